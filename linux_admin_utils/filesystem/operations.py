"""Opérations sur le système de fichiers via cp, mv, chmod, chown
et mkdir.

Les programmes sont résolus dans le PATH par l'exécuteur au moment
de l'appel ; un programme introuvable lève MissingDependencyError.

Example:
    Création d'une arborescence puis changement de propriétaire :

        ops = FileOperations(executor, logger)
        ops.mkdir("/srv/app/data", MkdirOptions(parents=True))
        ops.chown("www-data:www-data", "/srv/app", recursive=True)
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from linux_admin_utils.commands.base import CommandExecutor, CommandResult
from linux_admin_utils.commands.builder import CommandBuilder
from linux_admin_utils.errors.exceptions import (
    ConfigurationError,
    MissingDependencyError,
)
from linux_admin_utils.logging.base import Logger

Targets = Union[str, Sequence[str]]


@dataclass(frozen=True)
class CopyOptions:
    """Options de copie.

    Attributes:
        recursive: Copier les répertoires récursivement (-r).
        preserve: Préserver les attributs (-p).
        force: Écraser les fichiers existants (-f).
    """

    recursive: bool = False
    preserve: bool = False
    force: bool = False


@dataclass(frozen=True)
class MkdirOptions:
    """Options de création de répertoires.

    Attributes:
        parents: Créer les répertoires parents (-p).
        mode: Permissions des répertoires créés (-m).
    """

    parents: bool = False
    mode: Optional[str] = None


def _targets(targets: Optional[Targets], name: str) -> List[str]:
    if not targets:
        raise ConfigurationError(f"{name} est requis.")
    if isinstance(targets, str):
        return [targets]
    return list(targets)


def _require(value: Optional[object], name: str) -> None:
    if value is None or value == "":
        raise ConfigurationError(f"{name} est requis.")


class FileOperations:
    """Façade des opérations fichiers.

    Attributes:
        _executor: Exécuteur de commandes.
        _logger: Logger optionnel.
    """

    def __init__(
        self,
        executor: CommandExecutor,
        logger: Optional[Logger] = None,
    ) -> None:
        self._executor = executor
        self._logger = logger

    def _log(self, message: str) -> None:
        if self._logger:
            self._logger.log_info(message)

    def _builder(self, name: str) -> CommandBuilder:
        """Prépare une commande pour un programme résolu dans le PATH.

        Raises:
            MissingDependencyError: Si le programme est introuvable.
        """
        path = self._executor.resolve(name)
        if path is None:
            raise MissingDependencyError(
                f"Commande introuvable dans le PATH : {name}"
            )
        return CommandBuilder(path)

    def _run(self, builder: CommandBuilder) -> CommandResult:
        return self._executor.run(builder.program, builder.build())

    def copy(
        self,
        source: str,
        destination: str,
        options: Optional[CopyOptions] = None,
    ) -> CommandResult:
        """Copie un fichier ou un répertoire.

        Raises:
            ConfigurationError: Si la source ou la destination manque.
        """
        _require(source, "La source")
        _require(destination, "La destination")
        options = options or CopyOptions()
        self._log(f"Copie de {source} vers {destination}")
        builder = (
            self._builder("cp")
            .with_flag_if("-r", options.recursive)
            .with_flag_if("-p", options.preserve)
            .with_flag_if("-f", options.force)
            .with_args([source, destination])
        )
        return self._run(builder)

    def move(
        self,
        source: str,
        destination: str,
        force: bool = False,
    ) -> CommandResult:
        """Déplace ou renomme un fichier ou un répertoire."""
        _require(source, "La source")
        _require(destination, "La destination")
        self._log(f"Déplacement de {source} vers {destination}")
        builder = (
            self._builder("mv")
            .with_flag_if("-f", force)
            .with_args([source, destination])
        )
        return self._run(builder)

    def chmod(
        self,
        mode: Union[str, int],
        targets: Targets,
        recursive: bool = False,
    ) -> CommandResult:
        """Change les permissions.

        Args:
            mode: Mode (ex: "755", 755, "u+x"), converti en chaîne.
            targets: Chemin ou liste de chemins.
            recursive: Appliquer récursivement (-R).

        Returns:
            Résultat de la commande.
        """
        _require(mode, "Le mode")
        paths = _targets(targets, "La cible")
        self._log(f"Permissions {mode} sur : {' '.join(paths)}")
        builder = (
            self._builder("chmod")
            .with_flag_if("-R", recursive)
            .with_args([str(mode)] + paths)
        )
        return self._run(builder)

    def chown(
        self,
        owner: str,
        targets: Targets,
        recursive: bool = False,
    ) -> CommandResult:
        """Change le propriétaire (``user`` ou ``user:group``)."""
        _require(owner, "Le propriétaire")
        paths = _targets(targets, "La cible")
        self._log(f"Propriétaire {owner} sur : {' '.join(paths)}")
        builder = (
            self._builder("chown")
            .with_flag_if("-R", recursive)
            .with_args([owner] + paths)
        )
        return self._run(builder)

    def mkdir(
        self,
        paths: Targets,
        options: Optional[MkdirOptions] = None,
    ) -> CommandResult:
        """Crée un ou plusieurs répertoires."""
        directories = _targets(paths, "Le chemin")
        options = options or MkdirOptions()
        self._log(f"Création des répertoires : {' '.join(directories)}")
        builder = (
            self._builder("mkdir")
            .with_flag_if("-p", options.parents)
            .with_option_if("-m", options.mode)
            .with_args(directories)
        )
        return self._run(builder)

    def command_exists(self, command: str) -> bool:
        """Indique si une commande existe dans le PATH."""
        return self._executor.probe(command)

    def command_path(self, command: str) -> Optional[str]:
        """Retourne le chemin complet d'une commande, ou None."""
        return self._executor.resolve(command)
