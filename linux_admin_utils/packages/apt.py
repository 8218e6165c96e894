"""Gestion des paquets Debian/Ubuntu via apt-get et apt.

Chaque opération assemble ses paramètres dans l'ordre suivant :
options (-y, -q, ...), sous-commande (install, remove, ...), puis
noms de paquets en arguments positionnels.

Example:
    Installation non interactive puis vérification des mises à jour :

        from linux_admin_utils.packages import (
            AptPackageManager,
            InstallOptions,
        )

        apt = AptPackageManager(executor, logger)
        apt.install(["curl", "jq"], InstallOptions(assume_yes=True))
        # Commande : /usr/bin/apt-get -y install curl jq
        if apt.has_pending_updates():
            ...
"""

from dataclasses import dataclass
from typing import List, Optional

from linux_admin_utils.commands.base import CommandExecutor, CommandResult
from linux_admin_utils.commands.builder import CommandBuilder
from linux_admin_utils.errors.exceptions import ConfigurationError
from linux_admin_utils.logging.base import Logger
from linux_admin_utils.packages.base import (
    PackageManager,
    PackageNames,
    PackageRecord,
)
from linux_admin_utils.packages.parser import parse_package_listing

APT_GET_CMD = "/usr/bin/apt-get"
APT_CMD = "/usr/bin/apt"


@dataclass(frozen=True)
class AptOptions:
    """Options communes aux opérations apt-get.

    Attributes:
        assume_yes: Répondre oui à toutes les questions (-y).
        quiet: Mode silencieux (-q).
    """

    assume_yes: bool = False
    quiet: bool = False


@dataclass(frozen=True)
class InstallOptions(AptOptions):
    """Options d'installation (fix_broken : -f)."""

    fix_broken: bool = False


@dataclass(frozen=True)
class RemoveOptions(AptOptions):
    """Options de désinstallation (purge : supprime la configuration)."""

    purge: bool = False


@dataclass(frozen=True)
class UpgradeOptions(AptOptions):
    """Options de mise à jour (dist_upgrade : dist-upgrade)."""

    dist_upgrade: bool = False


@dataclass(frozen=True)
class CleanOptions:
    """Options de nettoyage (autoclean : paquets obsolètes seulement)."""

    autoclean: bool = False


def _package_list(packages: Optional[PackageNames]) -> List[str]:
    """Normalise un nom ou une liste de noms de paquets.

    Raises:
        ConfigurationError: Si aucun paquet n'est fourni.
    """
    if not packages:
        raise ConfigurationError("Les paquets sont requis.")
    if isinstance(packages, str):
        return [packages]
    return list(packages)


class AptPackageManager(PackageManager):
    """Façade apt-get/apt.

    Attributes:
        _executor: Exécuteur de commandes.
        _logger: Logger optionnel.
        _apt_get_cmd: Chemin de apt-get.
        _apt_cmd: Chemin de apt.
    """

    def __init__(
        self,
        executor: CommandExecutor,
        logger: Optional[Logger] = None,
        apt_get_cmd: str = APT_GET_CMD,
        apt_cmd: str = APT_CMD,
    ) -> None:
        """Initialise la façade apt.

        Args:
            executor: Exécuteur de commandes.
            logger: Logger optionnel.
            apt_get_cmd: Chemin de apt-get.
            apt_cmd: Chemin de apt.
        """
        self._executor = executor
        self._logger = logger
        self._apt_get_cmd = apt_get_cmd
        self._apt_cmd = apt_cmd

    def _log(self, message: str) -> None:
        if self._logger:
            self._logger.log_info(message)

    def _apt_get(self, options: AptOptions) -> CommandBuilder:
        """Prépare une commande apt-get avec les options communes."""
        return (
            CommandBuilder(self._apt_get_cmd)
            .with_flag_if("-y", options.assume_yes)
            .with_flag_if("-q", options.quiet)
        )

    def _run(self, builder: CommandBuilder) -> CommandResult:
        return self._executor.run(builder.program, builder.build())

    def update(
        self, options: Optional[AptOptions] = None
    ) -> CommandResult:
        """Met à jour les listes de paquets (apt-get update).

        Args:
            options: Options communes.

        Returns:
            Résultat de la commande.
        """
        options = options or AptOptions()
        self._log("Mise à jour des listes de paquets")
        return self._run(self._apt_get(options).with_flag("update"))

    def install(
        self,
        packages: PackageNames,
        options: Optional[InstallOptions] = None,
    ) -> CommandResult:
        """Installe un ou plusieurs paquets.

        Args:
            packages: Nom ou liste de noms de paquets.
            options: Options d'installation.

        Returns:
            Résultat de la commande.

        Raises:
            ConfigurationError: Si aucun paquet n'est fourni.
            CommandFailed: Si apt-get échoue.
        """
        names = _package_list(packages)
        options = options or InstallOptions()
        self._log(f"Installation des paquets : {' '.join(names)}")
        builder = (
            self._apt_get(options)
            .with_flag_if("-f", options.fix_broken)
            .with_flag("install")
            .with_args(names)
        )
        return self._run(builder)

    def remove(
        self,
        packages: PackageNames,
        options: Optional[RemoveOptions] = None,
    ) -> CommandResult:
        """Désinstalle un ou plusieurs paquets.

        Avec purge, utilise la sous-commande purge et le flag --purge.

        Args:
            packages: Nom ou liste de noms de paquets.
            options: Options de désinstallation.

        Returns:
            Résultat de la commande.

        Raises:
            ConfigurationError: Si aucun paquet n'est fourni.
        """
        names = _package_list(packages)
        options = options or RemoveOptions()
        self._log(f"Suppression des paquets : {' '.join(names)}")
        builder = (
            self._apt_get(options)
            .with_flag_if("--purge", options.purge)
            .with_flag("purge" if options.purge else "remove")
            .with_args(names)
        )
        return self._run(builder)

    def upgrade(
        self, options: Optional[UpgradeOptions] = None
    ) -> CommandResult:
        """Met à jour tous les paquets (upgrade ou dist-upgrade)."""
        options = options or UpgradeOptions()
        self._log("Mise à jour des paquets")
        command = "dist-upgrade" if options.dist_upgrade else "upgrade"
        return self._run(self._apt_get(options).with_flag(command))

    def search(self, pattern: str) -> CommandResult:
        """Recherche des paquets (apt search).

        Raises:
            ConfigurationError: Si le motif est absent.
        """
        if not pattern:
            raise ConfigurationError("Le motif de recherche est requis.")
        self._log(f"Recherche de paquets : {pattern}")
        builder = (
            CommandBuilder(self._apt_cmd)
            .with_flag("search")
            .with_args([pattern])
        )
        return self._run(builder)

    def show(self, package: str) -> CommandResult:
        """Affiche les informations d'un paquet (apt show).

        Raises:
            ConfigurationError: Si le paquet est absent.
        """
        if not package:
            raise ConfigurationError("Le paquet est requis.")
        self._log(f"Informations du paquet : {package}")
        builder = (
            CommandBuilder(self._apt_cmd)
            .with_flag("show")
            .with_args([package])
        )
        return self._run(builder)

    def list_installed(
        self, pattern: Optional[str] = None
    ) -> List[PackageRecord]:
        """Liste les paquets installés, filtrés par motif optionnel."""
        self._log("Listing des paquets installés")
        builder = (
            CommandBuilder(self._apt_cmd)
            .with_flag("--installed")
            .with_flag("list")
        )
        if pattern:
            builder.with_args([pattern])
        return parse_package_listing(self._run(builder).output)

    def list_upgradable(self) -> List[PackageRecord]:
        """Liste les paquets pouvant être mis à jour."""
        self._log("Listing des paquets à mettre à jour")
        builder = (
            CommandBuilder(self._apt_cmd)
            .with_flag("--upgradable")
            .with_flag("list")
        )
        return parse_package_listing(self._run(builder).output)

    def clean(
        self, options: Optional[CleanOptions] = None
    ) -> CommandResult:
        """Vide le cache des paquets (clean ou autoclean)."""
        options = options or CleanOptions()
        self._log("Nettoyage du cache des paquets")
        command = "autoclean" if options.autoclean else "clean"
        return self._run(
            CommandBuilder(self._apt_get_cmd).with_flag(command)
        )
