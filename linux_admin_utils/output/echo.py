"""Sortie de texte et écriture de fichiers via echo.

L'écriture dans un fichier repose sur une redirection shell
(``echo texte > fichier``) composée par compose_redirection et
exécutée par CommandExecutor.run_shell. Le texte et le chemin ne
sont pas échappés : ils doivent provenir d'une source fiable.
Toutes les autres opérations passent par CommandExecutor.run, sans
shell.
"""

from dataclasses import dataclass
from typing import Optional

from linux_admin_utils.commands.base import CommandExecutor, CommandResult
from linux_admin_utils.commands.builder import CommandBuilder
from linux_admin_utils.commands.params import compose_redirection
from linux_admin_utils.errors.exceptions import ConfigurationError
from linux_admin_utils.filesystem.base import FileManager
from linux_admin_utils.logging.base import Logger

ECHO_CMD = "/bin/echo"


@dataclass(frozen=True)
class EchoOptions:
    """Options d'affichage.

    Attributes:
        no_newline: Pas de retour à la ligne final (-n).
        interpret_backslash: Interpréter les séquences '\\' (-e).
        output_file: Rediriger la sortie vers ce fichier.
    """

    no_newline: bool = False
    interpret_backslash: bool = False
    output_file: Optional[str] = None


@dataclass(frozen=True)
class WriteOptions:
    """Options d'écriture dans un fichier.

    Attributes:
        append: Ajouter en fin de fichier ('>>') au lieu d'écraser.
        no_newline: Pas de retour à la ligne final (-n).
    """

    append: bool = False
    no_newline: bool = False


class EchoWriter:
    """Façade echo.

    Attributes:
        _executor: Exécuteur de commandes.
        _file_manager: Accès en lecture aux fichiers.
        _logger: Logger optionnel.
        _echo_cmd: Chemin de echo.
    """

    def __init__(
        self,
        executor: CommandExecutor,
        file_manager: FileManager,
        logger: Optional[Logger] = None,
        echo_cmd: str = ECHO_CMD,
    ) -> None:
        self._executor = executor
        self._file_manager = file_manager
        self._logger = logger
        self._echo_cmd = echo_cmd

    def _log(self, message: str) -> None:
        if self._logger:
            self._logger.log_info(message)

    def output(
        self,
        text: str,
        options: Optional[EchoOptions] = None,
    ) -> CommandResult:
        """Affiche un texte, ou l'écrit dans options.output_file.

        Args:
            text: Texte à afficher.
            options: Options d'affichage.

        Returns:
            Résultat de la commande.

        Raises:
            ConfigurationError: Si le texte est absent.
        """
        if text is None:
            raise ConfigurationError("Le texte est requis.")
        options = options or EchoOptions()
        self._log("Affichage de texte")
        builder = (
            CommandBuilder(self._echo_cmd)
            .with_flag_if("-n", options.no_newline)
            .with_flag_if("-e", options.interpret_backslash)
            .with_args([text])
        )
        if options.output_file:
            return self._executor.run_shell(
                compose_redirection(
                    self._echo_cmd, builder.build(), options.output_file
                )
            )
        return self._executor.run(builder.program, builder.build())

    def write_to_file(
        self,
        text: str,
        file_path: str,
        options: Optional[WriteOptions] = None,
    ) -> CommandResult:
        """Écrit un texte dans un fichier par redirection shell.

        Args:
            text: Texte à écrire.
            file_path: Fichier de destination.
            options: Options d'écriture.

        Returns:
            Résultat de la commande.

        Raises:
            ConfigurationError: Si le texte ou le chemin est absent.
        """
        if text is None:
            raise ConfigurationError("Le texte est requis.")
        if not file_path:
            raise ConfigurationError("Le chemin du fichier est requis.")
        options = options or WriteOptions()
        self._log(f"Écriture dans le fichier : {file_path}")
        params = (
            CommandBuilder(self._echo_cmd)
            .with_flag_if("-n", options.no_newline)
            .with_args([text])
            .build()
        )
        return self._executor.run_shell(
            compose_redirection(
                self._echo_cmd, params, file_path, append=options.append
            )
        )

    def append_to_file(
        self,
        text: str,
        file_path: str,
        no_newline: bool = False,
    ) -> CommandResult:
        """Ajoute un texte en fin de fichier ('>>')."""
        return self.write_to_file(
            text,
            file_path,
            WriteOptions(append=True, no_newline=no_newline),
        )

    def newline(self, count: int = 1) -> CommandResult:
        """Affiche un ou plusieurs retours à la ligne.

        Raises:
            ConfigurationError: Si count est inférieur à 1.
        """
        if count < 1:
            raise ConfigurationError("count doit être positif.")
        self._log(f"Affichage de {count} retour(s) à la ligne")
        builder = (
            CommandBuilder(self._echo_cmd)
            .with_flag("-e")
            .with_args(["\\n" * count])
        )
        return self._executor.run(builder.program, builder.build())

    def interpret(self, text: str) -> CommandResult:
        """Affiche un texte en interprétant les séquences '\\' (-e)."""
        return self.output(text, EchoOptions(interpret_backslash=True))

    def output_inline(self, text: str) -> CommandResult:
        """Affiche un texte sans retour à la ligne final (-n)."""
        return self.output(text, EchoOptions(no_newline=True))

    def create_file(
        self,
        file_path: str,
        content: str,
        overwrite: bool = False,
        options: Optional[WriteOptions] = None,
    ) -> CommandResult:
        """Crée un fichier avec un contenu.

        Args:
            file_path: Fichier à créer.
            content: Contenu du fichier.
            overwrite: Autoriser l'écrasement d'un fichier existant.
            options: Options d'écriture.

        Returns:
            Résultat de la commande.

        Raises:
            ConfigurationError: Si un argument manque, ou si le
                fichier existe et que overwrite est False.
        """
        if not file_path:
            raise ConfigurationError("Le chemin du fichier est requis.")
        if content is None:
            raise ConfigurationError("Le contenu est requis.")
        self._log(f"Création du fichier : {file_path}")
        if self._file_manager.file_exists(file_path) and not overwrite:
            raise ConfigurationError(
                f"Le fichier {file_path} existe déjà. "
                "Utilisez overwrite=True pour l'écraser."
            )
        return self.write_to_file(content, file_path, options)

    def read_file(
        self,
        file_path: str,
        options: Optional[EchoOptions] = None,
    ) -> CommandResult:
        """Lit un fichier et affiche son contenu via echo.

        Raises:
            ConfigurationError: Si le chemin est absent ou si le
                fichier n'existe pas.
        """
        if not file_path:
            raise ConfigurationError("Le chemin du fichier est requis.")
        if not self._file_manager.file_exists(file_path):
            raise ConfigurationError(
                f"Le fichier {file_path} n'existe pas."
            )
        self._log(f"Lecture du fichier : {file_path}")
        content = self._file_manager.read_file(file_path)
        return self.output(content, options)

    def is_available(self) -> bool:
        """Indique si echo est présent dans le PATH."""
        return self._executor.probe("echo")
