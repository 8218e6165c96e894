"""Exécuteur de commandes Linux via subprocess.

Ce module fournit LinuxCommandExecutor, une implémentation concrète
de CommandExecutor qui utilise subprocess pour exécuter des commandes
sur un système Linux.

Deux chemins d'exécution distincts :
    - run() : liste de tokens, sans shell (cas général).
    - run_shell() : chaîne passée à /bin/sh -c, réservée aux
      redirections ('>', '>>').

Tout code de retour non nul lève CommandFailed.

Example :
    Exécution simple avec logs fichier :

        from linux_admin_utils.commands import (
            CommandBuilder,
            LinuxCommandExecutor,
        )

        executor = LinuxCommandExecutor(logger=logger)
        params = CommandBuilder("ls").with_flag("-la").build()
        result = executor.run("ls", params)
        print(result.output)
"""

import os
import shutil
import subprocess  # nosec B404
import time
from typing import Dict, List, Optional

from linux_admin_utils.commands.base import (
    CommandExecutor,
    CommandResult,
)
from linux_admin_utils.commands.formatter import (
    CommandFormatter,
    PlainCommandFormatter,
)
from linux_admin_utils.commands.params import ParameterSet, serialize
from linux_admin_utils.errors.exceptions import CommandFailed
from linux_admin_utils.logging.base import Logger

DEFAULT_SHELL = "/bin/sh"


class LinuxCommandExecutor(CommandExecutor):
    """Exécuteur de commandes Linux via subprocess.

    Le mode dry_run permet de simuler l'exécution sans lancer de
    processus : la commande est loguée et un résultat vide en
    succès est retourné.

    Les messages de log utilisent PlainCommandFormatter avec les
    préfixes [ROOT] ou [user] selon les privilèges détectés à
    l'initialisation via os.getuid().

    Attributes:
        _logger: Logger optionnel pour les logs fichier.
        _default_env: Variables d'environnement par défaut.
        _dry_run: Mode simulation.
        _shell: Shell utilisé par run_shell().
        _is_root: True si le processus courant est root (uid 0).
        _plain: Formateur texte brut pour les logs fichier.
        _console_formatter: Formateur optionnel pour la console.
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        default_env: Optional[Dict[str, str]] = None,
        dry_run: bool = False,
        console_formatter: Optional[CommandFormatter] = None,
        shell: str = DEFAULT_SHELL,
    ) -> None:
        """Initialise l'exécuteur de commandes.

        Args:
            logger: Logger optionnel pour les sorties fichier.
            default_env: Variables d'environnement par défaut
                (fusionnées avec os.environ).
            dry_run: Si True, simule sans exécuter.
            console_formatter: Formateur optionnel pour la console
                (ex: AnsiCommandFormatter()).
            shell: Shell utilisé pour les redirections.
        """
        self._logger = logger
        self._default_env = default_env
        self._dry_run = dry_run
        self._shell = shell
        self._is_root: bool = os.getuid() == 0
        self._plain = PlainCommandFormatter()
        self._console_formatter = console_formatter

    def _build_env(
        self,
        env: Optional[Dict[str, str]] = None,
    ) -> Optional[Dict[str, str]]:
        """Fusionne os.environ, default_env et env spécifique.

        Retourne None si aucun environnement personnalisé
        (subprocess utilisera os.environ par défaut).
        """
        if self._default_env is None and env is None:
            return None
        merged = os.environ.copy()
        if self._default_env:
            merged.update(self._default_env)
        if env:
            merged.update(env)
        return merged

    def _log(self, message: str) -> None:
        if self._logger:
            self._logger.log_info(message)

    def _log_error(self, message: str) -> None:
        if self._logger:
            self._logger.log_error(message)

    def _console(self, message: str) -> None:
        if self._console_formatter:
            print(message)

    def _announce(self, command: List[str], shell: bool) -> None:
        """Logue et affiche le début d'une exécution."""
        self._log(
            self._plain.format_start(command, self._is_root, shell)
        )
        if self._console_formatter:
            self._console(
                self._console_formatter.format_start(
                    command, self._is_root, shell
                )
            )

    def _make_dry_run_result(
        self,
        command: List[str],
        shell: bool,
    ) -> CommandResult:
        """Crée un CommandResult pour le mode dry_run."""
        self._log(self._plain.format_dry_run(command, self._is_root))
        if self._console_formatter:
            self._console(
                self._console_formatter.format_dry_run(
                    command, self._is_root
                )
            )
        return CommandResult(
            command=command,
            return_code=0,
            stdout="",
            stderr="",
            success=True,
            duration=0.0,
            executed_as_root=self._is_root,
            shell=shell,
        )

    def _execute(
        self,
        command: List[str],
        argv: List[str],
        shell: bool,
        env: Optional[Dict[str, str]],
        cwd: Optional[str],
    ) -> CommandResult:
        """Lance le processus et convertit l'issue en résultat.

        Args:
            command: Commande telle que rapportée (logs, résultat).
            argv: Arguments réellement passés à subprocess.
            shell: True pour le chemin shell.
            env: Variables d'environnement supplémentaires.
            cwd: Répertoire de travail.

        Returns:
            CommandResult en succès.

        Raises:
            CommandFailed: Code retour non nul ou erreur système.
        """
        if self._dry_run:
            return self._make_dry_run_result(command, shell)

        self._announce(command, shell)
        start = time.monotonic()
        try:
            proc = subprocess.run(  # nosec B603
                argv,
                capture_output=True,
                text=True,
                env=self._build_env(env),
                cwd=cwd,
            )
        except OSError as e:
            self._log_error(f"Erreur système : {e}")
            raise CommandFailed(
                command, exit_code=-1, stderr=str(e)
            ) from e
        duration = time.monotonic() - start

        if proc.returncode != 0:
            self._log_error(
                self._plain.format_failure(
                    command, proc.returncode, self._is_root
                )
            )
            if self._console_formatter:
                self._console(
                    self._console_formatter.format_failure(
                        command, proc.returncode, self._is_root
                    )
                )
            raise CommandFailed(
                command,
                exit_code=proc.returncode,
                stdout=proc.stdout or "",
                stderr=proc.stderr or "",
            )

        return CommandResult(
            command=command,
            return_code=proc.returncode,
            stdout=proc.stdout or "",
            stderr=proc.stderr or "",
            success=True,
            duration=duration,
            executed_as_root=self._is_root,
            shell=shell,
        )

    def run(
        self,
        program: str,
        params: Optional[ParameterSet] = None,
        env: Optional[Dict[str, str]] = None,
        cwd: Optional[str] = None,
    ) -> CommandResult:
        """Exécute un programme avec ses paramètres, sans shell.

        Les paramètres sont sérialisés avant tout lancement : un
        ParameterSet invalide lève ConfigurationError sans exécution.

        Args:
            program: Nom ou chemin du programme.
            params: Paramètres de la commande.
            env: Variables d'environnement supplémentaires.
            cwd: Répertoire de travail.

        Returns:
            CommandResult avec les sorties capturées.

        Raises:
            CommandFailed: Si le code de retour est non nul ou si
                le programme ne peut pas être lancé.
            ConfigurationError: Si les paramètres sont invalides.
        """
        command = [program]
        if params is not None:
            command += serialize(params)
        return self._execute(command, command, False, env, cwd)

    def run_shell(
        self,
        command: str,
        env: Optional[Dict[str, str]] = None,
        cwd: Optional[str] = None,
    ) -> CommandResult:
        """Exécute une commande composée via /bin/sh -c.

        Args:
            command: Commande shell complète (avec redirection).
            env: Variables d'environnement supplémentaires.
            cwd: Répertoire de travail.

        Returns:
            CommandResult avec les sorties capturées.

        Raises:
            CommandFailed: Si le code de retour est non nul.
        """
        argv = [self._shell, "-c", command]
        return self._execute([command], argv, True, env, cwd)

    def resolve(self, name: str) -> Optional[str]:
        """Retourne le chemin complet d'une commande via shutil.which."""
        return shutil.which(name)
