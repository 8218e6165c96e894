"""Formateurs pour l'affichage des messages de commandes système.

Ce module fournit une hiérarchie de formateurs permettant d'afficher
les messages de commandes différemment selon le contexte (fichier de
log ou console) et les privilèges d'exécution (root ou utilisateur).

Classes :
    CommandFormatter : Interface abstraite de formatage.
    PlainCommandFormatter : Texte brut avec préfixes [ROOT]/[user].
    AnsiCommandFormatter : Codes ANSI colorés pour la console.

Les commandes passées par le shell (redirections) sont signalées
par la mention « (shell) » pour les distinguer des exécutions
directes.
"""

import sys
from abc import ABC, abstractmethod
from typing import List


class CommandFormatter(ABC):
    """Interface abstraite pour formater les messages de commande."""

    ROOT_PREFIX = "[ROOT]"
    USER_PREFIX = "[user]"

    def _prefix(self, is_root: bool) -> str:
        return self.ROOT_PREFIX if is_root else self.USER_PREFIX

    @staticmethod
    def _label(shell: bool) -> str:
        return "Exécution (shell)" if shell else "Exécution"

    @abstractmethod
    def format_start(
        self, command: List[str], is_root: bool, shell: bool = False
    ) -> str:
        """Formate le message de début d'exécution.

        Args:
            command: Commande sous forme de liste.
            is_root: True si la commande est exécutée en root.
            shell: True si la commande passe par /bin/sh.

        Returns:
            Message formaté prêt à l'affichage.
        """
        pass

    @abstractmethod
    def format_dry_run(
        self, command: List[str], is_root: bool
    ) -> str:
        """Formate le message de simulation (mode dry-run)."""
        pass

    @abstractmethod
    def format_failure(
        self, command: List[str], return_code: int, is_root: bool
    ) -> str:
        """Formate le message d'échec d'une commande.

        Args:
            command: Commande sous forme de liste.
            return_code: Code de retour du processus.
            is_root: True si la commande est exécutée en root.

        Returns:
            Message formaté prêt à l'affichage.
        """
        pass


class PlainCommandFormatter(CommandFormatter):
    """Formateur texte brut pour les logs fichier.

    Example :
        [ROOT] Exécution : /usr/bin/apt-get -y install curl
        [user] Exécution (shell) : /bin/echo Hello > out.txt
    """

    def format_start(
        self, command: List[str], is_root: bool, shell: bool = False
    ) -> str:
        cmd_str = " ".join(command)
        return f"{self._prefix(is_root)} {self._label(shell)} : {cmd_str}"

    def format_dry_run(
        self, command: List[str], is_root: bool
    ) -> str:
        cmd_str = " ".join(command)
        return f"{self._prefix(is_root)} [dry-run] {cmd_str}"

    def format_failure(
        self, command: List[str], return_code: int, is_root: bool
    ) -> str:
        cmd_str = " ".join(command)
        return (
            f"{self._prefix(is_root)} Code retour {return_code} : "
            f"{cmd_str}"
        )


class AnsiCommandFormatter(CommandFormatter):
    """Formateur ANSI coloré pour la sortie console.

    N'émet aucun code ANSI si stdout n'est pas un terminal TTY.

    Styles ANSI :
        ROOT    → \\033[1;33m (jaune-or gras)
        user    → \\033[0;32m (vert normal)
        dry-run → \\033[0;90m (gris discret)
        échec   → \\033[1;31m (rouge gras)
    """

    RESET = "\033[0m"
    ROOT_STYLE = "\033[1;33m"
    USER_STYLE = "\033[0;32m"
    DRY_STYLE = "\033[0;90m"
    FAIL_STYLE = "\033[1;31m"

    def _is_tty(self) -> bool:
        return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()

    def _style(self, text: str, style: str) -> str:
        if not self._is_tty():
            return text
        return f"{style}{text}{self.RESET}"

    def format_start(
        self, command: List[str], is_root: bool, shell: bool = False
    ) -> str:
        cmd_str = " ".join(command)
        style = self.ROOT_STYLE if is_root else self.USER_STYLE
        return self._style(
            f"{self._prefix(is_root)} {self._label(shell)} : {cmd_str}",
            style,
        )

    def format_dry_run(
        self, command: List[str], is_root: bool
    ) -> str:
        cmd_str = " ".join(command)
        return self._style(
            f"{self._prefix(is_root)} [dry-run] {cmd_str}",
            self.DRY_STYLE,
        )

    def format_failure(
        self, command: List[str], return_code: int, is_root: bool
    ) -> str:
        cmd_str = " ".join(command)
        return self._style(
            f"{self._prefix(is_root)} Code retour {return_code} : "
            f"{cmd_str}",
            self.FAIL_STYLE,
        )
