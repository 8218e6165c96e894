"""Interfaces abstraites et structures de données pour l'exécution
de commandes système.

Ce module définit :
    - CommandResult : Résultat immuable d'une exécution de commande.
    - CommandExecutor : Interface abstraite pour les exécuteurs.

Contrat commun à toutes les implémentations de CommandExecutor :
un code de retour non nul lève CommandFailed, jamais un faux succès.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Optional

from linux_admin_utils.commands.params import ParameterSet


@dataclass(frozen=True)
class CommandResult:
    """Résultat de l'exécution d'une commande système.

    Attributes:
        command: Commande exécutée sous forme de liste (un seul
            élément, la chaîne complète, pour une commande shell).
        return_code: Code de retour du processus.
        stdout: Sortie standard capturée.
        stderr: Sortie d'erreur capturée.
        success: True si la commande a réussi (code 0).
        duration: Durée d'exécution en secondes.
        executed_as_root: True si lancée par root (uid 0).
        shell: True si la commande est passée par /bin/sh.
    """

    command: List[str]
    return_code: int
    stdout: str
    stderr: str
    success: bool
    duration: float
    executed_as_root: bool = False
    shell: bool = False

    @property
    def output(self) -> str:
        """Sortie standard capturée."""
        return self.stdout


class CommandExecutor(ABC):
    """Interface abstraite pour l'exécution de commandes système."""

    @abstractmethod
    def run(
        self,
        program: str,
        params: Optional[ParameterSet] = None,
        env: Optional[Dict[str, str]] = None,
        cwd: Optional[str] = None,
    ) -> CommandResult:
        """Exécute un programme avec ses paramètres, sans shell.

        Args:
            program: Nom ou chemin du programme.
            params: Paramètres sérialisés en liste de tokens.
            env: Variables d'environnement supplémentaires.
            cwd: Répertoire de travail.

        Returns:
            Résultat de l'exécution.

        Raises:
            CommandFailed: Si le code de retour est non nul.
            ConfigurationError: Si les paramètres sont invalides.
        """
        pass

    @abstractmethod
    def run_shell(
        self,
        command: str,
        env: Optional[Dict[str, str]] = None,
        cwd: Optional[str] = None,
    ) -> CommandResult:
        """Exécute une commande composée via le shell.

        Réservé aux commandes nécessitant une redirection ('>', '>>').

        Args:
            command: Commande shell complète.
            env: Variables d'environnement supplémentaires.
            cwd: Répertoire de travail.

        Returns:
            Résultat de l'exécution.

        Raises:
            CommandFailed: Si le code de retour est non nul.
        """
        pass

    @abstractmethod
    def resolve(self, name: str) -> Optional[str]:
        """Retourne le chemin complet d'une commande du PATH.

        Args:
            name: Nom de la commande.

        Returns:
            Chemin absolu ou None si introuvable.
        """
        pass

    def probe(self, name: str) -> bool:
        """Indique si une commande est disponible dans le PATH.

        Args:
            name: Nom de la commande.

        Returns:
            True si la commande est trouvée.
        """
        return self.resolve(name) is not None
