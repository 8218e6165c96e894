"""
Module contenant les exceptions personnalisées de linux_admin_utils.

Ce module suit le principe SRP en isolant la gestion des exceptions.
"""
from typing import List, Optional, Union


class ApplicationError(Exception):
    """Exception de base pour toutes les applications."""
    pass

class ConfigurationError(ApplicationError):
    """Paramètres invalides ou argument requis manquant.

    Levée avant toute tentative d'exécution, jamais réessayée.
    """
    pass

class FileConfigurationError(ConfigurationError):
    """ Exception de base pour toutes les fichiers de configurations    """
    pass

class SystemRequirementError(ApplicationError):
    """Exception de base pour toutes les systemes de dépendances."""
    pass

class MissingDependencyError(SystemRequirementError):
    """Exception de base pour toutes les dépendances manquantes."""
    pass


class CommandFailed(ApplicationError):
    """Le programme externe s'est terminé avec un code non nul.

    Attributes:
        command: Commande exécutée (liste de tokens ou chaîne shell).
        exit_code: Code de retour du processus (-1 si le processus
            n'a pas pu être lancé).
        stdout: Sortie standard capturée.
        stderr: Sortie d'erreur capturée.
    """

    def __init__(
        self,
        command: Union[List[str], str],
        exit_code: int,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        self.command = command
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr
        if isinstance(command, str):
            cmd_str = command
        else:
            cmd_str = " ".join(command)
        message = f"Code retour {exit_code} : {cmd_str}"
        detail = stderr.strip()
        if detail:
            message += f" ({detail})"
        super().__init__(message)

    @property
    def output(self) -> Optional[str]:
        """Sortie standard capturée, si disponible."""
        return self.stdout or None
