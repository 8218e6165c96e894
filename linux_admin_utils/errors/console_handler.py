"""
    ConsoleErrorHandler (générique, configurable)
"""
from linux_admin_utils.errors.base import ErrorHandler
from linux_admin_utils.errors.exceptions import (ApplicationError,
                                                 CommandFailed,
                                                 ConfigurationError,
                                                 MissingDependencyError)


class ConsoleErrorHandler(ErrorHandler):
    """Handler pour afficher les erreurs dans la console.

    Distingue les erreurs connues (ApplicationError ou le type de base
    fourni) des erreurs inattendues, et affiche un message de solution
    adapté au type d'erreur.
    """

    def __init__(
        self,
        base_error_type: type[Exception] = ApplicationError,
        solutions: dict[type[Exception], str] | None = None
    ) -> None:
        """Initialise le handler console.

        Args:
            base_error_type: Classe de base pour distinguer erreurs
                connues/inconnues (défaut: ApplicationError).
            solutions: Dictionnaire {TypeException: "message solution"},
                prioritaire sur les messages par défaut.
        """
        self.base_error_type = base_error_type
        self.solutions = solutions or {}

    def handle(self, error: Exception) -> None:
        """Affiche l'erreur dans la console avec des messages utilisateur.

        Args:
            error: L'exception à afficher.
        """
        if isinstance(error, self.base_error_type):
            self._handle_known_error(error)
        else:
            self._handle_unknown_error(error)

    def _solution_for(self, error: Exception) -> str:
        """Retourne la suggestion de solution adaptée à l'erreur."""
        for error_type, solution in self.solutions.items():
            if isinstance(error, error_type):
                return solution
        if isinstance(error, MissingDependencyError):
            return "Installez les dépendances manquantes comme indiqué."
        if isinstance(error, CommandFailed):
            if error.exit_code == -1:
                return "Vérifiez que le programme est installé."
            return "Consultez la sortie d'erreur de la commande."
        if isinstance(error, ConfigurationError):
            return "Vérifiez les paramètres transmis à l'opération."
        return "Voir les suggestions ci-dessus."

    def _handle_known_error(self, error: Exception) -> None:
        """Gère les erreurs connues du projet.

        Args:
            error: L'exception métier à traiter.
        """
        print(f"\n🛑 {type(error).__name__}: {str(error)}")
        print(f"\n🔧 Solution : {self._solution_for(error)}")

    def _handle_unknown_error(self, error: Exception) -> None:
        """Gère les erreurs inattendues.

        Args:
            error: L'exception non prévue à afficher.
        """
        print(f"\n💥 Erreur inattendue: {str(error)}")
        print(f"Type: {type(error).__name__}")
        print(
            "\n📋 Cela peut être un bug. Veuillez ouvrir une issue avec ces informations."
        )
