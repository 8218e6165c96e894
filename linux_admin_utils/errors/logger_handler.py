"""
    LoggerErrorHandler
"""
from linux_admin_utils.errors.base import ErrorHandler
from linux_admin_utils.errors.exceptions import ApplicationError, CommandFailed
from linux_admin_utils.logging.base import Logger


class LoggerErrorHandler(ErrorHandler):
    """Handler pour logger les erreurs.

    Enregistre les erreurs dans le fichier de log via le Logger
    injecté au constructeur.
    """

    def __init__(self,
                 logger: Logger,
                 base_error_type: type[Exception] = ApplicationError
                 ) -> None:
        """Initialise le handler avec un logger.

        Args:
            logger: Instance de Logger pour l'enregistrement des erreurs.
            base_error_type: Classe de base des erreurs connues.
        """
        self.logger = logger
        self.base_error_type = base_error_type

    def handle(self, error: Exception) -> None:
        """Log l'erreur avec différents niveaux selon la gravité.

        Les CommandFailed sont loggées avec leur sortie d'erreur
        complète pour faciliter le diagnostic.

        Args:
            error: L'exception à logger.
        """
        if isinstance(error, CommandFailed):
            self.logger.log_error(f"{type(error).__name__}: {str(error)}")
            if error.stderr:
                self.logger.log_error(f"stderr : {error.stderr.strip()}")
        elif isinstance(error, self.base_error_type):
            self.logger.log_error(f"{type(error).__name__}: {str(error)}")
        else:
            self.logger.log_error(
                f"Erreur inattendue: {type(error).__name__}: {str(error)}"
            )
