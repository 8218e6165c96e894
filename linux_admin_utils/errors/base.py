"""Diffusion des erreurs d'administration vers plusieurs sorties.

Un script d'administration encadre ses appels aux façades par
ErrorHandlerChain.reporting() : un CommandFailed ou un
ConfigurationError est alors affiché à l'utilisateur et journalisé
avant d'être relancé, ou de terminer le script.

Example:
    chain = build_error_chain(logger)
    with chain.reporting(exit_code=1):
        apt.install(["curl"], InstallOptions(assume_yes=True))
"""

import sys
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator, List, Optional


class ErrorHandler(ABC):
    """Sortie d'erreur (console, fichier de log...)."""

    @abstractmethod
    def handle(self, error: Exception) -> None:
        """Rapporte une erreur sans la relancer."""
        pass


class ErrorHandlerChain:
    """Transmet chaque erreur à tous les handlers, dans l'ordre d'ajout."""

    def __init__(self) -> None:
        self.handlers: List[ErrorHandler] = []

    def add_handler(self, handler: ErrorHandler) -> "ErrorHandlerChain":
        """Ajoute un handler et retourne la chaîne."""
        self.handlers.append(handler)
        return self

    def handle(self, error: Exception) -> None:
        for handler in self.handlers:
            handler.handle(error)

    def handle_and_exit(self, error: Exception, exit_code: int = 1) -> None:
        """Rapporte l'erreur puis termine le processus avec exit_code."""
        self.handle(error)
        sys.exit(exit_code)

    @contextmanager
    def reporting(self, exit_code: Optional[int] = None) -> Iterator[None]:
        """Rapporte toute exception levée dans le bloc.

        Args:
            exit_code: Si fourni, termine le processus avec ce code
                après le rapport. Sinon l'exception est relancée.

        Raises:
            Exception: L'exception d'origine, si exit_code est None.
        """
        try:
            yield
        except Exception as error:
            self.handle(error)
            if exit_code is not None:
                sys.exit(exit_code)
            raise
