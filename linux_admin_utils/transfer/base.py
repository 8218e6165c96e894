"""Interface abstraite pour les clients de transfert HTTP."""

from abc import ABC, abstractmethod
from typing import Optional

from linux_admin_utils.commands.base import CommandResult


class TransferClient(ABC):
    """Interface pour les clients de transfert.

    Permet de substituer le client réel par un mock dans les tests
    des composants qui téléchargent des ressources.
    """

    @abstractmethod
    def download(self, url: str) -> CommandResult:
        """Télécharge une ressource."""
        pass

    @abstractmethod
    def is_accessible(self, url: str) -> bool:
        """Indique si l'URL répond avec un code 2xx."""
        pass

    @abstractmethod
    def status_code(self, url: str) -> Optional[int]:
        """Retourne le code de statut HTTP, ou None."""
        pass
