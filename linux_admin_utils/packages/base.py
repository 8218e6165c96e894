"""Interfaces abstraites et modèles pour la gestion de paquets."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from linux_admin_utils.commands.base import CommandResult

PackageNames = Union[str, Sequence[str]]


@dataclass(frozen=True)
class PackageRecord:
    """Paquet extrait d'un listing.

    Attributes:
        name: Nom du paquet.
        version: Version (ou suite/version selon le format du listing).
        architecture: Architecture (ex: 'amd64').
        status: Statut entre crochets (ex: 'installed', 'upgradable').
        description: Reste de la ligne, texte libre.
    """

    name: str
    version: str
    architecture: str
    status: str
    description: str


class PackageManager(ABC):
    """Interface pour les gestionnaires de paquets."""

    @abstractmethod
    def install(self, packages: PackageNames) -> CommandResult:
        """Installe un ou plusieurs paquets."""
        pass

    @abstractmethod
    def remove(self, packages: PackageNames) -> CommandResult:
        """Désinstalle un ou plusieurs paquets."""
        pass

    @abstractmethod
    def list_installed(
        self, pattern: Optional[str] = None
    ) -> List[PackageRecord]:
        """Liste les paquets installés."""
        pass

    @abstractmethod
    def list_upgradable(self) -> List[PackageRecord]:
        """Liste les paquets pouvant être mis à jour."""
        pass

    def has_pending_updates(self) -> bool:
        """Indique si des mises à jour sont disponibles.

        Returns:
            True si le listing des paquets à mettre à jour
            n'est pas vide.
        """
        return len(self.list_upgradable()) > 0
