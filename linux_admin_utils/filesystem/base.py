"""Interface abstraite pour l'accès aux fichiers."""

from abc import ABC, abstractmethod


class FileManager(ABC):
    """Interface pour l'accès en lecture aux fichiers."""

    @abstractmethod
    def file_exists(self, file_path: str) -> bool:
        """
        Vérifie si un fichier existe.

        Args:
            file_path: Chemin du fichier

        Returns:
            True si le fichier existe, False sinon
        """
        pass

    @abstractmethod
    def read_file(self, file_path: str) -> str:
        """
        Lit le contenu complet d'un fichier.

        Args:
            file_path: Chemin du fichier

        Returns:
            Contenu du fichier

        Raises:
            FileNotFoundError: Si le fichier n'existe pas
        """
        pass
