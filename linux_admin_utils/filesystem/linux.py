"""Implémentation Linux de l'accès aux fichiers."""

from pathlib import Path
from typing import Optional

from linux_admin_utils.logging.base import Logger
from linux_admin_utils.filesystem.base import FileManager


class LinuxFileManager(FileManager):
    """
    Implémentation Linux de l'accès aux fichiers.

    Les lectures sont loggées via l'instance Logger si fournie.
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        """
        Initialise le gestionnaire de fichiers.

        Args:
            logger: Instance de Logger optionnelle
        """
        self.logger = logger

    def file_exists(self, file_path: str) -> bool:
        return Path(file_path).exists()

    def read_file(self, file_path: str) -> str:
        """
        Lit le contenu d'un fichier en UTF-8.

        Args:
            file_path: Chemin du fichier

        Returns:
            Contenu du fichier

        Raises:
            FileNotFoundError: Si le fichier n'existe pas
            OSError: Si la lecture échoue
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except OSError as e:
            if self.logger:
                self.logger.log_error(
                    f"Erreur lors de la lecture du fichier {file_path}: {e}"
                )
            raise
        if self.logger:
            self.logger.log_info(f"Fichier {file_path} lu avec succès.")
        return content
