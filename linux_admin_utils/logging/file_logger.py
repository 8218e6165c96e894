"""Logger fichier basé sur le module logging de la bibliothèque standard."""

import logging
import os
from typing import Any, Dict, Optional

from linux_admin_utils.logging.base import Logger

DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DEFAULT_LEVEL = "INFO"


def _logging_settings(config: Optional[Dict[str, Any]]) -> tuple[int, str]:
    """Extrait niveau et format de la section "logging" d'une config."""
    section = (config or {}).get("logging", {})
    level_name = str(section.get("level", DEFAULT_LEVEL)).upper()
    level = getattr(logging, level_name, logging.INFO)
    return level, section.get("format", DEFAULT_FORMAT)


class FileLogger(Logger):
    """
    Journalise les commandes et les erreurs dans un fichier UTF-8.

    Un seul logging.Logger est créé par chemin de fichier : deux
    instances sur le même fichier partagent leurs handlers. Chaque
    message est écrit immédiatement sur disque et n'est pas propagé
    au logger racine.
    """

    def __init__(
        self,
        log_file: str,
        config: Optional[Dict[str, Any]] = None,
        console_output: bool = False
    ) -> None:
        """
        Args:
            log_file: Chemin du fichier de log, créé avec ses
                répertoires parents si besoin
            config: Dictionnaire avec une section "logging"
                (clés "level" et "format"), par exemple
                AdminSettings.logging_config()
            console_output: Dupliquer les messages sur stderr
        """
        self.log_file = log_file
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        level, log_format = _logging_settings(config)
        self.logger = logging.getLogger(f"linux_admin_utils.{log_file}")
        self.logger.setLevel(level)
        self.logger.propagate = False

        if self.logger.handlers:
            self.handler = self.logger.handlers[0]
        else:
            self.handler = self._attach_handlers(
                level, logging.Formatter(log_format), console_output
            )

    def _attach_handlers(
        self,
        level: int,
        formatter: logging.Formatter,
        console_output: bool
    ) -> logging.Handler:
        """Ajoute le handler fichier (et console) et le retourne."""
        handlers: list[logging.Handler] = [
            logging.FileHandler(self.log_file, encoding='utf-8')
        ]
        if console_output:
            handlers.append(logging.StreamHandler())
        for handler in handlers:
            handler.setLevel(level)
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)
        return handlers[0]

    def _write(self, level: int, message: str) -> None:
        self.logger.log(level, message)
        self.handler.flush()

    def log_info(self, message: str) -> None:
        """Log un message d'information."""
        self._write(logging.INFO, message)

    def log_warning(self, message: str) -> None:
        """Log un avertissement."""
        self._write(logging.WARNING, message)

    def log_error(self, message: str) -> None:
        """Log une erreur."""
        self._write(logging.ERROR, message)
