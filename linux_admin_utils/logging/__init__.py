"""Module de logging."""

from linux_admin_utils.logging.base import Logger
from linux_admin_utils.logging.file_logger import FileLogger

__all__ = [
    "Logger",
    "FileLogger",
]
