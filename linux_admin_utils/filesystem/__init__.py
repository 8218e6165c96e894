"""Module de gestion des fichiers."""

from linux_admin_utils.filesystem.base import FileManager
from linux_admin_utils.filesystem.linux import LinuxFileManager
from linux_admin_utils.filesystem.operations import (
    CopyOptions,
    FileOperations,
    MkdirOptions,
)

__all__ = [
    "FileManager",
    "LinuxFileManager",
    "FileOperations",
    "CopyOptions",
    "MkdirOptions",
]
