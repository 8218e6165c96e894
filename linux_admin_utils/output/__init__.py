"""Module de sortie texte et d'écriture de fichiers via echo."""

from linux_admin_utils.output.echo import (
    ECHO_CMD,
    EchoOptions,
    EchoWriter,
    WriteOptions,
)

__all__ = [
    "ECHO_CMD",
    "EchoOptions",
    "EchoWriter",
    "WriteOptions",
]
