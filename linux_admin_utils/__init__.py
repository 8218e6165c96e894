"""
Linux Admin Utils - Construction et exécution de commandes d'administration.

Modules disponibles:
- commands: Paramètres ordonnés, sérialisation et exécution de commandes
  (ParameterSet, CommandBuilder, LinuxCommandExecutor)
- packages: Gestion des paquets apt et analyse des listes de paquets
  (AptPackageManager, parse_package_listing)
- transfer: Transferts HTTP via curl (CurlClient)
- filesystem: Lecture de fichiers et opérations cp/mv/chmod/chown/mkdir
  (LinuxFileManager, FileOperations)
- output: Affichage et écriture de fichiers via echo (EchoWriter)
- logging: Gestion des logs (Logger, FileLogger)
- config: Chargement de configuration (TOML, JSON, AdminSettings)
- errors: Hiérarchie d'exceptions et gestionnaires d'erreurs
"""

__version__ = "1.0.0"

from linux_admin_utils.logging import Logger, FileLogger
from linux_admin_utils.config import (
    ConfigLoader,
    ConfigFileLoader,
    FileConfigLoader,
    AdminSettings,
    AdminSettingsLoader,
    build_error_chain,
    build_executor,
)
from linux_admin_utils.errors import (
    ApplicationError,
    CommandFailed,
    ConfigurationError,
    FileConfigurationError,
    SystemRequirementError,
    MissingDependencyError,
    ErrorHandler,
    ConsoleErrorHandler,
    LoggerErrorHandler,
    ErrorHandlerChain,
)
from linux_admin_utils.commands import (
    ParameterEntry,
    ParameterSet,
    serialize,
    serialize_to_string,
    compose_redirection,
    CommandResult,
    CommandExecutor,
    CommandBuilder,
    CommandFormatter,
    PlainCommandFormatter,
    AnsiCommandFormatter,
    LinuxCommandExecutor,
)
from linux_admin_utils.packages import (
    PackageRecord,
    PackageManager,
    parse_package_listing,
    AptPackageManager,
    AptOptions,
    InstallOptions,
    RemoveOptions,
    UpgradeOptions,
    CleanOptions,
)
from linux_admin_utils.transfer import (
    TransferClient,
    CurlClient,
    TransferOptions,
    DownloadOptions,
    UploadOptions,
    RequestOptions,
    extract_status_code,
)
from linux_admin_utils.filesystem import (
    FileManager,
    LinuxFileManager,
    FileOperations,
    CopyOptions,
    MkdirOptions,
)
from linux_admin_utils.output import (
    EchoWriter,
    EchoOptions,
    WriteOptions,
)

__all__ = [
    # Logging
    "Logger",
    "FileLogger",
    # Config
    "ConfigLoader",
    "ConfigFileLoader",
    "FileConfigLoader",
    "AdminSettings",
    "AdminSettingsLoader",
    "build_error_chain",
    "build_executor",
    # Errors
    "ApplicationError",
    "CommandFailed",
    "ConfigurationError",
    "FileConfigurationError",
    "SystemRequirementError",
    "MissingDependencyError",
    "ErrorHandler",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    "ErrorHandlerChain",
    # Commands
    "ParameterEntry",
    "ParameterSet",
    "serialize",
    "serialize_to_string",
    "compose_redirection",
    "CommandResult",
    "CommandExecutor",
    "CommandBuilder",
    "CommandFormatter",
    "PlainCommandFormatter",
    "AnsiCommandFormatter",
    "LinuxCommandExecutor",
    # Packages
    "PackageRecord",
    "PackageManager",
    "parse_package_listing",
    "AptPackageManager",
    "AptOptions",
    "InstallOptions",
    "RemoveOptions",
    "UpgradeOptions",
    "CleanOptions",
    # Transfer
    "TransferClient",
    "CurlClient",
    "TransferOptions",
    "DownloadOptions",
    "UploadOptions",
    "RequestOptions",
    "extract_status_code",
    # Filesystem
    "FileManager",
    "LinuxFileManager",
    "FileOperations",
    "CopyOptions",
    "MkdirOptions",
    # Output
    "EchoWriter",
    "EchoOptions",
    "WriteOptions",
]
