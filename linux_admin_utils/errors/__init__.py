"""Module de gestion des errors."""

from linux_admin_utils.errors.base import ErrorHandler, ErrorHandlerChain
from linux_admin_utils.errors.exceptions import (ApplicationError,
                                                 CommandFailed,
                                                 ConfigurationError,
                                                 FileConfigurationError,
                                                 SystemRequirementError,
                                                 MissingDependencyError)
from linux_admin_utils.errors.console_handler import ConsoleErrorHandler
from linux_admin_utils.errors.logger_handler import LoggerErrorHandler


__all__ = [
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
]
