"""Module de configuration."""

from linux_admin_utils.config.loader import (
    ConfigLoader,
    ConfigFileLoader,
    FileConfigLoader,
)
from linux_admin_utils.config.settings import (
    AdminSettings,
    AdminSettingsLoader,
    build_error_chain,
    build_executor,
)

__all__ = [
    "ConfigLoader",
    "ConfigFileLoader",
    "FileConfigLoader",
    "AdminSettings",
    "AdminSettingsLoader",
    "build_error_chain",
    "build_executor",
]
