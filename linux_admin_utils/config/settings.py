"""Paramètres globaux de linux_admin_utils.

Fichier de configuration attendu (TOML) :

    [admin]
    log_file = "/var/log/linux-admin.log"
    log_level = "INFO"
    dry_run = false
    console_colors = true

    [admin.binaries]
    apt-get = "/usr/bin/apt-get"
    curl = "/usr/local/bin/curl"

Example:
    Construction d'un exécuteur configuré :

        settings = AdminSettingsLoader("config/admin.toml").load()
        logger = FileLogger(settings.log_file, settings.logging_config())
        executor = build_executor(settings, logger)
        apt = AptPackageManager(
            executor, logger,
            apt_get_cmd=settings.binary("apt-get", APT_GET_CMD),
        )
        with build_error_chain(logger).reporting(exit_code=1):
            apt.install(["curl"], InstallOptions(assume_yes=True))
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from linux_admin_utils.commands.formatter import AnsiCommandFormatter
from linux_admin_utils.commands.runner import LinuxCommandExecutor
from linux_admin_utils.config.loader import ConfigFileLoader, ConfigLoader
from linux_admin_utils.errors.base import ErrorHandlerChain
from linux_admin_utils.errors.console_handler import ConsoleErrorHandler
from linux_admin_utils.errors.exceptions import ConfigurationError
from linux_admin_utils.errors.logger_handler import LoggerErrorHandler
from linux_admin_utils.logging.base import Logger

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class AdminSettings:
    """Paramètres de l'exécuteur et des façades.

    Attributes:
        log_file: Fichier de log.
        log_level: Niveau de log (DEBUG, INFO, ...).
        dry_run: Simuler les commandes sans les exécuter.
        console_colors: Afficher les commandes en couleur sur stdout.
        binaries: Chemins des programmes, par nom de commande.
    """

    log_file: str = "/var/log/linux-admin-utils.log"
    log_level: str = "INFO"
    dry_run: bool = False
    console_colors: bool = False
    binaries: Dict[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        """Valide les champs après initialisation.

        Raises:
            ConfigurationError: Si log_file est vide ou log_level inconnu.
        """
        if not self.log_file:
            raise ConfigurationError("log_file est requis")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ConfigurationError(
                f"log_level invalide : {self.log_level}"
            )

    def binary(self, name: str, default: str) -> str:
        """Retourne le chemin configuré d'un programme.

        Args:
            name: Nom de la commande (ex: "curl").
            default: Chemin utilisé si aucun n'est configuré.

        Returns:
            Chemin du programme.
        """
        return self.binaries.get(name, default)

    def logging_config(self) -> Dict[str, Any]:
        """Retourne la configuration attendue par FileLogger."""
        return {"logging": {"level": self.log_level.upper()}}


class AdminSettingsLoader(ConfigFileLoader[AdminSettings]):
    """Chargeur de AdminSettings depuis la section [admin]."""

    DEFAULT_SECTION: str = "admin"

    def __init__(
        self,
        config_path: str | Path,
        config_loader: ConfigLoader | None = None
    ) -> None:
        super().__init__(config_path, config_loader)

    def load(self, section: str | None = None) -> AdminSettings:
        """Charge et retourne les paramètres.

        Args:
            section: Nom de la section à charger. Par défaut "admin".

        Returns:
            Instance de AdminSettings.

        Raises:
            KeyError: Si la section n'existe pas.
            ConfigurationError: Si une valeur est invalide.
        """
        section_name = section or self.DEFAULT_SECTION
        data: dict[str, Any] = self._get_section(section_name)
        defaults = AdminSettings()

        return AdminSettings(
            log_file=data.get("log_file", defaults.log_file),
            log_level=data.get("log_level", defaults.log_level),
            dry_run=bool(data.get("dry_run", False)),
            console_colors=bool(data.get("console_colors", False)),
            binaries=dict(data.get("binaries", {})),
        )


def build_executor(
    settings: AdminSettings,
    logger: Optional[Logger] = None,
) -> LinuxCommandExecutor:
    """Construit un LinuxCommandExecutor selon les paramètres.

    Args:
        settings: Paramètres chargés.
        logger: Logger optionnel.

    Returns:
        Exécuteur configuré (dry_run, couleurs console).
    """
    formatter = AnsiCommandFormatter() if settings.console_colors else None
    return LinuxCommandExecutor(
        logger=logger,
        dry_run=settings.dry_run,
        console_formatter=formatter,
    )


def build_error_chain(
    logger: Optional[Logger] = None,
    console: bool = True,
) -> ErrorHandlerChain:
    """Construit la chaîne de rapport d'erreurs d'un script.

    Args:
        logger: Logger recevant les erreurs, s'il est fourni.
        console: Afficher les erreurs et leur solution sur stdout.

    Returns:
        Chaîne prête pour ErrorHandlerChain.reporting().
    """
    chain = ErrorHandlerChain()
    if console:
        chain.add_handler(ConsoleErrorHandler())
    if logger is not None:
        chain.add_handler(LoggerErrorHandler(logger))
    return chain
