"""Tests pour le module config."""

import json
from unittest.mock import MagicMock, patch

import pytest

from linux_admin_utils.commands import (
    AnsiCommandFormatter,
    LinuxCommandExecutor,
)
from linux_admin_utils.config import (
    AdminSettings,
    AdminSettingsLoader,
    ConfigLoader,
    FileConfigLoader,
    build_error_chain,
    build_executor,
)
from linux_admin_utils.errors import (
    CommandFailed,
    ConfigurationError,
    ConsoleErrorHandler,
    FileConfigurationError,
    LoggerErrorHandler,
)
from linux_admin_utils.logging.base import Logger
from linux_admin_utils.packages import AptPackageManager


ADMIN_TOML = """
[admin]
log_file = "/tmp/admin.log"
log_level = "debug"
dry_run = true
console_colors = true

[admin.binaries]
apt-get = "/opt/bin/apt-get"
"""


class TestFileConfigLoader:
    """Tests pour FileConfigLoader."""

    def setup_method(self):
        """Initialise le loader avant chaque test."""
        self.loader = FileConfigLoader()

    def test_load_json(self, tmp_path):
        """Test du chargement d'un fichier JSON."""
        config_file = tmp_path / "config.json"
        config_data = {"key": "value", "nested": {"a": 1}}
        config_file.write_text(json.dumps(config_data))

        assert self.loader.load(config_file) == config_data

    def test_load_toml(self, tmp_path):
        """Test du chargement d'un fichier TOML."""
        config_file = tmp_path / "config.toml"
        config_file.write_text('[section]\nkey = "value"\n')

        result = self.loader.load(config_file)

        assert result["section"]["key"] == "value"

    def test_file_not_found(self):
        """Test avec fichier inexistant."""
        with pytest.raises(FileConfigurationError, match="non trouvé"):
            self.loader.load("/nonexistent/config.toml")

    def test_unsupported_extension(self, tmp_path):
        """Test avec extension non supportée."""
        config_file = tmp_path / "config.xml"
        config_file.write_text("<config></config>")

        with pytest.raises(FileConfigurationError, match="Extension"):
            self.loader.load(config_file)

    def test_toml_invalide(self, tmp_path):
        """Un TOML mal formé lève FileConfigurationError."""
        config_file = tmp_path / "config.toml"
        config_file.write_text("[section\nkey = ")

        with pytest.raises(FileConfigurationError, match="invalide"):
            self.loader.load(config_file)

    def test_json_invalide(self, tmp_path):
        """Un JSON mal formé lève FileConfigurationError."""
        config_file = tmp_path / "config.json"
        config_file.write_text("{not json")

        with pytest.raises(FileConfigurationError):
            self.loader.load(config_file)


class TestAdminSettings:
    """Tests pour la dataclass AdminSettings."""

    def test_valeurs_par_defaut(self):
        """Les défauts sont valides."""
        settings = AdminSettings()
        assert settings.log_level == "INFO"
        assert settings.dry_run is False
        assert settings.binaries == {}

    def test_log_level_invalide(self):
        """Un niveau inconnu lève ConfigurationError."""
        with pytest.raises(ConfigurationError):
            AdminSettings(log_level="VERBOSE")

    def test_log_file_vide(self):
        """Un fichier de log vide lève ConfigurationError."""
        with pytest.raises(ConfigurationError):
            AdminSettings(log_file="")

    def test_binary(self):
        """binary() retourne le chemin configuré ou le défaut."""
        settings = AdminSettings(binaries={"curl": "/opt/curl"})
        assert settings.binary("curl", "/usr/bin/curl") == "/opt/curl"
        assert settings.binary("apt", "/usr/bin/apt") == "/usr/bin/apt"

    def test_hashable(self):
        """Les paramètres restent hashables malgré binaries."""
        settings = AdminSettings(binaries={"curl": "/opt/curl"})
        assert hash(settings) == hash(AdminSettings())

    def test_logging_config(self):
        """logging_config() alimente FileLogger."""
        settings = AdminSettings(log_level="warning")
        assert settings.logging_config() == {
            "logging": {"level": "WARNING"}
        }


class TestAdminSettingsLoader:
    """Tests pour AdminSettingsLoader."""

    def test_load_toml(self, tmp_path):
        """Chargement de la section [admin]."""
        config_file = tmp_path / "admin.toml"
        config_file.write_text(ADMIN_TOML)

        settings = AdminSettingsLoader(config_file).load()

        assert settings.log_file == "/tmp/admin.log"
        assert settings.log_level == "debug"
        assert settings.dry_run is True
        assert settings.console_colors is True
        assert settings.binaries == {"apt-get": "/opt/bin/apt-get"}

    def test_section_absente(self, tmp_path):
        """Une section absente lève KeyError."""
        config_file = tmp_path / "admin.toml"
        config_file.write_text('[other]\nkey = "v"\n')

        with pytest.raises(KeyError, match="admin"):
            AdminSettingsLoader(config_file).load()

    def test_section_personnalisee(self, tmp_path):
        """Une autre section peut être chargée."""
        config_file = tmp_path / "admin.json"
        config_file.write_text(json.dumps({"staging": {"dry_run": True}}))

        settings = AdminSettingsLoader(config_file).load("staging")

        assert settings.dry_run is True
        assert settings.log_file == AdminSettings().log_file

    def test_config_loader_injecte(self):
        """Un ConfigLoader injecté remplace la lecture du fichier."""
        mock_loader = MagicMock(spec=ConfigLoader)
        mock_loader.load.return_value = {"admin": {"log_level": "ERROR"}}

        settings = AdminSettingsLoader(
            "ignored.toml", config_loader=mock_loader
        ).load()

        mock_loader.load.assert_called_once_with("ignored.toml")
        assert settings.log_level == "ERROR"


class TestBuildExecutor:
    """Tests pour build_executor()."""

    @patch("linux_admin_utils.commands.runner.subprocess.run")
    def test_dry_run(self, mock_run):
        """dry_run est transmis à l'exécuteur."""
        executor = build_executor(AdminSettings(dry_run=True))

        assert isinstance(executor, LinuxCommandExecutor)
        executor.run("ls")
        mock_run.assert_not_called()

    def test_console_colors(self):
        """console_colors active AnsiCommandFormatter."""
        logger = MagicMock(spec=Logger)
        executor = build_executor(
            AdminSettings(console_colors=True), logger
        )

        assert isinstance(
            executor._console_formatter, AnsiCommandFormatter
        )
        assert executor._logger is logger

    def test_sans_couleurs(self):
        """Sans console_colors, aucun formateur console."""
        executor = build_executor(AdminSettings())
        assert executor._console_formatter is None


class TestBuildErrorChain:
    """Tests pour build_error_chain()."""

    def test_console_et_logger(self):
        """Console puis logger, dans cet ordre."""
        chain = build_error_chain(MagicMock(spec=Logger))

        assert [type(h) for h in chain.handlers] == [
            ConsoleErrorHandler,
            LoggerErrorHandler,
        ]

    def test_sans_console_ni_logger(self):
        """Aucun handler si tout est désactivé."""
        assert build_error_chain(console=False).handlers == []

    @patch("builtins.print")
    def test_echec_apt_journalise_et_relance(self, mock_print):
        """Un échec d'apt-get est affiché, journalisé puis relancé."""
        logger = MagicMock(spec=Logger)
        executor = MagicMock(spec=LinuxCommandExecutor)
        executor.run.side_effect = CommandFailed(
            ["apt-get", "install", "nope"],
            exit_code=100,
            stderr="E: Unable to locate package nope",
        )
        apt = AptPackageManager(executor, logger)

        with pytest.raises(CommandFailed):
            with build_error_chain(logger).reporting():
                apt.install("nope")

        logger.log_error.assert_any_call(
            "stderr : E: Unable to locate package nope"
        )
        assert mock_print.called

    @patch("linux_admin_utils.errors.base.sys.exit")
    def test_configuration_error_termine(self, mock_exit):
        """Une liste de paquets vide termine le script avec le code fourni."""
        logger = MagicMock(spec=Logger)
        apt = AptPackageManager(MagicMock(spec=LinuxCommandExecutor), logger)

        with build_error_chain(logger, console=False).reporting(exit_code=2):
            apt.install([])

        logger.log_error.assert_called_once()
        mock_exit.assert_called_once_with(2)
