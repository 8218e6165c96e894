"""Lecture des fichiers de configuration (TOML ou JSON).

Le format est choisi d'après l'extension du fichier. Toute erreur de
lecture (fichier absent, extension inconnue, contenu mal formé) est
remontée sous forme de FileConfigurationError.
"""

import json
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, Dict, Generic, TypeVar, Union

from linux_admin_utils.errors.exceptions import FileConfigurationError

# Dataclass produite par un chargeur typé
T = TypeVar("T")

ConfigPath = Union[str, Path]


def _read_toml(path: Path) -> Dict[str, Any]:
    with open(path, "rb") as f:
        return tomllib.load(f)


def _read_json(path: Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


_READERS: Dict[str, Callable[[Path], Dict[str, Any]]] = {
    ".toml": _read_toml,
    ".json": _read_json,
}


class ConfigLoader(ABC):
    """Interface de lecture d'un fichier de configuration.

    Injectée dans les chargeurs typés pour pouvoir être remplacée
    par un mock.
    """

    @abstractmethod
    def load(
        self,
        config_path: ConfigPath,
        schema: type | None = None
    ) -> Union[Dict[str, Any], Any]:
        """Lit un fichier de configuration.

        Args:
            config_path: Chemin du fichier.
            schema: Modèle pydantic optionnel ; sans modèle, le
                dictionnaire brut est retourné.

        Returns:
            Dictionnaire brut ou instance du modèle.

        Raises:
            FileConfigurationError: Fichier absent, illisible ou
                d'un format non supporté.
        """
        pass


class FileConfigLoader(ConfigLoader):
    """Lecture TOML (tomllib) ou JSON, validation pydantic optionnelle."""

    def load(
        self,
        config_path: ConfigPath,
        schema: type | None = None
    ) -> Union[Dict[str, Any], Any]:
        """Lit le fichier puis le valide si un modèle est fourni.

        Raises:
            FileConfigurationError: Fichier absent, extension non
                supportée ou contenu mal formé.
            ImportError: Modèle fourni sans pydantic installé.
            TypeError: Le modèle n'est pas un pydantic.BaseModel.
        """
        path = Path(config_path)
        if not path.exists():
            raise FileConfigurationError(
                f"Fichier de configuration non trouvé: {path}"
            )

        reader = _READERS.get(path.suffix.lower())
        if reader is None:
            raise FileConfigurationError(
                f"Extension non supportée: {path.suffix}. "
                "Utilisez .toml ou .json"
            )

        try:
            raw_config = reader(path)
        except (tomllib.TOMLDecodeError, json.JSONDecodeError) as e:
            raise FileConfigurationError(
                f"Fichier de configuration invalide {path}: {e}"
            ) from e

        if schema is None:
            return raw_config
        return self._validate(raw_config, schema)

    @staticmethod
    def _validate(data: Dict[str, Any], schema: type) -> Any:
        """Valide le dictionnaire avec un modèle pydantic.

        pydantic n'est importé qu'ici : il reste une dépendance
        optionnelle (extra ``validation``).
        """
        try:
            from pydantic import BaseModel
        except ImportError:
            raise ImportError(
                "pydantic est requis pour la validation de schema. "
                "Installez-le avec: "
                "pip install linux-admin-utils[validation]"
            )

        if not (isinstance(schema, type) and issubclass(schema, BaseModel)):
            raise TypeError(
                "Le schema doit être une sous-classe de "
                f"pydantic.BaseModel, reçu: {schema}"
            )
        return schema.model_validate(data)


class ConfigFileLoader(ABC, Generic[T]):
    """Base des chargeurs qui construisent une dataclass à partir
    d'une section du fichier.

    Attributes:
        _config: Contenu complet du fichier.
    """

    def __init__(
        self,
        config_path: ConfigPath,
        config_loader: ConfigLoader | None = None
    ) -> None:
        """Lit le fichier dès la construction.

        Args:
            config_path: Chemin du fichier (.toml ou .json).
            config_loader: Lecteur injectable, FileConfigLoader
                par défaut.
        """
        loader = config_loader or FileConfigLoader()
        self._config: dict[str, Any] = loader.load(config_path)

    @property
    def config(self) -> dict[str, Any]:
        """Contenu brut du fichier."""
        return self._config

    def _get_section(self, section: str) -> dict[str, Any]:
        """Retourne une section du fichier.

        Raises:
            KeyError: Si la section n'existe pas.
        """
        try:
            return self._config[section]
        except KeyError:
            raise KeyError(
                f"Section '{section}' non trouvée dans le fichier. "
                f"Sections disponibles: {list(self._config)}"
            ) from None

    @abstractmethod
    def load(self, section: str | None = None) -> T:
        """Construit la dataclass à partir d'une section.

        Args:
            section: Section à lire, celle du chargeur si None.
        """
        pass
