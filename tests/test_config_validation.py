"""Tests pour la validation Pydantic optionnelle de FileConfigLoader."""

import json
import tempfile
import unittest
from unittest.mock import patch

from pydantic import BaseModel, ValidationError, field_validator

from linux_admin_utils.config import FileConfigLoader


class AdminModel(BaseModel):
    """Modele Pydantic de test pour la section admin."""
    log_file: str
    dry_run: bool = False

    model_config = {"extra": "forbid"}

    @field_validator("log_file")
    @classmethod
    def must_be_absolute(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError("Le chemin doit etre absolu")
        return v


class AdminFileModel(BaseModel):
    """Modele racine avec sous-section."""
    admin: AdminModel


class TestFileConfigLoaderWithSchema(unittest.TestCase):
    """Tests FileConfigLoader.load() avec schema Pydantic."""

    def setUp(self):
        self.loader = FileConfigLoader()

    def _write_json(self, data: dict) -> str:
        """Ecrit un fichier JSON temporaire et retourne le chemin."""
        f = tempfile.NamedTemporaryFile(
            mode="w", suffix=".json", delete=False
        )
        json.dump(data, f)
        f.close()
        return f.name

    def test_load_without_schema_returns_dict(self):
        """Sans schema, load() retourne un dict brut."""
        path = self._write_json({"admin": {"log_file": "/var/log/a.log"}})
        result = self.loader.load(path)
        self.assertIsInstance(result, dict)

    def test_load_with_schema_returns_model(self):
        """Avec schema, load() retourne une instance du modele."""
        path = self._write_json(
            {"admin": {"log_file": "/var/log/a.log", "dry_run": True}}
        )
        result = self.loader.load(path, schema=AdminFileModel)
        self.assertIsInstance(result, AdminFileModel)
        self.assertTrue(result.admin.dry_run)

    def test_schema_rejects_invalid_data(self):
        """Une valeur invalide leve ValidationError."""
        path = self._write_json({"admin": {"log_file": "relatif.log"}})
        with self.assertRaises(ValidationError):
            self.loader.load(path, schema=AdminFileModel)

    def test_schema_rejects_extra_fields(self):
        """Un champ inconnu est refuse (extra=forbid)."""
        path = self._write_json(
            {"admin": {"log_file": "/a.log", "inconnu": 1}}
        )
        with self.assertRaises(ValidationError):
            self.loader.load(path, schema=AdminFileModel)

    def test_schema_not_basemodel_raises_type_error(self):
        """Un schema qui n'est pas un BaseModel leve TypeError."""
        path = self._write_json({"admin": {}})
        with self.assertRaises(TypeError):
            self.loader.load(path, schema=dict)

    def test_pydantic_absent_raises_import_error(self):
        """Sans pydantic, la validation leve ImportError."""
        path = self._write_json({"admin": {"log_file": "/a.log"}})
        with patch.dict("sys.modules", {"pydantic": None}):
            with self.assertRaises(ImportError):
                self.loader.load(path, schema=AdminFileModel)


if __name__ == "__main__":
    unittest.main()
