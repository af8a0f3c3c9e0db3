"""Tests pour le module config."""

import json
from unittest.mock import MagicMock

import pytest
from pydantic import BaseModel, ValidationError

from linux_process_utils.commands import Command
from linux_process_utils.commands.options import apply_options
from linux_process_utils.config import (
    FileConfigLoader,
    LauncherConfig,
    LoggingSettings,
    load_launcher_config,
)
from linux_process_utils.errors import FileConfigurationError


class SampleConfig(BaseModel):
    """Modele Pydantic de test."""
    name: str
    count: int

    model_config = {"extra": "forbid"}


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
        with pytest.raises(FileNotFoundError):
            self.loader.load("/nonexistent/config.toml")

    def test_unsupported_extension(self, tmp_path):
        """Test avec extension non supportée."""
        config_file = tmp_path / "config.xml"
        config_file.write_text("<config></config>")

        with pytest.raises(ValueError, match="Extension non supportée"):
            self.loader.load(config_file)

    def test_load_with_schema(self, tmp_path):
        """Test de la validation via un schema Pydantic."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"name": "test", "count": 2}))

        result = self.loader.load(config_file, schema=SampleConfig)

        assert isinstance(result, SampleConfig)
        assert result.count == 2

    def test_load_with_invalid_data(self, tmp_path):
        """Données invalides levent pydantic.ValidationError."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"name": "test", "count": "x"}))

        with pytest.raises(ValidationError):
            self.loader.load(config_file, schema=SampleConfig)

    def test_load_non_basemodel_raises_type_error(self, tmp_path):
        """Passer un type non-BaseModel lève TypeError."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"key": "value"}))

        with pytest.raises(TypeError):
            self.loader.load(config_file, schema=dict)


class TestLauncherConfig:
    """Tests pour le modèle LauncherConfig."""

    def test_valeurs_par_defaut(self):
        """Test des valeurs par défaut."""
        config = LauncherConfig()
        assert config.shell == "/bin/sh"
        assert config.dir is None
        assert config.env == {}
        assert config.env_file is None
        assert config.logging == LoggingSettings()

    def test_shell_relatif_refuse(self):
        """Test qu'un shell relatif est refusé."""
        with pytest.raises(ValidationError, match="chemin absolu"):
            LauncherConfig(shell="bash")

    def test_champ_inconnu_refuse(self):
        """Test que les champs inconnus sont refusés."""
        with pytest.raises(ValidationError):
            LauncherConfig(timeout=10)

    def test_cle_env_invalide(self):
        """Test qu'une clé contenant '=' est refusée."""
        with pytest.raises(ValidationError, match="invalide"):
            LauncherConfig(env={"A=B": "x"})

    def test_niveau_normalise(self):
        """Test que le niveau de log est mis en majuscules."""
        assert LoggingSettings(level="debug").level == "DEBUG"

    def test_niveau_invalide(self):
        """Test qu'un niveau inconnu est refusé."""
        with pytest.raises(ValidationError):
            LoggingSettings(level="BAVARD")

    def test_options_vides(self):
        """Test qu'une configuration par défaut ne produit aucune option."""
        assert LauncherConfig().options() == []

    def test_options_appliquees(self, tmp_path):
        """Test de l'ordre dir, env_file puis env."""
        env_path = tmp_path / ".env"
        env_path.write_text("LPU_A=fichier\nLPU_B=fichier\n")
        config = LauncherConfig(
            dir="/tmp",
            env_file=str(env_path),
            env={"LPU_B": "config"},
        )
        cmd = Command("true")
        apply_options(cmd, config.options())
        assert cmd.dir == "/tmp"
        assert cmd.env["LPU_A"] == "fichier"
        assert cmd.env["LPU_B"] == "config"


class TestLoadLauncherConfig:
    """Tests pour load_launcher_config."""

    def test_sans_fichier(self):
        """Test que l'absence de chemin donne les valeurs par défaut."""
        assert load_launcher_config() == LauncherConfig()

    def test_fichier_toml(self, tmp_path):
        """Test du chargement d'un fichier TOML complet."""
        config_file = tmp_path / "launcher.toml"
        config_file.write_text(
            'shell = "/bin/bash"\n'
            'dir = "/srv"\n'
            "\n[env]\nLANG = \"C.UTF-8\"\n"
            "\n[logging]\nlevel = \"debug\"\n"
        )

        config = load_launcher_config(config_file)

        assert config.shell == "/bin/bash"
        assert config.dir == "/srv"
        assert config.env == {"LANG": "C.UTF-8"}
        assert config.logging.level == "DEBUG"

    def test_fichier_absent(self, tmp_path):
        """Test qu'un fichier absent lève FileConfigurationError."""
        with pytest.raises(FileConfigurationError, match="absent.toml"):
            load_launcher_config(tmp_path / "absent.toml")

    def test_fichier_invalide(self, tmp_path):
        """Test qu'un contenu invalide lève FileConfigurationError."""
        config_file = tmp_path / "launcher.json"
        config_file.write_text(json.dumps({"shell": "sh"}))

        with pytest.raises(FileConfigurationError) as exc_info:
            load_launcher_config(config_file)
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_toml_malforme(self, tmp_path):
        """Test qu'un TOML malformé lève FileConfigurationError."""
        config_file = tmp_path / "launcher.toml"
        config_file.write_text("shell = \n")

        with pytest.raises(FileConfigurationError):
            load_launcher_config(config_file)

    def test_loader_injecte(self):
        """Test de l'injection d'un chargeur."""
        loader = MagicMock()
        loader.load.return_value = LauncherConfig(shell="/bin/dash")

        config = load_launcher_config("virtuel.toml", loader=loader)

        assert config.shell == "/bin/dash"
        loader.load.assert_called_once_with(
            "virtuel.toml", schema=LauncherConfig
        )
