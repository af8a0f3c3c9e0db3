"""Tests pour system() et look_path()."""

import io
import sys
from unittest.mock import MagicMock, patch

import pytest

from linux_process_utils.commands import look_path, options, system
from linux_process_utils.errors import (
    AlreadySetError,
    ExecutableNotFoundError,
    ExitError,
)


@pytest.fixture
def std_streams(monkeypatch):
    """Remplace les flux standard par des tampons mémoire."""
    streams = {
        "stdin": io.BytesIO(),
        "stdout": io.BytesIO(),
        "stderr": io.BytesIO(),
    }
    for name, stream in streams.items():
        monkeypatch.setattr(sys, name, stream)
    return streams


class TestSystem:
    """Tests pour system()."""

    def test_decoupage_sur_les_espaces(self):
        """Test que chaque mot devient un argument de sh -c."""
        with patch(
            "linux_process_utils.commands.launcher.Command"
        ) as command_cls:
            system("echo hello world")
        command_cls.assert_called_once_with(
            "/bin/sh", "-c", "echo", "hello", "world", logger=None
        )
        command_cls.return_value.run.assert_called_once()

    def test_espaces_multiples(self):
        """Test que les suites d'espaces et tabulations sont fusionnées."""
        with patch(
            "linux_process_utils.commands.launcher.Command"
        ) as command_cls:
            system("  echo \t hello   world ")
        assert command_cls.call_args[0] == (
            "/bin/sh", "-c", "echo", "hello", "world"
        )

    def test_guillemets_non_supportes(self):
        """Limitation connue : les guillemets ne regroupent pas les mots."""
        with patch(
            "linux_process_utils.commands.launcher.Command"
        ) as command_cls:
            system("echo 'deux mots'")
        assert command_cls.call_args[0] == (
            "/bin/sh", "-c", "echo", "'deux", "mots'"
        )

    def test_seul_le_premier_mot_est_execute(self, std_streams):
        """Limitation connue : les mots suivants deviennent $0, $1."""
        system("echo hello world")
        assert std_streams["stdout"].getvalue() == b"\n"

    def test_flux_de_l_appelant(self, std_streams):
        """Test que la sortie de l'enfant arrive sur sys.stdout."""
        system("pwd", options.dir("/tmp"))
        assert std_streams["stdout"].getvalue() == b"/tmp\n"

    def test_shell_personnalise(self):
        """Test du paramètre shell."""
        with patch(
            "linux_process_utils.commands.launcher.Command"
        ) as command_cls:
            system("true", shell="/bin/bash")
        assert command_cls.call_args[0][0] == "/bin/bash"

    def test_options_apres_les_defauts(self):
        """Test que les options utilisateur suivent stdin/stdout/stderr."""
        user_option = MagicMock()
        with patch(
            "linux_process_utils.commands.launcher.Command"
        ) as command_cls:
            system("true", user_option)
        run_opts = command_cls.return_value.run.call_args[0]
        assert len(run_opts) == 4
        assert run_opts[3] is user_option

    def test_option_stdout_en_conflit(self, std_streams):
        """Test qu'une option stdout entre en conflit avec les défauts."""
        with pytest.raises(AlreadySetError):
            system("true", options.stdout(io.BytesIO()))

    def test_echec_de_la_commande(self, std_streams):
        """Test qu'un statut non nul lève ExitError."""
        with pytest.raises(ExitError) as exc_info:
            system("false")
        assert exc_info.value.returncode == 1


class TestLookPath:
    """Tests pour look_path()."""

    def test_trouve_dans_le_path(self):
        """Test de la résolution d'un programme standard."""
        path = look_path("sh")
        assert path.endswith("/sh")

    def test_chemin_absolu(self):
        """Test qu'un chemin avec séparateur est testé directement."""
        assert look_path("/bin/sh") == "/bin/sh"

    def test_introuvable(self):
        """Test qu'un programme absent lève ExecutableNotFoundError."""
        with pytest.raises(ExecutableNotFoundError, match="introuvable"):
            look_path("programme-inexistant-lpu")

    def test_introuvable_est_file_not_found(self):
        """Test que l'erreur est aussi un FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            look_path("programme-inexistant-lpu")

    def test_path_personnalise(self, tmp_path, monkeypatch):
        """Test de la recherche dans un PATH modifié."""
        tool = tmp_path / "outil-lpu"
        tool.write_text("#!/bin/sh\n")
        tool.chmod(0o755)
        monkeypatch.setenv("PATH", str(tmp_path))
        assert look_path("outil-lpu") == str(tool)

    def test_chemin_relatif_sans_path(self, tmp_path, monkeypatch):
        """Test qu'un chemin relatif ne consulte pas le PATH."""
        tool = tmp_path / "outil-lpu"
        tool.write_text("#!/bin/sh\n")
        tool.chmod(0o755)
        monkeypatch.setenv("PATH", str(tmp_path))
        monkeypatch.chdir("/")
        with pytest.raises(ExecutableNotFoundError):
            look_path("./outil-lpu")

    def test_fichier_non_executable(self, tmp_path):
        """Test qu'un fichier non exécutable n'est pas retenu."""
        script = tmp_path / "script"
        script.write_text("#!/bin/sh\n")
        script.chmod(0o644)
        with pytest.raises(ExecutableNotFoundError):
            look_path(str(script))
