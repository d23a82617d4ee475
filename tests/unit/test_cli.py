"""
Tests for the command line interface.
"""

import functools
from pathlib import Path

import pytest
from rich.console import Console
from typer.testing import CliRunner

from steam_roulette import __version__, cli
from steam_roulette.config.settings import Settings
from steam_roulette.steam import install as install_module
from steam_roulette.steam.models import NOT_FOUND, InstallKind, SteamInstall

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated(tmp_path: Path, monkeypatch):
    """No user config, wide console, and no real launches."""
    monkeypatch.setattr(Settings, "CONFIG_FILE", tmp_path / "no-config.json")
    monkeypatch.delenv(Settings.STEAM_PATH_ENV, raising=False)
    monkeypatch.setattr(cli, "console", Console(width=200))
    monkeypatch.setattr(cli, "err_console", Console(stderr=True, width=200))

    def no_launch(install, app_id):
        raise AssertionError("launch_game called")

    monkeypatch.setattr(cli, "launch_game", no_launch)


def _detected(monkeypatch, root: Path) -> None:
    def detect(on_status=None, root_override=None):
        return SteamInstall(InstallKind.NATIVE, root_override or root, ("steam",))

    monkeypatch.setattr(cli, "detect_steam", detect)


class TestSteamNotFound:
    """Tests for the no-Steam path."""

    def test_message_and_no_scanning(self, monkeypatch):
        """Nothing is scanned when Steam is missing."""
        monkeypatch.setattr(cli, "detect_steam", lambda **kwargs: NOT_FOUND)

        class NoScanner:
            def __init__(self, *args, **kwargs):
                raise AssertionError("library scanned")

        monkeypatch.setattr(cli, "SteamLibraryScanner", NoScanner)

        result = runner.invoke(cli.app, [])

        assert result.exit_code == 1
        assert "Couldn't find Steam" in result.output

    def test_list_command(self, monkeypatch):
        monkeypatch.setattr(cli, "detect_steam", lambda **kwargs: NOT_FOUND)
        result = runner.invoke(cli.app, ["list"])
        assert result.exit_code == 1
        assert "Couldn't find Steam" in result.output


class TestLaunch:
    """Tests for the default launch action."""

    def test_dry_run_verbose(self, make_library, monkeypatch):
        """Dry run announces the pick but launches nothing."""
        root = make_library("Steam", {"220": "Half-Life 2", "0": "Proton 8.0"})
        _detected(monkeypatch, root)

        result = runner.invoke(cli.app, ["-v", "--dry-run"])

        assert result.exit_code == 0, result.output
        assert 'Randomly launching "Half-Life 2"! Have fun!' in result.output

    def test_quiet_by_default(self, make_library, monkeypatch):
        """Without -v nothing is printed."""
        root = make_library("Steam", {"220": "Half-Life 2"})
        _detected(monkeypatch, root)

        result = runner.invoke(cli.app, ["--dry-run"])

        assert result.exit_code == 0
        assert "Randomly launching" not in result.output

    def test_very_verbose_shows_discovery(self, make_library, monkeypatch):
        root = make_library("Steam", {"220": "Half-Life 2"})
        _detected(monkeypatch, root)

        result = runner.invoke(cli.app, ["-vv", "--dry-run"])

        assert result.exit_code == 0
        assert "steam://rungameid/220" in result.output
        assert "Found 1 games" in result.output

    def test_launches_picked_game(self, make_library, monkeypatch):
        """The picked game's id is handed to the launcher."""
        root = make_library("Steam", {"220": "Half-Life 2"})
        _detected(monkeypatch, root)
        launched = []

        class FakeProcess:
            args = ["steam", "steam://rungameid/220"]
            pid = 1234

        def fake_launch(install, app_id):
            launched.append((install.kind, app_id))
            return FakeProcess()

        monkeypatch.setattr(cli, "launch_game", fake_launch)

        result = runner.invoke(cli.app, [])

        assert result.exit_code == 0
        assert launched == [(InstallKind.NATIVE, "220")]

    def test_no_games(self, make_library, monkeypatch):
        """An empty catalog is a clear error, not a crash."""
        root = make_library("Steam", {"0": "Proton 8.0"})
        _detected(monkeypatch, root)

        result = runner.invoke(cli.app, [])

        assert result.exit_code == 1
        assert "No installed games found" in result.output

    def test_missing_library_folders(self, make_library, monkeypatch):
        root = make_library("Steam", {"220": "Half-Life 2"})
        (root / "steamapps" / "libraryfolders.vdf").unlink()
        _detected(monkeypatch, root)

        result = runner.invoke(cli.app, ["--dry-run"])

        assert result.exit_code == 1
        assert "Error scanning Steam library" in result.output

    def test_steam_path_override(self, make_library, tmp_path: Path, monkeypatch):
        """--steam-path replaces the detected root."""
        root = make_library("Custom", {"620": "Portal 2"})
        _detected(monkeypatch, tmp_path / "detected-but-empty")

        result = runner.invoke(cli.app, ["-v", "--dry-run", "--steam-path", str(root)])

        assert result.exit_code == 0, result.output
        assert '"Portal 2"' in result.output

    def test_steam_path_when_no_steam_dir_in_home(self, make_library, tmp_path: Path, monkeypatch):
        """An explicit path works when none of the usual Steam dirs exist."""
        root = make_library("Elsewhere", {"620": "Portal 2"})
        home = tmp_path / "empty-home"
        home.mkdir()

        def no_flatpak(cmd, **kwargs):
            raise FileNotFoundError(2, "No such file or directory", "flatpak")

        monkeypatch.setattr(Path, "home", classmethod(lambda cls: home))
        monkeypatch.setattr(install_module.shutil, "which", lambda name: f"/usr/bin/{name}")
        monkeypatch.setattr(install_module.subprocess, "run", no_flatpak)
        monkeypatch.setattr(
            cli, "detect_steam", functools.partial(install_module.detect_steam, platform="linux")
        )

        result = runner.invoke(cli.app, ["-v", "--dry-run", "--steam-path", str(root)])

        assert result.exit_code == 0, result.output
        assert "Couldn't find Steam" not in result.output
        assert 'Randomly launching "Portal 2"! Have fun!' in result.output

    def test_steam_path_from_environment(self, make_library, tmp_path: Path, monkeypatch):
        """STEAM_ROULETTE_STEAM_PATH is handed to detection like --steam-path."""
        root = make_library("FromEnv", {"220": "Half-Life 2"})
        _detected(monkeypatch, tmp_path / "detected-but-empty")
        monkeypatch.setenv(Settings.STEAM_PATH_ENV, str(root))

        result = runner.invoke(cli.app, ["-v", "--dry-run"])

        assert result.exit_code == 0, result.output
        assert '"Half-Life 2"' in result.output

    def test_version(self):
        result = runner.invoke(cli.app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestListGames:
    """Tests for the list command."""

    def test_lists_all_libraries(self, make_library, monkeypatch):
        second = make_library("Second", {"620": "Portal 2"})
        root = make_library("Steam", {"220": "Half-Life 2"}, extra_libraries=(second,))
        _detected(monkeypatch, root)

        result = runner.invoke(cli.app, ["list"])

        assert result.exit_code == 0, result.output
        assert "Half-Life 2" in result.output
        assert "Portal 2" in result.output
        assert "Total: 2 games" in result.output

    def test_empty(self, make_library, monkeypatch):
        root = make_library("Steam", {})
        _detected(monkeypatch, root)

        result = runner.invoke(cli.app, ["list"])

        assert result.exit_code == 0
        assert "No games found" in result.output
