"""Shared fixtures: fake Steam directory trees."""

from pathlib import Path

import pytest


def manifest_text(app_id: str, name: str) -> str:
    """Build appmanifest contents the way Steam writes them."""
    return (
        '"AppState"\n'
        "{\n"
        f'\t"appid"\t\t"{app_id}"\n'
        '\t"Universe"\t\t"1"\n'
        f'\t"name"\t\t"{name}"\n'
        '\t"StateFlags"\t\t"4"\n'
        f'\t"installdir"\t\t"{name}"\n'
        '\t"InstalledDepots"\n'
        "\t{\n"
        '\t\t"221"\n'
        "\t\t{\n"
        '\t\t\t"manifest"\t\t"2279370536431338361"\n'
        "\t\t}\n"
        "\t}\n"
        "}\n"
    )


def library_folders_text(*paths: str) -> str:
    """Build libraryfolders.vdf contents listing the given library paths."""
    lines = ['"libraryfolders"', "{"]
    for index, path in enumerate(paths):
        lines += [
            f'\t"{index}"',
            "\t{",
            f'\t\t"path"\t\t"{path}"',
            '\t\t"label"\t\t""',
            '\t\t"contentid"\t\t"4384718273917349"',
            "\t}",
        ]
    lines.append("}")
    return "\n".join(lines) + "\n"


@pytest.fixture(name="manifest_text")
def manifest_text_fixture():
    """Factory for appmanifest contents."""
    return manifest_text


@pytest.fixture(name="library_folders_text")
def library_folders_text_fixture():
    """Factory for libraryfolders.vdf contents."""
    return library_folders_text


@pytest.fixture
def make_library(tmp_path: Path):
    """Create a library root with a steamapps dir holding the given games."""

    def _make(name: str, games: dict, extra_libraries: tuple = ()) -> Path:
        root = tmp_path / name
        steamapps = root / "steamapps"
        steamapps.mkdir(parents=True)
        for app_id, game_name in games.items():
            (steamapps / f"appmanifest_{app_id}.acf").write_text(
                manifest_text(app_id, game_name)
            )
        (steamapps / "libraryfolders.vdf").write_text(
            library_folders_text(*[str(p) for p in extra_libraries])
        )
        return root

    return _make
