"""
Game Launcher.

Picks a game from the catalog and hands it to Steam via steam:// URL.
"""

import os
import random
import subprocess
from typing import Optional, Sequence

from steam_roulette.steam.models import CatalogEntry, SteamInstall


class NoGamesFoundError(Exception):
    """Raised when the catalog has nothing to pick from."""

    pass


class LaunchError(Exception):
    """Raised when Steam could not be started."""

    pass


def rungame_uri(app_id: str) -> str:
    """Build the steam:// URL that starts a game."""
    return f"steam://rungameid/{app_id}"


def pick_game(
    catalog: Sequence[CatalogEntry],
    rng: Optional[random.Random] = None,
) -> CatalogEntry:
    """
    Pick a random game.

    Args:
        catalog: Launchable games.
        rng: Random source. Defaults to the module-level generator.

    Raises:
        NoGamesFoundError: If the catalog is empty.
    """
    if not catalog:
        raise NoGamesFoundError("No installed games found in your Steam libraries.")
    return (rng or random).choice(catalog)


def build_launch_command(install: SteamInstall, app_id: str) -> list[str]:
    """
    Build command to launch a Steam game.

    Raises:
        LaunchError: If Steam was not detected.
    """
    if not install.found or not install.command:
        raise LaunchError("Couldn't find Steam!")
    return [*install.command, rungame_uri(app_id)]


def detach_options(os_name: Optional[str] = None) -> dict:
    """Popen keyword arguments that detach the child from our console."""
    os_name = os_name or os.name
    if os_name == "nt":
        return {
            "creationflags": subprocess.DETACHED_PROCESS | subprocess.CREATE_NEW_PROCESS_GROUP,
        }
    if os_name == "posix":
        return {"start_new_session": True}
    return {}


def launch_game(install: SteamInstall, app_id: str) -> subprocess.Popen:
    """
    Start a game through Steam without waiting for it.

    Steam output is discarded and the process is detached from our session,
    so closing the terminal doesn't take the game down with it.

    Raises:
        LaunchError: If Steam was not detected or could not be started.
    """
    cmd = build_launch_command(install, app_id)

    try:
        process = subprocess.Popen(
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            **detach_options(),
        )
    except OSError as e:
        raise LaunchError(f"Failed to start {cmd[0]}: {e}") from e

    # Never waited on. Marked as finished so Popen.__del__ stays quiet.
    process.returncode = 0
    return process
