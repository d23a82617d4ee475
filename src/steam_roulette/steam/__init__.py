"""Steam installation discovery, library scanning and launching."""

from steam_roulette.steam.models import (
    CatalogEntry,
    InstallKind,
    ManifestRecord,
    SteamInstall,
)
from steam_roulette.steam.manifest import parse_manifest
from steam_roulette.steam.blacklist import is_blacklisted, is_proton, filter_catalog
from steam_roulette.steam.library_folders import LibraryFoldersError, get_other_library_paths
from steam_roulette.steam.library_scanner import (
    ManifestReadError,
    SteamLibraryScanner,
    scan_library,
)
from steam_roulette.steam.install import detect_steam, get_detector
from steam_roulette.steam.launcher import (
    LaunchError,
    NoGamesFoundError,
    launch_game,
    pick_game,
    rungame_uri,
)

__all__ = [
    # Models
    "CatalogEntry",
    "InstallKind",
    "ManifestRecord",
    "SteamInstall",
    # Discovery
    "detect_steam",
    "get_detector",
    "get_other_library_paths",
    "LibraryFoldersError",
    # Scanning
    "parse_manifest",
    "scan_library",
    "SteamLibraryScanner",
    "ManifestReadError",
    "is_blacklisted",
    "is_proton",
    "filter_catalog",
    # Launching
    "launch_game",
    "pick_game",
    "rungame_uri",
    "LaunchError",
    "NoGamesFoundError",
]
