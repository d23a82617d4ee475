"""
Steam Library Scanner.

Finds and parses Steam's appmanifest files to get installed games.
"""

from pathlib import Path
from typing import Callable, Iterable, Optional

from steam_roulette.steam.blacklist import is_blacklisted
from steam_roulette.steam.library_folders import get_other_library_paths
from steam_roulette.steam.manifest import parse_manifest
from steam_roulette.steam.models import CatalogEntry, SteamInstall

MANIFEST_PREFIX = "appmanifest"
MANIFEST_DIR = "steamapps"


class ManifestReadError(Exception):
    """Raised when a listed appmanifest file cannot be read."""

    pass


def scan_library(
    steamapps_dir: Path,
    extra_blacklist: Iterable[str] = (),
    on_status: Optional[Callable[[str], None]] = None,
) -> list[CatalogEntry]:
    """
    Collect the games installed in one library.

    A library that cannot be listed contributes nothing: Steam keeps stale
    entries for removed drives. Empty or truncated manifests are skipped
    one by one.

    Args:
        steamapps_dir: steamapps directory of the library.
        extra_blacklist: Additional exact names to exclude.
        on_status: Callback for status messages.

    Returns:
        Catalog entries found in this library.

    Raises:
        ManifestReadError: If a manifest is listed but cannot be read.
    """
    log = on_status or (lambda msg: None)
    extra = set(extra_blacklist)

    try:
        manifest_files = sorted(
            path for path in steamapps_dir.iterdir()
            if path.name.startswith(MANIFEST_PREFIX)
        )
    except OSError:
        log(f"Skipping unreachable library: {steamapps_dir}")
        return []

    games = []
    for manifest_file in manifest_files:
        try:
            content = manifest_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ManifestReadError(f"Cannot read {manifest_file}: {e}") from e

        record = parse_manifest(content)
        if record is None:
            log(f"Skipping empty or corrupted manifest: {manifest_file.name}")
            continue

        if is_blacklisted(record.name, extra):
            continue

        games.append(CatalogEntry(
            name=record.name,
            app_id=record.app_id,
            library=steamapps_dir,
        ))

    return games


class SteamLibraryScanner:
    """Builds the catalog of launchable games for a Steam installation."""

    def __init__(
        self,
        install: SteamInstall,
        extra_blacklist: Iterable[str] = (),
        on_status: Optional[Callable[[str], None]] = None,
    ):
        """
        Initialize scanner.

        Args:
            install: Detected Steam installation.
            extra_blacklist: Additional exact names to exclude.
            on_status: Callback for status messages.
        """
        self.install = install
        self.extra_blacklist = list(extra_blacklist)
        self.on_status = on_status or (lambda msg: None)

    def _log(self, message: str) -> None:
        """Log a status message."""
        self.on_status(message)

    def get_library_dirs(self) -> list[Path]:
        """
        Get all steamapps directories, default library first.

        Raises:
            LibraryFoldersError: If libraryfolders.vdf cannot be read.
        """
        default_dir = self.install.steamapps_dir
        dirs = [default_dir]
        seen = {default_dir.resolve()}

        for lib_path in get_other_library_paths(default_dir):
            steamapps_dir = Path(lib_path) / MANIFEST_DIR
            # The default library is usually listed as well, often through
            # the ~/.steam/steam symlink
            resolved = steamapps_dir.resolve()
            if resolved not in seen:
                seen.add(resolved)
                dirs.append(steamapps_dir)

        return dirs

    def scan(self) -> list[CatalogEntry]:
        """
        Scan every library and return the launchable games.

        Returns:
            Catalog entries across all libraries.
        """
        games = []
        for steamapps_dir in self.get_library_dirs():
            self._log(f"Scanning {steamapps_dir}")
            found = scan_library(steamapps_dir, self.extra_blacklist, self.on_status)
            self._log(f"Found {len(found)} games in {steamapps_dir}")
            games.extend(found)
        return games
