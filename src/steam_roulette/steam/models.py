"""Data types shared by the Steam discovery modules."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional


class InstallKind(Enum):
    """How Steam is installed on this machine."""
    NATIVE = "native"        # Distro package / official installer at the usual place
    ALT_PATH = "alt_path"    # Install path found in the Windows registry
    FLATPAK = "flatpak"      # com.valvesoftware.Steam from Flathub
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class SteamInstall:
    """A detected Steam installation."""
    kind: InstallKind
    root: Optional[Path] = None
    command: tuple[str, ...] = ()

    @property
    def found(self) -> bool:
        return self.kind is not InstallKind.NOT_FOUND

    @property
    def steamapps_dir(self) -> Path:
        """Manifest directory of the default library."""
        if self.root is None:
            raise ValueError("Steam installation has no root directory")
        return self.root / "steamapps"


NOT_FOUND = SteamInstall(kind=InstallKind.NOT_FOUND)


@dataclass(frozen=True)
class ManifestRecord:
    """Raw result of parsing one appmanifest file."""
    name: str = ""
    app_id: str = ""
    fields: dict[str, str] = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class CatalogEntry:
    """A launchable game."""
    name: str
    app_id: str
    library: Optional[Path] = field(default=None, compare=False)
