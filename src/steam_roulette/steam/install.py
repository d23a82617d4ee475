"""
Steam installation detection.

One detector per platform:
- Linux: native package, falling back to the Flatpak from Flathub
- Windows: default install folder, falling back to the registry
- macOS: steam on PATH
"""

import shutil
import subprocess
import sys
from pathlib import Path
from typing import Callable, Optional

from steam_roulette.steam.models import NOT_FOUND, InstallKind, SteamInstall

FLATPAK_APP_ID = "com.valvesoftware.Steam"


class InstallDetector:
    """Base detector. Used as-is on platforms Steam does not support."""

    def __init__(
        self,
        on_status: Optional[Callable[[str], None]] = None,
        root_override: Optional[Path] = None,
    ):
        """
        Initialize detector.

        Args:
            on_status: Callback for status and failure messages.
            root_override: Steam root chosen by the user. Replaces the
                probed root once the Steam executable is found.
        """
        self.on_status = on_status or (lambda msg: None)
        self.root_override = root_override

    def _log(self, message: str) -> None:
        """Log a status message."""
        self.on_status(message)

    def detect(self) -> SteamInstall:
        """Detect Steam. Returns NOT_FOUND if it is not installed."""
        return NOT_FOUND


class LinuxDetector(InstallDetector):
    """Detects native and Flatpak Steam on Linux."""

    # Relative to $HOME, in probe order. Distros disagree on the layout.
    NATIVE_PATHS = [
        ".local/share/steam",
        ".local/share/Steam",
        ".steam/steam",
        ".steam/root",
    ]
    FLATPAK_PATH = ".var/app/com.valvesoftware.Steam/data/Steam"

    def detect(self) -> SteamInstall:
        if shutil.which("steam"):
            root = self.root_override or self._find_native_root()
            if root:
                return SteamInstall(InstallKind.NATIVE, root, ("steam",))
            self._log("steam is on PATH but no Steam directory was found")

        if self._has_flatpak_steam():
            return SteamInstall(
                InstallKind.FLATPAK,
                self.root_override or Path.home() / self.FLATPAK_PATH,
                ("flatpak", "run", FLATPAK_APP_ID),
            )

        return NOT_FOUND

    def _find_native_root(self) -> Optional[Path]:
        """Return the first existing native Steam directory."""
        home = Path.home()
        for relative in self.NATIVE_PATHS:
            path = home / relative
            if path.is_dir():
                return path
        return None

    def _has_flatpak_steam(self) -> bool:
        """Check if the Steam Flatpak is installed."""
        try:
            result = subprocess.run(
                ["flatpak", "list", "--app", "--columns=application"],
                capture_output=True,
                text=True,
                check=True,
            )
        except FileNotFoundError:
            self._log("flatpak is not installed, skipping Flatpak Steam")
            return False
        except subprocess.CalledProcessError as e:
            self._log(f"Couldn't query flatpak: {e}")
            return False

        return FLATPAK_APP_ID in result.stdout.split()


class WindowsDetector(InstallDetector):
    """Detects Steam in its default folder or via the registry."""

    DEFAULT_PATH = Path(r"C:\Program Files (x86)\Steam")
    REGISTRY_KEY = r"SOFTWARE\WOW6432Node\Valve\Steam"

    def detect(self) -> SteamInstall:
        exe = self.DEFAULT_PATH / "steam.exe"
        if exe.is_file():
            return SteamInstall(
                InstallKind.NATIVE,
                self.root_override or self.DEFAULT_PATH,
                (str(exe),),
            )

        try:
            install_path = self._get_install_path_from_registry()
        except OSError as e:
            self._log(f"Couldn't find steam in registry due to error: {e}")
            return NOT_FOUND

        root = Path(install_path)
        exe = root / "steam.exe"
        if not exe.is_file():
            self._log("steam.exe was not in install folder")
            self._log(f"Expected path according to registry: {install_path}")
            return NOT_FOUND

        return SteamInstall(InstallKind.ALT_PATH, self.root_override or root, (str(exe),))

    def _get_install_path_from_registry(self) -> str:
        """Read InstallPath written by the Steam installer."""
        import winreg

        with winreg.OpenKey(winreg.HKEY_LOCAL_MACHINE, self.REGISTRY_KEY) as key:
            value, _ = winreg.QueryValueEx(key, "InstallPath")
        return str(value)


class MacDetector(InstallDetector):
    """Detects Steam on macOS."""

    DEFAULT_PATH = "Library/Application Support/Steam"

    def detect(self) -> SteamInstall:
        if shutil.which("steam"):
            return SteamInstall(
                InstallKind.NATIVE,
                self.root_override or Path.home() / self.DEFAULT_PATH,
                ("steam",),
            )
        return NOT_FOUND


def get_detector(
    platform: Optional[str] = None,
    on_status: Optional[Callable[[str], None]] = None,
    root_override: Optional[Path] = None,
) -> InstallDetector:
    """
    Get the detector for a platform.

    Args:
        platform: sys.platform style name. Defaults to the running platform.
        on_status: Callback for status messages.
        root_override: Steam root chosen by the user.
    """
    platform = platform or sys.platform
    if platform.startswith("linux"):
        return LinuxDetector(on_status, root_override)
    if platform == "win32":
        return WindowsDetector(on_status, root_override)
    if platform == "darwin":
        return MacDetector(on_status, root_override)
    return InstallDetector(on_status, root_override)


def detect_steam(
    on_status: Optional[Callable[[str], None]] = None,
    platform: Optional[str] = None,
    root_override: Optional[Path] = None,
) -> SteamInstall:
    """
    Detect the Steam installation on this machine.

    With root_override, only the Steam executable has to be found; the
    library root is taken as given.
    """
    return get_detector(platform, on_status, root_override).detect()
