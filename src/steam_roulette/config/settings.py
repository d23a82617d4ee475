"""
Application settings and configuration paths.

config.json example:

    {
        "steam_path": "/mnt/data/Steam",
        "blacklist": ["Wallpaper Engine", "3DMark"]
    }
"""

from pathlib import Path
from typing import Optional
import os
import json


class Settings:
    """Application settings. Read-only, nothing is ever written back."""

    # Config directory (XDG compliant)
    CONFIG_DIR = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")) / "steam-roulette"

    # Config file path
    CONFIG_FILE = CONFIG_DIR / "config.json"

    # Environment override for the Steam root
    STEAM_PATH_ENV = "STEAM_ROULETTE_STEAM_PATH"

    def _load_config(self) -> dict:
        """Load config from file."""
        if self.CONFIG_FILE.exists():
            try:
                with open(self.CONFIG_FILE) as f:
                    config = json.load(f)
            except (json.JSONDecodeError, IOError):
                return {}
            if isinstance(config, dict):
                return config
        return {}

    @property
    def steam_path(self) -> Optional[Path]:
        """Get Steam root override: env var > config file > None (auto-detect)."""
        env_path = os.environ.get(self.STEAM_PATH_ENV)
        if env_path:
            return Path(env_path).expanduser()
        config = self._load_config()
        if config.get("steam_path"):
            return Path(config["steam_path"]).expanduser()
        return None

    @property
    def extra_blacklist(self) -> list[str]:
        """Get user-defined app names to never launch."""
        names = self._load_config().get("blacklist", [])
        if not isinstance(names, list):
            return []
        return [str(name) for name in names]


# Singleton instance
settings = Settings()
