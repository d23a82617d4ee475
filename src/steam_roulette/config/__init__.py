"""Configuration."""

from steam_roulette.config.settings import Settings, settings

__all__ = ["Settings", "settings"]
