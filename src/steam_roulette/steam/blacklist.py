"""
Non-game filter.

Steam installs runtimes, redistributables and soundtracks through the same
appmanifest mechanism as games. These must never be picked.
"""

from typing import Collection, Iterable

from steam_roulette.steam.models import CatalogEntry

# Steam tools matched by exact name
STEAM_LIBS = {
    "Steamworks Common Redistributables",
    "SteamVR",
    "Proton Experimental",  # Not caught by is_proton(), no version number
}


def is_proton(app_name: str) -> bool:
    """
    Check if an app is a versioned Proton runtime ("Proton 8.0").

    The second word has to be a non-zero number. "Proton" alone and
    "Proton 0" are left alone on purpose.
    """
    if not app_name.startswith("Proton"):
        return False

    words = app_name.split(" ")
    if len(words) < 2:
        return False

    try:
        version = float(words[1])
    except ValueError:
        return False
    return version != 0.0


def is_blacklisted(app_name: str, extra: Collection[str] = ()) -> bool:
    """
    Check if an app should be excluded from the catalog.

    Args:
        app_name: Name from the app manifest.
        extra: Additional exact names to exclude (from user config).
    """
    return (
        not app_name.strip()
        or app_name in STEAM_LIBS
        or app_name in extra
        # Downloaded albums
        or app_name.endswith("Soundtrack")
        or is_proton(app_name)
        or app_name.startswith("Steam Linux Runtime")
    )


def filter_catalog(
    entries: Iterable[CatalogEntry],
    extra: Iterable[str] = (),
) -> list[CatalogEntry]:
    """Drop blacklisted entries, keeping order."""
    extra = set(extra)
    return [e for e in entries if not is_blacklisted(e.name, extra)]
