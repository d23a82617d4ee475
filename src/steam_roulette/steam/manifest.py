"""
Steam appmanifest parser.

appmanifest_<id>.acf files look like this:

    "AppState"
    {
    	"appid"		"220"
    	"name"		"Half-Life 2"
    	"installdir"		"Half-Life 2"
    	...
    }

Only single-line scalar fields are read. Nested blocks are not followed,
their lines just fail the two-fragment check and are skipped.
"""

from typing import Iterator, Optional

from steam_roulette.steam.models import ManifestRecord

# Header lines before the first field ("AppState" and the opening brace)
HEADER_LINES = 2

# Substring of a key -> ManifestRecord attribute it fills
RECORD_FIELDS = {
    "appid": "app_id",
    "name": "name",
}


def iter_fields(text: str) -> Iterator[tuple[str, str]]:
    """
    Yield (key, value) pairs from the body of a manifest.

    Skips the header lines and the closing brace. Each remaining line is
    split on tabs; lines with fewer than two non-empty fragments are
    ignored. Double quotes are removed from keys and values.
    """
    body = text.splitlines()[HEADER_LINES:]
    for line in body[:-1]:
        fragments = [part for part in line.split("\t") if part]
        if len(fragments) < 2:
            continue
        yield fragments[0].replace('"', ""), fragments[1].replace('"', "")


def parse_manifest(text: str) -> Optional[ManifestRecord]:
    """
    Parse the contents of an appmanifest file.

    Args:
        text: File contents.

    Returns:
        ManifestRecord with name and app id (empty strings when absent),
        or None if the file is empty or truncated before its body.
    """
    if not text.splitlines()[HEADER_LINES:]:
        return None

    values = {"name": "", "app_id": ""}
    fields: dict[str, str] = {}

    for key, value in iter_fields(text):
        fields[key] = value
        # Later occurrences overwrite earlier ones
        for marker, attr in RECORD_FIELDS.items():
            if marker in key:
                values[attr] = value

    return ManifestRecord(name=values["name"], app_id=values["app_id"], fields=fields)
