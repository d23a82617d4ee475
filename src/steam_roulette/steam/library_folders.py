"""
libraryfolders.vdf reader.

Steam records every library folder the user added (other drives, SD cards)
in steamapps/libraryfolders.vdf:

    "libraryfolders"
    {
    	"0"
    	{
    		"path"		"/home/user/.local/share/Steam"
    		...
    	}
    	"1"
    	{
    		"path"		"/mnt/games/SteamLibrary"
    		...
    	}
    }
"""

from pathlib import Path

LIBRARY_FOLDERS_FILE = "libraryfolders.vdf"


class LibraryFoldersError(Exception):
    """Raised when libraryfolders.vdf cannot be read."""

    pass


def get_other_library_paths(steamapps_dir: Path) -> list[str]:
    """
    Get library paths registered in libraryfolders.vdf.

    Paths are returned as written in the file, without checking that they
    exist. Backslashes in Windows paths stay escaped.

    Args:
        steamapps_dir: steamapps directory of the default library.

    Returns:
        List of library root paths.

    Raises:
        LibraryFoldersError: If the file is missing or unreadable.
    """
    vdf_path = steamapps_dir / LIBRARY_FOLDERS_FILE
    try:
        content = vdf_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LibraryFoldersError(f"Cannot read {vdf_path}: {e}") from e

    libs = []
    for line in content.splitlines():
        if "path" not in line:
            continue
        parts = line.split(None, 1)
        if len(parts) < 2:
            continue
        # Drop the surrounding quotes
        value = parts[1].strip()
        libs.append(value[1:-1])
    return libs
