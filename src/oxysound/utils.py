"""Utility functions for playlist file locations."""

import os
from typing import Dict


def _alias_directories() -> Dict[str, str]:
    """Map directory aliases to the current user's directories."""
    home = os.path.expanduser("~")
    return {
        "$HOME": home,
        "$XDG_CACHE_HOME": os.getenv("XDG_CACHE_HOME") or os.path.join(home, ".cache"),
        "$XDG_CONFIG_HOME": os.getenv("XDG_CONFIG_HOME") or os.path.join(home, ".config"),
        "$XDG_DATA_HOME": os.getenv("XDG_DATA_HOME")
        or os.path.join(home, ".local", "share"),
        "$XDG_BIN_HOME": os.getenv("XDG_BIN_HOME") or os.path.join(home, ".local", "bin"),
    }


def expand_path_aliases(path: str) -> str:
    """Replace directory aliases in a path with the user's directories.

    Only whole path components are replaced, so ``$XDG_DATA_HOME/oxysound``
    expands while ``foo$HOME`` is left untouched. A leading ``~`` is expanded
    as well.

    Args:
        path: Path that may contain aliases such as ``$HOME`` or ``$XDG_DATA_HOME``

    Returns:
        The expanded path
    """
    aliases = _alias_directories()
    path = os.path.expanduser(path)
    components = path.split(os.sep)
    if path.startswith(os.sep):
        components[0] = os.sep
    # An alias that expands to an absolute path restarts the path there
    return os.path.join(*[aliases.get(component, component) for component in components])


def playlist_path(title: str, directory: str) -> str:
    """Return the JSON file path for a playlist.

    Args:
        title: Playlist title, used as the file name
        directory: Save directory, may contain aliases

    Returns:
        Full path to ``<directory>/<title>.json``
    """
    return expand_path_aliases(os.path.join(directory, f"{title}.json"))
