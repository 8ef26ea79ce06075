"""Store playlists as JSON files named after their title."""

import glob
import json
import os
from typing import List, Optional

from .errors import PlaylistFormatError, StorageError
from .models import Playlist
from .utils import expand_path_aliases, playlist_path


def load_or_create_file(file_path: str) -> Optional[str]:
    """Return the content of a file, creating it empty if it does not exist.

    Args:
        file_path: Full path of the file

    Returns:
        File content, or None if the file was just created

    Raises:
        StorageError: If the file cannot be read or created
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        pass
    except UnicodeDecodeError as e:
        raise PlaylistFormatError(f"{file_path} is not UTF-8 text: {str(e)}", file_path) from e
    except OSError as e:
        raise StorageError(f"Failed to read {file_path}: {str(e)}", file_path) from e

    try:
        parent = os.path.dirname(file_path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(file_path, "x", encoding="utf-8"):
            pass
    except OSError as e:
        raise StorageError(f"Failed to create {file_path}: {str(e)}", file_path) from e
    return None


def load_playlist(title: str, directory: str) -> Optional[Playlist]:
    """Load a playlist from ``<directory>/<title>.json``.

    A missing file is created empty and reported as None; the caller then
    starts a new ``Playlist(title)``. An empty file is not valid JSON, so
    loading the same title again before saving raises PlaylistFormatError.

    Args:
        title: Playlist title
        directory: Save directory, may contain aliases such as $XDG_DATA_HOME

    Returns:
        The loaded playlist, or None if it did not exist

    Raises:
        StorageError: If the file cannot be read or created
        PlaylistFormatError: If the file is not valid playlist JSON
    """
    file_path = playlist_path(title, directory)
    content = load_or_create_file(file_path)
    if content is None:
        return None

    try:
        return Playlist.from_dict(json.loads(content))
    except json.JSONDecodeError as e:
        raise PlaylistFormatError(f"Invalid JSON in {file_path}: {str(e)}", file_path) from e
    except KeyError as e:
        raise PlaylistFormatError(f"Missing field {e} in {file_path}", file_path) from e
    except TypeError as e:
        raise PlaylistFormatError(f"Invalid playlist in {file_path}: {str(e)}", file_path) from e


def save_playlist(playlist: Playlist, directory: str) -> str:
    """Write a playlist to ``<directory>/<title>.json``, replacing any old content.

    Args:
        playlist: Playlist to save
        directory: Save directory, may contain aliases

    Returns:
        Path of the written file

    Raises:
        StorageError: If the file cannot be written
    """
    file_path = playlist_path(playlist.title, directory)
    try:
        parent = os.path.dirname(file_path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(playlist.to_dict(), f, indent=2)
    except OSError as e:
        raise StorageError(f"Failed to write {file_path}: {str(e)}", file_path) from e
    return file_path


def list_playlists(directory: str) -> List[str]:
    """List the titles of all playlists saved in a directory.

    Args:
        directory: Save directory, may contain aliases

    Returns:
        Sorted playlist titles, empty if the directory does not exist

    Raises:
        StorageError: If the path exists but is not a readable directory
    """
    directory = expand_path_aliases(directory)
    if not os.path.exists(directory):
        return []
    if not os.path.isdir(directory):
        raise StorageError(f"Not a directory: {directory}", directory)

    files = glob.glob(os.path.join(glob.escape(directory), "*.json"))
    return sorted(os.path.splitext(os.path.basename(path))[0] for path in files)
