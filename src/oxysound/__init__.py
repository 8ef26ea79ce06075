"""Build and keep YouTube playlists from video IDs."""

__version__ = "0.1.0"

# Import all public components
from .api import MetadataProvider, YouTubeAPI
from .errors import (
    ConfigError,
    IncompleteMetadataError,
    OxysoundError,
    PlaylistFormatError,
    StorageError,
    YouTubeError,
)
from .logging_config import get_logger
from .models import Playlist, Video, compose_playlist_url, video_key
from .reconcile import reconcile
from .storage import list_playlists, load_playlist, save_playlist

__all__ = [
    "MetadataProvider",
    "YouTubeAPI",
    "ConfigError",
    "IncompleteMetadataError",
    "OxysoundError",
    "PlaylistFormatError",
    "StorageError",
    "YouTubeError",
    "get_logger",
    "Playlist",
    "Video",
    "compose_playlist_url",
    "video_key",
    "reconcile",
    "list_playlists",
    "load_playlist",
    "save_playlist",
]
