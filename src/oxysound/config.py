"""Configuration and environment settings."""

import os
from typing import Optional, Tuple

from dotenv import load_dotenv

from .errors import ConfigError

load_dotenv()

# YouTube API Settings
YOUTUBE_API_KEY = os.getenv("YOUTUBE_API_KEY", "")

# Directory Settings
DEFAULT_SAVE_DIRECTORY = os.path.join("$XDG_DATA_HOME", "oxysound", "playlists")
SAVE_DIRECTORY = os.getenv("OXYSOUND_SAVE_DIRECTORY", DEFAULT_SAVE_DIRECTORY)


def check_config(
    api_key: Optional[str] = None, save_directory: Optional[str] = None
) -> Tuple[str, str]:
    """Return the API key and save directory after checking both are set.

    Args:
        api_key: YouTube Data API key, defaults to YOUTUBE_API_KEY
        save_directory: Playlist directory, defaults to SAVE_DIRECTORY

    Returns:
        Tuple of (api key, save directory)

    Raises:
        ConfigError: If a setting is empty
    """
    if api_key is None:
        api_key = YOUTUBE_API_KEY
    if save_directory is None:
        save_directory = SAVE_DIRECTORY

    if not api_key:
        raise ConfigError("YOUTUBE_API_KEY")
    if not save_directory:
        raise ConfigError("OXYSOUND_SAVE_DIRECTORY")
    return api_key, save_directory
