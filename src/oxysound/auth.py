"""YouTube API client construction."""

from typing import Optional

from googleapiclient.discovery import build

from . import config
from .errors import ConfigError, YouTubeError


def get_youtube_service(api_key: Optional[str] = None) -> object:
    """Build a YouTube Data API client authenticated with an API key.

    Args:
        api_key: YouTube Data API key, defaults to config.YOUTUBE_API_KEY

    Returns:
        YouTube API client

    Raises:
        ConfigError: If no API key is configured
        YouTubeError: If the client cannot be built
    """
    if api_key is None:
        api_key = config.YOUTUBE_API_KEY
    if not api_key:
        raise ConfigError("YOUTUBE_API_KEY")

    try:
        return build("youtube", "v3", developerKey=api_key, cache_discovery=False)
    except Exception as e:
        raise YouTubeError(f"Failed to build YouTube service: {str(e)}") from e
