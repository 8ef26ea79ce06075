"""YouTube API wrapper used as the video metadata provider."""

from typing import Dict, List, Optional, Protocol

from .auth import get_youtube_service
from .errors import YouTubeError
from .logging_config import get_logger


logger = get_logger(__name__)

MAX_RESULTS = 50


class MetadataProvider(Protocol):
    """Anything that can look up video metadata for a batch of IDs."""

    def fetch_videos(self, video_ids: List[str]) -> List[Dict]:
        """Return one response item per video the provider could resolve.

        Items look like ``{"id": ..., "snippet": {"title": ..., "publishedAt": ...}}``.
        Unknown, deleted or private videos are left out, so the result may be
        shorter than ``video_ids``.
        """
        ...


def get_metadata_provider(api_key: Optional[str] = None) -> "YouTubeAPI":
    """Create a YouTubeAPI backed by a freshly built client.

    Args:
        api_key: YouTube Data API key, defaults to the configured key

    Raises:
        ConfigError: If no API key is configured
        YouTubeError: If the client cannot be built
    """
    return YouTubeAPI(get_youtube_service(api_key))


class YouTubeAPI:
    """Wrapper for YouTube API operations."""

    def __init__(self, youtube):
        """Initialize API wrapper.

        Args:
            youtube: YouTube API client
        """
        self.youtube = youtube

    def fetch_videos(self, video_ids: List[str]) -> List[Dict]:
        """Get snippet metadata for a batch of videos in one request.

        Args:
            video_ids: IDs of videos to look up

        Returns:
            List of response items, possibly fewer than requested

        Raises:
            YouTubeError: If the request fails or the response is malformed
        """
        if not video_ids:
            return []

        logger.debug("Requesting metadata for %d videos", len(video_ids))
        try:
            # pylint: disable=no-member
            request = self.youtube.videos().list(
                part="snippet",
                id=",".join(video_ids),
                maxResults=MAX_RESULTS,
            )
            # pylint: enable=no-member
            response = request.execute()
        except Exception as e:
            raise YouTubeError(f"Failed to get video metadata: {str(e)}") from e

        items = response.get("items") if isinstance(response, dict) else None
        if not isinstance(items, list):
            raise YouTubeError("Failed to get video metadata: response has no items")

        for item in items:
            if not isinstance(item, dict) or not isinstance(item.get("id"), str):
                raise YouTubeError("Failed to get video metadata: response item has no id")

        logger.debug("Received metadata for %d of %d videos", len(items), len(video_ids))
        return items
