"""Error handling utilities."""

from typing import Optional

from .logging_config import get_logger

logger = get_logger(__name__)


def log_error(error: Exception, context: Optional[str] = None) -> None:
    """Log an error with optional context.

    Args:
        error: The exception to log
        context: Optional context about where/why the error occurred
    """
    if context:
        logger.error(f"{context}: {str(error)}")
    else:
        logger.error(str(error))


class OxysoundError(Exception):
    """Base class for all oxysound errors."""

    pass


class ConfigError(OxysoundError):
    """Error raised when a required setting is missing."""

    def __init__(self, setting: str):
        """Initialize error.

        Args:
            setting: Name of the missing setting
        """
        self.setting = setting
        super().__init__(
            f"Missing required setting {setting}. "
            "Set it in the environment or in a .env file"
        )


class YouTubeError(OxysoundError):
    """Error raised when the YouTube API request fails."""

    pass


class IncompleteMetadataError(YouTubeError):
    """Error raised when the API returns fewer videos than requested."""

    def __init__(self, requested: int, fetched: int):
        """Initialize error.

        Args:
            requested: Number of video IDs sent to the API
            fetched: Number of videos the API returned
        """
        self.requested = requested
        self.fetched = fetched
        super().__init__(
            f"Response didn't yield enough items (expected: {requested}, found: {fetched})"
        )


class StorageError(OxysoundError):
    """Error raised when a playlist file cannot be read, written or created."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(message)


class PlaylistFormatError(OxysoundError):
    """Error raised when a playlist file is not valid playlist JSON."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(message)
