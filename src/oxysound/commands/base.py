"""Base command class for playlist operations."""

from typing import Any

from ..logging_config import get_logger
from ..models import Playlist
from ..storage import load_playlist

# Get logger for this module
logger = get_logger(__name__)


class PlaylistCommand:
    """Base class for playlist commands."""

    def __init__(self, save_directory: str):
        """Initialize command.

        Args:
            save_directory: Directory holding the playlist files
        """
        self.save_directory = save_directory
        self._logger = logger
        self._validated = False

    def validate(self) -> None:
        """Validate command parameters.

        Raises:
            ValueError: If parameters are invalid
        """
        if not self.save_directory:
            raise ValueError("Save directory is required")
        self._validated = True

    def run(self) -> Any:
        """Validate and run the command.

        Returns:
            The command result, usually the resulting Playlist

        Raises:
            ValueError: If parameters are invalid
            OxysoundError: If the command fails
        """
        self.validate()
        return self._run()

    def _run(self) -> Any:
        """Internal run implementation."""
        raise NotImplementedError

    def load_or_new(self, title: str) -> Playlist:
        """Load a saved playlist, or start an empty one if it does not exist.

        Args:
            title: Playlist title

        Returns:
            The saved playlist or a new empty one
        """
        playlist = load_playlist(title, self.save_directory)
        if playlist is None:
            self._logger.info("Playlist %s does not exist, creating %s instead", title, title)
            return Playlist(title=title)
        return playlist
