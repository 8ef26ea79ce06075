"""Commands that add videos and fetch their metadata."""

from typing import List, Sequence

from ..api import MetadataProvider
from ..logging_config import get_logger
from ..models import Playlist
from ..reconcile import reconcile
from ..storage import save_playlist
from .base import PlaylistCommand

logger = get_logger(__name__)


class AddCommand(PlaylistCommand):
    """Add videos to a playlist, fetch missing metadata and save it.

    The playlist is loaded if it exists and started empty otherwise.
    """

    def __init__(
        self,
        save_directory: str,
        title: str,
        video_ids: Sequence[str],
        provider: MetadataProvider,
    ) -> None:
        """Initialize command.

        Args:
            save_directory: Directory holding the playlist files
            title: Playlist title
            video_ids: Video IDs to add
            provider: Source of video metadata
        """
        super().__init__(save_directory)
        self.title = title
        self.video_ids: List[str] = list(video_ids)
        self.provider = provider
        self._logger = logger

    def validate(self) -> None:
        """Validate command parameters."""
        super().validate()
        if not self.title:
            raise ValueError("Playlist title is required")
        if not self.video_ids:
            raise ValueError("At least one video ID is required")
        if self.provider is None:
            raise ValueError("Metadata provider is required")

    def get_playlist(self) -> Playlist:
        return self.load_or_new(self.title)

    def _run(self) -> Playlist:
        playlist = self.get_playlist()

        added = playlist.add_videos(self.video_ids)
        self._logger.info("Added %d new videos to %s", len(added), playlist.title)

        fetched = reconcile(playlist, self.provider)
        if fetched:
            self._logger.info("Fetched metadata for %d videos", len(fetched))

        file_path = save_playlist(playlist, self.save_directory)
        self._logger.info("Saved playlist %s to %s", playlist.title, file_path)
        return playlist


class CreateCommand(AddCommand):
    """Create a new playlist, replacing any saved playlist with the same title."""

    def validate(self) -> None:
        """Validate command parameters. Video IDs are optional."""
        PlaylistCommand.validate(self)
        if not self.title:
            raise ValueError("Playlist title is required")
        if self.provider is None:
            raise ValueError("Metadata provider is required")

    def get_playlist(self) -> Playlist:
        return Playlist(title=self.title)
