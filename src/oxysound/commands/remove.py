"""Remove command for saved playlists."""

from typing import List, Sequence

from ..logging_config import get_logger
from ..models import Playlist
from ..storage import save_playlist
from .base import PlaylistCommand

logger = get_logger(__name__)


class RemoveCommand(PlaylistCommand):
    """Remove videos from a playlist and save it. No metadata is fetched."""

    def __init__(self, save_directory: str, title: str, video_ids: Sequence[str]) -> None:
        """Initialize command.

        Args:
            save_directory: Directory holding the playlist files
            title: Playlist title
            video_ids: Video IDs to remove
        """
        super().__init__(save_directory)
        self.title = title
        self.video_ids: List[str] = list(video_ids)
        self._logger = logger

    def validate(self) -> None:
        """Validate command parameters."""
        super().validate()
        if not self.title:
            raise ValueError("Playlist title is required")
        if not self.video_ids:
            raise ValueError("At least one video ID is required")

    def _run(self) -> Playlist:
        playlist = self.load_or_new(self.title)

        removed = playlist.remove_videos(self.video_ids)
        self._logger.info("Removed %d videos from %s", len(removed), playlist.title)

        file_path = save_playlist(playlist, self.save_directory)
        self._logger.info("Saved playlist %s to %s", playlist.title, file_path)
        return playlist
