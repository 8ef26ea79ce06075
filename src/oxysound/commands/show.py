"""Print command: show a playlist without saving it."""

from dataclasses import dataclass
from typing import List, Union

from ..models import Playlist
from .base import PlaylistCommand


@dataclass(frozen=True)
class ByTitle:
    """Show the saved playlist with this title."""

    title: str


@dataclass(frozen=True)
class ByIds:
    """Show an unsaved playlist built from these video IDs."""

    ids: List[str]


PrintTarget = Union[ByTitle, ByIds]


class PrintCommand(PlaylistCommand):
    """Build the playlist to print. Nothing is saved or fetched."""

    def __init__(self, save_directory: str, target: PrintTarget) -> None:
        """Initialize command.

        Args:
            save_directory: Directory holding the playlist files
            target: Which playlist to show
        """
        super().__init__(save_directory)
        self.target = target

    def validate(self) -> None:
        """Validate command parameters."""
        super().validate()
        if isinstance(self.target, ByTitle):
            if not self.target.title:
                raise ValueError("Playlist title is required")
        elif isinstance(self.target, ByIds):
            if not self.target.ids:
                raise ValueError("At least one video ID is required")
        else:
            raise ValueError(f"Unknown print target: {self.target!r}")

    def _run(self) -> Playlist:
        if isinstance(self.target, ByTitle):
            return self.load_or_new(self.target.title)

        playlist = Playlist()
        playlist.add_videos(self.target.ids)
        return playlist
