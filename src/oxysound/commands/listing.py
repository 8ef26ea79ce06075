"""List command for saved playlists."""

from typing import List

from ..storage import list_playlists
from .base import PlaylistCommand


class ListCommand(PlaylistCommand):
    """Command to list the titles of all saved playlists."""

    def _run(self) -> List[str]:
        return list_playlists(self.save_directory)
