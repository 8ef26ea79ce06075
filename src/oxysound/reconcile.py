"""Merge fetched video metadata into a playlist."""

from typing import List

from .api import MetadataProvider
from .errors import IncompleteMetadataError
from .models import Playlist, Video


def reconcile(playlist: Playlist, provider: MetadataProvider) -> List[Video]:
    """Fetch metadata for every video in the playlist that has none yet.

    All unfetched IDs go out in a single request. Videos that already have
    metadata keep their place at the front; newly fetched videos follow in
    the order the provider returned them.

    The provider has to answer for every requested ID. If it returns fewer
    items (deleted, private or unknown videos) nothing is merged and the
    playlist stays exactly as it was.

    Args:
        playlist: Playlist to update in place
        provider: Metadata source, e.g. YouTubeAPI

    Returns:
        The newly fetched videos

    Raises:
        IncompleteMetadataError: If fewer items than requested came back
        YouTubeError: If the provider request fails
    """
    requested = playlist.unfetched_ids()
    if not requested:
        return []

    items = provider.fetch_videos(requested)
    if len(items) != len(requested):
        raise IncompleteMetadataError(requested=len(requested), fetched=len(items))

    newly_fetched = [Video.from_response_item(item) for item in items]
    already_fetched = [video for video in playlist.videos if video.fetched]
    playlist.videos = already_fetched + newly_fetched
    return newly_fetched
