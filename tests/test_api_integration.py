"""Integration tests against the real YouTube Data API.

Run with ``pytest --run-api`` and YOUTUBE_API_KEY set.
"""

import pytest

from src.oxysound.api import get_metadata_provider
from src.oxysound.errors import IncompleteMetadataError
from src.oxysound.models import Playlist
from src.oxysound.reconcile import reconcile


@pytest.mark.api
def test_fetch_metadata():
    """Test a known video gets its metadata."""
    playlist = Playlist(title="test")
    playlist.add_videos(["dQw4w9WgXcQ"])

    reconcile(playlist, get_metadata_provider())

    assert [video.fetched for video in playlist.videos] == [True]
    assert playlist.videos[0].title == (
        "Rick Astley - Never Gonna Give You Up (Official Music Video)"
    )


@pytest.mark.api
def test_unknown_video_fails():
    """Test an ID YouTube cannot resolve fails the whole batch."""
    playlist = Playlist(title="test")
    playlist.add_videos(["dQw4w9WgXcQ", "xxxxxxxxxxx"])

    with pytest.raises(IncompleteMetadataError) as exc_info:
        reconcile(playlist, get_metadata_provider())

    assert (exc_info.value.requested, exc_info.value.fetched) == (2, 1)
    assert not any(video.fetched for video in playlist.videos)
