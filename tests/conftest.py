"""Common test fixtures and utilities."""

from unittest.mock import MagicMock

import pytest

from helpers import FakeProvider, make_item


@pytest.fixture
def provider() -> FakeProvider:
    """Provider that answers every requested ID."""
    return FakeProvider()


@pytest.fixture
def save_dir(tmp_path) -> str:
    """Empty directory for playlist files."""
    directory = tmp_path / "playlists"
    directory.mkdir()
    return str(directory)


@pytest.fixture
def youtube_client() -> MagicMock:
    """Create a mock YouTube API client.

    Returns:
        MagicMock: Mock client whose videos().list() returns two items
    """
    mock = MagicMock()
    mock.videos.return_value.list.return_value.execute.return_value = {
        "kind": "youtube#videoListResponse",
        "items": [
            make_item("vid1", "Video 1", "2009-10-25T06:57:33Z"),
            make_item("vid2", "Video 2", "2015-01-01T00:00:00Z"),
        ],
    }
    return mock
