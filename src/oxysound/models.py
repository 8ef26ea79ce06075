"""Video and playlist data structures.

A playlist is an ordered collection of videos that is unique by video ID. The
item count and both URLs are derived from the IDs whenever they are read, so
they can never drift from the video list.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Sequence

VIDEO_BASE_URL = "https://www.youtube.com/watch?v="
PLAYLIST_BASE_URL = "http://www.youtube.com/watch_videos?video_ids="
DEFAULT_TITLE = "untitled"


def video_key(video: "Video") -> str:
    """Return the identity of a video, used for all membership checks."""
    return video.id


@dataclass
class Video:
    """Video ID plus metadata fetched from the YouTube API."""

    id: str
    title: str = ""
    published_at: str = ""
    fetched: bool = False

    @property
    def url(self) -> str:
        """Watch URL of the video."""
        return f"{VIDEO_BASE_URL}{self.id}"

    @classmethod
    def from_response_item(cls, item: Dict[str, Any]) -> "Video":
        """Create a fetched video from a YouTube API ``videos`` item.

        Args:
            item: Response item with ``id`` and an optional ``snippet``

        Returns:
            Video marked as fetched, missing metadata defaults to ""
        """
        snippet = item.get("snippet") or {}
        return cls(
            id=item["id"],
            title=snippet.get("title") or "",
            published_at=snippet.get("publishedAt") or "",
            fetched=True,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the video, derived URL included."""
        return {
            "id": self.id,
            "title": self.title,
            "publishedAt": self.published_at,
            "url": self.url,
            "fetched": self.fetched,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Video":
        """Deserialize a video saved by ``to_dict``.

        Raises:
            KeyError: If a field is missing
            TypeError: If a field has the wrong type
        """
        _require_type(data, "id", str)
        _require_type(data, "title", str)
        _require_type(data, "publishedAt", str)
        _require_type(data, "url", str)
        _require_type(data, "fetched", bool)
        return cls(
            id=data["id"],
            title=data["title"],
            published_at=data["publishedAt"],
            fetched=data["fetched"],
        )

    def __str__(self) -> str:
        date = self.published_at.split("T")[0] or "unknown date"
        return f"{self.title}\n\tID: {self.id}\n\tPublished at: {date}\n\tURL: {self.url}"


def compose_playlist_url(videos: Iterable[Video]) -> str:
    """Return the URL that plays all videos in order.

    An empty playlist yields the base URL with an empty ``video_ids`` value.
    """
    return PLAYLIST_BASE_URL + ",".join(video_key(video) for video in videos)


@dataclass
class Playlist:
    """Named, ordered list of unique videos."""

    title: str = DEFAULT_TITLE
    videos: List[Video] = field(default_factory=list)

    @property
    def num_items(self) -> int:
        return len(self.videos)

    @property
    def url(self) -> str:
        return compose_playlist_url(self.videos)

    def add_videos(self, ids: Sequence[str]) -> List[Video]:
        """Append videos for IDs that are not in the playlist yet.

        Duplicates, both of existing members and within ``ids``, are ignored;
        the first occurrence wins.

        Args:
            ids: Video IDs to add

        Returns:
            The newly added videos, in input order
        """
        seen = {video_key(video) for video in self.videos}
        added = []
        for video_id in ids:
            if video_id in seen:
                continue
            seen.add(video_id)
            added.append(Video(id=video_id))

        self.videos.extend(added)
        return added

    def remove_videos(self, ids: Iterable[str]) -> List[Video]:
        """Remove videos by ID. IDs that are not in the playlist are ignored.

        Args:
            ids: Video IDs to remove

        Returns:
            The removed videos
        """
        to_remove = set(ids)
        removed = [video for video in self.videos if video_key(video) in to_remove]
        self.videos = [video for video in self.videos if video_key(video) not in to_remove]
        return removed

    def unfetched_ids(self) -> List[str]:
        """IDs of videos without metadata, in playlist order."""
        return [video_key(video) for video in self.videos if not video.fetched]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the playlist with its derived fields."""
        return {
            "title": self.title,
            "numItems": self.num_items,
            "videos": [video.to_dict() for video in self.videos],
            "url": self.url,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Playlist":
        """Deserialize a playlist saved by ``to_dict``.

        ``numItems`` and ``url`` must be present but are derived from the
        videos rather than read back.

        Raises:
            KeyError: If a field is missing
            TypeError: If a field has the wrong type
        """
        if not isinstance(data, dict):
            raise TypeError(f"Expected a JSON object, got {type(data).__name__}")
        _require_type(data, "title", str)
        _require_type(data, "numItems", int)
        _require_type(data, "videos", list)
        _require_type(data, "url", str)
        for item in data["videos"]:
            if not isinstance(item, dict):
                raise TypeError(f"Expected a video object, got {type(item).__name__}")
        return cls(
            title=data["title"],
            videos=[Video.from_dict(item) for item in data["videos"]],
        )

    def __str__(self) -> str:
        videos = "\n\n".join(
            "\t" + str(video).replace("\t", "\t\t") for video in self.videos
        )
        return (
            f"{self.title}\n----------\nlength: {self.num_items}\nvideos: \n{videos}"
            f"\n\nplaylist URL: {self.url}"
        )


def _require_type(data: Dict[str, Any], name: str, expected: type) -> None:
    value = data[name]
    # bool is an int subclass, keep counts and flags apart
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        raise TypeError(
            f"Field {name!r} should be {expected.__name__}, got {type(value).__name__}"
        )
