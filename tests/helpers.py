"""Test doubles shared by the test modules."""

from typing import Dict, List, Optional


def make_item(video_id: str, title: Optional[str] = None, published_at: Optional[str] = None) -> Dict:
    """Build a YouTube API ``videos`` response item."""
    snippet = {}
    if title is not None:
        snippet["title"] = title
    if published_at is not None:
        snippet["publishedAt"] = published_at
    return {"kind": "youtube#video", "id": video_id, "snippet": snippet}


class FakeProvider:
    """Metadata provider returning canned items and recording requests."""

    def __init__(self, items: Optional[List[Dict]] = None, error: Optional[Exception] = None):
        self.items = items
        self.error = error
        self.requests: List[List[str]] = []

    def fetch_videos(self, video_ids: List[str]) -> List[Dict]:
        self.requests.append(list(video_ids))
        if self.error is not None:
            raise self.error
        if self.items is None:
            return [
                make_item(video_id, f"Title {video_id}", "2024-01-02T03:04:05Z")
                for video_id in video_ids
            ]
        return self.items
