"""Tests for building the YouTube API client."""

from unittest import TestCase
from unittest.mock import MagicMock, patch

from src.oxysound import auth
from src.oxysound.errors import ConfigError, YouTubeError


class TestGetYouTubeService(TestCase):
    """Test cases for get_youtube_service."""

    @patch("src.oxysound.auth.build")
    def test_builds_with_api_key(self, mock_build):
        """Test the client is built with the given key."""
        mock_client = MagicMock()
        mock_build.return_value = mock_client

        result = auth.get_youtube_service("key123")

        self.assertIs(result, mock_client)
        mock_build.assert_called_once_with(
            "youtube", "v3", developerKey="key123", cache_discovery=False
        )

    @patch("src.oxysound.auth.build")
    def test_uses_configured_key(self, mock_build):
        with patch("src.oxysound.config.YOUTUBE_API_KEY", "from-env"):
            auth.get_youtube_service()

        self.assertEqual(mock_build.call_args.kwargs["developerKey"], "from-env")

    @patch("src.oxysound.auth.build")
    def test_missing_key(self, mock_build):
        """Test a missing key raises ConfigError before building."""
        with patch("src.oxysound.config.YOUTUBE_API_KEY", ""):
            with self.assertRaises(ConfigError) as ctx:
                auth.get_youtube_service()

        self.assertEqual(ctx.exception.setting, "YOUTUBE_API_KEY")
        mock_build.assert_not_called()

    @patch("src.oxysound.auth.build")
    def test_build_failure(self, mock_build):
        mock_build.side_effect = Exception("discovery failed")

        with self.assertRaises(YouTubeError) as ctx:
            auth.get_youtube_service("key123")

        self.assertIn("discovery failed", str(ctx.exception))
