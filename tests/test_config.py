"""Tests for configuration settings."""

from unittest.mock import patch

import pytest

from src.oxysound import config
from src.oxysound.errors import ConfigError


def test_default_save_directory():
    assert config.DEFAULT_SAVE_DIRECTORY.split("/") == ["$XDG_DATA_HOME", "oxysound", "playlists"]


def test_check_config_explicit_values():
    assert config.check_config("key", "/tmp/playlists") == ("key", "/tmp/playlists")


def test_check_config_uses_module_settings():
    with patch.object(config, "YOUTUBE_API_KEY", "env-key"), patch.object(
        config, "SAVE_DIRECTORY", "/data"
    ):
        assert config.check_config() == ("env-key", "/data")


def test_check_config_missing_api_key():
    """Test a missing API key is reported by name."""
    with pytest.raises(ConfigError) as exc_info:
        config.check_config("", "/data")

    assert exc_info.value.setting == "YOUTUBE_API_KEY"
    assert "YOUTUBE_API_KEY" in str(exc_info.value)


def test_check_config_missing_save_directory():
    with pytest.raises(ConfigError) as exc_info:
        config.check_config("key", "")

    assert exc_info.value.setting == "OXYSOUND_SAVE_DIRECTORY"
