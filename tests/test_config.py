"""
Tests for settings.
"""

import pytest
from pydantic import ValidationError

from cookie_search.config import Settings, get_settings


class TestSettings:
    """Test Settings defaults and environment overrides."""

    def test_defaults(self):
        """Test default values."""
        settings = Settings()

        assert settings.DEFAULT_MIN_SCORE == 0.3
        assert settings.HIGHLIGHT_TAG == "mark"
        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_JSON is False

    def test_environment_override(self, monkeypatch):
        """Test COOKIE_SEARCH_ prefixed variables are read."""
        monkeypatch.setenv("COOKIE_SEARCH_DEFAULT_MIN_SCORE", "0.45")
        monkeypatch.setenv("COOKIE_SEARCH_LOG_JSON", "true")
        monkeypatch.setenv("COOKIE_SEARCH_LOG_LEVEL", "DEBUG")

        settings = Settings()

        assert settings.DEFAULT_MIN_SCORE == 0.45
        assert settings.LOG_JSON is True
        assert settings.LOG_LEVEL == "DEBUG"

    def test_unprefixed_variables_ignored(self, monkeypatch):
        """Test variables without the prefix are not read."""
        monkeypatch.setenv("DEFAULT_MIN_SCORE", "0.9")

        assert Settings().DEFAULT_MIN_SCORE == 0.3

    @pytest.mark.parametrize("value", ["-0.1", "1.5", "abc"])
    def test_invalid_min_score(self, monkeypatch, value):
        """Test out of range min score is rejected."""
        monkeypatch.setenv("COOKIE_SEARCH_DEFAULT_MIN_SCORE", value)

        with pytest.raises(ValidationError):
            Settings()

    @pytest.mark.parametrize("tag", ["b", "em", "my-mark", "h1"])
    def test_valid_highlight_tag(self, tag):
        """Test bare element names are accepted."""
        assert Settings(HIGHLIGHT_TAG=tag).HIGHLIGHT_TAG == tag

    @pytest.mark.parametrize("tag", ["", "<mark>", "mark class=x", "9a"])
    def test_invalid_highlight_tag(self, tag):
        """Test anything but a bare element name is rejected."""
        with pytest.raises(ValidationError):
            Settings(HIGHLIGHT_TAG=tag)

    def test_invalid_log_level(self, monkeypatch):
        """Test unknown log level is rejected."""
        monkeypatch.setenv("COOKIE_SEARCH_LOG_LEVEL", "VERBOSE")

        with pytest.raises(ValidationError):
            Settings()


class TestGetSettings:
    """Test cached settings access."""

    def test_cached_instance(self):
        """Test the same instance is returned."""
        assert get_settings() is get_settings()

    def test_cache_clear_rereads_environment(self, monkeypatch):
        """Test clearing the cache picks up new values."""
        assert get_settings().HIGHLIGHT_TAG == "mark"

        monkeypatch.setenv("COOKIE_SEARCH_HIGHLIGHT_TAG", "strong")
        get_settings.cache_clear()

        assert get_settings().HIGHLIGHT_TAG == "strong"
