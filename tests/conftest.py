"""
Test configuration and fixtures
"""

import pytest

from cookie_search.config import get_settings
from cookie_search.domain.entities import Cookie


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    """Isolate tests from COOKIE_SEARCH_* variables and cached settings."""
    for key in ("DEFAULT_MIN_SCORE", "HIGHLIGHT_TAG", "LOG_LEVEL", "LOG_JSON"):
        monkeypatch.delenv(f"COOKIE_SEARCH_{key}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_cookies():
    """Sample cookie records as delivered by a browser extension"""
    return [
        {"name": "sessionid", "value": "a1b2c3", "domain": "example.com"},
        {"name": "csrftoken", "value": "xyz789", "domain": ".example.com"},
        {"name": "_ga", "value": "GA1.2.3456", "domain": ".google.com"},
        {"name": "theme", "value": "dark", "domain": "docs.example.org"},
        {"name": "cookie_consent", "value": "true", "domain": "shop.test"},
    ]


@pytest.fixture
def sample_cookie_objects():
    """Sample cookies as Cookie value objects"""
    return [
        Cookie(name="sessionid", value="a1b2c3", domain="example.com"),
        Cookie(name="lang", value="en-US", domain="session.example.net"),
        Cookie(name="prefs", value="session=short", domain="example.net"),
    ]
