"""
Fuzzy search, ranking and highlighting for browser cookies.

The matching functions live in ``cookie_search.search``; the facade and
domain types are re-exported here.
"""
from .domain import (
    Cookie,
    CookieField,
    CookieSearchException,
    InvalidHighlightTagException,
    InvalidSearchOptionsException,
    MatchType,
    SearchMatch,
)
from .search.cookie_search import CookieSearch
from .validators import SearchOptions

__version__ = "1.0.0"

__all__ = [
    "Cookie",
    "CookieField",
    "CookieSearch",
    "CookieSearchException",
    "InvalidHighlightTagException",
    "InvalidSearchOptionsException",
    "MatchType",
    "SearchMatch",
    "SearchOptions",
]
