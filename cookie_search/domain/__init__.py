"""
Domain layer for cookie search.

Value objects and exceptions shared by the matching, ranking and
highlighting modules.
"""
from .entities import Cookie, CookieField, MatchType, SearchMatch
from .exceptions import (
    CookieSearchException,
    InvalidHighlightTagException,
    InvalidSearchOptionsException,
)

__all__ = [
    "Cookie",
    "CookieField",
    "MatchType",
    "SearchMatch",
    "CookieSearchException",
    "InvalidHighlightTagException",
    "InvalidSearchOptionsException",
]
