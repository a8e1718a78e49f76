"""
Search module for cookie lookup.

Provides fuzzy matching, multi-field ranking and match highlighting.
"""
from .cookie_search import CookieSearch
from .fuzzy_matcher import classify_match, fuzzy_match
from .highlighter import escape_html, escape_regex, highlight
from .ranker import score_record, search, search_with_scores

__all__ = [
    "CookieSearch",
    "classify_match",
    "fuzzy_match",
    "escape_html",
    "escape_regex",
    "highlight",
    "score_record",
    "search",
    "search_with_scores",
]
