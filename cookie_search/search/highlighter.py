"""
Match highlighting for cookie search results.

Produces HTML fragments with every occurrence of the search term wrapped
in a highlight element.
"""

import re
from typing import Any, Optional

from ..config import HIGHLIGHT_TAG_PATTERN, get_settings
from ..domain.exceptions import InvalidHighlightTagException

# Characters with special meaning in a regular expression
REGEX_SPECIAL_CHARS = re.compile(r"[.*+?^${}()|\[\]\\]")

# Replaced in this order so "&" is never escaped twice
HTML_ESCAPES = (("&", "&amp;"), ("<", "&lt;"), (">", "&gt;"))


def escape_regex(value: str) -> str:
    """
    Escape regex metacharacters so value matches only itself.

    Escapes . * + ? ^ $ { } ( ) | [ ] and backslash.

    Examples:
        "a.b" -> "a\\.b"
        "(x)" -> "\\(x\\)"
    """
    return REGEX_SPECIAL_CHARS.sub(lambda m: "\\" + m.group(0), value)


def escape_html(text: str) -> str:
    """Escape &, < and > for embedding text in HTML."""
    for char, entity in HTML_ESCAPES:
        text = text.replace(char, entity)
    return text


def highlight(text: Any, search_term: str, tag: Optional[str] = None) -> str:
    """
    Wrap every case-insensitive occurrence of search_term in a tag.

    The text is HTML-escaped before matching, so occurrences are found in
    the escaped text. Matched substrings keep their original casing.

    With an empty search term the text is returned as a string without
    escaping.

    Args:
        text: Text to highlight (converted with str())
        search_term: Literal term to mark
        tag: Element name to wrap matches in, defaults to the configured tag

    Returns:
        HTML fragment

    Raises:
        InvalidHighlightTagException: If tag is not a bare element name
    """
    if not search_term:
        return str(text)

    if tag is None:
        tag = get_settings().HIGHLIGHT_TAG
    elif not isinstance(tag, str) or not re.fullmatch(HIGHLIGHT_TAG_PATTERN, tag):
        raise InvalidHighlightTagException(tag)

    safe_text = escape_html(str(text))
    pattern = re.compile(f"({escape_regex(search_term)})", re.IGNORECASE)
    return pattern.sub(rf"<{tag}>\1</{tag}>", safe_text)
