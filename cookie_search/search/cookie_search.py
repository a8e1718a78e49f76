"""
Facade bundling search, scoring and highlighting with fixed options.
"""

import re
from typing import Any, List, Optional, Sequence

from ..config import HIGHLIGHT_TAG_PATTERN
from ..domain.entities import SearchMatch
from ..domain.exceptions import InvalidHighlightTagException
from ..validators import OptionsInput, SearchOptions, coerce_options
from .fuzzy_matcher import fuzzy_match
from .highlighter import highlight
from .ranker import search, search_with_scores


class CookieSearch:
    """
    Cookie search bound to one set of options.

    Stateless apart from the validated options and highlight tag, so a
    single instance can be shared between threads.
    """

    def __init__(self, options: OptionsInput = None, highlight_tag: Optional[str] = None):
        """
        Initialize cookie search.

        Args:
            options: SearchOptions, a mapping of option keys, or None for defaults
            highlight_tag: Element used by highlight(), None for the configured tag

        Raises:
            InvalidSearchOptionsException: If options are invalid
            InvalidHighlightTagException: If highlight_tag is not a bare element name
        """
        self.options: SearchOptions = coerce_options(options)

        if highlight_tag is not None and (
            not isinstance(highlight_tag, str)
            or not re.fullmatch(HIGHLIGHT_TAG_PATTERN, highlight_tag)
        ):
            raise InvalidHighlightTagException(highlight_tag)
        self.highlight_tag = highlight_tag

    def score(self, search_term: str, candidate: str) -> float:
        """Score a single candidate string."""
        return fuzzy_match(search_term, candidate)

    def search(self, records: Sequence[Any], search_term: str) -> Sequence[Any]:
        """Filter and rank records with the bound options."""
        return search(records, search_term, self.options)

    def search_with_scores(
        self, records: Sequence[Any], search_term: str
    ) -> List[SearchMatch]:
        """Filter and rank records, keeping their scores."""
        return search_with_scores(records, search_term, self.options)

    def highlight(self, text: Any, search_term: str) -> str:
        """Highlight search_term in text with the bound tag."""
        return highlight(text, search_term, tag=self.highlight_tag)

    def get_stats(self) -> dict:
        """
        Get search configuration.

        Returns:
            Dictionary with the active options and highlight tag
        """
        return {
            "options": self.options.model_dump(by_alias=True),
            "highlight_tag": self.highlight_tag,
        }
