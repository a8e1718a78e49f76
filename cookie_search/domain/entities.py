"""
Domain entities for cookie search.

Core value objects representing cookies and scored search matches.
These entities are framework-agnostic and contain no matching logic.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional


class CookieField(str, Enum):
    """Cookie fields that take part in matching."""

    NAME = "name"
    VALUE = "value"
    DOMAIN = "domain"


class MatchType(str, Enum):
    """Which scoring rule produced a match."""

    EXACT = "exact"
    CONTAINS = "contains"
    SUBSEQUENCE = "subsequence"
    NONE = "none"


@dataclass(frozen=True)
class Cookie:
    """
    Value object representing a browser cookie.

    Only name, value and domain are matched against; the remaining
    attributes are carried through untouched.
    """

    name: str
    value: Optional[str] = None
    domain: Optional[str] = None
    path: Optional[str] = None
    secure: bool = False
    http_only: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Cookie":
        """
        Build a cookie from a browser extension cookie mapping.

        Accepts both ``httpOnly`` (extension API) and ``http_only`` keys.

        Args:
            data: Mapping with at least a ``name`` key

        Returns:
            Cookie instance
        """
        http_only = data.get("httpOnly", data.get("http_only", False))
        return cls(
            name=data["name"],
            value=data.get("value"),
            domain=data.get("domain"),
            path=data.get("path"),
            secure=bool(data.get("secure", False)),
            http_only=bool(http_only),
        )

    def to_dict(self) -> dict:
        """Convert to the browser extension cookie shape."""
        return {
            "name": self.name,
            "value": self.value,
            "domain": self.domain,
            "path": self.path,
            "secure": self.secure,
            "httpOnly": self.http_only,
        }


@dataclass
class SearchMatch:
    """
    Container for a searched record with its relevance score.

    Attributes:
        record: The matched record, returned as supplied by the caller
        score: Best weighted score across searched fields (0-1)
        matched_field: Field that produced the best score, None when unscored
        match_type: Scoring rule that fired on the matched field
    """

    record: Any
    score: float
    matched_field: Optional[CookieField] = None
    match_type: MatchType = MatchType.NONE

    def to_dict(self) -> dict:
        """Convert to a plain dictionary, rounding the score."""
        return {
            "score": round(self.score, 4),
            "matched_field": self.matched_field.value if self.matched_field else None,
            "match_type": self.match_type.value,
        }
