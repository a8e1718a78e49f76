"""
Custom exceptions for the cookie search domain.

Scoring itself never fails; these exceptions cover invalid input
rejected at the call boundary.
"""

from typing import Any, Optional


class CookieSearchException(Exception):
    """Base exception for all cookie search errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidSearchOptionsException(CookieSearchException):
    """Raised when search options fail validation."""

    def __init__(self, reason: str, options: Any = None):
        message = f"Invalid search options: {reason}"
        super().__init__(
            message=message, details={"reason": reason, "options": repr(options)}
        )


class InvalidHighlightTagException(CookieSearchException):
    """Raised when the highlight element is not a bare tag name."""

    def __init__(self, tag: Any):
        message = f"Invalid highlight tag: {tag!r}"
        super().__init__(message=message, details={"tag": repr(tag)})
