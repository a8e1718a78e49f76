"""
Configuration module for cookie search.

Centralized configuration using Pydantic settings. Every value can be
overridden through ``COOKIE_SEARCH_``-prefixed environment variables or a
``.env`` file.
"""

import re
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

HIGHLIGHT_TAG_PATTERN = r"[A-Za-z][A-Za-z0-9-]*"


class Settings(BaseSettings):
    """
    Settings for cookie search.

    Attributes:
        DEFAULT_MIN_SCORE: minScore applied when search options omit it
        HIGHLIGHT_TAG: Element wrapped around highlighted matches
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        LOG_JSON: Render logs as JSON instead of console output
    """

    DEFAULT_MIN_SCORE: float = Field(
        default=0.3,
        ge=0.0,
        le=1.0,
        description="Inclusive lower score bound for search results",
    )
    HIGHLIGHT_TAG: str = Field(
        default="mark",
        description="HTML element used to mark matches",
    )

    # Logging configuration
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    LOG_JSON: bool = Field(
        default=False,
        description="Use JSON structured logging",
    )

    model_config = SettingsConfigDict(
        env_prefix="COOKIE_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("HIGHLIGHT_TAG")
    @classmethod
    def validate_highlight_tag(cls, value: str) -> str:
        """
        Validate that the highlight tag is a bare element name.

        Raises:
            ValueError: If the tag contains anything besides a tag name
        """
        if not re.fullmatch(HIGHLIGHT_TAG_PATTERN, value):
            raise ValueError(f"Highlight tag must be a bare element name, got: {value}")
        return value


@lru_cache()
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
