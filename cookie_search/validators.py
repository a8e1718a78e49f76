"""
Search option validation.

Pydantic model for the options accepted by the ranker, plus the coercion
applied at the call boundary.
"""

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from .config import get_settings
from .domain.exceptions import InvalidSearchOptionsException


class SearchOptions(BaseModel):
    """
    Options controlling which cookie fields are searched.

    Accepts camelCase keys (``searchInValue``) as well as field names
    (``search_in_value``). Unknown keys are ignored.

    Attributes:
        search_in_value: Also score the cookie value (weight 0.7)
        search_in_domain: Also score the cookie domain (weight 0.5)
        min_score: Inclusive lower bound for a record to be kept (0-1)
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    search_in_value: bool = False
    search_in_domain: bool = False
    min_score: float = Field(
        default_factory=lambda: get_settings().DEFAULT_MIN_SCORE,
        ge=0.0,
        le=1.0,
    )


OptionsInput = Union[SearchOptions, Mapping[str, Any], None]


def coerce_options(options: OptionsInput = None) -> SearchOptions:
    """
    Turn caller-supplied options into a validated SearchOptions.

    Args:
        options: None, a SearchOptions instance, or a mapping of option keys

    Returns:
        Validated SearchOptions

    Raises:
        InvalidSearchOptionsException: If options cannot be validated
    """
    if options is None:
        return SearchOptions()
    if isinstance(options, SearchOptions):
        return options
    if not isinstance(options, Mapping):
        raise InvalidSearchOptionsException(
            f"expected a mapping, got {type(options).__name__}", options
        )

    try:
        return SearchOptions.model_validate(dict(options))
    except ValidationError as e:
        reason = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise InvalidSearchOptionsException(reason, options) from e
