"""
Multi-field search and ranking for cookies.

Scores each record on its name and, when enabled, its value and domain,
keeps records whose best weighted score reaches ``min_score`` and orders
them by that score.
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

from ..domain.entities import CookieField, MatchType, SearchMatch
from ..validators import OptionsInput, coerce_options
from .fuzzy_matcher import classify_match

logger = logging.getLogger(__name__)

# Field weights applied to the raw fuzzy score
FIELD_WEIGHTS = {
    CookieField.NAME: 1.0,
    CookieField.VALUE: 0.7,
    CookieField.DOMAIN: 0.5,
}


def get_field(record: Any, field: CookieField) -> Optional[Any]:
    """
    Read a field from a mapping record or an attribute-style record.

    Returns:
        Field value, or None when the record does not have it
    """
    if isinstance(record, Mapping):
        return record.get(field.value)
    return getattr(record, field.value, None)


def score_record(
    record: Any,
    search_term: str,
    search_in_value: bool = False,
    search_in_domain: bool = False,
) -> Tuple[float, Optional[CookieField], MatchType]:
    """
    Calculate the best weighted score of a record across searched fields.

    The name field is always scored; a missing name scores 0. Value and
    domain are only scored when enabled and non-empty. On equal scores
    the earlier field (name, value, domain) wins.

    Args:
        record: Cookie mapping or object
        search_term: Non-empty search term
        search_in_value: Include the value field
        search_in_domain: Include the domain field

    Returns:
        Tuple of (max_score, matched_field, match_type)
    """
    fields = [CookieField.NAME]
    if search_in_value:
        fields.append(CookieField.VALUE)
    if search_in_domain:
        fields.append(CookieField.DOMAIN)

    best_score = 0.0
    best_field: Optional[CookieField] = None
    best_type = MatchType.NONE

    for field in fields:
        candidate = get_field(record, field)
        if field is CookieField.NAME and candidate is None:
            logger.debug("Record has no name, scoring name as 0")
            continue
        if field is not CookieField.NAME and not candidate:
            continue

        match_type, raw_score = classify_match(search_term, str(candidate))
        score = raw_score * FIELD_WEIGHTS[field]

        if best_field is None or score > best_score:
            best_score = score
            best_field = field
            best_type = match_type

    if best_type is MatchType.NONE:
        best_field = None

    return (best_score, best_field, best_type)


def search_with_scores(
    records: Iterable[Any], search_term: str, options: OptionsInput = None
) -> List[SearchMatch]:
    """
    Search records and return scored matches sorted by relevance.

    An empty search term returns every record in input order with a score
    of 1.0 and no matched field.

    Args:
        records: Cookie mappings or objects
        search_term: Term to search for
        options: SearchOptions, a mapping of option keys, or None

    Returns:
        List of SearchMatch objects sorted by score (descending, stable)

    Raises:
        InvalidSearchOptionsException: If options are invalid
    """
    if not search_term:
        return [SearchMatch(record=record, score=1.0) for record in records]

    opts = coerce_options(options)

    matches = []
    candidates = 0
    for record in records:
        candidates += 1
        score, field, match_type = score_record(
            record,
            search_term,
            search_in_value=opts.search_in_value,
            search_in_domain=opts.search_in_domain,
        )
        if score >= opts.min_score:
            matches.append(
                SearchMatch(
                    record=record,
                    score=score,
                    matched_field=field,
                    match_type=match_type,
                )
            )

    # list.sort is stable, equal scores keep input order
    matches.sort(key=lambda m: m.score, reverse=True)

    logger.debug(
        "Cookie search kept %d of %d records (term length %d, min score %.2f)",
        len(matches),
        candidates,
        len(search_term),
        opts.min_score,
    )

    return matches


def search(
    records: Iterable[Any], search_term: str, options: OptionsInput = None
) -> Union[Iterable[Any], List[Any]]:
    """
    Filter and rank records by how well they match search_term.

    Args:
        records: Cookie mappings or objects, each with a ``name``
        search_term: Term to search for; empty returns records unchanged
        options: SearchOptions, a mapping such as
            ``{"searchInValue": True, "minScore": 0.5}``, or None

    Returns:
        The input itself for an empty term, otherwise a new list of the
        kept records ordered by score
    """
    if not search_term:
        return records

    return [match.record for match in search_with_scores(records, search_term, options)]
