"""
Fuzzy matching engine for cookie search.

Scores how well a search term matches a candidate string using three
case-insensitive rules, checked in order: exact match, substring
containment, and in-order subsequence.
"""

from typing import Tuple

from ..domain.entities import MatchType

# Rule scores (out of 1)
EXACT_SCORE = 1.0
CONTAINS_SCORE = 0.8
SUBSEQUENCE_WEIGHT = 0.6


def classify_match(search_term: str, candidate: str) -> Tuple[MatchType, float]:
    """
    Determine which rule matches and the resulting score.

    The subsequence rule is a single greedy left-to-right scan. Its score
    is the share of candidate characters consumed by the term, scaled by
    0.6, so shorter candidates score higher.

    An empty term is contained in every candidate; callers are expected to
    short-circuit on empty terms before scoring.

    Args:
        search_term: Term typed by the user (e.g., "ssid")
        candidate: Field value to match against (e.g., "SESSIONID")

    Returns:
        Tuple of (match_type, score) with score between 0.0 and 1.0
    """
    term = search_term.lower()
    target = candidate.lower()

    if target == term:
        return (MatchType.EXACT, EXACT_SCORE)

    if term in target:
        return (MatchType.CONTAINS, CONTAINS_SCORE)

    matched = 0
    term_index = 0
    for char in target:
        if term_index == len(term):
            break
        if char == term[term_index]:
            matched += 1
            term_index += 1

    if term_index == len(term):
        return (MatchType.SUBSEQUENCE, matched / len(target) * SUBSEQUENCE_WEIGHT)

    return (MatchType.NONE, 0.0)


def fuzzy_match(search_term: str, candidate: str) -> float:
    """
    Score how well search_term matches candidate.

    Examples:
        fuzzy_match("session", "session") -> 1.0
        fuzzy_match("coo", "cookie") -> 0.8
        fuzzy_match("ke", "cookie") -> 0.2
        fuzzy_match("xyz", "cookie") -> 0.0

    Returns:
        Similarity score between 0.0 (no match) and 1.0 (exact match)
    """
    return classify_match(search_term, candidate)[1]
