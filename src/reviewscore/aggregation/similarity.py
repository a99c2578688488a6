"""Similarity predicate used to cluster near-duplicate findings."""

from __future__ import annotations

import re

from reviewscore.aggregation.config import AggregationConfig
from reviewscore.findings.schemas import Finding

_NON_ALNUM_RE = re.compile(r"[^a-z0-9\s]")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_message(message: str) -> str:
    """Lowercase, replace non-alphanumerics with spaces, collapse runs."""
    lowered = _NON_ALNUM_RE.sub(" ", message.lower())
    return _WHITESPACE_RE.sub(" ", lowered).strip()


def _tokenize(message: str) -> set[str]:
    normalized = normalize_message(message)
    if not normalized:
        return set()
    return set(normalized.split(" "))


def message_similarity(first: str, second: str) -> float:
    """Jaccard similarity over normalized word sets.

    Two messages with no tokens at all count as identical.
    """
    words_a = _tokenize(first)
    words_b = _tokenize(second)
    union = words_a | words_b
    if not union:
        return 1.0
    return len(words_a & words_b) / len(union)


def locations_close(a: Finding, b: Finding, threshold: int) -> bool:
    """True for file-level findings or start lines within ``threshold``."""
    if a.start_line is None or b.start_line is None:
        return True
    return abs(a.start_line - b.start_line) <= threshold


def are_similar(
    a: Finding, b: Finding, config: AggregationConfig
) -> bool:
    """Same file, nearby, similarly worded and in the same dimension.

    Cheapest checks run first; the token comparison runs last.
    """
    if a.file != b.file:
        return False
    if not locations_close(a, b, config.location_proximity_threshold):
        return False
    if a.dimension != b.dimension:
        return False
    return (
        message_similarity(a.message, b.message)
        >= config.message_similarity_threshold
    )
