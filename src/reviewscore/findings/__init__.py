"""Finding value objects shared by aggregation and scoring."""

from reviewscore.findings.schemas import (
    AggregationResult,
    AggregationStats,
    Finding,
    FindingGroup,
    SourcedFinding,
)

__all__ = [
    "AggregationResult",
    "AggregationStats",
    "Finding",
    "FindingGroup",
    "SourcedFinding",
]
