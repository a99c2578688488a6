"""Aggregation thresholds and source preferences.

Presets are plain constructors: every call returns a fresh frozen value,
so concurrent review runs never share a config instance.
"""

from __future__ import annotations

from dataclasses import dataclass

from reviewscore.constants import FindingSource, Severity


@dataclass(frozen=True)
class AggregationConfig:
    """Clustering, merge and rank & filter settings for one run."""

    message_similarity_threshold: float = 0.8
    location_proximity_threshold: int = 3  # lines
    min_confidence_threshold: float = 0.3
    min_severity: Severity = Severity.INFO
    max_findings: int = 100
    include_additional_insights: bool = True
    static_analysis_priority: int = 2
    ai_review_priority: int = 1
    static_analysis_weight: float = 1.0
    ai_review_weight: float = 0.8

    def source_priority(self, source: FindingSource) -> int:
        if source is FindingSource.STATIC:
            return self.static_analysis_priority
        return self.ai_review_priority

    def source_weight(self, source: FindingSource) -> float:
        if source is FindingSource.STATIC:
            return self.static_analysis_weight
        return self.ai_review_weight


def default_config() -> AggregationConfig:
    return AggregationConfig()


def strict_config() -> AggregationConfig:
    """Fewer, higher-confidence findings; AI reviewers take priority."""
    return AggregationConfig(
        message_similarity_threshold=0.9,
        location_proximity_threshold=2,
        min_confidence_threshold=0.7,
        min_severity=Severity.MINOR,
        max_findings=50,
        include_additional_insights=False,
        static_analysis_priority=1,
        ai_review_priority=2,
        static_analysis_weight=0.8,
        ai_review_weight=1.0,
    )


def permissive_config() -> AggregationConfig:
    """Looser clustering and almost no filtering."""
    return AggregationConfig(
        message_similarity_threshold=0.6,
        location_proximity_threshold=5,
        min_confidence_threshold=0.1,
        min_severity=Severity.INFO,
        max_findings=200,
        include_additional_insights=True,
        static_analysis_priority=1,
        ai_review_priority=1,
        static_analysis_weight=1.0,
        ai_review_weight=1.0,
    )


AGGREGATION_PRESETS = {
    "default": default_config,
    "strict": strict_config,
    "permissive": permissive_config,
}
