"""Deduction-based quality scores per dimension and in total."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from reviewscore.constants import FALLBACK_SEVERITY_IMPACT, Dimension
from reviewscore.findings.schemas import Finding
from reviewscore.scoring.config import ScoringConfig
from reviewscore.scoring.rules import adjust_impact
from reviewscore.scoring.schemas import Scores

logger = logging.getLogger(__name__)


def _clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))


def group_by_dimension(
    findings: Sequence[Finding],
) -> dict[Dimension, list[Finding]]:
    """Bucket findings per dimension; every dimension gets a bucket."""
    buckets: dict[Dimension, list[Finding]] = {d: [] for d in Dimension}
    for finding in findings:
        buckets[finding.effective_dimension].append(finding)
    return buckets


def finding_impact(finding: Finding, config: ScoringConfig) -> float:
    """Severity impact scaled by confidence raised to the exponent."""
    severity_impact = config.severity_impact.get(
        finding.severity, FALLBACK_SEVERITY_IMPACT
    )
    confidence = _clamp(finding.confidence, 0.0, 1.0)
    return severity_impact * confidence**config.confidence_exponent


def calculate_dimension_score(
    dimension: Dimension,
    findings: Sequence[Finding],
    config: ScoringConfig,
) -> float:
    """Score one dimension; no findings means a perfect ``base_score``.

    Each finding can at most cost one full unit of impact before the
    dimension rule, so the impact ratio is taken against the count.
    """
    if not findings:
        return config.base_score

    total_impact = sum(finding_impact(f, config) for f in findings)
    adjusted = adjust_impact(dimension, total_impact, findings)
    impact_ratio = adjusted / len(findings)
    score = config.base_score - impact_ratio * config.base_score
    return _clamp(score, config.min_score, config.base_score)


def calculate_total_score(
    dimension_scores: Mapping[Dimension, float],
    config: ScoringConfig,
) -> float:
    """Weighted average of the dimension scores.

    Equals ``Σ score·weight`` when the weights sum to 1.0. Dimension
    scores are already on the 0–100 scale, so no further scaling is
    applied.
    """
    weighted_sum = 0.0
    total_weight = 0.0
    for dimension, score in dimension_scores.items():
        weight = config.dimension_weights.get(dimension, 0.0)
        weighted_sum += score * weight
        total_weight += weight

    if total_weight <= 0:
        return config.base_score
    return _clamp(
        weighted_sum / total_weight, config.min_score, config.base_score
    )


def calculate_scores(
    findings: Sequence[Finding], config: ScoringConfig
) -> Scores:
    """Score every dimension and combine them by configured weight."""
    weights = dict(config.dimension_weights)
    if not findings:
        return Scores(
            total_score=config.base_score,
            dimensions={d: config.base_score for d in Dimension},
            weights=weights,
        )

    buckets = group_by_dimension(findings)
    dimension_scores = {
        dimension: calculate_dimension_score(dimension, bucket, config)
        for dimension, bucket in buckets.items()
    }
    total = calculate_total_score(dimension_scores, config)

    logger.debug(
        "event=scores_calculated findings=%d total=%.2f",
        len(findings),
        total,
    )
    return Scores(
        total_score=total,
        dimensions=dimension_scores,
        weights=weights,
    )
