"""Aggregate static and AI findings: cluster, merge, rank, filter."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence

from reviewscore.aggregation.clustering import (
    group_similar_findings,
    tag_findings,
)
from reviewscore.aggregation.config import AggregationConfig
from reviewscore.aggregation.merge import merge_group
from reviewscore.constants import Dimension, Severity
from reviewscore.findings.schemas import (
    AggregationResult,
    AggregationStats,
    Finding,
    FindingGroup,
)

logger = logging.getLogger(__name__)


def aggregate(
    static_findings: Sequence[Finding],
    ai_findings: Sequence[Finding],
    config: AggregationConfig,
) -> AggregationResult:
    """Deduplicate and rank findings from both provider families.

    Pure function of its arguments. Empty inputs are valid and produce
    an empty result with zero counts.
    """
    tagged = tag_findings(static_findings, ai_findings)
    groups = group_similar_findings(tagged, config)
    merged = [merge_group(group, config) for group in groups]
    ranked = rank_and_filter(merged, config)
    stats = build_stats(groups, merged, ranked)

    logger.debug(
        "event=aggregation_complete input=%d merged=%d final=%d"
        " duplicates=%d filtered=%d",
        stats.total_input_findings,
        len(merged),
        stats.final_findings_count,
        stats.duplicates_removed,
        stats.filtered_out,
    )
    return AggregationResult(findings=ranked, stats=stats, groups=groups)


def _rank_key(finding: Finding) -> tuple[int, float, int]:
    return (
        -finding.severity.ordinal,
        -finding.confidence,
        finding.effective_dimension.ordinal,
    )


def rank_and_filter(
    findings: Sequence[Finding], config: AggregationConfig
) -> list[Finding]:
    """Apply, in order: confidence floor, severity floor, sort, limit.

    Sort is severity desc, confidence desc, dimension asc. ``sorted`` is
    stable, so full ties keep their merge order.
    """
    min_ordinal = config.min_severity.ordinal
    kept = [
        f
        for f in findings
        if f.confidence >= config.min_confidence_threshold
        and f.severity.ordinal >= min_ordinal
    ]
    ranked = sorted(kept, key=_rank_key)
    return ranked[: max(0, config.max_findings)]


def build_stats(
    groups: Sequence[FindingGroup],
    merged: Sequence[Finding],
    final: Sequence[Finding],
) -> AggregationStats:
    """Per-stage counts; breakdowns cover the final set only."""
    total = sum(len(group) for group in groups)

    by_dimension: Counter[Dimension] = Counter(
        f.effective_dimension for f in final
    )
    by_severity: Counter[Severity] = Counter(f.severity for f in final)
    average = (
        sum(f.confidence for f in final) / len(final) if final else 0.0
    )

    return AggregationStats(
        total_input_findings=total,
        duplicates_removed=total - len(merged),
        filtered_out=len(merged) - len(final),
        final_findings_count=len(final),
        findings_by_dimension=dict(by_dimension),
        findings_by_severity=dict(by_severity),
        average_confidence=average,
    )
