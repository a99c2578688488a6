"""Collapse a cluster of similar findings into one representative."""

from __future__ import annotations

from collections.abc import Sequence

from reviewscore.aggregation.config import AggregationConfig
from reviewscore.constants import (
    ADDITIONAL_INSIGHTS_HEADER,
    CONSENSUS_BOOST_CAP,
    CONSENSUS_BOOST_STEP,
    FALLBACK_CONFIDENCE,
)
from reviewscore.findings.schemas import (
    Finding,
    FindingGroup,
    SourcedFinding,
)


def clamp_confidence(value: float) -> float:
    return min(1.0, max(0.0, value))


def select_primary(
    members: Sequence[SourcedFinding], config: AggregationConfig
) -> SourcedFinding:
    """Pick the member whose content represents the cluster.

    Ranked by source priority, then confidence, then severity. ``max``
    returns the first maximal element, so earlier members win full ties.
    """
    return max(
        members,
        key=lambda sf: (
            config.source_priority(sf.source),
            sf.finding.confidence,
            sf.finding.severity.ordinal,
        ),
    )


def merged_confidence(
    members: Sequence[SourcedFinding], config: AggregationConfig
) -> float:
    """Source-weighted mean confidence plus a consensus boost."""
    if len(members) == 1:
        return clamp_confidence(members[0].finding.confidence)

    total_weight = 0.0
    weighted_sum = 0.0
    for sf in members:
        weight = config.source_weight(sf.source)
        weighted_sum += sf.finding.confidence * weight
        total_weight += weight

    base = (
        weighted_sum / total_weight
        if total_weight > 0
        else FALLBACK_CONFIDENCE
    )
    boost = min(
        CONSENSUS_BOOST_CAP, (len(members) - 1) * CONSENSUS_BOOST_STEP
    )
    return clamp_confidence(base + boost)


def merged_message(
    members: Sequence[SourcedFinding],
    primary: SourcedFinding,
    config: AggregationConfig,
) -> str:
    """Primary message, optionally followed by the others' wording."""
    base = primary.finding.message
    if not config.include_additional_insights:
        return base

    insights: list[str] = []
    for sf in members:
        if sf is primary:
            continue
        message = sf.finding.message
        if message not in insights:
            insights.append(message)

    if not insights:
        return base

    lines = [base, "", ADDITIONAL_INSIGHTS_HEADER]
    lines.extend(f"- {insight}" for insight in insights)
    return "\n".join(lines)


def _merged_sources(members: Sequence[SourcedFinding]) -> list[str]:
    seen: dict[str, None] = {}
    for sf in members:
        for source in sf.finding.sources:
            seen.setdefault(source, None)
    return list(seen)


def merge_group(
    group: FindingGroup, config: AggregationConfig
) -> Finding:
    """Merge a cluster; single-member clusters pass through unchanged."""
    members = group.members
    if len(members) == 1:
        return members[0].finding

    primary = select_primary(members, config)
    severity = max(
        (sf.finding.severity for sf in members),
        key=lambda s: s.ordinal,
    )
    return primary.finding.model_copy(
        update={
            "severity": severity,
            "title": merged_message(members, primary, config),
            "sources": _merged_sources(members),
            "confidence": merged_confidence(members, config),
        }
    )
