"""Greedy single-link clustering of sourced findings."""

from __future__ import annotations

from collections.abc import Sequence

from reviewscore.aggregation.config import AggregationConfig
from reviewscore.aggregation.similarity import are_similar
from reviewscore.constants import FindingSource
from reviewscore.findings.schemas import (
    Finding,
    FindingGroup,
    SourcedFinding,
)


def tag_findings(
    static_findings: Sequence[Finding],
    ai_findings: Sequence[Finding],
) -> list[SourcedFinding]:
    """Concatenate static then AI findings, preserving input order."""
    tagged = [
        SourcedFinding(finding=f, source=FindingSource.STATIC)
        for f in static_findings
    ]
    tagged.extend(
        SourcedFinding(finding=f, source=FindingSource.AI)
        for f in ai_findings
    )
    return tagged


def group_similar_findings(
    findings: Sequence[SourcedFinding],
    config: AggregationConfig,
) -> list[FindingGroup]:
    """Partition findings into clusters of near-duplicates.

    The first unconsumed finding seeds a cluster; one left-to-right scan
    pulls in every later finding similar to that seed. Membership is
    tracked with a ``consumed`` flag per input position, so each finding
    lands in exactly one group and groups come out in seed order.

    Members are compared with the seed only. Two non-seed members of
    different groups are never compared, so merged findings built from
    them may still be near-duplicates of each other.
    """
    consumed = [False] * len(findings)
    groups: list[FindingGroup] = []

    for seed_idx, seed in enumerate(findings):
        if consumed[seed_idx]:
            continue
        consumed[seed_idx] = True
        members = [seed]

        for idx in range(seed_idx + 1, len(findings)):
            if consumed[idx]:
                continue
            candidate = findings[idx]
            if are_similar(seed.finding, candidate.finding, config):
                consumed[idx] = True
                members.append(candidate)

        groups.append(FindingGroup(members=members))

    return groups
