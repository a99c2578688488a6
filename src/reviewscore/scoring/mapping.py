"""Keyword-based dimension assignment for unclassified findings."""

from __future__ import annotations

from collections.abc import Sequence

from reviewscore.constants import Dimension
from reviewscore.findings.schemas import Finding
from reviewscore.scoring.config import DimensionMappingConfig


def dimension_match_score(
    content: str, dimension: Dimension, config: DimensionMappingConfig
) -> int:
    """Keyword hits for ``dimension`` in lowercased ``content``."""
    keywords = config.dimension_keywords.get(dimension, ())
    return sum(
        config.keyword_weight
        for keyword in keywords
        if keyword.lower() in content
    )


def determine_best_dimension(
    finding: Finding, config: DimensionMappingConfig
) -> Dimension:
    """Highest-scoring dimension; ties and no match use the default."""
    content = f"{finding.message} {finding.file}".lower()
    scores = {
        d: dimension_match_score(content, d, config) for d in Dimension
    }
    best = max(scores.values())
    if best <= 0:
        return config.default_dimension

    leaders = [d for d, score in scores.items() if score == best]
    if len(leaders) > 1:
        return config.default_dimension
    return leaders[0]


def map_finding_to_dimension(
    finding: Finding, config: DimensionMappingConfig
) -> Finding:
    if finding.dimension is not None and not config.force_remapping:
        return finding
    dimension = determine_best_dimension(finding, config)
    if dimension == finding.dimension:
        return finding
    return finding.model_copy(update={"dimension": dimension})


def map_findings_to_dimensions(
    findings: Sequence[Finding], config: DimensionMappingConfig
) -> list[Finding]:
    """Assign a dimension to every finding that lacks one.

    With ``force_remapping`` set, existing dimensions are recomputed too.
    """
    return [map_finding_to_dimension(f, config) for f in findings]
