"""Dimension-specific impact adjustments.

Each dimension has its own risk shape, so the raw impact of its findings
is reshaped by one rule before it becomes a score. The set of dimensions
is closed: ``IMPACT_RULES`` has exactly one entry per ``Dimension``.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeAlias

from reviewscore.constants import (
    MAINTAINABILITY_FACTOR,
    MAINTAINABILITY_SEVERITY_LIMIT,
    PERFORMANCE_DISCOUNT,
    PERFORMANCE_LOW_CONFIDENCE,
    QUALITY_MINOR_COUNT_LIMIT,
    QUALITY_MINOR_FACTOR,
    SECURITY_CRITICAL_PENALTY,
    SECURITY_HIGH_CONFIDENCE,
    SECURITY_HIGH_CONFIDENCE_FACTOR,
    TEST_COVERAGE_LONE_FACTOR,
    Dimension,
    Severity,
)
from reviewscore.findings.schemas import Finding

ImpactRule: TypeAlias = Callable[[float, Sequence[Finding]], float]


def _mean_confidence(findings: Sequence[Finding]) -> float:
    return sum(f.confidence for f in findings) / len(findings)


def _security(impact: float, findings: Sequence[Finding]) -> float:
    critical = sum(1 for f in findings if f.severity is Severity.CRITICAL)
    impact *= 1.0 + critical * SECURITY_CRITICAL_PENALTY
    if _mean_confidence(findings) > SECURITY_HIGH_CONFIDENCE:
        impact *= SECURITY_HIGH_CONFIDENCE_FACTOR
    return impact


def _quality(impact: float, findings: Sequence[Finding]) -> float:
    # Many small issues point at a systemic problem
    minor = sum(1 for f in findings if f.severity is Severity.MINOR)
    if minor > QUALITY_MINOR_COUNT_LIMIT:
        return impact * QUALITY_MINOR_FACTOR
    return impact


def _maintainability(
    impact: float, findings: Sequence[Finding]
) -> float:
    mean_severity = sum(f.severity.ordinal for f in findings) / len(
        findings
    )
    if mean_severity > MAINTAINABILITY_SEVERITY_LIMIT:
        return impact * MAINTAINABILITY_FACTOR
    return impact


def _performance(impact: float, findings: Sequence[Finding]) -> float:
    if _mean_confidence(findings) < PERFORMANCE_LOW_CONFIDENCE:
        return impact * PERFORMANCE_DISCOUNT
    return impact


def _test_coverage(
    impact: float, findings: Sequence[Finding]
) -> float:
    # A lone coverage gap usually signals a broader hole
    if len(findings) == 1:
        return impact * TEST_COVERAGE_LONE_FACTOR
    return impact


IMPACT_RULES: dict[Dimension, ImpactRule] = {
    Dimension.SECURITY: _security,
    Dimension.QUALITY: _quality,
    Dimension.MAINTAINABILITY: _maintainability,
    Dimension.PERFORMANCE: _performance,
    Dimension.TEST_COVERAGE: _test_coverage,
}


def adjust_impact(
    dimension: Dimension, impact: float, findings: Sequence[Finding]
) -> float:
    """Apply ``dimension``'s rule; ``findings`` must be non-empty."""
    return IMPACT_RULES[dimension](impact, findings)
