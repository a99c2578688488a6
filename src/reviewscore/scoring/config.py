"""Scoring and dimension-mapping configuration.

Each preset constructor builds new read-only mappings, so a config handed
to one review run can never be altered through another.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from reviewscore.constants import Dimension, Severity


def _default_severity_impact() -> Mapping[Severity, float]:
    return MappingProxyType({
        Severity.INFO: 0.1,
        Severity.MINOR: 0.3,
        Severity.MAJOR: 0.6,
        Severity.CRITICAL: 1.0,
    })


def _default_dimension_weights() -> Mapping[Dimension, float]:
    return MappingProxyType({
        Dimension.SECURITY: 0.25,
        Dimension.QUALITY: 0.30,
        Dimension.MAINTAINABILITY: 0.25,
        Dimension.PERFORMANCE: 0.15,
        Dimension.TEST_COVERAGE: 0.05,
    })


@dataclass(frozen=True)
class ScoringConfig:
    """Deduction-based scoring parameters.

    Values are assumed validated upstream: weights sum to 1.0 and
    thresholds lie within [0, base_score].
    """

    base_score: float = 100.0
    min_score: float = 0.0
    severity_impact: Mapping[Severity, float] = field(
        default_factory=_default_severity_impact
    )
    dimension_weights: Mapping[Dimension, float] = field(
        default_factory=_default_dimension_weights
    )
    confidence_exponent: float = 1.2
    problem_threshold: float = 70.0
    excellent_threshold: float = 90.0

    def with_weights(
        self, weights: Mapping[Dimension, float]
    ) -> ScoringConfig:
        """Copy of this config using externally supplied weights."""
        return replace(
            self, dimension_weights=MappingProxyType(dict(weights))
        )


def default_config() -> ScoringConfig:
    return ScoringConfig()


def strict_config() -> ScoringConfig:
    """Heavier deductions and higher bars for problem/excellent areas."""
    return ScoringConfig(
        severity_impact=MappingProxyType({
            Severity.INFO: 0.2,
            Severity.MINOR: 0.5,
            Severity.MAJOR: 0.8,
            Severity.CRITICAL: 1.2,
        }),
        confidence_exponent=1.5,
        problem_threshold=80.0,
        excellent_threshold=95.0,
    )


def lenient_config() -> ScoringConfig:
    """Lighter deductions, a score floor of 20 and linear confidence."""
    return ScoringConfig(
        min_score=20.0,
        severity_impact=MappingProxyType({
            Severity.INFO: 0.05,
            Severity.MINOR: 0.2,
            Severity.MAJOR: 0.4,
            Severity.CRITICAL: 0.7,
        }),
        confidence_exponent=1.0,
        problem_threshold=60.0,
        excellent_threshold=80.0,
    )


SCORING_PRESETS = {
    "default": default_config,
    "strict": strict_config,
    "lenient": lenient_config,
}


def _default_keywords() -> Mapping[Dimension, tuple[str, ...]]:
    return MappingProxyType({
        Dimension.SECURITY: (
            "security", "vulnerability", "injection", "xss", "csrf",
            "auth", "crypto", "ssl", "password", "token",
        ),
        Dimension.QUALITY: (
            "quality", "bug", "error", "exception", "null",
            "duplicate", "complexity", "smell", "antipattern",
        ),
        Dimension.MAINTAINABILITY: (
            "maintainability", "refactor", "documentation", "comment",
            "naming", "structure", "coupling", "cohesion",
        ),
        Dimension.PERFORMANCE: (
            "performance", "slow", "memory", "cpu", "optimization",
            "efficiency", "cache", "database", "query", "loop",
        ),
        Dimension.TEST_COVERAGE: (
            "test", "coverage", "unittest", "integration", "assertion",
            "mock", "stub",
        ),
    })


@dataclass(frozen=True)
class DimensionMappingConfig:
    """Keyword table for assigning a dimension to a finding."""

    dimension_keywords: Mapping[Dimension, tuple[str, ...]] = field(
        default_factory=_default_keywords
    )
    default_dimension: Dimension = Dimension.QUALITY
    keyword_weight: int = 1
    force_remapping: bool = False
