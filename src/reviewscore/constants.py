"""Enums and tuning values for aggregation, scoring and analysis.

The enums are used across packages. The numeric values are the named
factors and thresholds of individual rules, kept together so a preset
review can see every knob in one place.
"""

from __future__ import annotations

from enum import StrEnum

# ── String Enums ─────────────────────────────────────────


class Severity(StrEnum):
    """Finding impact level, declared in ascending order."""

    INFO = "INFO"
    MINOR = "MINOR"
    MAJOR = "MAJOR"
    CRITICAL = "CRITICAL"

    @property
    def ordinal(self) -> int:
        return _SEVERITY_ORDER.index(self)


class Dimension(StrEnum):
    """Independent quality axes, each scored 0–100."""

    SECURITY = "SECURITY"
    QUALITY = "QUALITY"
    MAINTAINABILITY = "MAINTAINABILITY"
    PERFORMANCE = "PERFORMANCE"
    TEST_COVERAGE = "TEST_COVERAGE"

    @property
    def ordinal(self) -> int:
        return _DIMENSION_ORDER.index(self)


class FindingSource(StrEnum):
    """Which provider family reported a finding."""

    STATIC = "STATIC"
    AI = "AI"


class ScoreGrade(StrEnum):
    """Letter grade for a total score."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"


class TrendDirection(StrEnum):
    """Direction of a score series over past runs."""

    IMPROVING = "IMPROVING"
    DECLINING = "DECLINING"
    STABLE = "STABLE"
    UNKNOWN = "UNKNOWN"


class BenchmarkStatus(StrEnum):
    """Band of a dimension score relative to its benchmark."""

    SIGNIFICANTLY_ABOVE = "SIGNIFICANTLY_ABOVE"
    ABOVE = "ABOVE"
    BELOW = "BELOW"
    SIGNIFICANTLY_BELOW = "SIGNIFICANTLY_BELOW"


class RiskLevel(StrEnum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


_SEVERITY_ORDER: tuple[Severity, ...] = tuple(Severity)
_DIMENSION_ORDER: tuple[Dimension, ...] = tuple(Dimension)

# Unmapped findings rank and score as this dimension
DEFAULT_DIMENSION = Dimension.QUALITY


# ── Aggregation ──────────────────────────────────────────

CONSENSUS_BOOST_STEP = 0.1  # per additional agreeing member
CONSENSUS_BOOST_CAP = 0.3
FALLBACK_CONFIDENCE = 0.5  # zero total source weight
ADDITIONAL_INSIGHTS_HEADER = "Additional insights:"


# ── Scoring ──────────────────────────────────────────────

FALLBACK_SEVERITY_IMPACT = 0.5  # severity missing from impact map

SECURITY_CRITICAL_PENALTY = 0.5  # per CRITICAL finding
SECURITY_HIGH_CONFIDENCE = 0.8
SECURITY_HIGH_CONFIDENCE_FACTOR = 1.3
QUALITY_MINOR_COUNT_LIMIT = 10
QUALITY_MINOR_FACTOR = 1.2
MAINTAINABILITY_SEVERITY_LIMIT = 2.0  # mean severity ordinal
MAINTAINABILITY_FACTOR = 1.15
PERFORMANCE_LOW_CONFIDENCE = 0.6
PERFORMANCE_DISCOUNT = 0.8
TEST_COVERAGE_LONE_FACTOR = 1.5


# ── Summary ──────────────────────────────────────────────

GRADE_THRESHOLDS: tuple[tuple[float, ScoreGrade], ...] = (
    (90.0, ScoreGrade.A),
    (80.0, ScoreGrade.B),
    (70.0, ScoreGrade.C),
    (60.0, ScoreGrade.D),
)

ADDRESSABLE_CONFIDENCE = 0.7
POINTS_PER_ADDRESSABLE_ISSUE = 2.0
MAX_IMPROVEMENT_POINTS = 20.0

INDUSTRY_BENCHMARKS: dict[Dimension, float] = {
    Dimension.SECURITY: 85.0,
    Dimension.QUALITY: 78.0,
    Dimension.MAINTAINABILITY: 72.0,
    Dimension.PERFORMANCE: 75.0,
    Dimension.TEST_COVERAGE: 65.0,
}


# ── Analysis ─────────────────────────────────────────────

BENCHMARK_SIGNIFICANT_DELTA = 10.0  # points, and percent for the average

TREND_STABLE_BAND = 2.0  # half-series mean change counted as flat
TREND_STRENGTH_SCALE = 10.0  # points of change for full strength
STRONG_TREND = 0.7

SECURITY_HIGH_RISK_SCORE = 50.0
SECURITY_HIGH_RISK_ISSUES = 5
SECURITY_MEDIUM_RISK_SCORE = 70.0
SECURITY_MEDIUM_RISK_ISSUES = 2
QUALITY_MEDIUM_RISK_SCORE = 60.0
QUALITY_HIGH_RISK_SCORE = 40.0
MAINTENANCE_MEDIUM_RISK_SCORE = 50.0
