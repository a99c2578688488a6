"""Grade, weak/strong areas and recommendations from computed scores."""

from __future__ import annotations

from collections.abc import Sequence

from reviewscore.constants import (
    ADDRESSABLE_CONFIDENCE,
    GRADE_THRESHOLDS,
    MAX_IMPROVEMENT_POINTS,
    POINTS_PER_ADDRESSABLE_ISSUE,
    Dimension,
    ScoreGrade,
    Severity,
)
from reviewscore.findings.schemas import Finding
from reviewscore.scoring.config import ScoringConfig
from reviewscore.scoring.schemas import Scores, ScoreSummary

RECOMMENDATIONS: dict[Dimension, str] = {
    Dimension.SECURITY: (
        "Review security-related findings and implement security"
        " best practices"
    ),
    Dimension.QUALITY: (
        "Address code quality issues and consider refactoring"
        " complex areas"
    ),
    Dimension.MAINTAINABILITY: (
        "Improve code maintainability through better documentation"
        " and structure"
    ),
    Dimension.PERFORMANCE: (
        "Investigate performance issues and optimize critical paths"
    ),
    Dimension.TEST_COVERAGE: (
        "Increase test coverage and add missing test cases"
    ),
}

NO_PROBLEMS_RECOMMENDATION = (
    "Great work! Continue following best practices."
)


def score_grade(score: float) -> ScoreGrade:
    for threshold, grade in GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return ScoreGrade.F


def problem_areas(
    scores: Scores, config: ScoringConfig
) -> list[Dimension]:
    """Dimensions below the problem threshold, weakest first."""
    weak = [
        d
        for d, score in scores.dimensions.items()
        if score < config.problem_threshold
    ]
    return sorted(weak, key=lambda d: (scores.dimensions[d], d.ordinal))


def strong_areas(
    scores: Scores, config: ScoringConfig
) -> list[Dimension]:
    """Dimensions at or above the excellent threshold, strongest first."""
    strong = [
        d
        for d, score in scores.dimensions.items()
        if score >= config.excellent_threshold
    ]
    return sorted(strong, key=lambda d: (-scores.dimensions[d], d.ordinal))


def improvement_potential(
    scores: Scores, findings: Sequence[Finding]
) -> float:
    """Points recoverable by fixing confident, actionable findings."""
    addressable = sum(
        1
        for f in findings
        if f.confidence > ADDRESSABLE_CONFIDENCE
        and f.severity.ordinal >= Severity.MINOR.ordinal
    )
    from_issues = min(
        MAX_IMPROVEMENT_POINTS, addressable * POINTS_PER_ADDRESSABLE_ISSUE
    )
    return max(0.0, min(100.0 - scores.total_score, from_issues))


def recommendations(weak: Sequence[Dimension]) -> list[str]:
    if not weak:
        return [NO_PROBLEMS_RECOMMENDATION]
    return [RECOMMENDATIONS[d] for d in weak]


def generate_score_summary(
    scores: Scores,
    findings: Sequence[Finding],
    config: ScoringConfig,
) -> ScoreSummary:
    weak = problem_areas(scores, config)
    return ScoreSummary(
        scores=scores,
        grade=score_grade(scores.total_score),
        problem_areas=weak,
        strong_areas=strong_areas(scores, config),
        improvement_potential=improvement_potential(scores, findings),
        recommendations=recommendations(weak),
    )
