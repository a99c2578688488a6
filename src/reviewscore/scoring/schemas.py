"""Pydantic models for scoring output."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from reviewscore.constants import (
    BenchmarkStatus,
    Dimension,
    RiskLevel,
    ScoreGrade,
    TrendDirection,
)


class Scores(BaseModel):
    """Total and per-dimension scores on the 0–100 scale."""

    model_config = ConfigDict(frozen=True)

    total_score: float
    dimensions: dict[Dimension, float]
    weights: dict[Dimension, float]


class ScoreSummary(BaseModel):
    """Human-facing interpretation of a ``Scores`` value."""

    model_config = ConfigDict(frozen=True)

    scores: Scores
    grade: ScoreGrade
    problem_areas: list[Dimension] = Field(
        default_factory=lambda: list[Dimension]()
    )
    strong_areas: list[Dimension] = Field(
        default_factory=lambda: list[Dimension]()
    )
    improvement_potential: float = 0.0
    recommendations: list[str] = Field(
        default_factory=lambda: list[str]()
    )

    @property
    def has_problems(self) -> bool:
        return bool(self.problem_areas)

    @property
    def is_excellent(self) -> bool:
        return self.grade is ScoreGrade.A and not self.problem_areas

    @property
    def summary_text(self) -> str:
        status = (
            f"{len(self.problem_areas)} areas need attention"
            if self.has_problems
            else "All quality dimensions look good"
        )
        return (
            f"Overall Grade: {self.grade} "
            f"({self.scores.total_score:.1f}/100) - {status}"
        )


class HistoricalScore(BaseModel):
    """Scores of an earlier run, supplied by the caller."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    total_score: float
    dimension_scores: dict[Dimension, float] = Field(
        default_factory=lambda: dict[Dimension, float]()
    )


class TrendAnalysis(BaseModel):
    """Direction of the total and each dimension across past runs.

    ``strength`` is the first-to-last change of the total, scaled into
    [0, 1].
    """

    model_config = ConfigDict(frozen=True)

    overall: TrendDirection
    strength: float = 0.0
    dimension_trends: dict[Dimension, TrendDirection] = Field(
        default_factory=lambda: dict[Dimension, TrendDirection]()
    )
    insights: list[str] = Field(default_factory=lambda: list[str]())
    interpretation: str = ""


class BenchmarkResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: float
    benchmark: float
    difference: float
    percentage_difference: float
    status: BenchmarkStatus


class BenchmarkComparison(BaseModel):
    """Per-dimension benchmark results and their overall reading."""

    model_config = ConfigDict(frozen=True)

    results: dict[Dimension, BenchmarkResult] = Field(
        default_factory=lambda: dict[Dimension, BenchmarkResult]()
    )
    average_performance: float = 0.0  # mean percentage difference
    overall_assessment: str = ""
    recommendations: list[str] = Field(default_factory=lambda: list[str]())


class DimensionRisk(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: RiskLevel
    issue_count: int
    score: float | None = None


class RiskAssessment(BaseModel):
    """Security, quality and maintenance risk with mitigation advice."""

    model_config = ConfigDict(frozen=True)

    overall_risk: RiskLevel
    security: DimensionRisk
    quality: DimensionRisk
    maintenance: DimensionRisk
    mitigation_strategies: list[str] = Field(
        default_factory=lambda: list[str]()
    )


class ScoreAnalysisReport(BaseModel):
    """Trend, benchmark and risk views over one ``Scores`` value."""

    model_config = ConfigDict(frozen=True)

    scores: Scores
    trends: TrendAnalysis
    benchmarks: BenchmarkComparison
    risks: RiskAssessment
