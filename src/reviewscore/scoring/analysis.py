"""Trend, benchmark and risk analysis over computed scores.

Everything here is a pure function of ``Scores``, the final findings and
caller-supplied history. No clock is read.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from statistics import fmean

from reviewscore.constants import (
    BENCHMARK_SIGNIFICANT_DELTA,
    INDUSTRY_BENCHMARKS,
    MAINTENANCE_MEDIUM_RISK_SCORE,
    QUALITY_HIGH_RISK_SCORE,
    QUALITY_MEDIUM_RISK_SCORE,
    SECURITY_HIGH_RISK_ISSUES,
    SECURITY_HIGH_RISK_SCORE,
    SECURITY_MEDIUM_RISK_ISSUES,
    SECURITY_MEDIUM_RISK_SCORE,
    STRONG_TREND,
    TREND_STABLE_BAND,
    TREND_STRENGTH_SCALE,
    BenchmarkStatus,
    Dimension,
    RiskLevel,
    TrendDirection,
)
from reviewscore.findings.schemas import Finding
from reviewscore.scoring.schemas import (
    BenchmarkComparison,
    BenchmarkResult,
    DimensionRisk,
    HistoricalScore,
    RiskAssessment,
    ScoreAnalysisReport,
    Scores,
    TrendAnalysis,
)

logger = logging.getLogger(__name__)

NO_HISTORY_INTERPRETATION = "Not enough history for trend analysis"

TREND_INSIGHTS: dict[TrendDirection, str] = {
    TrendDirection.IMPROVING: (
        "Code quality is trending up; recent improvements are paying off"
    ),
    TrendDirection.DECLINING: (
        "Code quality is trending down; tighten quality controls"
    ),
    TrendDirection.STABLE: (
        "Code quality is holding steady; look for the next improvement"
    ),
    TrendDirection.UNKNOWN: NO_HISTORY_INTERPRETATION,
}
STRONG_TREND_INSIGHT = "The change is pronounced; keep monitoring it"

MITIGATION_STRATEGIES: dict[RiskLevel, tuple[str, ...]] = {
    RiskLevel.HIGH: (
        "Start a code quality improvement plan now",
        "Review code more often",
        "Pause feature work and focus on quality fixes",
    ),
    RiskLevel.MEDIUM: (
        "Plan incremental improvements",
        "Invest in team training",
        "Add automated quality checks",
    ),
    RiskLevel.LOW: (
        "Keep the current quality level",
        "Hold regular quality retrospectives",
    ),
}


# ── Trends ───────────────────────────────────────────────


def trend_direction(series: Sequence[float]) -> TrendDirection:
    """Compare the mean of the later half of ``series`` with the earlier.

    With an odd length the middle value belongs to the later half.
    """
    if len(series) < 2:
        return TrendDirection.UNKNOWN
    mid = len(series) // 2
    change = fmean(series[mid:]) - fmean(series[:mid])
    if abs(change) < TREND_STABLE_BAND:
        return TrendDirection.STABLE
    return TrendDirection.IMPROVING if change > 0 else TrendDirection.DECLINING


def trend_strength(series: Sequence[float]) -> float:
    if len(series) < 2:
        return 0.0
    return min(abs(series[-1] - series[0]) / TREND_STRENGTH_SCALE, 1.0)


def analyze_trends(
    scores: Scores, history: Sequence[HistoricalScore]
) -> TrendAnalysis:
    """Trend of the current run against earlier runs, oldest first.

    History is ordered by timestamp; the current scores are the newest
    point. A dimension missing from a historical run counts as 0.
    """
    if not history:
        return TrendAnalysis(
            overall=TrendDirection.UNKNOWN,
            interpretation=NO_HISTORY_INTERPRETATION,
        )

    ordered = sorted(history, key=lambda h: h.timestamp)
    totals = [h.total_score for h in ordered] + [scores.total_score]
    overall = trend_direction(totals)
    strength = trend_strength(totals)

    dimension_trends = {
        d: trend_direction(
            [h.dimension_scores.get(d, 0.0) for h in ordered]
            + [scores.dimensions.get(d, 0.0)]
        )
        for d in Dimension
    }

    insights = [TREND_INSIGHTS[overall]]
    if strength > STRONG_TREND:
        insights.append(STRONG_TREND_INSIGHT)

    return TrendAnalysis(
        overall=overall,
        strength=strength,
        dimension_trends=dimension_trends,
        insights=insights,
        interpretation=(
            f"Overall trend: {overall.lower()}, strength {strength * 100:.1f}"
        ),
    )


# ── Benchmarks ───────────────────────────────────────────


def benchmark_status(difference: float) -> BenchmarkStatus:
    if difference >= 0:
        if difference >= BENCHMARK_SIGNIFICANT_DELTA:
            return BenchmarkStatus.SIGNIFICANTLY_ABOVE
        return BenchmarkStatus.ABOVE
    if difference <= -BENCHMARK_SIGNIFICANT_DELTA:
        return BenchmarkStatus.SIGNIFICANTLY_BELOW
    return BenchmarkStatus.BELOW


def benchmark_assessment(average_performance: float) -> str:
    """Reading of the mean percentage difference across dimensions."""
    if average_performance >= BENCHMARK_SIGNIFICANT_DELTA:
        return "Significantly above the industry average"
    if average_performance >= 0:
        return "Slightly above the industry average"
    if average_performance >= -BENCHMARK_SIGNIFICANT_DELTA:
        return "Slightly below the industry average"
    return "Significantly below the industry average"


def _dimension_label(dimension: Dimension) -> str:
    return dimension.replace("_", " ").lower()


def compare_to_benchmarks(scores: Scores) -> BenchmarkComparison:
    """Compare each scored dimension with its reference benchmark.

    Dimensions absent from ``scores`` are left out. With no comparable
    dimension the average performance is 0.
    """
    results: dict[Dimension, BenchmarkResult] = {}
    for d, benchmark in INDUSTRY_BENCHMARKS.items():
        if d not in scores.dimensions:
            continue
        score = scores.dimensions[d]
        difference = score - benchmark
        results[d] = BenchmarkResult(
            score=score,
            benchmark=benchmark,
            difference=difference,
            percentage_difference=difference / benchmark * 100,
            status=benchmark_status(difference),
        )

    average = (
        fmean(r.percentage_difference for r in results.values())
        if results
        else 0.0
    )
    recommendations = [
        f"Focus on {_dimension_label(d)}: it is well below the industry"
        " benchmark"
        for d, r in results.items()
        if r.status is BenchmarkStatus.SIGNIFICANTLY_BELOW
    ]
    return BenchmarkComparison(
        results=results,
        average_performance=average,
        overall_assessment=benchmark_assessment(average),
        recommendations=recommendations,
    )


# ── Risks ────────────────────────────────────────────────


def _issue_count(findings: Sequence[Finding], dimension: Dimension) -> int:
    return sum(1 for f in findings if f.effective_dimension is dimension)


def assess_security_risk(
    scores: Scores, findings: Sequence[Finding]
) -> DimensionRisk:
    """HIGH needs both a low score and many issues; so does MEDIUM."""
    issues = _issue_count(findings, Dimension.SECURITY)
    score = scores.dimensions.get(Dimension.SECURITY)
    level = RiskLevel.LOW
    if score is not None:
        if (
            score < SECURITY_HIGH_RISK_SCORE
            and issues > SECURITY_HIGH_RISK_ISSUES
        ):
            level = RiskLevel.HIGH
        elif (
            score < SECURITY_MEDIUM_RISK_SCORE
            and issues > SECURITY_MEDIUM_RISK_ISSUES
        ):
            level = RiskLevel.MEDIUM
    return DimensionRisk(level=level, issue_count=issues, score=score)


def assess_quality_risk(
    scores: Scores, findings: Sequence[Finding]
) -> DimensionRisk:
    score = scores.dimensions.get(Dimension.QUALITY)
    level = RiskLevel.LOW
    if score is not None:
        if score < QUALITY_HIGH_RISK_SCORE:
            level = RiskLevel.HIGH
        elif score < QUALITY_MEDIUM_RISK_SCORE:
            level = RiskLevel.MEDIUM
    return DimensionRisk(
        level=level,
        issue_count=_issue_count(findings, Dimension.QUALITY),
        score=score,
    )


def assess_maintenance_risk(
    scores: Scores, findings: Sequence[Finding]
) -> DimensionRisk:
    """Maintenance risk never rises above MEDIUM."""
    score = scores.dimensions.get(Dimension.MAINTAINABILITY)
    level = RiskLevel.LOW
    if score is not None and score < MAINTENANCE_MEDIUM_RISK_SCORE:
        level = RiskLevel.MEDIUM
    return DimensionRisk(
        level=level,
        issue_count=_issue_count(findings, Dimension.MAINTAINABILITY),
        score=score,
    )


def determine_overall_risk(
    security: DimensionRisk,
    quality: DimensionRisk,
    maintenance: DimensionRisk,
) -> RiskLevel:
    if RiskLevel.HIGH in (security.level, quality.level):
        return RiskLevel.HIGH
    if RiskLevel.MEDIUM in (security.level, quality.level, maintenance.level):
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def assess_risks(
    scores: Scores, findings: Sequence[Finding]
) -> RiskAssessment:
    security = assess_security_risk(scores, findings)
    quality = assess_quality_risk(scores, findings)
    maintenance = assess_maintenance_risk(scores, findings)
    overall = determine_overall_risk(security, quality, maintenance)
    return RiskAssessment(
        overall_risk=overall,
        security=security,
        quality=quality,
        maintenance=maintenance,
        mitigation_strategies=list(MITIGATION_STRATEGIES[overall]),
    )


def analyze_scores(
    scores: Scores,
    findings: Sequence[Finding],
    history: Sequence[HistoricalScore] = (),
) -> ScoreAnalysisReport:
    report = ScoreAnalysisReport(
        scores=scores,
        trends=analyze_trends(scores, history),
        benchmarks=compare_to_benchmarks(scores),
        risks=assess_risks(scores, findings),
    )
    logger.debug(
        "event=scores_analyzed trend=%s risk=%s benchmark_avg=%.1f",
        report.trends.overall,
        report.risks.overall_risk,
        report.benchmarks.average_performance,
    )
    return report
