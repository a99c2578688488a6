"""Tests for trend, benchmark and risk analysis."""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta

import pytest

from reviewscore.constants import (
    BenchmarkStatus,
    Dimension,
    RiskLevel,
    TrendDirection,
)
from reviewscore.findings.schemas import Finding
from reviewscore.scoring.analysis import (
    MITIGATION_STRATEGIES,
    NO_HISTORY_INTERPRETATION,
    STRONG_TREND_INSIGHT,
    TREND_INSIGHTS,
    analyze_scores,
    analyze_trends,
    assess_maintenance_risk,
    assess_quality_risk,
    assess_risks,
    assess_security_risk,
    benchmark_status,
    compare_to_benchmarks,
    determine_overall_risk,
    trend_direction,
)
from reviewscore.scoring.config import default_config
from reviewscore.scoring.schemas import DimensionRisk, HistoricalScore, Scores
from tests.conftest import make_finding

_START = datetime(2026, 1, 1, tzinfo=UTC)


def _scores(total: float = 100.0, **dims: float) -> Scores:
    dimensions = {d: 100.0 for d in Dimension}
    dimensions.update({Dimension(k): v for k, v in dims.items()})
    return Scores(
        total_score=total,
        dimensions=dimensions,
        weights=dict(default_config().dimension_weights),
    )


def _history(*totals: float, **dims: float) -> list[HistoricalScore]:
    return [
        HistoricalScore(
            timestamp=_START + timedelta(days=i),
            total_score=total,
            dimension_scores={Dimension(k): v for k, v in dims.items()},
        )
        for i, total in enumerate(totals)
    ]


def _risk(level: RiskLevel) -> DimensionRisk:
    return DimensionRisk(level=level, issue_count=0)


class TestTrends:
    def test_no_history_is_unknown(self) -> None:
        trends = analyze_trends(_scores(80.0), [])
        assert trends.overall is TrendDirection.UNKNOWN
        assert trends.strength == 0.0
        assert trends.dimension_trends == {}
        assert trends.insights == []
        assert trends.interpretation == NO_HISTORY_INTERPRETATION

    def test_improving_with_strong_change(self) -> None:
        trends = analyze_trends(_scores(80.0), _history(70.0, 72.0))
        assert trends.overall is TrendDirection.IMPROVING
        assert trends.strength == pytest.approx(1.0)
        assert trends.insights == [
            TREND_INSIGHTS[TrendDirection.IMPROVING],
            STRONG_TREND_INSIGHT,
        ]
        assert trends.interpretation == (
            "Overall trend: improving, strength 100.0"
        )

    def test_declining(self) -> None:
        trends = analyze_trends(_scores(80.0), _history(90.0, 85.0))
        assert trends.overall is TrendDirection.DECLINING

    def test_small_change_is_stable(self) -> None:
        trends = analyze_trends(_scores(80.0), _history(80.0, 81.0))
        assert trends.overall is TrendDirection.STABLE
        assert trends.strength == 0.0
        assert trends.insights == [TREND_INSIGHTS[TrendDirection.STABLE]]

    def test_moderate_change_has_no_strong_insight(self) -> None:
        trends = analyze_trends(_scores(85.0), _history(80.0))
        assert trends.overall is TrendDirection.IMPROVING
        assert trends.strength == pytest.approx(0.5)
        assert STRONG_TREND_INSIGHT not in trends.insights

    def test_history_is_ordered_by_timestamp(self) -> None:
        history = _history(90.0, 60.0)
        trends = analyze_trends(_scores(60.0), list(reversed(history)))
        assert trends.overall is TrendDirection.DECLINING

    def test_dimension_trends_cover_every_dimension(self) -> None:
        trends = analyze_trends(
            _scores(100.0), _history(100.0, 100.0, SECURITY=100.0)
        )
        assert set(trends.dimension_trends) == set(Dimension)
        assert trends.dimension_trends[Dimension.SECURITY] is (
            TrendDirection.STABLE
        )
        # Dimensions missing from history count as 0
        assert trends.dimension_trends[Dimension.QUALITY] is (
            TrendDirection.IMPROVING
        )

    @pytest.mark.parametrize(
        ("series", "expected"),
        [
            ([50.0], TrendDirection.UNKNOWN),
            ([50.0, 51.9], TrendDirection.STABLE),
            ([50.0, 52.0], TrendDirection.IMPROVING),
            ([50.0, 48.0], TrendDirection.DECLINING),
            # Middle value belongs to the later half
            ([50.0, 60.0, 40.0], TrendDirection.STABLE),
        ],
    )
    def test_direction_bands(
        self, series: list[float], expected: TrendDirection
    ) -> None:
        assert trend_direction(series) is expected


class TestBenchmarks:
    def test_results_per_dimension(self) -> None:
        comparison = compare_to_benchmarks(_scores(SECURITY=80.0))
        security = comparison.results[Dimension.SECURITY]
        assert security.benchmark == 85.0
        assert security.difference == pytest.approx(-5.0)
        assert security.percentage_difference == pytest.approx(-500 / 85)
        assert security.status is BenchmarkStatus.BELOW
        coverage = comparison.results[Dimension.TEST_COVERAGE]
        assert coverage.difference == pytest.approx(35.0)
        assert coverage.status is BenchmarkStatus.SIGNIFICANTLY_ABOVE

    def test_average_performance_and_assessment(self) -> None:
        comparison = compare_to_benchmarks(_scores())
        expected = (
            (15 / 85 + 22 / 78 + 28 / 72 + 25 / 75 + 35 / 65) / 5 * 100
        )
        assert comparison.average_performance == pytest.approx(expected)
        assert comparison.overall_assessment == (
            "Significantly above the industry average"
        )
        assert comparison.recommendations == []

    def test_far_below_benchmark_is_recommended(self) -> None:
        comparison = compare_to_benchmarks(
            _scores(SECURITY=70.0, TEST_COVERAGE=50.0, QUALITY=70.0)
        )
        assert comparison.results[Dimension.QUALITY].status is (
            BenchmarkStatus.BELOW
        )
        assert comparison.recommendations == [
            "Focus on security: it is well below the industry benchmark",
            "Focus on test coverage: it is well below the industry"
            " benchmark",
        ]

    def test_low_scores_read_as_significantly_below(self) -> None:
        comparison = compare_to_benchmarks(
            _scores(**{d.value: 30.0 for d in Dimension})
        )
        assert comparison.average_performance < -10
        assert comparison.overall_assessment == (
            "Significantly below the industry average"
        )

    def test_no_dimensions_gives_neutral_average(self) -> None:
        comparison = compare_to_benchmarks(
            Scores(total_score=100.0, dimensions={}, weights={})
        )
        assert comparison.results == {}
        assert comparison.average_performance == 0.0
        assert comparison.overall_assessment == (
            "Slightly above the industry average"
        )

    @pytest.mark.parametrize(
        ("difference", "status"),
        [
            (10.0, BenchmarkStatus.SIGNIFICANTLY_ABOVE),
            (9.9, BenchmarkStatus.ABOVE),
            (0.0, BenchmarkStatus.ABOVE),
            (-0.1, BenchmarkStatus.BELOW),
            (-9.9, BenchmarkStatus.BELOW),
            (-10.0, BenchmarkStatus.SIGNIFICANTLY_BELOW),
        ],
    )
    def test_status_bands(
        self, difference: float, status: BenchmarkStatus
    ) -> None:
        assert benchmark_status(difference) is status


class TestRisks:
    def _security(self, count: int) -> list[Finding]:
        return [
            make_finding(dimension=Dimension.SECURITY, start_line=i)
            for i in range(count)
        ]

    def test_security_high_needs_low_score_and_many_issues(self) -> None:
        risk = assess_security_risk(
            _scores(SECURITY=40.0), self._security(6)
        )
        assert risk.level is RiskLevel.HIGH
        assert risk.issue_count == 6
        assert risk.score == 40.0

    def test_security_five_issues_is_only_medium(self) -> None:
        risk = assess_security_risk(
            _scores(SECURITY=40.0), self._security(5)
        )
        assert risk.level is RiskLevel.MEDIUM

    def test_security_few_issues_is_low(self) -> None:
        risk = assess_security_risk(
            _scores(SECURITY=40.0), self._security(2)
        )
        assert risk.level is RiskLevel.LOW

    def test_security_good_score_is_low(self) -> None:
        risk = assess_security_risk(
            _scores(SECURITY=70.0), self._security(10)
        )
        assert risk.level is RiskLevel.LOW

    @pytest.mark.parametrize(
        ("score", "level"),
        [
            (39.9, RiskLevel.HIGH),
            (40.0, RiskLevel.MEDIUM),
            (59.9, RiskLevel.MEDIUM),
            (60.0, RiskLevel.LOW),
        ],
    )
    def test_quality_bands(self, score: float, level: RiskLevel) -> None:
        risk = assess_quality_risk(_scores(QUALITY=score), [])
        assert risk.level is level

    def test_unmapped_findings_count_as_quality(self) -> None:
        risk = assess_quality_risk(_scores(), [make_finding(dimension=None)])
        assert risk.issue_count == 1

    def test_maintenance_never_exceeds_medium(self) -> None:
        assert assess_maintenance_risk(
            _scores(MAINTAINABILITY=0.0), []
        ).level is RiskLevel.MEDIUM
        assert assess_maintenance_risk(
            _scores(MAINTAINABILITY=50.0), []
        ).level is RiskLevel.LOW

    def test_missing_scores_are_low_risk(self) -> None:
        scores = Scores(total_score=100.0, dimensions={}, weights={})
        assessment = assess_risks(scores, [])
        assert assessment.overall_risk is RiskLevel.LOW
        assert assessment.security.score is None

    @pytest.mark.parametrize(
        ("security", "quality", "maintenance", "overall"),
        [
            (RiskLevel.LOW, RiskLevel.LOW, RiskLevel.LOW, RiskLevel.LOW),
            (RiskLevel.HIGH, RiskLevel.LOW, RiskLevel.LOW, RiskLevel.HIGH),
            (RiskLevel.LOW, RiskLevel.HIGH, RiskLevel.MEDIUM, RiskLevel.HIGH),
            (RiskLevel.MEDIUM, RiskLevel.LOW, RiskLevel.LOW, RiskLevel.MEDIUM),
            (RiskLevel.LOW, RiskLevel.LOW, RiskLevel.MEDIUM, RiskLevel.MEDIUM),
        ],
    )
    def test_overall_risk(
        self,
        security: RiskLevel,
        quality: RiskLevel,
        maintenance: RiskLevel,
        overall: RiskLevel,
    ) -> None:
        assert determine_overall_risk(
            _risk(security), _risk(quality), _risk(maintenance)
        ) is overall

    def test_mitigation_follows_overall_level(self) -> None:
        assessment = assess_risks(_scores(QUALITY=30.0), [])
        assert assessment.overall_risk is RiskLevel.HIGH
        assert assessment.mitigation_strategies == list(
            MITIGATION_STRATEGIES[RiskLevel.HIGH]
        )


def test_analyze_scores_combines_views(
    caplog: pytest.LogCaptureFixture,
) -> None:
    scores = _scores(75.0, QUALITY=50.0)
    with caplog.at_level(logging.DEBUG, logger="reviewscore.scoring.analysis"):
        report = analyze_scores(
            scores, [make_finding()], _history(90.0, 85.0)
        )
    assert report.scores == scores
    assert report.trends.overall is TrendDirection.DECLINING
    assert report.benchmarks.results[Dimension.QUALITY].status is (
        BenchmarkStatus.SIGNIFICANTLY_BELOW
    )
    assert report.risks.overall_risk is RiskLevel.MEDIUM
    assert "event=scores_analyzed" in caplog.text


def test_analysis_does_not_need_history() -> None:
    report = analyze_scores(_scores(), [])
    assert report.trends.overall is TrendDirection.UNKNOWN
    assert report.risks.overall_risk is RiskLevel.LOW
