"""Scoring — per-dimension deductions, weighted totals, summaries."""

from reviewscore.scoring.analysis import (
    analyze_scores,
    analyze_trends,
    assess_risks,
    compare_to_benchmarks,
)
from reviewscore.scoring.config import (
    SCORING_PRESETS,
    DimensionMappingConfig,
    ScoringConfig,
    default_config,
    lenient_config,
    strict_config,
)
from reviewscore.scoring.engine import (
    calculate_dimension_score,
    calculate_scores,
    calculate_total_score,
)
from reviewscore.scoring.mapping import map_findings_to_dimensions
from reviewscore.scoring.schemas import (
    BenchmarkComparison,
    HistoricalScore,
    RiskAssessment,
    ScoreAnalysisReport,
    Scores,
    ScoreSummary,
    TrendAnalysis,
)
from reviewscore.scoring.summary import generate_score_summary, score_grade

__all__ = [
    "SCORING_PRESETS",
    "BenchmarkComparison",
    "DimensionMappingConfig",
    "HistoricalScore",
    "RiskAssessment",
    "ScoreAnalysisReport",
    "ScoreSummary",
    "Scores",
    "ScoringConfig",
    "TrendAnalysis",
    "analyze_scores",
    "analyze_trends",
    "assess_risks",
    "calculate_dimension_score",
    "calculate_scores",
    "calculate_total_score",
    "compare_to_benchmarks",
    "default_config",
    "generate_score_summary",
    "lenient_config",
    "map_findings_to_dimensions",
    "score_grade",
    "strict_config",
]
