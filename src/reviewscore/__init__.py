"""Finding aggregation and multi-dimension quality scoring."""

from reviewscore.aggregation import AggregationConfig, aggregate
from reviewscore.constants import Dimension, FindingSource, ScoreGrade, Severity
from reviewscore.findings import AggregationResult, AggregationStats, Finding
from reviewscore.pipeline import ReviewScoringResult, run_review_scoring
from reviewscore.scoring import (
    DimensionMappingConfig,
    ScoreAnalysisReport,
    Scores,
    ScoreSummary,
    ScoringConfig,
    analyze_scores,
    calculate_scores,
    generate_score_summary,
    map_findings_to_dimensions,
)

__all__ = [
    "AggregationConfig",
    "AggregationResult",
    "AggregationStats",
    "Dimension",
    "DimensionMappingConfig",
    "Finding",
    "FindingSource",
    "ReviewScoringResult",
    "ScoreAnalysisReport",
    "ScoreGrade",
    "ScoreSummary",
    "Scores",
    "ScoringConfig",
    "Severity",
    "aggregate",
    "analyze_scores",
    "calculate_scores",
    "generate_score_summary",
    "map_findings_to_dimensions",
    "run_review_scoring",
]
