"""One review run: map dimensions, aggregate, score, summarize."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import TypeVar

from reviewscore.aggregation.aggregator import aggregate
from reviewscore.aggregation.config import AggregationConfig
from reviewscore.config import Settings
from reviewscore.findings.schemas import AggregationResult, Finding
from reviewscore.scoring.config import DimensionMappingConfig, ScoringConfig
from reviewscore.scoring.engine import calculate_scores
from reviewscore.scoring.mapping import map_findings_to_dimensions
from reviewscore.scoring.schemas import Scores, ScoreSummary
from reviewscore.scoring.summary import generate_score_summary

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class StageTiming:
    """Wall-clock duration of a single pipeline stage."""

    stage_name: str
    duration_ms: float


@dataclass(frozen=True)
class ReviewScoringResult:
    """Everything a review run hands to persistence and reporting."""

    aggregation: AggregationResult
    scores: Scores
    summary: ScoreSummary
    timings: tuple[StageTiming, ...] = field(default=())


def _timed(
    name: str, fn: Callable[[], T], timings: list[StageTiming]
) -> T:
    """Run ``fn``, record its duration, and let exceptions propagate."""
    start = time.monotonic()
    output = fn()
    elapsed = (time.monotonic() - start) * 1000
    timings.append(StageTiming(stage_name=name, duration_ms=elapsed))
    logger.debug("event=stage_done stage=%s duration_ms=%.2f", name, elapsed)
    return output


def run_review_scoring(
    static_findings: Sequence[Finding],
    ai_findings: Sequence[Finding],
    settings: Settings | None = None,
    *,
    aggregation_config: AggregationConfig | None = None,
    scoring_config: ScoringConfig | None = None,
    mapping_config: DimensionMappingConfig | None = None,
) -> ReviewScoringResult:
    """Turn raw provider findings into ranked findings and scores.

    Explicit configs win over the presets selected in ``settings``. When
    a preset is needed and ``settings`` is None, a fresh ``Settings()``
    is built, which reads ``.env`` and the environment on every call.
    Long-lived callers should build ``Settings`` once and pass it in.
    """
    agg_cfg = aggregation_config
    score_cfg = scoring_config
    if agg_cfg is None or score_cfg is None:
        if settings is None:
            settings = Settings()
        agg_cfg = agg_cfg or settings.aggregation_config()
        score_cfg = score_cfg or settings.scoring_config()
    map_cfg = mapping_config or DimensionMappingConfig()

    timings: list[StageTiming] = []

    static_mapped, ai_mapped = _timed(
        "dimension_mapping",
        lambda: (
            map_findings_to_dimensions(static_findings, map_cfg),
            map_findings_to_dimensions(ai_findings, map_cfg),
        ),
        timings,
    )
    aggregation = _timed(
        "aggregation",
        lambda: aggregate(static_mapped, ai_mapped, agg_cfg),
        timings,
    )
    scores = _timed(
        "scoring",
        lambda: calculate_scores(aggregation.findings, score_cfg),
        timings,
    )
    summary = _timed(
        "summary",
        lambda: generate_score_summary(
            scores, aggregation.findings, score_cfg
        ),
        timings,
    )

    logger.info(
        "event=review_scored input=%d final=%d total=%.1f grade=%s",
        aggregation.stats.total_input_findings,
        aggregation.stats.final_findings_count,
        scores.total_score,
        summary.grade,
    )
    return ReviewScoringResult(
        aggregation=aggregation,
        scores=scores,
        summary=summary,
        timings=tuple(timings),
    )
