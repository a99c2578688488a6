"""Finding aggregation — clustering, merging, ranking."""

from reviewscore.aggregation.aggregator import (
    aggregate,
    build_stats,
    rank_and_filter,
)
from reviewscore.aggregation.clustering import (
    group_similar_findings,
    tag_findings,
)
from reviewscore.aggregation.config import (
    AGGREGATION_PRESETS,
    AggregationConfig,
    default_config,
    permissive_config,
    strict_config,
)
from reviewscore.aggregation.merge import merge_group
from reviewscore.aggregation.similarity import (
    are_similar,
    message_similarity,
)

__all__ = [
    "AGGREGATION_PRESETS",
    "AggregationConfig",
    "aggregate",
    "are_similar",
    "build_stats",
    "default_config",
    "group_similar_findings",
    "merge_group",
    "message_similarity",
    "permissive_config",
    "rank_and_filter",
    "strict_config",
    "tag_findings",
]
