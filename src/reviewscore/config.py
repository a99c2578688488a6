"""Environment-based configuration for the scoring pipeline.

Only the pipeline glue reads ``Settings``; aggregation and scoring take
explicit config values.
"""

from __future__ import annotations

import logging
import math
from typing import Annotated, Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode

from reviewscore.aggregation.config import (
    AGGREGATION_PRESETS,
    AggregationConfig,
)
from reviewscore.constants import Dimension
from reviewscore.scoring.config import SCORING_PRESETS, ScoringConfig

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Reads from .env file and environment variables."""

    # Logging
    log_level: str = "INFO"

    # Presets
    aggregation_preset: str = "default"
    scoring_preset: str = "default"

    # External weight override (empty = preset weights)
    dimension_weights: Annotated[
        dict[Dimension, float], NoDecode
    ] = {}

    @field_validator("aggregation_preset", "scoring_preset", mode="before")
    @classmethod
    def _normalize_preset(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("aggregation_preset")
    @classmethod
    def _validate_aggregation_preset(cls, v: str) -> str:
        if v not in AGGREGATION_PRESETS:
            raise ValueError(
                f"unknown aggregation preset '{v}'; expected one of "
                + ", ".join(AGGREGATION_PRESETS)
            )
        return v

    @field_validator("scoring_preset")
    @classmethod
    def _validate_scoring_preset(cls, v: str) -> str:
        if v not in SCORING_PRESETS:
            raise ValueError(
                f"unknown scoring preset '{v}'; expected one of "
                + ", ".join(SCORING_PRESETS)
            )
        return v

    @field_validator("dimension_weights", mode="before")
    @classmethod
    def _parse_weights(cls, v: Any) -> Any:
        """Accept ``SECURITY=0.3,QUALITY=0.2`` strings or a mapping."""
        if isinstance(v, str):
            parsed: dict[str, str] = {}
            for pair in v.split(","):
                if not pair.strip():
                    continue
                name, _, value = pair.partition("=")
                parsed[name.strip().upper()] = value.strip()
            return parsed
        return v

    @field_validator("dimension_weights")
    @classmethod
    def _check_weight_sum(
        cls, v: dict[Dimension, float]
    ) -> dict[Dimension, float]:
        if v and not math.isclose(sum(v.values()), 1.0, abs_tol=1e-6):
            logger.warning(
                "Dimension weights sum to %.3f, not 1.0: %s",
                sum(v.values()),
                ", ".join(f"{d}={w}" for d, w in v.items()),
            )
        return v

    def aggregation_config(self) -> AggregationConfig:
        """Fresh config built from the selected preset."""
        return AGGREGATION_PRESETS[self.aggregation_preset]()

    def scoring_config(self) -> ScoringConfig:
        """Fresh config from the preset, with any weight override."""
        config = SCORING_PRESETS[self.scoring_preset]()
        if self.dimension_weights:
            return config.with_weights(self.dimension_weights)
        return config

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "",
        "extra": "ignore",
    }
