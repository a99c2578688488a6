"""Pydantic models for review findings and aggregation output."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from reviewscore.constants import (
    DEFAULT_DIMENSION,
    Dimension,
    FindingSource,
    Severity,
)


class Finding(BaseModel):
    """A single code-review issue reported by one or more sources.

    Immutable: merges and remaps build new instances with
    ``model_copy(update=...)`` and never touch the input.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    file: str
    start_line: int | None = None  # None = file-level finding
    end_line: int | None = None
    severity: Severity
    dimension: Dimension | None = None  # None until mapped
    title: str
    evidence: str = ""
    suggestion: str = ""
    patch: str | None = None
    sources: list[str] = Field(default_factory=lambda: list[str]())
    confidence: float = 1.0

    @property
    def message(self) -> str:
        return self.title

    @property
    def effective_dimension(self) -> Dimension:
        """Dimension used for ranking and scoring."""
        return self.dimension or DEFAULT_DIMENSION


class SourcedFinding(BaseModel):
    """A finding tagged with the provider family that produced it."""

    model_config = ConfigDict(frozen=True)

    finding: Finding
    source: FindingSource


class FindingGroup(BaseModel):
    """An ordered cluster of similar findings destined for one merge.

    The first member is the cluster seed.
    """

    model_config = ConfigDict(frozen=True)

    members: list[SourcedFinding] = Field(min_length=1)

    @property
    def seed(self) -> SourcedFinding:
        return self.members[0]

    def __len__(self) -> int:
        return len(self.members)


class AggregationStats(BaseModel):
    """Per-stage counts and breakdowns of one aggregation run."""

    model_config = ConfigDict(frozen=True)

    total_input_findings: int = 0
    duplicates_removed: int = 0
    filtered_out: int = 0
    final_findings_count: int = 0
    findings_by_dimension: dict[Dimension, int] = Field(
        default_factory=lambda: dict[Dimension, int]()
    )
    findings_by_severity: dict[Severity, int] = Field(
        default_factory=lambda: dict[Severity, int]()
    )
    average_confidence: float = 0.0

    @property
    def merged_count(self) -> int:
        return self.total_input_findings - self.duplicates_removed

    @property
    def deduplication_rate(self) -> float:
        """Percentage of input findings collapsed into another."""
        if self.total_input_findings <= 0:
            return 0.0
        return self.duplicates_removed / self.total_input_findings * 100

    @property
    def filter_rate(self) -> float:
        """Percentage of merged findings dropped by rank & filter."""
        if self.merged_count <= 0:
            return 0.0
        return self.filtered_out / self.merged_count * 100


class AggregationResult(BaseModel):
    """Final findings plus the clusters and stats that produced them."""

    model_config = ConfigDict(frozen=True)

    findings: list[Finding] = Field(
        default_factory=lambda: list[Finding]()
    )
    stats: AggregationStats = Field(default_factory=AggregationStats)
    groups: list[FindingGroup] = Field(
        default_factory=lambda: list[FindingGroup]()
    )
