"""Tests for keyword-based dimension mapping."""

from __future__ import annotations

from reviewscore.constants import Dimension
from reviewscore.scoring.config import DimensionMappingConfig
from reviewscore.scoring.mapping import (
    determine_best_dimension,
    map_findings_to_dimensions,
)
from tests.conftest import make_finding


def test_existing_dimension_is_kept() -> None:
    finding = make_finding(
        dimension=Dimension.PERFORMANCE, title="SQL injection risk"
    )
    mapped = map_findings_to_dimensions([finding], DimensionMappingConfig())
    assert mapped[0] is finding


def test_missing_dimension_is_inferred() -> None:
    finding = make_finding(
        dimension=None,
        file="db.py",
        title="Possible SQL injection vulnerability",
    )
    mapped = map_findings_to_dimensions([finding], DimensionMappingConfig())
    assert mapped[0].dimension is Dimension.SECURITY
    assert finding.dimension is None


def test_no_keyword_match_uses_default() -> None:
    finding = make_finding(dimension=None, file="x.py", title="Rename it")
    cfg = DimensionMappingConfig()
    assert determine_best_dimension(finding, cfg) is Dimension.QUALITY


def test_tie_uses_default() -> None:
    finding = make_finding(dimension=None, file="x.py", title="slow test")
    cfg = DimensionMappingConfig(default_dimension=Dimension.MAINTAINABILITY)
    assert determine_best_dimension(finding, cfg) is Dimension.MAINTAINABILITY


def test_file_path_contributes_keywords() -> None:
    finding = make_finding(
        dimension=None, file="tests/test_orders.py", title="Fix me"
    )
    cfg = DimensionMappingConfig()
    assert determine_best_dimension(finding, cfg) is Dimension.TEST_COVERAGE


def test_force_remapping_recomputes() -> None:
    finding = make_finding(
        dimension=Dimension.QUALITY,
        file="x.py",
        title="Memory leak in cache layer",
    )
    cfg = DimensionMappingConfig(force_remapping=True)
    mapped = map_findings_to_dimensions([finding], cfg)
    assert mapped[0].dimension is Dimension.PERFORMANCE
    assert mapped[0].id == finding.id


def test_custom_keyword_table() -> None:
    cfg = DimensionMappingConfig(
        dimension_keywords={
            Dimension.SECURITY: ("token",),
            Dimension.PERFORMANCE: ("loop", "cache"),
        },
    )
    finding = make_finding(
        dimension=None, file="x.py", title="token cache loop"
    )
    assert determine_best_dimension(finding, cfg) is Dimension.PERFORMANCE
