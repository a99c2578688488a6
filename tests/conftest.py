"""Shared test fixtures — finding builders."""

from __future__ import annotations

import itertools
from collections.abc import Callable
from typing import Any

import pytest

from reviewscore.constants import Dimension, Severity
from reviewscore.findings.schemas import Finding

_ids = itertools.count(1)


def make_finding(**overrides: Any) -> Finding:
    """Build a Finding with sensible defaults; override any field."""
    fields: dict[str, Any] = {
        "id": f"F-{next(_ids):04d}",
        "file": "src/app.py",
        "start_line": 10,
        "end_line": 12,
        "severity": Severity.MAJOR,
        "dimension": Dimension.QUALITY,
        "title": "Unused variable result",
        "evidence": "result = compute()",
        "suggestion": "Remove the assignment",
        "sources": ["pylint"],
        "confidence": 0.8,
    }
    fields.update(overrides)
    return Finding(**fields)


@pytest.fixture
def finding_factory() -> Callable[..., Finding]:
    return make_finding
