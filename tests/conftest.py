"""Shared test fixtures for the responsehelper test suite."""

from __future__ import annotations

from typing import Any

import pytest

from responsehelper.builder import ResponseBuilder
from responsehelper.config.settings import DetailsPolicy
from responsehelper.helper import ResponseHelper


# ---------------------------------------------------------------------------
# In-memory context
# ---------------------------------------------------------------------------


class RecordingContext:
    """``ResponseContext`` that records writes instead of sending them."""

    _UNSET = object()

    def __init__(self, meta: Any = _UNSET) -> None:
        self._meta = meta
        self.writes: list[tuple[int, dict]] = []

    def get_meta(self) -> Any | None:
        return None if self._meta is self._UNSET else self._meta

    def json(self, status_code: int, content: dict) -> tuple[int, dict]:
        self.writes.append((status_code, content))
        return status_code, content

    @property
    def status_code(self) -> int:
        assert len(self.writes) == 1, f"expected one write, got {len(self.writes)}"
        return self.writes[0][0]

    @property
    def body(self) -> dict:
        assert len(self.writes) == 1, f"expected one write, got {len(self.writes)}"
        return self.writes[0][1]


@pytest.fixture
def make_context():
    """Factory for recording contexts, optionally pre-seeded with meta."""
    return RecordingContext


@pytest.fixture
def builder() -> ResponseBuilder:
    return ResponseBuilder()


@pytest.fixture
def redacting_builder() -> ResponseBuilder:
    return ResponseBuilder(
        details_policy=DetailsPolicy.REDACT, redacted_details="Something went wrong"
    )


@pytest.fixture
def helper(builder: ResponseBuilder) -> ResponseHelper:
    return ResponseHelper(builder)

