"""Typed structures shared across bot components."""

from __future__ import annotations

from typing import TypedDict

from ..models import GameRecord, Store


class StoreFetchResult(TypedDict):
    """Outcome of one store's search within a deal comparison."""

    store: Store
    records: list[GameRecord]
    error: str | None
    processing_time_ms: int
