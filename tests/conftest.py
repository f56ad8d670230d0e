"""Shared fixtures: factories for logbook entries and repertoire items."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable

import pytest

from scoreid.core.models import LogbookEntry, Piece, RepertoireItem


def utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


@pytest.fixture
def make_entry() -> Callable[..., LogbookEntry]:
    """Build a LogbookEntry with sensible defaults; keyword overrides win."""

    def _make(entry_id: str = "entry-1", **overrides: Any) -> LogbookEntry:
        fields: dict[str, Any] = {
            "id": entry_id,
            "timestamp": utc(2025, 3, 1, 10, 0, 0),
            "duration": 1800,
            "pieces": [Piece("Moonlight Sonata", "Beethoven")],
            "type": "practice",
            "instrument": "piano",
            "created_at": utc(2025, 3, 1, 10, 30, 0),
            "updated_at": utc(2025, 3, 1, 10, 30, 0),
        }
        fields.update(overrides)
        return LogbookEntry(**fields)

    return _make


@pytest.fixture
def make_item() -> Callable[..., RepertoireItem]:
    """Build a RepertoireItem with sensible defaults; keyword overrides win."""

    def _make(score_id: str = "moonlight sonata-beethoven", **overrides: Any) -> RepertoireItem:
        fields: dict[str, Any] = {
            "score_id": score_id,
            "title": "Moonlight Sonata",
            "composer": "Beethoven",
            "created_at": utc(2025, 1, 1),
            "updated_at": utc(2025, 1, 1),
        }
        fields.update(overrides)
        return RepertoireItem(**fields)

    return _make


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, Any], Path]:
    """Write a JSON document under tmp_path and return its path."""

    def _write(name: str, payload: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write
