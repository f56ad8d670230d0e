"""Core data models for scoreid.

Records mirror the persisted camelCase JSON shape through ``from_dict`` /
``to_dict``; unknown keys are carried in ``extra`` so a load/save cycle never
drops data.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 string, epoch milliseconds or datetime (UTC if naive)."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        parsed = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)
    else:
        raise ValueError(f"Invalid timestamp: {value!r}")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    utc = value.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def _list_field(data: dict[str, Any], key: str, owner: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{owner} field {key!r} must be a list, got {type(value).__name__}")
    return list(value)


@dataclass(slots=True)
class Piece:
    """A free-text piece reference as typed by the user."""

    title: str
    composer: Optional[str] = None
    extra: dict[str, Any] = field(default_factory=dict)

    _KEYS = ("title", "composer")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Piece":
        if not isinstance(data, dict):
            raise ValueError(f"Piece must be an object, got {type(data).__name__}")
        return cls(
            title=str(data.get("title") or ""),
            composer=_optional_str(data.get("composer")),
            extra={key: value for key, value in data.items() if key not in cls._KEYS},
        )

    def to_dict(self) -> dict[str, Any]:
        payload = dict(self.extra)
        payload["title"] = self.title
        payload["composer"] = self.composer
        return payload


@dataclass(slots=True)
class LogbookEntry:
    """A single practice-log entry.

    ``id`` is immutable; piece titles/composers change only through an
    explicit bulk rename.
    """

    id: str
    timestamp: datetime
    duration: int
    pieces: list[Piece] = field(default_factory=list)
    notes: Optional[str] = None
    mood: Optional[str] = None
    type: Optional[str] = None
    instrument: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # Linked score (optional)
    score_id: Optional[str] = None
    score_title: Optional[str] = None
    score_composer: Optional[str] = None

    tags: list[str] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)

    _KEYS = (
        "id",
        "timestamp",
        "duration",
        "pieces",
        "notes",
        "mood",
        "type",
        "instrument",
        "createdAt",
        "updatedAt",
        "scoreId",
        "scoreTitle",
        "scoreComposer",
        "tags",
    )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LogbookEntry":
        timestamp = parse_timestamp(data.get("timestamp"))
        if timestamp is None:
            raise ValueError(f"Logbook entry {data.get('id')!r} has no timestamp")
        return cls(
            id=str(data.get("id") or ""),
            timestamp=timestamp,
            duration=int(data.get("duration") or 0),
            pieces=[Piece.from_dict(piece) for piece in _list_field(data, "pieces", "Logbook entry")],
            notes=_optional_str(data.get("notes")),
            mood=_optional_str(data.get("mood")),
            type=_optional_str(data.get("type")),
            instrument=_optional_str(data.get("instrument")),
            created_at=parse_timestamp(data.get("createdAt")),
            updated_at=parse_timestamp(data.get("updatedAt")),
            score_id=_optional_str(data.get("scoreId")),
            score_title=_optional_str(data.get("scoreTitle")),
            score_composer=_optional_str(data.get("scoreComposer")),
            tags=_list_field(data, "tags", "Logbook entry"),
            extra={key: value for key, value in data.items() if key not in cls._KEYS},
        )

    def to_dict(self) -> dict[str, Any]:
        payload = dict(self.extra)
        payload.update(
            {
                "id": self.id,
                "timestamp": format_timestamp(self.timestamp),
                "duration": self.duration,
                "pieces": [piece.to_dict() for piece in self.pieces],
                "notes": self.notes,
                "mood": self.mood,
                "type": self.type,
                "instrument": self.instrument,
                "createdAt": format_timestamp(self.created_at),
                "updatedAt": format_timestamp(self.updated_at),
                "tags": list(self.tags),
            }
        )
        if self.score_id is not None:
            payload["scoreId"] = self.score_id
        if self.score_title is not None:
            payload["scoreTitle"] = self.score_title
        if self.score_composer is not None:
            payload["scoreComposer"] = self.score_composer
        return payload


@dataclass(slots=True)
class RepertoireItem:
    """A piece in the user's repertoire with aggregate practice statistics."""

    score_id: str
    title: str
    composer: Optional[str] = None
    practice_count: int = 0
    total_practice_time: int = 0
    last_practiced: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    personal_notes: Optional[str] = None
    reference_links: list[str] = field(default_factory=list)
    status: str = "planned"
    extra: dict[str, Any] = field(default_factory=dict)

    _KEYS = (
        "scoreId",
        "title",
        "composer",
        "practiceCount",
        "totalPracticeTime",
        "lastPracticed",
        "createdAt",
        "updatedAt",
        "personalNotes",
        "referenceLinks",
        "status",
    )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RepertoireItem":
        return cls(
            score_id=str(data.get("scoreId") or ""),
            title=str(data.get("title") or ""),
            composer=_optional_str(data.get("composer")),
            practice_count=int(data.get("practiceCount") or 0),
            total_practice_time=int(data.get("totalPracticeTime") or 0),
            last_practiced=parse_timestamp(data.get("lastPracticed")),
            created_at=parse_timestamp(data.get("createdAt")),
            updated_at=parse_timestamp(data.get("updatedAt")),
            personal_notes=_optional_str(data.get("personalNotes")),
            reference_links=_list_field(data, "referenceLinks", "Repertoire item"),
            status=str(data.get("status") or "planned"),
            extra={key: value for key, value in data.items() if key not in cls._KEYS},
        )

    def to_dict(self) -> dict[str, Any]:
        payload = dict(self.extra)
        payload.update(
            {
                "scoreId": self.score_id,
                "title": self.title,
                "composer": self.composer,
                "practiceCount": self.practice_count,
                "totalPracticeTime": self.total_practice_time,
                "lastPracticed": format_timestamp(self.last_practiced),
                "createdAt": format_timestamp(self.created_at),
                "updatedAt": format_timestamp(self.updated_at),
                "personalNotes": self.personal_notes,
                "referenceLinks": list(self.reference_links),
                "status": self.status,
            }
        )
        return payload


@dataclass(frozen=True, slots=True)
class DuplicateMatch:
    """A probable duplicate found by fuzzy matching (computed, never persisted)."""

    score_id: str
    title: str
    composer: str
    similarity: float
    confidence: str  # "high" | "medium" | "low"

    def to_dict(self) -> dict[str, Any]:
        return {
            "scoreId": self.score_id,
            "title": self.title,
            "composer": self.composer,
            "similarity": self.similarity,
            "confidence": self.confidence,
        }
