"""Convert loaded JSON records into models."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from scoreid.core.models import LogbookEntry, RepertoireItem
from scoreid.errors import InvalidRecordError

T = TypeVar("T")


def _convert(kind: str, records: list[dict[str, Any]], factory: Callable[[dict[str, Any]], T]) -> list[T]:
    converted = []
    for index, record in enumerate(records):
        try:
            converted.append(factory(record))
        except (TypeError, ValueError) as exc:
            record_id = record.get("id") or record.get("scoreId")
            raise InvalidRecordError(kind, index, str(exc), record_id=record_id) from exc
    return converted


def entries_from_records(records: list[dict[str, Any]]) -> list[LogbookEntry]:
    return _convert("logbook entry", records, LogbookEntry.from_dict)


def repertoire_from_records(records: list[dict[str, Any]]) -> list[RepertoireItem]:
    return _convert("repertoire item", records, RepertoireItem.from_dict)
