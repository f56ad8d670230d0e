"""Duplicate detection and cleanup for practice-log entries.

Three independent checks run per entry, in order; the first that fires wins:

1. identical content signature (confidence 0.95)
2. identical entry id (confidence 1.0; should never happen)
3. same 2-minute timestamp bucket, same pieces, durations within 30s
   (confidence 0.85)

Checks 1 and 3 overlap in coverage but their confidences are shown to users
separately, so both are kept.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
import logging
import math
from typing import Iterable, Optional, Sequence

from .identity.normalize import normalize_composer, normalize_title
from .models import LogbookEntry, Piece

logger = logging.getLogger(__name__)

DURATION_BUCKET_SECONDS = 5 * 60
TIME_BUCKET_SECONDS = 2 * 60
NEAR_DUPLICATE_DURATION_SECONDS = 30

SIGNATURE_CONFIDENCE = 0.95
SAME_ID_CONFIDENCE = 1.0
NEAR_TIMESTAMP_CONFIDENCE = 0.85

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class DuplicateEntry:
    """An entry judged to duplicate an earlier one."""

    entry: LogbookEntry
    duplicate_of: str
    confidence: float
    reason: str
    index: Optional[int] = None
    original_index: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "entryId": self.entry.id,
            "duplicateOf": self.duplicate_of,
            "confidence": self.confidence,
            "reason": self.reason,
        }


@dataclass(frozen=True)
class CleanupConflict:
    """Duplicates that could not be merged automatically."""

    ids: tuple[str, ...]
    reason: str


@dataclass(frozen=True)
class CleanupResult:
    duplicates_found: int
    duplicates_removed: int
    entries_preserved: int
    entries: list[LogbookEntry] = field(default_factory=list)
    conflicts: list[CleanupConflict] = field(default_factory=list)


@dataclass(frozen=True)
class DuplicateReport:
    duplicates: list[DuplicateEntry]
    total_entries: int
    duplicates_found: int
    high_confidence: int
    medium_confidence: int
    low_confidence: int


def _utc(value: datetime) -> datetime:
    return value.astimezone(timezone.utc)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _pieces_key(pieces: Iterable[Piece]) -> str:
    return "|".join(
        sorted(f"{normalize_title(piece.title)}-{normalize_composer(piece.composer)}" for piece in pieces)
    )


def _exact_pieces_key(pieces: Iterable[Piece]) -> str:
    return "|".join(sorted(f"{piece.title}-{piece.composer or ''}" for piece in pieces))


def generate_content_signature(entry: LogbookEntry) -> str:
    """Signature of what was practiced, independent of the entry id.

    Combines the practice day (UTC), the duration rounded to the nearest
    5 minutes, the entry type, the instrument and the sorted normalized pieces.
    """
    date_key = _utc(entry.timestamp).date().isoformat()
    duration_key = _round_half_up(entry.duration / DURATION_BUCKET_SECONDS) * DURATION_BUCKET_SECONDS
    type_key = (entry.type or "practice").lower()
    instrument_key = (entry.instrument or "unknown").lower()
    return f"{date_key}_{duration_key}_{type_key}_{instrument_key}_{_pieces_key(entry.pieces)}"


def _time_signature(entry: LogbookEntry) -> str:
    elapsed = (_utc(entry.timestamp) - _EPOCH).total_seconds()
    bucket = math.floor(elapsed / TIME_BUCKET_SECONDS)
    return f"{bucket}_{_exact_pieces_key(entry.pieces)}"


def detect_duplicates(entries: Sequence[LogbookEntry]) -> list[DuplicateEntry]:
    """Find entries that duplicate an earlier entry in the sequence.

    Flagged entries never act as originals for the content checks, but every
    entry claims its id, so a later entry reusing that id is always reported.
    """
    duplicates: list[DuplicateEntry] = []
    signatures: dict[str, int] = {}
    time_signatures: dict[str, int] = {}
    first_index_by_id: dict[str, int] = {}

    for index, entry in enumerate(entries):
        first_index = first_index_by_id.setdefault(entry.id, index)

        signature = generate_content_signature(entry)
        original_index = signatures.get(signature)
        if original_index is not None:
            original = entries[original_index]
            duplicates.append(
                DuplicateEntry(
                    entry,
                    original.id,
                    SIGNATURE_CONFIDENCE,
                    "Identical content signature",
                    index,
                    original_index,
                )
            )
            logger.debug("Entry %s duplicates %s by signature", entry.id, original.id)
            continue

        if first_index != index:
            duplicates.append(
                DuplicateEntry(entry, entry.id, SAME_ID_CONFIDENCE, "Identical ID", index, first_index)
            )
            logger.debug("Entry id %s appears more than once", entry.id)
            continue

        time_signature = _time_signature(entry)
        original_index = time_signatures.get(time_signature)
        if (
            original_index is not None
            and abs(entry.duration - entries[original_index].duration) <= NEAR_DUPLICATE_DURATION_SECONDS
        ):
            original = entries[original_index]
            duplicates.append(
                DuplicateEntry(
                    entry,
                    original.id,
                    NEAR_TIMESTAMP_CONFIDENCE,
                    "Near-identical timestamp and pieces",
                    index,
                    original_index,
                )
            )
            logger.debug("Entry %s duplicates %s by timestamp", entry.id, original.id)
            continue

        signatures[signature] = index
        time_signatures[time_signature] = index

    return duplicates


def score_entry_completeness(entry: LogbookEntry) -> float:
    """Weighted count of populated fields; higher means more worth keeping."""
    score = 0.0
    score += 2 if entry.pieces else 0
    score += 2 if entry.duration > 0 else 0

    for value in (
        entry.notes,
        entry.mood,
        entry.type,
        entry.instrument,
        entry.score_id,
        entry.score_title,
        entry.score_composer,
    ):
        score += 1 if value else 0

    for piece in entry.pieces:
        score += 0.5 if piece.title else 0
        score += 0.5 if piece.composer else 0
    return score


def _last_touched(entry: LogbookEntry) -> datetime:
    return entry.updated_at or entry.created_at or _EPOCH


def choose_best_entry(original: LogbookEntry, duplicate: LogbookEntry) -> LogbookEntry:
    """Pick the entry to keep: most complete first, then most recently updated."""
    original_score = score_entry_completeness(original)
    duplicate_score = score_entry_completeness(duplicate)
    if original_score != duplicate_score:
        return original if original_score > duplicate_score else duplicate
    return duplicate if _last_touched(duplicate) > _last_touched(original) else original


def _resolve_original(
    entries: Sequence[LogbookEntry],
    duplicate: DuplicateEntry,
    member_index: int,
) -> Optional[int]:
    index = duplicate.original_index
    if index is not None and 0 <= index < len(entries) and entries[index].id == duplicate.duplicate_of:
        return index
    # records without a usable index: first other entry carrying the id
    for index, entry in enumerate(entries):
        if entry.id == duplicate.duplicate_of and index != member_index:
            return index
    return None


def _index_of(entries: Sequence[LogbookEntry], duplicate: DuplicateEntry) -> Optional[int]:
    if duplicate.index is not None:
        return duplicate.index
    for index, entry in enumerate(entries):
        if entry is duplicate.entry:
            return index
    for index, entry in enumerate(entries):
        if entry == duplicate.entry:
            return index
    return None


class _Groups:
    """Disjoint sets of entry indexes; the root of a set is its lowest index."""

    def __init__(self) -> None:
        self._parent: dict[int, int] = {}

    def find(self, index: int) -> int:
        self._parent.setdefault(index, index)
        while self._parent[index] != index:
            self._parent[index] = self._parent[self._parent[index]]
            index = self._parent[index]
        return index

    def union(self, first: int, second: int) -> None:
        first_root, second_root = self.find(first), self.find(second)
        if first_root != second_root:
            self._parent[max(first_root, second_root)] = min(first_root, second_root)

    def components(self) -> list[list[int]]:
        grouped: dict[int, list[int]] = {}
        for index in sorted(self._parent):
            grouped.setdefault(self.find(index), []).append(index)
        return list(grouped.values())


def cleanup_duplicates(
    entries: Sequence[LogbookEntry],
    duplicates: Optional[Sequence[DuplicateEntry]] = None,
) -> CleanupResult:
    """Collapse duplicate groups, keeping the best entry of each.

    ``duplicates`` defaults to :func:`detect_duplicates` over ``entries``; a
    caller may pass records from an earlier review pass instead. Pairs that
    share an entry are merged into one group, so every group keeps exactly
    one entry. A duplicate whose original is no longer present is reported as
    a conflict and left untouched.
    """
    if duplicates is None:
        duplicates = detect_duplicates(entries)

    if not duplicates:
        return CleanupResult(0, 0, len(entries), entries=list(entries))

    groups = _Groups()
    unresolved: dict[str, list[DuplicateEntry]] = {}

    for duplicate in duplicates:
        member_index = _index_of(entries, duplicate)
        if member_index is None:
            logger.debug("Duplicate %s is not in the entry list", duplicate.entry.id)
            continue
        original_index = _resolve_original(entries, duplicate, member_index)
        if original_index is None:
            unresolved.setdefault(duplicate.duplicate_of, []).append(duplicate)
            continue
        groups.union(original_index, member_index)

    conflicts = [
        CleanupConflict(
            ids=tuple(duplicate.entry.id for duplicate in group),
            reason=f"Original entry {original_id} not found",
        )
        for original_id, group in unresolved.items()
    ]

    to_remove: set[int] = set()
    for component in groups.components():
        best_index = component[0]
        for index in component[1:]:
            best = choose_best_entry(entries[best_index], entries[index])
            if best is entries[index]:
                best_index = index
        to_remove.update(index for index in component if index != best_index)

    kept = [entry for index, entry in enumerate(entries) if index not in to_remove]
    result = CleanupResult(
        duplicates_found=len(duplicates),
        duplicates_removed=len(to_remove),
        entries_preserved=len(kept),
        entries=kept,
        conflicts=conflicts,
    )

    logger.info(
        "Found %d duplicates, removing %d entries, preserving %d",
        result.duplicates_found,
        result.duplicates_removed,
        result.entries_preserved,
    )
    if conflicts:
        logger.warning("%d duplicate conflicts need manual resolution", len(conflicts))
    return result


def remove_duplicates(entries: Sequence[LogbookEntry]) -> list[LogbookEntry]:
    """Return ``entries`` without duplicates, keeping the best of each group."""
    return cleanup_duplicates(entries).entries


def get_duplicate_report(entries: Sequence[LogbookEntry]) -> DuplicateReport:
    """Duplicates plus confidence buckets for user review."""
    duplicates = detect_duplicates(entries)
    return DuplicateReport(
        duplicates=duplicates,
        total_entries=len(entries),
        duplicates_found=len(duplicates),
        high_confidence=sum(1 for d in duplicates if d.confidence >= 0.9),
        medium_confidence=sum(1 for d in duplicates if 0.7 <= d.confidence < 0.9),
        low_confidence=sum(1 for d in duplicates if d.confidence < 0.7),
    )


def rename_piece(
    entries: Sequence[LogbookEntry],
    old_title: str,
    new_title: str,
    *,
    composer: Optional[str] = None,
    new_composer: Optional[str] = None,
    now: Optional[datetime] = None,
) -> tuple[list[LogbookEntry], int]:
    """Rename a piece across all entries.

    Pieces match on normalized title, and on normalized composer when
    ``composer`` is given. Returns the new entry list and the number of
    entries changed; entry ids are never touched.
    """
    target_title = normalize_title(old_title)
    target_composer = normalize_composer(composer) if composer is not None else None
    touched_at = now or datetime.now(timezone.utc)

    def matches(piece: Piece) -> bool:
        if normalize_title(piece.title) != target_title:
            return False
        return target_composer is None or normalize_composer(piece.composer) == target_composer

    renamed: list[LogbookEntry] = []
    changed = 0
    for entry in entries:
        if not any(matches(piece) for piece in entry.pieces):
            renamed.append(entry)
            continue
        pieces = [
            replace(
                piece,
                title=new_title,
                composer=new_composer if new_composer is not None else piece.composer,
                extra=dict(piece.extra),
            )
            if matches(piece)
            else piece
            for piece in entry.pieces
        ]
        renamed.append(replace(entry, pieces=pieces, updated_at=touched_at))
        changed += 1

    logger.info("Renamed %r to %r in %d entries", old_title, new_title, changed)
    return renamed, changed
