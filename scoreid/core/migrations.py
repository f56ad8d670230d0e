"""Score id migrations over persisted JSON records.

Every function here is idempotent and returns new records; the input
dictionaries are never modified.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import re
from typing import Any, Optional

from .identity.score_id import generate_score_id, is_canonical_score_id, normalize_existing_score_id

logger = logging.getLogger(__name__)

_CORRUPTED_CANONICAL = re.compile(r"^(score_[a-z0-9]+(?:[-_][a-z0-9]+)*)-unknown$", flags=re.IGNORECASE)


@dataclass(frozen=True)
class MigrationStats:
    entries_normalized: int = 0
    pieces_normalized: int = 0
    score_ids_normalized: int = 0


def _normalize_piece(piece: Any) -> Any:
    if isinstance(piece, dict) and isinstance(piece.get("title"), str) and piece["title"]:
        composer = piece.get("composer") if isinstance(piece.get("composer"), str) else None
        return {**piece, "id": generate_score_id(piece["title"], composer)}
    return piece


def normalize_logbook_records(records: list[dict[str, Any]]) -> tuple[list[dict[str, Any]], MigrationStats]:
    """Bring piece ids and ``scoreId`` fields of logbook records to the current form.

    Piece ids are regenerated from title and composer. Existing ``scoreId``
    values are re-derived; entries carrying only the legacy
    ``scoreTitle``/``scoreComposer`` pair get a ``scoreId`` built from them.
    """
    entries_normalized = 0
    pieces_normalized = 0
    score_ids_normalized = 0
    migrated: list[dict[str, Any]] = []

    for record in records:
        entry = dict(record)
        changed = False

        pieces = entry.get("pieces")
        if isinstance(pieces, list):
            new_pieces = [_normalize_piece(piece) for piece in pieces]
            for old, new in zip(pieces, new_pieces):
                if new is not old and old.get("id") != new["id"]:
                    pieces_normalized += 1
                    changed = True
            entry["pieces"] = new_pieces

        score_id = entry.get("scoreId")
        if isinstance(score_id, str) and score_id:
            normalized = normalize_existing_score_id(score_id)
            if normalized != score_id:
                entry["scoreId"] = normalized
                score_ids_normalized += 1
                changed = True
        elif isinstance(entry.get("scoreTitle"), str) and entry["scoreTitle"]:
            composer = entry.get("scoreComposer")
            entry["scoreId"] = generate_score_id(entry["scoreTitle"], composer if isinstance(composer, str) else None)
            score_ids_normalized += 1
            changed = True

        if changed:
            entries_normalized += 1
        migrated.append(entry)

    stats = MigrationStats(entries_normalized, pieces_normalized, score_ids_normalized)
    logger.info(
        "Normalized %d logbook entries, %d pieces, %d score ids",
        stats.entries_normalized,
        stats.pieces_normalized,
        stats.score_ids_normalized,
    )
    return migrated, stats


def normalize_score_ids_in_object(obj: Any) -> Any:
    """Recursively normalize every ``scoreId`` string and ``pieces`` list in ``obj``."""
    if isinstance(obj, list):
        return [normalize_score_ids_in_object(item) for item in obj]
    if not isinstance(obj, dict):
        return obj

    normalized: dict[str, Any] = {}
    for key, value in obj.items():
        if key == "scoreId" and isinstance(value, str):
            normalized[key] = normalize_existing_score_id(value)
        elif key == "pieces" and isinstance(value, list):
            normalized[key] = [_normalize_piece(piece) for piece in value]
        else:
            normalized[key] = normalize_score_ids_in_object(value)
    return normalized


def extract_corrupted_canonical_id(score_id: Any) -> Optional[str]:
    """Return the catalog id hidden in a ``score_<slug>-unknown`` value, if any."""
    if not isinstance(score_id, str) or not score_id:
        return None
    match = _CORRUPTED_CANONICAL.match(score_id)
    if match and is_canonical_score_id(match.group(1)):
        return match.group(1)
    return None


def repair_canonical_score_ids(records: list[dict[str, Any]]) -> tuple[list[dict[str, Any]], int]:
    """Strip the ``-unknown`` suffix that older builds appended to catalog ids.

    Covers ``scoreId``, ``score_id`` and piece ``id`` fields. Returns the
    repaired records and the number of fields changed.
    """
    repairs = 0
    repaired: list[dict[str, Any]] = []

    for record in records:
        entry = dict(record)
        for key in ("scoreId", "score_id"):
            original = extract_corrupted_canonical_id(entry.get(key))
            if original:
                logger.debug("Repairing %s %r -> %r", key, entry[key], original)
                entry[key] = original
                repairs += 1

        pieces = entry.get("pieces")
        if isinstance(pieces, list):
            new_pieces = []
            for piece in pieces:
                original = extract_corrupted_canonical_id(piece.get("id")) if isinstance(piece, dict) else None
                if original:
                    logger.debug("Repairing piece id %r -> %r", piece["id"], original)
                    piece = {**piece, "id": original}
                    repairs += 1
                new_pieces.append(piece)
            entry["pieces"] = new_pieces

        repaired.append(entry)

    if repairs:
        logger.info("Repaired %d corrupted catalog score ids", repairs)
    return repaired, repairs
