"""Repertoire deduplication and sync merging.

Duplicate repertoire items are merged, not discarded: the kept item carries
the summed practice statistics of its whole group.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
import logging
from typing import Iterable, Optional, Sequence

from .identity.score_id import is_same_score, normalize_existing_score_id
from .models import RepertoireItem

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_FAR_FUTURE = datetime.max.replace(tzinfo=timezone.utc)


@dataclass(frozen=True)
class RepertoireCleanupResult:
    cleaned: list[RepertoireItem] = field(default_factory=list)
    duplicates: list[RepertoireItem] = field(default_factory=list)


def _keeper_sort_key(item: RepertoireItem) -> tuple:
    # most practice time, then count, then most recent practice, then oldest
    created = item.created_at or _FAR_FUTURE
    return (
        -item.total_practice_time,
        -item.practice_count,
        -(item.last_practiced or _EPOCH).timestamp(),
        created,
    )


def _latest(values: Iterable[Optional[datetime]]) -> Optional[datetime]:
    present = [value for value in values if value is not None]
    return max(present) if present else None


def _earliest(values: Iterable[Optional[datetime]]) -> Optional[datetime]:
    present = [value for value in values if value is not None]
    return min(present) if present else None


def merge_repertoire_items(items: Sequence[RepertoireItem]) -> RepertoireItem:
    """Merge a group of duplicate items into one.

    The keeper supplies title, composer, notes and status; practice counts and
    times are summed, ``last_practiced`` is the latest across the group and
    reference links are unioned in order.
    """
    if not items:
        raise ValueError("Cannot merge an empty repertoire group")

    keeper = sorted(items, key=_keeper_sort_key)[0]
    links: list[str] = []
    for item in [keeper, *[other for other in items if other is not keeper]]:
        for link in item.reference_links:
            if link not in links:
                links.append(link)

    return replace(
        keeper,
        score_id=normalize_existing_score_id(keeper.score_id),
        practice_count=sum(item.practice_count for item in items),
        total_practice_time=sum(item.total_practice_time for item in items),
        last_practiced=_latest(item.last_practiced for item in items),
        created_at=_earliest(item.created_at for item in items),
        updated_at=_latest(item.updated_at for item in items),
        reference_links=links,
        extra=dict(keeper.extra),
    )


def cleanup_duplicate_repertoire(items: Sequence[RepertoireItem]) -> RepertoireCleanupResult:
    """Collapse items whose score ids name the same piece.

    Each unprocessed item seeds a group of the later items that match it
    directly; matches of matches are not followed.
    """
    processed: set[int] = set()
    cleaned: list[RepertoireItem] = []
    duplicates: list[RepertoireItem] = []

    for seed_index, seed in enumerate(items):
        if seed_index in processed:
            continue
        processed.add(seed_index)

        group = [seed]
        for index in range(seed_index + 1, len(items)):
            if index in processed:
                continue
            if is_same_score(seed.score_id, items[index].score_id):
                group.append(items[index])
                processed.add(index)

        if len(group) == 1:
            cleaned.append(seed)
            continue

        merged = merge_repertoire_items(group)
        cleaned.append(merged)
        keeper = sorted(group, key=_keeper_sort_key)[0]
        duplicates.extend(item for item in group if item is not keeper)
        logger.debug("Merged %d repertoire items into %s", len(group), merged.score_id)

    if duplicates:
        logger.info(
            "Merged %d duplicate repertoire items, %d items remain",
            len(duplicates),
            len(cleaned),
        )
    return RepertoireCleanupResult(cleaned=cleaned, duplicates=duplicates)


def _updated(item: RepertoireItem) -> datetime:
    return item.updated_at or item.created_at or _EPOCH


def index_repertoire(items: Iterable[RepertoireItem]) -> dict[str, RepertoireItem]:
    """Key items by normalized score id; the most recently updated item wins."""
    indexed: dict[str, RepertoireItem] = {}
    for item in items:
        key = normalize_existing_score_id(item.score_id)
        current = indexed.get(key)
        if current is None or _updated(item) > _updated(current):
            indexed[key] = item
    return indexed


def merge_incoming_repertoire(
    existing: Iterable[RepertoireItem],
    incoming: Iterable[RepertoireItem],
) -> list[RepertoireItem]:
    """Last-write-wins merge of a synced repertoire into the local one.

    Items present on one side only are kept. When both sides hold the same
    piece, the incoming item replaces the local one unless the local copy was
    updated strictly later.
    """
    merged = index_repertoire(existing)
    replaced = 0
    for key, item in index_repertoire(incoming).items():
        current = merged.get(key)
        if current is not None and _updated(current) > _updated(item):
            logger.debug("Keeping local repertoire item %s", key)
            continue
        if current is not None:
            replaced += 1
        merged[key] = item

    logger.info("Merged incoming repertoire: %d items, %d replaced", len(merged), replaced)
    return list(merged.values())
