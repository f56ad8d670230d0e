"""Fuzzy matching of pieces by weighted edit-distance similarity."""

from __future__ import annotations

from typing import Iterable, Optional, Protocol

from rapidfuzz.distance import Levenshtein

from ..models import DuplicateMatch
from .normalize import normalize_composer, normalize_title

TITLE_WEIGHT = 0.7
COMPOSER_WEIGHT = 0.3
MISSING_COMPOSER_SIMILARITY = 0.3
HIGH_CONFIDENCE = 0.95
MEDIUM_CONFIDENCE = 0.85


class PieceCandidate(Protocol):
    """Anything carrying a score id, title and optional composer."""

    score_id: str
    title: str
    composer: Optional[str]


def string_similarity(first: str | None, second: str | None) -> float:
    """Normalized Levenshtein similarity in [0, 1]; 1.0 means identical.

    Examples:
        >>> string_similarity("abcdefghij", "abcdefgxyz")
        0.7
    """
    first = first or ""
    second = second or ""
    if first == second:
        return 1.0
    if not first or not second:
        return 0.0
    distance = Levenshtein.distance(first.lower(), second.lower())
    max_length = max(len(first), len(second))
    return (max_length - distance) / max_length


def composer_similarity(first: str, second: str) -> float:
    """Similarity of two normalized composers, tolerant of missing data."""
    if not first and not second:
        return 1.0
    if not first or not second:
        return MISSING_COMPOSER_SIMILARITY
    return string_similarity(first, second)


def confidence_for(similarity: float) -> str:
    if similarity >= HIGH_CONFIDENCE:
        return "high"
    if similarity >= MEDIUM_CONFIDENCE:
        return "medium"
    return "low"


def find_similar_pieces(
    title: str | None,
    composer: str | None,
    candidates: Iterable[PieceCandidate],
    threshold: float = 0.7,
) -> list[DuplicateMatch]:
    """Find candidates that probably name the same piece.

    Overall similarity weighs the title at 0.7 and the composer at 0.3.
    Candidates at or above ``threshold`` are returned, most similar first.
    """
    query_title = normalize_title(title)
    query_composer = normalize_composer(composer)

    matches: list[DuplicateMatch] = []
    for candidate in candidates:
        title_score = string_similarity(query_title, normalize_title(candidate.title))
        composer_score = composer_similarity(query_composer, normalize_composer(candidate.composer))
        overall = title_score * TITLE_WEIGHT + composer_score * COMPOSER_WEIGHT

        if overall >= threshold:
            matches.append(
                DuplicateMatch(
                    score_id=candidate.score_id,
                    title=candidate.title,
                    composer=candidate.composer or "",
                    similarity=overall,
                    confidence=confidence_for(overall),
                )
            )

    matches.sort(key=lambda match: match.similarity, reverse=True)
    return matches
