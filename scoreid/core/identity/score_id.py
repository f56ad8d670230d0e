"""Score id generation, parsing and comparison.

A score id is a single string key derived from a (title, composer) pair.
Two delimiter conventions coexist in persisted data:

- legacy:  ``normalized title-normalized composer`` (single hyphen)
- current: ``normalized title||normalized composer`` (double pipe)

New ids keep the legacy hyphen unless the title or composer itself contains a
hyphen, in which case the unambiguous double pipe is used. Ids without a
composer are the normalized title alone.

Parsing legacy ids splits on the last hyphen. That is a heuristic: a legacy
title ending in "... - Op. 5" mis-parses. Changing the split would silently
reclassify stored data, so the heuristic is kept as is.
"""

from __future__ import annotations

from dataclasses import dataclass
import re

from .canonicalizer import is_known_composer
from .matching import COMPOSER_WEIGHT, TITLE_WEIGHT, string_similarity
from .normalize import normalize_composer, normalize_title

SCORE_ID_DELIMITER = "||"
LEGACY_DELIMITER = "-"
_FREE_TEXT_SEPARATOR = " - "
_CANONICAL_PATTERN = re.compile(r"^score_[a-z0-9]+(?:[-_][a-z0-9]+)*$", flags=re.IGNORECASE)
_MAX_COMPOSER_WORDS = 2


@dataclass(frozen=True)
class ParsedScoreId:
    """Title/composer halves recovered from a score id."""

    title: str
    composer: str


def _join(title: str, composer: str) -> str:
    if not composer:
        return title
    if LEGACY_DELIMITER in title or LEGACY_DELIMITER in composer:
        # pipes touching the delimiter would move the first "||" split point
        title = title.rstrip("|").rstrip()
        composer = composer.lstrip("|").lstrip()
        return f"{title}{SCORE_ID_DELIMITER}{composer}"
    return f"{title}{LEGACY_DELIMITER}{composer}"


def generate_score_id(title: str | None, composer: str | None = None) -> str:
    """Build a score id from a piece title and optional composer.

    Examples:
        >>> generate_score_id("Sonata Op. 1", "Beethoven")
        'sonata op. 1-beethoven'
        >>> generate_score_id("Sonatina Op. 36 No. 1 - Movement 1", "Clementi")
        'sonatina op. 36 no. 1 - movement 1||clementi'
        >>> generate_score_id("Moonlight Sonata")
        'moonlight sonata'
    """
    return _join(normalize_title(title), normalize_composer(composer))


def parse_score_id(score_id: str | None) -> ParsedScoreId:
    """Split a score id back into its title and composer halves."""
    normalized = (score_id or "").lower().strip()

    if SCORE_ID_DELIMITER in normalized:
        title, _, composer = normalized.partition(SCORE_ID_DELIMITER)
        return ParsedScoreId(title=title.strip(), composer=composer.strip())

    if LEGACY_DELIMITER in normalized:
        title, _, composer = normalized.rpartition(LEGACY_DELIMITER)
        return ParsedScoreId(title=title.strip(), composer=composer.strip())

    return ParsedScoreId(title=normalized, composer="")


def _free_text_halves(normalized: str) -> tuple[str, str] | None:
    parts = normalized.split(_FREE_TEXT_SEPARATOR)
    if len(parts) != 2:
        return None
    first, second = parts[0].strip(), parts[1].strip()
    if not first or not second:
        return None
    return first, second


def is_same_score(first: str | None, second: str | None) -> bool:
    """Check whether two score ids refer to the same piece.

    Handles mixed delimiter conventions and legacy ids whose halves were
    entered in reverse order ("Composer - Title" vs "Title - Composer").
    """
    normalized_first = (first or "").lower().strip()
    normalized_second = (second or "").lower().strip()

    if normalized_first == normalized_second:
        return True

    parsed_first = parse_score_id(normalized_first)
    parsed_second = parse_score_id(normalized_second)
    if parsed_first == parsed_second:
        return True
    if (
        parsed_first.composer
        and parsed_first.title == parsed_second.composer
        and parsed_first.composer == parsed_second.title
    ):
        return True

    halves_first = _free_text_halves(normalized_first)
    halves_second = _free_text_halves(normalized_second)
    if halves_first and halves_second:
        return halves_first == halves_second[::-1]
    return False


def is_same_score_with_fuzzy(first: str | None, second: str | None, threshold: float = 0.9) -> bool:
    """Like :func:`is_same_score`, falling back to weighted edit-distance similarity."""
    if is_same_score(first, second):
        return True

    parsed_first = parse_score_id(first)
    parsed_second = parse_score_id(second)
    title_similarity = string_similarity(parsed_first.title, parsed_second.title)
    composer_similarity = string_similarity(parsed_first.composer, parsed_second.composer)
    return title_similarity * TITLE_WEIGHT + composer_similarity * COMPOSER_WEIGHT >= threshold


def is_canonical_score_id(score_id: str | None) -> bool:
    """Catalog score ids (``score_<slug>``) are opaque and never re-derived."""
    return bool(score_id) and bool(_CANONICAL_PATTERN.match(score_id.strip()))


def _guess_composer_half(first: str, second: str) -> tuple[str, str] | None:
    """Return (title, composer) for a free-text "A - B" id, or None if unclear.

    A half naming a known composer wins; otherwise the composer is taken to be
    the shorter half of at most two words.
    """
    first_known = is_known_composer(first)
    second_known = is_known_composer(second)
    if second_known and not first_known:
        return first, second
    if first_known and not second_known:
        return second, first

    first_words = len(first.split())
    second_words = len(second.split())
    second_fits = second_words <= _MAX_COMPOSER_WORDS
    first_fits = first_words <= _MAX_COMPOSER_WORDS

    if second_fits and (not first_fits or len(second) <= len(first)):
        return first, second
    if first_fits:
        return second, first
    return None


def normalize_existing_score_id(score_id: str | None) -> str:
    """Re-derive the current form of a possibly legacy score id.

    Examples:
        >>> normalize_existing_score_id("Moonlight Sonata||Beethoven")
        'moonlight sonata-beethoven'
        >>> normalize_existing_score_id("Beethoven - Moonlight Sonata")
        'moonlight sonata-beethoven'
    """
    normalized = (score_id or "").lower().strip()
    if not normalized or is_canonical_score_id(normalized):
        return normalized

    if SCORE_ID_DELIMITER not in normalized:
        halves = _free_text_halves(normalized)
        if halves:
            guessed = _guess_composer_half(*halves)
            if guessed is None:
                return normalized
            return _join(*guessed)

    parsed = parse_score_id(normalized)
    return _join(parsed.title, parsed.composer)
