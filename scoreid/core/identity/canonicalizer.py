"""Composer canonicalization - maps surface variants to one display name.

Resolution order for a raw composer string:

1. Strip catalog numbers (Op./BWV/K./Hob./...) and collapse whitespace.
2. Normalize for lookup (lowercase, unified quotes/dashes, no periods,
   ``", "`` comma spacing).
3. Exact match against the static variant table.
4. Last-name match: the final word equals, or is the tail of, a table key.
5. Fall back to :func:`format_composer_name` on the cleaned name.

Nothing here raises; empty or ``None`` input yields ``""``.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from types import MappingProxyType
from typing import Optional

from .composers import CATALOG_NUMBER_PATTERNS, COMPOSER_CANONICAL_NAMES
from .formatter import format_composer_name
from .normalize import normalize_composer

_COMMA_SPACING = re.compile(r"\s*,\s*")
_WHITESPACE = re.compile(r"\s+")
_DANGLING_PUNCTUATION = " ,;:-"


@dataclass(frozen=True)
class CatalogInfo:
    """Composer with the first catalog number found in the raw string."""

    composer: str
    catalog_number: Optional[str] = None


def remove_catalog_numbers(composer: str | None) -> str:
    """Remove catalog identifiers from a composer string.

    Examples:
        >>> remove_catalog_numbers("Bach BWV 772 No. 1")
        'Bach'
        >>> remove_catalog_numbers("Chopin Op.10")
        'Chopin'
    """
    if not composer:
        return ""
    cleaned = composer
    for pattern in CATALOG_NUMBER_PATTERNS:
        cleaned = pattern.sub("", cleaned)
    cleaned = _WHITESPACE.sub(" ", cleaned).strip()
    return cleaned.strip(_DANGLING_PUNCTUATION)


def normalize_composer_for_matching(composer: str | None) -> str:
    """Normalize a (catalog-free) composer name into a lookup key."""
    normalized = normalize_composer(composer)
    if not normalized:
        return ""
    return _COMMA_SPACING.sub(", ", normalized).strip(" ,")


def _build_lookup() -> MappingProxyType:
    lookup: dict[str, str] = {}
    for variant, canonical in COMPOSER_CANONICAL_NAMES.items():
        key = normalize_composer_for_matching(variant)
        if key:
            lookup.setdefault(key, canonical)
    return MappingProxyType(lookup)


_CANONICAL_LOOKUP = _build_lookup()


def _lookup_by_last_name(normalized: str) -> Optional[str]:
    last_word = normalized.replace(",", " ").split()[-1]
    if last_word in _CANONICAL_LOOKUP:
        return _CANONICAL_LOOKUP[last_word]
    suffix = f" {last_word}"
    for key, canonical in _CANONICAL_LOOKUP.items():
        # "surname, given" keys end in a given name, not a surname
        if "," not in key and key.endswith(suffix):
            return canonical
    return None


def get_canonical_composer_name(composer: str | None) -> str:
    """Return the canonical display name for a composer.

    Examples:
        >>> get_canonical_composer_name("J.S. Bach")
        'Johann Sebastian Bach'
        >>> get_canonical_composer_name("Beethoven Op. 27")
        'Ludwig van Beethoven'
        >>> get_canonical_composer_name("john smith")
        'John Smith'
    """
    cleaned = remove_catalog_numbers(composer)
    if not cleaned:
        return ""

    normalized = normalize_composer_for_matching(cleaned)
    if not normalized:
        return ""

    canonical = _CANONICAL_LOOKUP.get(normalized)
    if canonical:
        return canonical

    canonical = _lookup_by_last_name(normalized)
    if canonical:
        return canonical

    return format_composer_name(cleaned)


def is_same_composer(first: str | None, second: str | None) -> bool:
    """Check whether two composer strings resolve to the same canonical name."""
    canonical_first = get_canonical_composer_name(first)
    canonical_second = get_canonical_composer_name(second)
    if not canonical_first or not canonical_second:
        return False
    return canonical_first.casefold() == canonical_second.casefold()


def extract_catalog_info(composer: str | None) -> CatalogInfo:
    """Split a raw composer string into canonical composer and catalog number.

    Only the first catalog number (by position in the string) is reported.
    """
    if not composer or not composer.strip():
        return CatalogInfo(composer="")

    first_match: Optional[re.Match[str]] = None
    for pattern in CATALOG_NUMBER_PATTERNS:
        match = pattern.search(composer)
        if match and (first_match is None or match.start() < first_match.start()):
            first_match = match

    catalog_number = first_match.group(0).strip() if first_match else None
    return CatalogInfo(
        composer=get_canonical_composer_name(composer),
        catalog_number=catalog_number,
    )


def get_display_composer_name(composer: str | None) -> str:
    """Composer name suitable for display (canonical when known)."""
    return get_canonical_composer_name(composer)


def is_known_composer(name: str | None) -> bool:
    """True when the name (catalog numbers ignored) is a variant in the static table."""
    normalized = normalize_composer_for_matching(remove_catalog_numbers(name))
    return bool(normalized) and normalized in _CANONICAL_LOOKUP
