"""Piece identity: normalization, composer canonicalization and score ids.

Two layers:
- Display: ``format_composer_name`` / ``get_canonical_composer_name`` keep
  diacritics and produce human-readable names.
- Keys: ``normalize_title`` / ``normalize_composer`` / ``generate_score_id``
  produce the lowercase strings used for equality and storage.
"""

from .normalize import normalize_composer, normalize_title
from .formatter import format_composer_name
from .canonicalizer import (
    CatalogInfo,
    extract_catalog_info,
    get_canonical_composer_name,
    get_display_composer_name,
    is_known_composer,
    is_same_composer,
    normalize_composer_for_matching,
    remove_catalog_numbers,
)
from .matching import find_similar_pieces, string_similarity
from .score_id import (
    ParsedScoreId,
    generate_score_id,
    is_canonical_score_id,
    is_same_score,
    is_same_score_with_fuzzy,
    normalize_existing_score_id,
    parse_score_id,
)

__all__ = [
    # Text keys
    "normalize_title",
    "normalize_composer",
    # Composer names
    "format_composer_name",
    "CatalogInfo",
    "extract_catalog_info",
    "get_canonical_composer_name",
    "get_display_composer_name",
    "is_known_composer",
    "is_same_composer",
    "normalize_composer_for_matching",
    "remove_catalog_numbers",
    # Similarity
    "find_similar_pieces",
    "string_similarity",
    # Score ids
    "ParsedScoreId",
    "generate_score_id",
    "is_canonical_score_id",
    "is_same_score",
    "is_same_score_with_fuzzy",
    "normalize_existing_score_id",
    "parse_score_id",
]
