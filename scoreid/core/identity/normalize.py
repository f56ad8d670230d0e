"""Text normalization for piece titles and composer names.

These are the match-key side of identity resolution: lowercase, trimmed,
single-spaced strings with typographic punctuation folded to ASCII. Diacritics
are kept (only their Unicode composition is unified), so "Dvořák" and
"Dvorak" stay distinct keys; fuzzy matching covers that gap.

All functions are pure and total: ``None`` and whitespace-only input
normalize to ``""``, and every function is idempotent.
"""

from __future__ import annotations

import re
import unicodedata

_WHITESPACE = re.compile(r"\s+")

# Curly quotes and typographic dashes folded to their ASCII equivalents.
_PUNCTUATION_MAP = str.maketrans(
    {
        "‘": "'",
        "’": "'",
        "“": '"',
        "”": '"',
        "–": "-",
        "—": "-",
    }
)


def _fold(value: str | None) -> str:
    if not value:
        return ""
    cleaned = unicodedata.normalize("NFC", value)
    return cleaned.lower().translate(_PUNCTUATION_MAP)


def _squash(value: str) -> str:
    return _WHITESPACE.sub(" ", value).strip()


def normalize_title(title: str | None) -> str:
    """Normalize a piece title for score id generation.

    Examples:
        >>> normalize_title("  Moonlight   SONATA ")
        'moonlight sonata'
        >>> normalize_title("Piece—Part 1")
        'piece-part 1'
    """
    return _squash(_fold(title))


def normalize_composer(composer: str | None) -> str:
    """Normalize a composer name for score id generation.

    Periods are dropped so that initials compress ("J.S. Bach" -> "js bach").

    Examples:
        >>> normalize_composer("J.S. Bach")
        'js bach'
        >>> normalize_composer("W.A. Mozart")
        'wa mozart'
    """
    return _squash(_fold(composer).replace(".", ""))
