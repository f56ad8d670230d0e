"""Display formatting for composer names.

The inverse of normalization: takes a lowercase or free-typed name and renders
a properly capitalized display form.

    >>> format_composer_name("ludwig van beethoven")
    'Ludwig van Beethoven'
    >>> format_composer_name("j.s. bach")
    'J.S. Bach'
    >>> format_composer_name("MOZART")
    'Mozart'

Formatting is idempotent for ordinary names, but not for names carrying an
embedded acronym: an ALL-CAPS word is passed through unchanged unless the
whole input is ALL-CAPS, in which case the input is lowercased first.
Callers must not assume ``format(format(x)) == format(x)`` in general.
"""

from __future__ import annotations

import re

from .composers import MAX_PARTICLE_WORDS, NAME_PARTICLES

_SEPARATOR = re.compile(r"(\s+)")
_SINGLE_INITIAL = re.compile(r"^[a-z]\.$", flags=re.IGNORECASE)
_MULTI_INITIALS = re.compile(r"^(?:[a-z]\.){2,}$", flags=re.IGNORECASE)
_APOSTROPHES = re.compile(r"(['’])")
_DIGIT = re.compile(r"\d")


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def _is_acronym(word: str) -> bool:
    return len(word) > 1 and word.isupper() and not _DIGIT.search(word)


def _format_apostrophe_word(word: str) -> str:
    parts = _APOSTROPHES.split(word)
    rendered: list[str] = []
    for index, part in enumerate(parts):
        if index % 2 == 1:
            rendered.append(part)
        elif index == 0:
            rendered.append(part.upper() if len(part) == 1 else _capitalize(part))
        elif len(part) > 1:
            rendered.append(_capitalize(part))
        else:
            rendered.append(part)
    return "".join(rendered)


def _format_word(word: str) -> str:
    if _SINGLE_INITIAL.match(word) or _MULTI_INITIALS.match(word):
        return word.upper()

    if "-" in word:
        segments = word.split("-")
        rendered = []
        for index, segment in enumerate(segments):
            if index > 0 and segment.lower() in NAME_PARTICLES:
                rendered.append(segment.lower())
            else:
                rendered.append(_format_word(segment))
        return "-".join(rendered)

    if _APOSTROPHES.search(word):
        return _format_apostrophe_word(word)

    if _is_acronym(word):
        return word
    return _capitalize(word)


def _match_particle(words: list[str], start: int) -> int:
    """Return how many words starting at ``start`` form a particle (0 if none)."""
    for span in range(min(MAX_PARTICLE_WORDS, len(words) - start), 0, -1):
        candidate = " ".join(word.lower() for word in words[start : start + span])
        if candidate in NAME_PARTICLES:
            return span
    return 0


def format_composer_name(name: str | None) -> str:
    """Render a display form of a composer name (also usable for title-casing).

    Rules, in order: ALL-CAPS input longer than two characters is treated as
    carrying no case information; particles ("van", "von der", "de", ...) are
    lowercased unless they open the name; initials ("j.", "c.p.e.") are
    uppercased; hyphenated and apostrophe segments are capitalized
    independently; any other word is capitalized except deliberate acronyms.
    """
    if not name or not name.strip():
        return ""

    text = name.strip()
    if len(text) > 2 and text == text.upper():
        text = text.lower()

    tokens = _SEPARATOR.split(text)
    words = tokens[0::2]
    separators = tokens[1::2]

    rendered_words: list[str] = []
    index = 0
    while index < len(words):
        span = _match_particle(words, index) if index > 0 else 0
        if span:
            for offset in range(span):
                rendered_words.append(words[index + offset].lower())
            index += span
            continue
        rendered_words.append(_format_word(words[index]))
        index += 1

    output = [rendered_words[0]]
    for separator, word in zip(separators, rendered_words[1:]):
        output.append(separator)
        output.append(word)
    return "".join(output)
