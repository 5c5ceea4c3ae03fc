"""Word normalisation helpers used by the rhyme engine."""

from __future__ import annotations

import re
from typing import Optional

__all__ = ["LINE_PUNCTUATION", "normalize_word", "last_word"]

# Punctuation removed from a line before its final token is taken.
LINE_PUNCTUATION = ".,!?;:\"'()[]{}"

_NON_LETTER_PATTERN = re.compile(r"[^a-z]")
_LINE_PUNCTUATION_PATTERN = re.compile("[" + re.escape(LINE_PUNCTUATION) + "]")


def normalize_word(word: Optional[str]) -> str:
    """Lowercase ``word`` and drop every character outside ``a-z``."""

    if not word:
        return ""
    return _NON_LETTER_PATTERN.sub("", word.lower())


def last_word(line: Optional[str]) -> str:
    """Return the normalised final word of ``line`` (``""`` for blank lines)."""

    trimmed = (line or "").strip()
    if not trimmed:
        return ""

    tokens = _LINE_PUNCTUATION_PATTERN.sub("", trimmed).split()
    if not tokens:
        return ""
    return normalize_word(tokens[-1])
