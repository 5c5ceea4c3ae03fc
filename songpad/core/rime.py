"""Spelling based rime extraction.

A word's rime is approximated from its letters alone: the final run of vowel
letters (``a e i o u y``) followed by whatever consonant letters trail it.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, Optional

from songpad.utils.syllables import VOWELS

from .normalizer import normalize_word

__all__ = [
    "RimeParts",
    "PhoneticPattern",
    "ENDING_LENGTH",
    "get_rime_parts",
    "get_phonetic_pattern",
    "get_vowel_sounds",
]

ENDING_LENGTH = 3


@dataclass(frozen=True)
class RimeParts:
    """Final vowel cluster and coda of a normalised word."""

    vowel_cluster: str = ""
    coda: str = ""
    rime: str = ""
    ending: str = ""

    def as_dict(self) -> Dict[str, Any]:
        return {
            "vowel_cluster": self.vowel_cluster,
            "coda": self.coda,
            "rime": self.rime,
            "ending": self.ending,
        }


@dataclass(frozen=True)
class PhoneticPattern:
    """The slice of :class:`RimeParts` consulted by the near-rhyme rules."""

    vowel_sound: str
    consonant_ending: str
    exact_ending: str


@lru_cache(maxsize=4096)
def _rime_parts_for(normalized: str) -> RimeParts:
    index = len(normalized)

    while index > 0 and normalized[index - 1] not in VOWELS:
        index -= 1
    coda = normalized[index:]

    cluster_end = index
    while index > 0 and normalized[index - 1] in VOWELS:
        index -= 1
    vowel_cluster = normalized[index:cluster_end]

    ending = normalized[-ENDING_LENGTH:]
    if not vowel_cluster:
        return RimeParts(ending=ending)

    return RimeParts(
        vowel_cluster=vowel_cluster,
        coda=coda,
        rime=vowel_cluster + coda,
        ending=ending,
    )


def get_rime_parts(raw_word: Optional[str]) -> RimeParts:
    """Split ``raw_word`` into its final vowel cluster, coda, rime and ending.

    Words without any vowel letter keep only their ``ending`` (last three
    letters) so they can still be compared letter for letter.
    """

    normalized = normalize_word(raw_word)
    if not normalized:
        return RimeParts()
    return _rime_parts_for(normalized)


def get_phonetic_pattern(word: Optional[str]) -> PhoneticPattern:
    parts = get_rime_parts(word)
    return PhoneticPattern(
        vowel_sound=parts.vowel_cluster.upper(),
        consonant_ending=parts.coda,
        exact_ending=parts.ending,
    )


def get_vowel_sounds(word: Optional[str]) -> str:
    """Return every vowel letter of ``word`` in order, e.g. ``"eauiu"`` for beautiful."""

    return "".join(char for char in normalize_word(word) if char in VOWELS)
