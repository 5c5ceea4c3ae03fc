"""Pairwise rhyme classification over spelling based rimes.

Both predicates compare normalised words only. A word never rhymes with
itself and an empty word never rhymes with anything. Exact and near rhymes
are mutually exclusive: :func:`is_near_rhyme` is false whenever
:func:`is_rhyme` holds.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional, Tuple

from .normalizer import normalize_word
from .rime import PhoneticPattern, RimeParts, get_phonetic_pattern, get_rime_parts

__all__ = [
    "GroupKind",
    "MIN_ENDING_MATCH",
    "RHYME_RULES",
    "NEAR_RHYME_RULES",
    "is_rhyme",
    "is_near_rhyme",
    "is_assonance",
    "classify_pair",
]

MIN_ENDING_MATCH = 2


class GroupKind(str, Enum):
    """Relationship reported for a line or pair of words."""

    NONE = "none"
    RHYME = "rhyme"
    NEAR_RHYME = "near-rhyme"


RimeRule = Callable[[RimeParts, RimeParts], bool]
PatternRule = Callable[[PhoneticPattern, PhoneticPattern], bool]


def _same_rime(first: RimeParts, second: RimeParts) -> bool:
    return bool(first.rime) and first.rime == second.rime


def _same_ending(first: RimeParts, second: RimeParts) -> bool:
    return len(first.ending) >= MIN_ENDING_MATCH and first.ending == second.ending


def _shares_vowel_sound(first: PhoneticPattern, second: PhoneticPattern) -> bool:
    # "light" / "lips": same vowel, different trailing consonants
    return (
        bool(first.vowel_sound)
        and first.vowel_sound == second.vowel_sound
        and first.consonant_ending != second.consonant_ending
    )


def _shares_consonant_ending(first: PhoneticPattern, second: PhoneticPattern) -> bool:
    # "cat" / "kit": same trailing consonants, different vowel
    return (
        bool(first.consonant_ending)
        and first.consonant_ending == second.consonant_ending
        and first.vowel_sound != second.vowel_sound
    )


# Evaluated top to bottom, first match wins.
RHYME_RULES: Tuple[Tuple[str, RimeRule], ...] = (
    ("rime", _same_rime),
    ("ending", _same_ending),
)

NEAR_RHYME_RULES: Tuple[Tuple[str, PatternRule], ...] = (
    ("assonance", _shares_vowel_sound),
    ("consonance", _shares_consonant_ending),
)


def _comparable(word1: Optional[str], word2: Optional[str]) -> Optional[Tuple[str, str]]:
    first = normalize_word(word1)
    second = normalize_word(word2)
    if not first or not second or first == second:
        return None
    return first, second


def is_rhyme(word1: Optional[str], word2: Optional[str]) -> bool:
    """Return whether the two words share a rime, or failing that an ending."""

    pair = _comparable(word1, word2)
    if pair is None:
        return False

    parts1 = get_rime_parts(pair[0])
    parts2 = get_rime_parts(pair[1])
    return any(rule(parts1, parts2) for _, rule in RHYME_RULES)


def is_near_rhyme(word1: Optional[str], word2: Optional[str]) -> bool:
    """Return whether the words are a slant rhyme without being an exact rhyme."""

    pair = _comparable(word1, word2)
    if pair is None or is_rhyme(*pair):
        return False

    pattern1 = get_phonetic_pattern(pair[0])
    pattern2 = get_phonetic_pattern(pair[1])
    return any(rule(pattern1, pattern2) for _, rule in NEAR_RHYME_RULES)


is_assonance = is_near_rhyme


def classify_pair(word1: Optional[str], word2: Optional[str]) -> GroupKind:
    if is_rhyme(word1, word2):
        return GroupKind.RHYME
    if is_near_rhyme(word1, word2):
        return GroupKind.NEAR_RHYME
    return GroupKind.NONE
