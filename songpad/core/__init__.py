"""Core phonetic analysis utilities for SongPad."""

from .analyzer import BufferAnalysis, LineAnnotation, analyze_buffer
from .classifier import (
    GroupKind,
    NEAR_RHYME_RULES,
    RHYME_RULES,
    classify_pair,
    is_assonance,
    is_near_rhyme,
    is_rhyme,
)
from .grouping import (
    BREAK_MARKER,
    COLOR_CYCLE,
    GroupingResult,
    Line,
    LineKind,
    RhymeGroup,
    Section,
    build_lines,
    find_break_positions,
    group_lines,
    in_same_section,
    split_lines,
    split_sections,
)
from .normalizer import last_word, normalize_word
from .rime import (
    PhoneticPattern,
    RimeParts,
    get_phonetic_pattern,
    get_rime_parts,
    get_vowel_sounds,
)

__all__ = [
    "BREAK_MARKER",
    "COLOR_CYCLE",
    "BufferAnalysis",
    "LineAnnotation",
    "analyze_buffer",
    "GroupKind",
    "RHYME_RULES",
    "NEAR_RHYME_RULES",
    "classify_pair",
    "is_assonance",
    "is_near_rhyme",
    "is_rhyme",
    "GroupingResult",
    "Line",
    "LineKind",
    "RhymeGroup",
    "Section",
    "build_lines",
    "find_break_positions",
    "group_lines",
    "in_same_section",
    "split_lines",
    "split_sections",
    "last_word",
    "normalize_word",
    "PhoneticPattern",
    "RimeParts",
    "get_phonetic_pattern",
    "get_rime_parts",
    "get_vowel_sounds",
]
