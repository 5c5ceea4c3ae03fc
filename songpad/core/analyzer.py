"""Whole-buffer lyric analysis: syllable counts and rhyme annotations per line."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .classifier import GroupKind
from .grouping import (
    BREAK_MARKER,
    GroupingResult,
    Line,
    RhymeGroup,
    Section,
    build_lines,
    group_lines,
    split_lines,
    split_sections,
)

__all__ = ["LineAnnotation", "BufferAnalysis", "analyze_buffer"]


@dataclass(frozen=True)
class LineAnnotation:
    """What the gutter shows for one line."""

    syllable_count: Optional[int] = None
    group_kind: GroupKind = GroupKind.NONE
    group_color_index: Optional[int] = None

    def as_dict(self) -> Dict[str, Any]:
        return {
            "syllable_count": self.syllable_count,
            "group_kind": self.group_kind.value,
            "group_color_index": self.group_color_index,
        }


@dataclass
class BufferAnalysis:
    break_marker: str
    lines: List[Line]
    rhyme_groups: List[RhymeGroup]
    near_rhyme_groups: List[RhymeGroup]
    annotations: List[LineAnnotation]
    sections: List[Section] = field(default_factory=list)

    @property
    def group_count(self) -> int:
        return len(self.rhyme_groups) + len(self.near_rhyme_groups)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "break_marker": self.break_marker,
            "lines": [
                dict(annotation.as_dict(), index=line.index, text=line.text)
                for line, annotation in zip(self.lines, self.annotations)
            ],
            "rhyme_groups": [list(group.members) for group in self.rhyme_groups],
            "near_rhyme_groups": [list(group.members) for group in self.near_rhyme_groups],
        }


def _annotate(line: Line, grouping: GroupingResult) -> LineAnnotation:
    if not line.is_content:
        return LineAnnotation()

    group = grouping.group_for(line.index)
    if group is None:
        return LineAnnotation(syllable_count=line.syllable_count)
    return LineAnnotation(
        syllable_count=line.syllable_count,
        group_kind=group.kind,
        group_color_index=group.color_index,
    )


def analyze_buffer(text: Optional[str], break_marker: str = BREAK_MARKER) -> BufferAnalysis:
    """Run the full pipeline over ``text`` and annotate every line.

    The result depends on ``text`` and ``break_marker`` alone; calling this
    twice with the same buffer yields equal analyses.
    """

    lines = build_lines(split_lines(text), break_marker)
    grouping = group_lines(lines)
    return BufferAnalysis(
        break_marker=break_marker,
        lines=lines,
        rhyme_groups=grouping.rhyme_groups,
        near_rhyme_groups=grouping.near_rhyme_groups,
        annotations=[_annotate(line, grouping) for line in lines],
        sections=split_sections(lines),
    )
