"""Section aware grouping of lyric lines into rhyme and near-rhyme groups.

Lines are grouped by their last word. Grouping is anchor based: the first
unassigned line of a run becomes the anchor and every later line in the same
section is compared against the anchor only, never against the other
members. Two lines that both rhyme with the anchor therefore share a group
even when they do not rhyme with each other, and two lines that rhyme with
each other but not with an earlier anchor stay free to form their own group.
The indicator colours downstream depend on exactly this behaviour.
"""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from songpad.utils.syllables import count_line_syllables

from .classifier import GroupKind, is_near_rhyme, is_rhyme
from .normalizer import last_word

__all__ = [
    "BREAK_MARKER",
    "COLOR_CYCLE",
    "LineKind",
    "Line",
    "Section",
    "RhymeGroup",
    "GroupingResult",
    "split_lines",
    "build_lines",
    "find_break_positions",
    "in_same_section",
    "split_sections",
    "group_lines",
]

BREAK_MARKER = "---"
COLOR_CYCLE = 30

WordPredicate = Callable[[str, str], bool]


class LineKind(str, Enum):
    BLANK = "blank"
    BREAK = "break"
    CONTENT = "content"


@dataclass(frozen=True)
class Line:
    """A single buffer line and the values derived from it."""

    index: int
    text: str
    kind: LineKind
    last_word: str = ""
    syllable_count: Optional[int] = None

    @property
    def is_break(self) -> bool:
        return self.kind is LineKind.BREAK

    @property
    def is_content(self) -> bool:
        return self.kind is LineKind.CONTENT


@dataclass(frozen=True)
class Section:
    """Maximal run of lines between break markers."""

    index: int
    start: int
    end: int
    content_indices: Tuple[int, ...] = ()

    def __contains__(self, line_index: object) -> bool:
        return isinstance(line_index, int) and self.start <= line_index <= self.end


@dataclass(frozen=True)
class RhymeGroup:
    """Lines whose last words relate to the group's anchor (its first member)."""

    index: int
    kind: GroupKind
    members: Tuple[int, ...]

    @property
    def anchor(self) -> int:
        return self.members[0]

    @property
    def color_index(self) -> int:
        return self.index % COLOR_CYCLE

    def __len__(self) -> int:
        return len(self.members)

    def __contains__(self, line_index: object) -> bool:
        return line_index in self.members


@dataclass
class GroupingResult:
    rhyme_groups: List[RhymeGroup] = field(default_factory=list)
    near_rhyme_groups: List[RhymeGroup] = field(default_factory=list)
    membership: Dict[int, RhymeGroup] = field(default_factory=dict)

    def group_for(self, line_index: int) -> Optional[RhymeGroup]:
        return self.membership.get(line_index)

    def add(self, kind: GroupKind, members: Sequence[int]) -> RhymeGroup:
        target = self.rhyme_groups if kind is GroupKind.RHYME else self.near_rhyme_groups
        group = RhymeGroup(len(target), kind, tuple(members))
        target.append(group)
        for member in group.members:
            self.membership[member] = group
        return group


def split_lines(text: Optional[str]) -> List[str]:
    """Split a buffer on newlines; an empty buffer is a single blank line."""

    return (text or "").split("\n")


def build_lines(
    raw_lines: Sequence[str],
    break_marker: str = BREAK_MARKER,
) -> List[Line]:
    lines: List[Line] = []
    for index, raw in enumerate(raw_lines):
        trimmed = raw.strip()
        if not trimmed:
            lines.append(Line(index, raw, LineKind.BLANK))
        elif trimmed == break_marker:
            lines.append(Line(index, raw, LineKind.BREAK))
        else:
            lines.append(
                Line(
                    index,
                    raw,
                    LineKind.CONTENT,
                    last_word=last_word(raw),
                    syllable_count=count_line_syllables(raw),
                )
            )
    return lines


def find_break_positions(lines: Sequence[Line]) -> List[int]:
    """Return the sorted indices of break-marker lines."""

    return [line.index for line in lines if line.is_break]


def in_same_section(first: int, second: int, break_positions: Sequence[int]) -> bool:
    """Return whether no break position lies strictly between the two indices.

    ``break_positions`` must be sorted ascending.
    """

    low, high = sorted((first, second))
    return bisect_left(break_positions, high) <= bisect_right(break_positions, low)


def split_sections(lines: Sequence[Line]) -> List[Section]:
    sections: List[Section] = []
    start = 0
    content: List[int] = []

    def _close(end: int) -> None:
        if end >= start:
            sections.append(Section(len(sections), start, end, tuple(content)))

    for line in lines:
        if line.is_break:
            _close(line.index - 1)
            start = line.index + 1
            content = []
        elif line.is_content:
            content.append(line.index)
    _close(len(lines) - 1)
    return sections


def _anchor_scan(
    position: int,
    lines: Sequence[Line],
    break_positions: Sequence[int],
    assigned: Dict[int, RhymeGroup],
    predicate: WordPredicate,
) -> List[int]:
    anchor = lines[position]
    members = [anchor.index]
    for other in lines[position + 1 :]:
        if not in_same_section(anchor.index, other.index, break_positions):
            # sections are contiguous, nothing further down can match
            break
        if not other.is_content or other.index in assigned:
            continue
        if predicate(anchor.last_word, other.last_word):
            members.append(other.index)
    return members


def group_lines(lines: Sequence[Line]) -> GroupingResult:
    """Build rhyme and near-rhyme groups in a single forward pass over ``lines``.

    A line that already belongs to a group is neither an anchor nor a
    candidate again, so every line ends up in at most one group. Candidate
    groups with fewer than two members are dropped.
    """

    result = GroupingResult()
    break_positions = find_break_positions(lines)

    for position, line in enumerate(lines):
        if not line.is_content or line.index in result.membership:
            continue

        members = _anchor_scan(position, lines, break_positions, result.membership, is_rhyme)
        if len(members) > 1:
            result.add(GroupKind.RHYME, members)
            continue

        members = _anchor_scan(position, lines, break_positions, result.membership, is_near_rhyme)
        if len(members) > 1:
            result.add(GroupKind.NEAR_RHYME, members)

    return result
