from songpad.core.classifier import GroupKind
from songpad.core.grouping import (
    COLOR_CYCLE,
    LineKind,
    build_lines,
    find_break_positions,
    group_lines,
    in_same_section,
    split_lines,
    split_sections,
)


def _group(raw_lines, marker="---"):
    return group_lines(build_lines(raw_lines, marker))


def test_build_lines_classifies_kinds():
    lines = build_lines(["Hello there", "", "  ---  ", "   ", "Goodbye!"])

    assert [line.kind for line in lines] == [
        LineKind.CONTENT,
        LineKind.BLANK,
        LineKind.BREAK,
        LineKind.BLANK,
        LineKind.CONTENT,
    ]
    assert lines[0].last_word == "there"
    assert lines[0].syllable_count == 3
    assert lines[1].syllable_count is None
    assert lines[2].syllable_count is None
    assert lines[4].last_word == "goodbye"


def test_break_marker_must_match_exactly():
    lines = build_lines(["----", "--- end", "---"])

    assert [line.kind for line in lines] == [LineKind.CONTENT, LineKind.CONTENT, LineKind.BREAK]


def test_split_lines():
    assert split_lines("") == [""]
    assert split_lines(None) == [""]
    assert split_lines("a\nb\n") == ["a", "b", ""]


def test_find_break_positions():
    assert find_break_positions(build_lines(["a", "---", "b", " --- ", "c"])) == [1, 3]
    assert find_break_positions(build_lines(["a", "==", "b"], break_marker="==")) == [1]
    assert find_break_positions(build_lines(["a", "==", "b"])) == []


def test_group_lines_uses_break_positions_of_its_lines():
    lines = build_lines(["day", "==", "way"], break_marker="==")

    assert find_break_positions(lines) == [1]
    assert group_lines(lines).rhyme_groups == []
    assert len(group_lines(build_lines(["day", "==", "way"])).rhyme_groups) == 1


def test_in_same_section():
    breaks = [2, 5]

    assert in_same_section(0, 1, breaks)
    assert in_same_section(1, 0, breaks)
    assert not in_same_section(1, 3, breaks)
    assert in_same_section(3, 4, breaks)
    assert not in_same_section(0, 6, breaks)
    # a break at one of the endpoints does not separate
    assert in_same_section(2, 4, breaks)
    assert in_same_section(3, 3, breaks)
    assert in_same_section(0, 9, [])


def test_split_sections():
    lines = build_lines(["one", "two", "---", "", "three", "---", "---"])
    sections = split_sections(lines)

    assert [(s.start, s.end) for s in sections] == [(0, 1), (3, 4)]
    assert sections[0].content_indices == (0, 1)
    assert sections[1].content_indices == (4,)
    assert 4 in sections[1]
    assert 2 not in sections[0]


def test_rhymes_do_not_cross_section_breaks():
    result = _group(["day", "way", "---", "play"])

    assert [group.members for group in result.rhyme_groups] == [(0, 1)]
    assert result.near_rhyme_groups == []
    assert result.group_for(3) is None


def test_lone_line_after_break_forms_no_group():
    result = _group(["say", "---", "play", "dog"])

    assert result.rhyme_groups == []


def test_blank_lines_do_not_break_sections():
    result = _group(["day", "", "   ", "way"])

    assert [group.members for group in result.rhyme_groups] == [(0, 3)]


def test_groups_are_created_in_order_with_stable_indices():
    result = _group(["cat", "day", "bat", "way", "hat"])

    assert [group.members for group in result.rhyme_groups] == [(0, 2, 4), (1, 3)]
    assert [group.index for group in result.rhyme_groups] == [0, 1]
    assert result.group_for(4).color_index == 0
    assert result.group_for(3).color_index == 1


def test_near_rhyme_group_when_no_exact_rhyme():
    result = _group(["cat", "kit", "dog"])

    assert result.rhyme_groups == []
    assert len(result.near_rhyme_groups) == 1
    group = result.near_rhyme_groups[0]
    assert group.kind is GroupKind.NEAR_RHYME
    assert group.members == (0, 1)
    assert group.anchor == 0


def test_grouping_is_anchor_based_not_transitive():
    # "cat" anchors: "kit" (coda t) and "cap" (vowel a) both join even though
    # "kit" and "cap" are not near rhymes of each other.
    result = _group(["cat", "kit", "cap"])

    assert [group.members for group in result.near_rhyme_groups] == [(0, 1, 2)]


def test_line_in_a_group_is_never_reused():
    # "cat" takes "bat". "kit" would near-rhyme with "bat" but "bat" is
    # already assigned, so "kit" stays alone.
    result = _group(["cat", "bat", "kit"])

    assert [group.members for group in result.rhyme_groups] == [(0, 1)]
    assert result.near_rhyme_groups == []
    assert result.group_for(2) is None


def test_rhyme_anchor_skips_near_rhyme_scan():
    result = _group(["cat", "bat", "cap"])

    assert [group.members for group in result.rhyme_groups] == [(0, 1)]
    assert result.near_rhyme_groups == []


def test_empty_last_words_never_group():
    result = _group(["!!!", "???", "..."])

    assert result.rhyme_groups == []
    assert result.near_rhyme_groups == []


def test_membership_invariants():
    raw = ["cat", "bat", "kit", "day", "way", "---", "hat", "sat", "lips", "light", ""]
    result = _group(raw)
    groups = result.rhyme_groups + result.near_rhyme_groups

    seen = set()
    for group in groups:
        assert len(group) >= 2
        for member in group.members:
            assert member not in seen
            seen.add(member)
            assert raw[member].strip() not in ("", "---")
        assert all(in_same_section(group.anchor, member, [5]) for member in group.members)


def test_color_index_cycles():
    words = []
    for index in range(COLOR_CYCLE + 1):
        words.extend(["cat", "bat", "---"])
    result = _group(words)

    assert len(result.rhyme_groups) == COLOR_CYCLE + 1
    assert result.rhyme_groups[-1].index == COLOR_CYCLE
    assert result.rhyme_groups[-1].color_index == 0
