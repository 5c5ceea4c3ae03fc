import itertools

import pytest

from songpad.core.classifier import (
    NEAR_RHYME_RULES,
    RHYME_RULES,
    GroupKind,
    classify_pair,
    is_assonance,
    is_near_rhyme,
    is_rhyme,
)

WORDS = [
    "cat", "bat", "dog", "fog", "time", "fine", "light", "like", "lips",
    "kit", "day", "way", "nth", "tenth", "queue", "blue", "sing", "ring",
    "hand", "band", "told", "cold", "Cat!", "", "???",
]


def test_exact_rhyme_examples():
    assert is_rhyme("cat", "bat")
    assert is_rhyme("day", "way")
    assert is_rhyme("cold", "told")
    assert not is_rhyme("cat", "dog")


def test_rhyme_is_case_and_punctuation_insensitive():
    assert is_rhyme("Cat!", "bat,")


def test_no_self_rhyme():
    for word in ["cat", "time", "nth"]:
        assert not is_rhyme(word, word)
        assert not is_near_rhyme(word, word)
    # identical after normalisation counts as the same word
    assert not is_rhyme("Cat", "cat!")


def test_empty_words_never_match():
    assert not is_rhyme("", "")
    assert not is_rhyme("cat", "")
    assert not is_near_rhyme("???", "cat")
    assert classify_pair(None, "cat") is GroupKind.NONE


def test_time_and_fine_share_the_rime_e():
    # Both words end in the vowel cluster "e" with no coda, which is an exact
    # rime match under the spelling rules, so they are not a near rhyme.
    assert is_rhyme("time", "fine")
    assert not is_near_rhyme("time", "fine")
    assert not is_near_rhyme("time", "time")


def test_ending_fallback_for_words_without_vowels():
    assert is_rhyme("nth", "tenth")
    assert not is_near_rhyme("nth", "tenth")


def test_near_rhyme_same_vowel_different_coda():
    assert not is_rhyme("light", "lips")
    assert is_near_rhyme("light", "lips")


def test_near_rhyme_same_coda_different_vowel():
    assert not is_rhyme("cat", "kit")
    assert is_near_rhyme("cat", "kit")


def test_unrelated_words_are_neither():
    assert not is_near_rhyme("cat", "dog")
    assert classify_pair("cat", "dog") is GroupKind.NONE


def test_classify_pair():
    assert classify_pair("cat", "bat") is GroupKind.RHYME
    assert classify_pair("cat", "kit") is GroupKind.NEAR_RHYME
    assert GroupKind.NEAR_RHYME.value == "near-rhyme"


def test_assonance_alias():
    assert is_assonance is is_near_rhyme


def test_rule_tables_are_ordered_tuples():
    assert [name for name, _ in RHYME_RULES] == ["rime", "ending"]
    assert [name for name, _ in NEAR_RHYME_RULES] == ["assonance", "consonance"]


@pytest.mark.parametrize("first, second", list(itertools.combinations(WORDS, 2)))
def test_predicates_are_symmetric_and_exclusive(first, second):
    assert is_rhyme(first, second) == is_rhyme(second, first)
    assert is_near_rhyme(first, second) == is_near_rhyme(second, first)
    assert not (is_rhyme(first, second) and is_near_rhyme(first, second))
