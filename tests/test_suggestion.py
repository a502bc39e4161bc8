# tests/test_suggestion.py
import pytest

from radix_autocompleter.core.suggestion import Suggestion, check_top_k, compare


def test_orders_by_score_then_word():
    low = Suggestion.of("zebra", 1)
    high = Suggestion.of("apple", 2)
    assert low < high
    # equal scores fall back to the word
    assert Suggestion.of("cain", 3) < Suggestion.of("cameo", 3)


def test_equality_needs_word_and_score():
    assert Suggestion.of("car", 1) == Suggestion.of("car", 1)
    assert Suggestion.of("car", 1) != Suggestion.of("car", 2)
    assert len({Suggestion.of("car", 1), Suggestion.of("car", 1), Suggestion.of("car", 2)}) == 2


def test_compare_is_three_way():
    a, b = Suggestion.of("a", 1), Suggestion.of("b", 1)
    assert compare(a, b) == -1
    assert compare(b, a) == 1
    assert compare(a, Suggestion.of("a", 1)) == 0


def test_is_immutable():
    s = Suggestion.of("car", 1)
    with pytest.raises(AttributeError):
        s.score = 9


def test_as_tuple():
    assert Suggestion.of("car", 1).as_tuple() == ("car", 1)


@pytest.mark.parametrize("bad", [0, -1, 2.5, "5", True])
def test_check_top_k_rejects(bad):
    with pytest.raises(ValueError):
        check_top_k(bad)


@pytest.mark.parametrize("bad", [-1, 2.5, "3", None, False])
def test_score_must_be_unsigned_int(bad):
    with pytest.raises(ValueError):
        Suggestion.of("car", bad)
