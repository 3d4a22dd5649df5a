# tests/test_autocomplete.py
# end-to-end behaviour of the AutoComplete engine

import io

import pytest

from dlb_autocomplete import AutoComplete, InvalidArgumentError, InvalidStateError


def test_scenario_cat_car_card_dog(ac, type_word):
    assert type_word(ac, "ca") == [True, True]
    assert ac.is_word() is False
    assert ac.get_number_of_predictions() == 3

    assert ac.advance("t")
    assert ac.is_word()
    assert ac.get_number_of_predictions() == 1
    assert ac.retrieve_prediction() == "cat"

    ac.reset()
    type_word(ac, "car")
    assert ac.is_word()
    assert ac.get_number_of_predictions() == 2


def test_scenario_unknown_first_letter(ac):
    ac.reset()
    assert ac.advance("z") is False
    assert ac.locked
    assert ac.locked_depth == 1
    ac.retreat()
    assert not ac.locked
    assert ac.get_current_prefix() == ""


def test_every_inserted_word_is_a_word(type_word):
    words = ["a", "ab", "abc", "b", "ba", "zebra", "zed", "zeds"]
    ac = AutoComplete.from_words(words)
    for w in words:
        ac.reset()
        assert all(type_word(ac, w))
        assert ac.is_word(), w


def test_root_count_is_number_of_distinct_words():
    ac = AutoComplete.from_words(["x", "y", "x", "xy", "y"])
    assert len(ac) == 3
    assert ac.get_number_of_predictions() == 3


def test_duplicate_add_returns_false(ac, type_word):
    assert ac.add("cat") is False
    type_word(ac, "ca")
    assert ac.get_number_of_predictions() == 3
    assert len(ac) == 4


def test_unmatched_prefix_has_no_predictions(ac, type_word):
    results = type_word(ac, "cx")
    assert results[-1] is False
    assert ac.locked
    assert ac.get_number_of_predictions() == 0
    assert ac.retrieve_prediction() is None


@pytest.mark.parametrize("bad", [None, ""])
def test_add_rejects_absent_or_empty(ac, bad):
    with pytest.raises(InvalidArgumentError):
        ac.add(bad)
    assert len(ac) == 4


def test_retreat_on_fresh_engine_raises():
    with pytest.raises(InvalidStateError):
        AutoComplete().retreat()


def test_add_without_argument_commits_prefix(ac, type_word):
    type_word(ac, "do")
    assert ac.add() is True
    assert "do" in ac
    assert ac.is_word()
    assert ac.get_number_of_predictions() == 2


def test_build_from_empty_engine(type_word):
    ac = AutoComplete()
    assert ac.get_number_of_predictions() == 0
    assert ac.advance("h") is False
    ac.retreat()
    assert ac.add("hi")
    assert ac.add("hello")
    assert all(type_word(ac, "h"))
    assert ac.get_number_of_predictions() == 2
    assert ac.retrieve_prediction() == "hi"


def test_new_session_is_independent(ac):
    other = ac.new_session()
    ac.advance("d")
    assert other.current_prefix == ""
    assert other.get_number_of_predictions() == 4
    other.add("dot")
    assert ac.get_number_of_predictions() == 2


def test_words_and_membership(ac):
    assert list(ac.words()) == ["cat", "car", "card", "dog"]
    assert "card" in ac
    assert "ca" not in ac


def test_print_trie(ac):
    buf = io.StringIO()
    ac.print_trie("d", file=buf)
    lines = buf.getvalue().splitlines()
    assert lines[1:-1] == ["o (1)", " g * (1)", "  ^ (0)"]
    assert 'Starting from "d"' in lines[0]
