import pytest

from dlb_autocomplete.core import AutoComplete

WORDS = ["cat", "car", "card", "dog"]


@pytest.fixture
def ac():
    return AutoComplete.from_words(WORDS)


@pytest.fixture
def type_word():
    def _type(engine, text):
        return [engine.advance(ch) for ch in text]
    return _type
