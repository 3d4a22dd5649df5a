# autocomplete.py
# AutoComplete - the engine a host application talks to.
# Owns one DLBTrie (the dictionary) and one default PrefixCursor (the typing
# session); new_session() hands out more cursors over the same dictionary.

from __future__ import annotations

import logging
import sys
from typing import Iterable, Iterator, List, Optional, TextIO

from .cursor import PrefixCursor, _CURRENT_PREFIX
from .dlb_trie import DLBTrie

logger = logging.getLogger(__name__)


class AutoComplete:
    """
    Incremental autocomplete over a DLB trie.

    Typical use:
        ac = AutoComplete.from_words(["cat", "car", "card", "dog"])
        ac.advance("c"); ac.advance("a")
        ac.get_number_of_predictions()   # 3
        ac.retrieve_prediction()         # "cat"
    """

    def __init__(self, trie: Optional[DLBTrie] = None) -> None:
        self.trie = trie if trie is not None else DLBTrie()
        self.cursor = PrefixCursor(self.trie)

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "AutoComplete":
        ac = cls()
        added = sum(1 for w in words if ac.trie.insert(w))
        logger.debug("built dictionary with %d words", added)
        return ac

    def new_session(self) -> PrefixCursor:
        """Independent cursor over this engine's dictionary."""
        return PrefixCursor(self.trie)

    # dictionary -----------------------------------------------------
    def add(self, word=_CURRENT_PREFIX) -> bool:
        """
        add(word) inserts `word`; add() commits the current prefix.
        True if the word was new, False if it was already stored.
        Raises InvalidArgumentError for None, "" or a word holding the sentinel.
        """
        return self.cursor.add(word)

    def words(self) -> Iterator[str]:
        return self.trie.words()

    def __len__(self) -> int:
        return len(self.trie)

    def __contains__(self, word) -> bool:
        return word in self.trie

    # navigation -----------------------------------------------------
    def advance(self, c: str) -> bool:
        return self.cursor.advance(c)

    def retreat(self) -> None:
        self.cursor.retreat()

    def reset(self) -> None:
        self.cursor.reset()

    # queries -----------------------------------------------------
    def is_word(self) -> bool:
        return self.cursor.is_word()

    def get_number_of_predictions(self) -> int:
        return self.cursor.get_number_of_predictions()

    def retrieve_prediction(self) -> Optional[str]:
        return self.cursor.retrieve_prediction()

    def get_current_prefix(self) -> str:
        return self.cursor.current_prefix

    @property
    def current_prefix(self) -> str:
        return self.cursor.current_prefix

    @property
    def locked(self) -> bool:
        return self.cursor.locked

    @property
    def locked_depth(self) -> int:
        return self.cursor.locked_depth

    # convenience/debugging -----------------------------------------------------
    def dump(self, start: str = "") -> List[str]:
        return self.trie.dump(start)

    def print_trie(self, start: str = "", file: Optional[TextIO] = None) -> None:
        """Print the subtrie below `start` (whole trie by default)."""
        out = file or sys.stdout
        for line in self.trie.dump(start):
            out.write(line + "\n")
