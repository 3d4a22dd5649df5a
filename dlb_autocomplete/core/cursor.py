# cursor.py
# Keystroke-level navigation over a DLBTrie.
#
# A PrefixCursor is one typing session: the characters typed so far, the trie
# node whose child chain holds the candidates for the next character, and a
# locked depth counting trailing characters that matched nothing. Many cursors
# can share one trie.

from __future__ import annotations

import logging
from typing import List, Optional

from .dlb_node import ROOT
from .dlb_trie import DLBTrie
from .errors import InvalidArgumentError, InvalidStateError

logger = logging.getLogger(__name__)

# marker for add() without an argument (None is an invalid word, not "no word")
_CURRENT_PREFIX = object()


class PrefixCursor:
    """
    Cursor state machine.

    Unlocked: `_level` is the node reached by the whole prefix (ROOT for "").
    Locked(n): the last n characters of the prefix have no path in the trie;
    `_level` stays on the node reached by the part before them, so n retreats
    unlock again without touching the trie.
    """

    def __init__(self, trie: DLBTrie) -> None:
        self.trie = trie
        self._prefix: List[str] = []
        self._level: int = ROOT
        self._locked_depth = 0
        self._seen_generation = trie.generation

    # state -----------------------------------------------------
    @property
    def current_prefix(self) -> str:
        return "".join(self._prefix)

    def get_current_prefix(self) -> str:
        return self.current_prefix

    @property
    def locked(self) -> bool:
        self._sync()
        return self._locked_depth > 0

    @property
    def locked_depth(self) -> int:
        self._sync()
        return self._locked_depth

    def _sync(self) -> None:
        """Catch up with words inserted since this cursor last looked at the trie."""
        if self._seen_generation == self.trie.generation:
            return
        self._seen_generation = self.trie.generation
        # an unlocked position survives inserts: nodes are never moved or removed
        if self._locked_depth:
            self._rewalk()

    def _rewalk(self) -> None:
        level = ROOT
        depth = 0
        for i, ch in enumerate(self._prefix):
            idx = self.trie.find_in_chain(self.trie.node(level).child, ch)
            if idx is None or self.trie.node(idx).count == 0:
                depth = len(self._prefix) - i
                break
            level = idx
        logger.debug("cursor resync on %r: locked %d -> %d", self.current_prefix, self._locked_depth, depth)
        self._level = level
        self._locked_depth = depth

    # navigation -----------------------------------------------------
    def advance(self, c: str) -> bool:
        """
        Append `c` to the prefix; O(1) in dictionary size.
        Returns True while the prefix still leads to at least one word.
        """
        if not isinstance(c, str) or len(c) != 1:
            raise InvalidArgumentError(f"advance() takes a single character, got {c!r}")
        self._sync()
        self._prefix.append(c)

        # once a prefix is dead no extension of it can match
        if self._locked_depth:
            self._locked_depth += 1
            return False

        match = self.trie.find_in_chain(self.trie.node(self._level).child, c)
        if match is None or self.trie.node(match).count == 0:
            # count == 0 means a leaf that continues nowhere (the sentinel)
            self._locked_depth = 1
            logger.debug("prefix %r has no match, cursor locked", self.current_prefix)
            return False

        self._level = match
        return True

    def retreat(self) -> None:
        """Drop the last prefix character; O(1)."""
        if not self._prefix:
            raise InvalidStateError("retreat() called on an empty prefix")
        self._sync()
        self._prefix.pop()
        if self._locked_depth:
            self._locked_depth -= 1
            if not self._locked_depth:
                logger.debug("cursor unlocked at %r", self.current_prefix)
            return
        self._level = self.trie.node(self._level).parent

    def reset(self) -> None:
        self._prefix.clear()
        self._level = ROOT
        self._locked_depth = 0
        self._seen_generation = self.trie.generation

    # queries -----------------------------------------------------
    def is_word(self) -> bool:
        """True if the current prefix is itself a stored word."""
        self._sync()
        if self._locked_depth:
            return False
        head = self.trie.node(self._level).child
        return any(self.trie.node(idx).is_sentinel for idx in self.trie.chain(head))

    def get_number_of_predictions(self) -> int:
        """Words starting with the current prefix (itself included); O(1)."""
        self._sync()
        if self._locked_depth:
            return 0
        return self.trie.node(self._level).count

    def retrieve_prediction(self) -> Optional[str]:
        """
        One completion of the current prefix, or None.
        Walks right along each chain and down the first node that still leads
        to words; the first sentinel met ends the walk. The cursor stays put.
        """
        self._sync()
        if self._locked_depth:
            return None

        suffix: List[str] = []
        cur = self.trie.node(self._level).child
        while cur is not None:
            node = self.trie.node(cur)
            if node.is_sentinel:
                return self.current_prefix + "".join(suffix)
            if node.count > 0:
                suffix.append(node.symbol)
                cur = node.child
            else:
                cur = node.next_sibling
        return None

    # insertion -----------------------------------------------------
    def add(self, word=_CURRENT_PREFIX) -> bool:
        """
        add(word): insert `word` into the shared trie.
        add(): commit the current prefix as a word.
        Returns True if the word was new.
        """
        if word is _CURRENT_PREFIX:
            word = self.current_prefix
        added = self.trie.insert(word)
        self._sync()
        return added

    def __repr__(self) -> str:
        state = f"locked({self._locked_depth})" if self._locked_depth else "unlocked"
        return f"PrefixCursor({self.current_prefix!r}, {state})"
