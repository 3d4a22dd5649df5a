# dlb_trie.py
# De La Briandais trie: every node has one child link (head of a sibling chain)
# instead of a children table. Alternatives at one position form a doubly
# linked chain kept in insertion order.
#
# Nodes live in a flat arena (self._nodes) and link to each other by index.
# Each node keeps the number of words continuing through it, so prefix
# prediction counts are O(1) reads.

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from .dlb_node import DLBNode, Index, ROOT, SENTINEL
from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)


def check_word(word) -> str:
    """Validate a word for insertion, returning it unchanged."""
    if word is None:
        raise InvalidArgumentError("add() called with no word")
    if not isinstance(word, str):
        raise InvalidArgumentError(f"word must be a str, got {type(word).__name__}")
    if word == "":
        raise InvalidArgumentError("add() called with the empty string")
    if SENTINEL in word:
        raise InvalidArgumentError(f"word may not contain the reserved character {SENTINEL!r}")
    return word


class DLBTrie:
    """
    Dictionary storage shared by one or more PrefixCursor sessions.

    The trie only grows: nodes are appended to the arena and never removed, so
    any index handed out stays valid for the trie's lifetime. `generation`
    increases on every successful insert; cursors use it to notice new words.
    """

    def __init__(self, words: Optional[Iterable[str]] = None) -> None:
        self._nodes: List[DLBNode] = [DLBNode("")]
        self.generation = 0
        if words is not None:
            for w in words:
                self.insert(w)

    # node access -----------------------------------------------------
    def node(self, idx: int) -> DLBNode:
        return self._nodes[idx]

    @property
    def node_count(self) -> int:
        """Arena size, root record included."""
        return len(self._nodes)

    def chain(self, head: Index) -> Iterator[int]:
        """Yield indices of a sibling chain, left to right, starting at `head`."""
        cur = head
        while cur is not None:
            yield cur
            cur = self._nodes[cur].next_sibling

    def chain_head(self, idx: int) -> int:
        """Rewind to the first node of the chain containing `idx`."""
        node = self._nodes[idx]
        while node.prev_sibling is not None:
            idx = node.prev_sibling
            node = self._nodes[idx]
        return idx

    def find_in_chain(self, head: Index, symbol: str) -> Index:
        for idx in self.chain(head):
            if self._nodes[idx].symbol == symbol:
                return idx
        return None

    # insertion -----------------------------------------------------
    def insert(self, word: str) -> bool:
        """
        Insert `word`; O(len(word)).
        Returns True when the word is new, False for a duplicate. A duplicate
        creates no nodes and leaves every count untouched.
        """
        check_word(word)

        path = [ROOT]
        is_new = False
        for ch in word + SENTINEL:
            idx, is_new = self._descend_or_create(path[-1], ch)
            path.append(idx)

        # only the sentinel can tell: any new node above it forces a new sentinel
        if not is_new:
            logger.debug("duplicate word %r ignored", word)
            return False

        # root + every character node; the sentinel itself continues nowhere
        for idx in path[:-1]:
            self._nodes[idx].count += 1
        self._nodes[path[-2]].is_word = True
        self.generation += 1
        logger.debug("inserted %r (%d words, %d nodes)", word, len(self), len(self._nodes))
        return True

    def _descend_or_create(self, parent: int, symbol: str) -> Tuple[int, bool]:
        """Find `symbol` in parent's child chain, appending a node if it is missing."""
        pnode = self._nodes[parent]
        if pnode.child is None:
            idx = self._new_node(symbol, parent)
            pnode.child = idx
            return idx, True

        last = None
        for idx in self.chain(pnode.child):
            if self._nodes[idx].symbol == symbol:
                return idx, False
            last = idx

        # new alternatives go after the existing ones, never sorted in
        idx = self._new_node(symbol, parent)
        self._nodes[last].next_sibling = idx
        self._nodes[idx].prev_sibling = last
        return idx, True

    def _new_node(self, symbol: str, parent: int) -> int:
        self._nodes.append(DLBNode(symbol, parent))
        return len(self._nodes) - 1

    # lookup -----------------------------------------------------
    def find_node(self, prefix: str) -> Index:
        """Index of the node for the last character of `prefix` (ROOT for ""), or None."""
        idx = ROOT
        for ch in prefix:
            idx = self.find_in_chain(self._nodes[idx].child, ch)
            if idx is None:
                return None
        return idx

    def count_prefix(self, prefix: str) -> int:
        """Number of stored words starting with `prefix`."""
        idx = self.find_node(prefix)
        return 0 if idx is None else self._nodes[idx].count

    def __contains__(self, word) -> bool:
        if not isinstance(word, str) or not word:
            return False
        idx = self.find_node(word)
        return idx is not None and self._nodes[idx].is_word

    def __len__(self) -> int:
        return self._nodes[ROOT].count

    def words(self) -> Iterator[str]:
        """All stored words, depth first, siblings in insertion order."""
        stack = [(self._nodes[ROOT].child, "")]
        while stack:
            idx, prefix = stack.pop()
            if idx is None:
                continue
            node = self._nodes[idx]
            # sibling after the whole child subtree
            stack.append((node.next_sibling, prefix))
            if node.is_sentinel:
                yield prefix
            else:
                stack.append((node.child, prefix + node.symbol))

    # convenience/debugging -----------------------------------------------------
    def dump(self, start: str = "") -> List[str]:
        """
        Pretty listing of the subtrie below `start` (whole trie for "").
        One line per node: indent by depth, symbol, ' *' for word ends, (count).
        """
        lines = [f'==================== START: DLB Trie Starting from "{start}" ====================']
        anchor = self.find_node(start)
        if anchor is not None:
            stack = [(self._nodes[anchor].child, 0)]
            while stack:
                idx, depth = stack.pop()
                if idx is None:
                    continue
                node = self._nodes[idx]
                mark = " *" if node.is_word else ""
                lines.append(f"{' ' * depth}{node.symbol}{mark} ({node.count})")
                stack.append((node.next_sibling, depth))
                stack.append((node.child, depth + 1))
        lines.append(f'==================== END: DLB Trie Starting from "{start}" ====================')
        return lines
