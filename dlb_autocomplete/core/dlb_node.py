# dlb_node.py
# One record of the DLB trie arena.
# Links are integer indices into DLBTrie._nodes (None = no link), not object refs.

from __future__ import annotations
from typing import Optional

# Synthetic last node of every stored word.
SENTINEL = "^"

# Index of the root record. It holds no character; its child is the chain
# of first characters and its count is the number of stored words.
ROOT = 0

Index = Optional[int]


class DLBNode:
    """
    A single node in the DLB trie.
    symbol: one character (SENTINEL marks end-of-word)
    count: number of words that pass through this node into its child chain
    is_word: a word ends exactly here (this node's child chain holds a SENTINEL)
    child / next_sibling: owning links (first node of next level / next alternative)
    prev_sibling / parent: back-references, only used for navigation
    """

    __slots__ = ("symbol", "count", "is_word", "child", "next_sibling", "prev_sibling", "parent")

    def __init__(self, symbol: str, parent: Index = None) -> None:
        self.symbol = symbol
        self.count = 0
        self.is_word = False
        self.child: Index = None
        self.next_sibling: Index = None
        self.prev_sibling: Index = None
        self.parent: Index = parent

    @property
    def is_sentinel(self) -> bool:
        return self.symbol == SENTINEL

    def __repr__(self) -> str:
        return f"DLBNode({self.symbol!r}, count={self.count}, is_word={self.is_word})"
