"""
dlb_autocomplete.core

The engine itself:
 - DLBNode / DLBTrie: arena-backed De La Briandais trie with per-node word counts
 - PrefixCursor: keystroke navigation (advance / retreat / reset) and queries
 - AutoComplete: dictionary + default cursor behind one object
"""

from .dlb_node import DLBNode, SENTINEL, ROOT
from .dlb_trie import DLBTrie
from .cursor import PrefixCursor
from .autocomplete import AutoComplete
from .errors import AutoCompleteError, InvalidArgumentError, InvalidStateError

__all__ = [
    "DLBNode",
    "SENTINEL",
    "ROOT",
    "DLBTrie",
    "PrefixCursor",
    "AutoComplete",
    "AutoCompleteError",
    "InvalidArgumentError",
    "InvalidStateError",
]
