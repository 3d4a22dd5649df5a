"""
dlb_autocomplete - incremental autocomplete backed by a De La Briandais trie.
"""

from .core import (
    AutoComplete,
    AutoCompleteError,
    DLBTrie,
    InvalidArgumentError,
    InvalidStateError,
    PrefixCursor,
    SENTINEL,
)

__all__ = [
    "AutoComplete",
    "AutoCompleteError",
    "DLBTrie",
    "InvalidArgumentError",
    "InvalidStateError",
    "PrefixCursor",
    "SENTINEL",
]

__version__ = "0.1.0"
