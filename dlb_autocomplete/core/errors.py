# errors.py - exceptions raised by the autocomplete engine
# Ordinary "no match" outcomes are return values (False / None / 0), not errors.


class AutoCompleteError(Exception):
    """Base class for engine errors."""


class InvalidArgumentError(AutoCompleteError, ValueError):
    """Bad input: empty/absent word, word holding the sentinel, multi-char advance."""


class InvalidStateError(AutoCompleteError, RuntimeError):
    """Operation not allowed in the current cursor state (retreat on empty prefix)."""
