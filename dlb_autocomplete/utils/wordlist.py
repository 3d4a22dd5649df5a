# wordlist.py - read plain-text dictionaries (one word per line)

from pathlib import Path
from typing import Iterator, Union


def iter_words(lines) -> Iterator[str]:
    """Strip lines, skipping blanks and '#' comments."""
    for raw in lines:
        w = raw.strip()
        if not w or w.startswith("#"):
            continue
        yield w


def load_words(path: Union[str, Path]) -> list:
    """Read a word list file. A missing file raises FileNotFoundError."""
    with open(path, "r", encoding="utf-8") as f:
        return list(iter_words(f))
