"""
AlphabetIndex
=============
Fixed 26-letter lowercase alphabet and the two lookups the cipher needs:
letter -> position and position -> letter.

The table is built once at import time and never mutated.
"""

from typing import Optional

ALPHABET      = "abcdefghijklmnopqrstuvwxyz"
ALPHABET_SIZE = len(ALPHABET)

_INDEX = {ch: i for i, ch in enumerate(ALPHABET)}


def index_of(char: str) -> Optional[int]:
    """
    Position (0-25) of a lowercase letter, or None for anything else.
    Uppercase and space both return None: callers case-fold first.
    """
    return _INDEX.get(char)


def letter_of(index: int) -> str:
    """Letter at `index`. Only values already reduced modulo 26 are valid."""
    if not 0 <= index < ALPHABET_SIZE:
        raise ValueError(f"Alphabet index must be in [0, {ALPHABET_SIZE - 1}], got {index}.")
    return ALPHABET[index]
