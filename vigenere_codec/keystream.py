"""
KeyExpander
===========
Turns a short key into one shift value per message position by cyclic
repetition.

Position p of the stream is index_of(key[p % len(key)]). The stream is
driven by absolute message position: a space in the message still uses up
its key letter, the shift is just thrown away by the transform.
"""

import logging

from .alphabet import index_of
from .exceptions import InvalidKey

logger = logging.getLogger(__name__)


def normalize_key(key: str) -> str:
    """
    Case-fold `key` and keep only letters a-z.
    Raises InvalidKey if nothing is left.
    """
    cleaned = "".join(c for c in (key or "").lower() if index_of(c) is not None)
    if not cleaned:
        raise InvalidKey("Vigenère key must contain at least one letter a-z.")
    return cleaned


def expand_key(key: str, length: int) -> list:
    """
    Build a shift sequence of `length` integers (0-25) from `key`.

    The key is normalised first, so an empty or letter-free key fails here
    rather than as a modulo-by-zero further down.
    """
    shifts = [index_of(c) for c in normalize_key(key)]
    period = len(shifts)
    stream = [shifts[p % period] for p in range(length)]
    logger.debug(f"Key expanded: period={period} length={length}")
    return stream
