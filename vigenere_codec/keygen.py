"""
Random key generation for the Vigenère codec.

Keys are drawn from the OS CSPRNG via `secrets`, one uniform pick from
a-z per position.
"""

import logging
import secrets

from .alphabet import ALPHABET

logger = logging.getLogger(__name__)


def generate_key(length: int) -> str:
    """Return exactly `length` random lowercase letters."""
    if length < 1:
        raise ValueError("Key length must be at least 1.")
    key = "".join(secrets.choice(ALPHABET) for _ in range(length))
    logger.debug(f"Generated key: length={length}")
    return key
