"""
VigenereCodec: Polyalphabetic Substitution
==========================================
Classic Vigenère over the lowercase alphabet a-z with a repeating key.

Encode:  c[i] = (m[i] + k[i mod |k|]) mod 26
Decode:  m[i] = (c[i] - k[i mod |k|] + 26) mod 26

Rules:
  * Input is case-folded one character at a time.
  * A space stays a space. Its key letter is still consumed.
  * Any other character outside a-z becomes a space (silent substitution).
  * Output length always equals input length.

Not secure. Falls to Kasiski / Friedman analysis and to any known
plaintext. Use it for teaching and puzzles only.
"""

import logging

from .alphabet import ALPHABET, ALPHABET_SIZE, index_of, letter_of
from .keystream import expand_key

logger = logging.getLogger(__name__)


class VigenereCodec:
    """
    Stateless Vigenère encoder/decoder.

    Holds no key: every call takes the key it needs, so one codec (or the
    module-level `encode` / `decode`) is safe to share between threads.
    """

    ALPHA  = ALPHABET
    SIZE   = ALPHABET_SIZE
    FILLER = " "   # emitted for spaces and unsupported characters

    @classmethod
    def encode(cls, message: str, key: str) -> str:
        """Encrypt `message` under `key`. Raises InvalidKey for an empty key."""
        return cls._transform(message, key, +1)

    @classmethod
    def decode(cls, ciphertext: str, key: str) -> str:
        """Decrypt `ciphertext` under `key`. Raises InvalidKey for an empty key."""
        return cls._transform(ciphertext, key, -1)

    # ── helpers ──────────────────────────────────────────────────────────────

    @classmethod
    def _transform(cls, text: str, key: str, direction: int) -> str:
        shifts = expand_key(key, len(text))
        result = []
        replaced = 0
        for ch, shift in zip(text, shifts):
            if ch == cls.FILLER:
                result.append(cls.FILLER)
                continue
            m = index_of(ch.lower())
            if m is None:
                result.append(cls.FILLER)
                replaced += 1
                continue
            if direction > 0:
                result.append(letter_of((m + shift) % cls.SIZE))
            else:
                result.append(letter_of((m - shift + cls.SIZE) % cls.SIZE))
        if replaced:
            logger.debug(f"Replaced {replaced} unsupported character(s) with spaces")
        logger.debug(f"{'Encoded' if direction > 0 else 'Decoded'} {len(text)} chars")
        return "".join(result)


def encode(message: str, key: str) -> str:
    """Encrypt `message` with the repeating `key`."""
    return VigenereCodec.encode(message, key)


def decode(ciphertext: str, key: str) -> str:
    """Decrypt `ciphertext` with the repeating `key`."""
    return VigenereCodec.decode(ciphertext, key)


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format=' %(message)s')

    vectors = [
        ("hello",       "key", "rijvs"),
        ("a",           "a",   "a"),
        ("hello world", "key", "rijvs gspvh"),
    ]
    for plain, key, expected in vectors:
        ct = encode(plain, key)
        assert ct == expected, (plain, key, ct)
        assert decode(ct, key) == plain
        print(f"{plain!r:15} + {key!r:6} -> {ct!r} ✓")
    print("All vectors: PASSED")
