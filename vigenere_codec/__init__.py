"""
vigenere_codec
==============
Vigenère polyalphabetic substitution over lowercase a-z.

Blaise de Vigenère, 1553. "Le chiffre indéchiffrable" for three hundred
years, broken by Kasiski in 1863. Educational, not secure.

    >>> from vigenere_codec import encode, decode
    >>> encode("hello", "key")
    'rijvs'
    >>> decode("rijvs", "key")
    'hello'

Modules:
    alphabet   AlphabetIndex: letter <-> position 0-25
    keystream  KeyExpander: repeating key -> per-position shifts
    codec      Transform: encode / decode
    keygen     Random key generation
"""

__version__ = "1.0.0"

from .alphabet   import ALPHABET, ALPHABET_SIZE, index_of, letter_of
from .keystream  import normalize_key, expand_key
from .codec      import VigenereCodec, encode, decode
from .keygen     import generate_key
from .exceptions import InvalidKey

__all__ = [
    "ALPHABET",
    "ALPHABET_SIZE",
    "index_of",
    "letter_of",
    "normalize_key",
    "expand_key",
    "VigenereCodec",
    "encode",
    "decode",
    "generate_key",
    "InvalidKey",
]
