"""Exceptions raised by vigenere_codec."""


class InvalidKey(ValueError):
    """
    The key is empty, or holds no letter a-z once case-folded and filtered.

    Subclasses ValueError so existing `except ValueError` handlers still
    catch a bad key.
    """
