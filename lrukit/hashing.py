"""Hash functions used by the hash dictionary."""

from __future__ import annotations

from typing import Iterable

__all__ = ["MODULUS", "hash_int", "hash_string", "hash_text_sum"]

MODULUS = int(1e9 + 7)


def hash_int(value: int) -> int:
    """Hash an integer as its absolute value."""
    return abs(value)


def hash_string(text: str) -> int:
    """Sum of the character codes of ``text``, reduced modulo ``MODULUS``."""
    return hash_text_sum((text,))


def hash_text_sum(texts: Iterable[str]) -> int:
    """Sum of the character codes of all ``texts``, reduced modulo ``MODULUS``."""
    total = 0
    for text in texts:
        for char in text:
            total = (total + ord(char)) % MODULUS
    return total