"""
Vigenere Transforms
====================

Letter-level transforms over the 26-letter alphabet: validation, the
single-amount shift used to test key-letter candidates, and Vigenere
encryption / decryption with a cyclically applied key.

All arithmetic is modulo 26 with ``A = 0``.
"""

from __future__ import annotations

import re
import string
from functools import lru_cache

import numpy as np

from vigenere.core.exceptions import InvalidInputError

ALPHABET: str = string.ascii_uppercase
_ORD_A: int = ord("A")
_NON_LETTER = re.compile(r"[^A-Z]")


def ensure_letters(text: str, what: str = "ciphertext", *, allow_empty: bool = False) -> str:
    """Check that *text* consists only of the letters A-Z.

    Args:
        text: Text to check.
        what: Name used in the error message.
        allow_empty: Accept the empty string.

    Returns:
        *text* unchanged.

    Raises:
        InvalidInputError: On empty input (unless allowed) or on the first
            character outside A-Z.
    """
    if not text:
        if allow_empty:
            return text
        raise InvalidInputError(f"{what} is empty")
    match = _NON_LETTER.search(text)
    if match is not None:
        raise InvalidInputError(
            f"{what} contains {match.group()!r} at position {match.start()}; "
            f"only uppercase letters A-Z are allowed",
            position=match.start(),
            character=match.group(),
        )
    return text


@lru_cache(maxsize=26)
def _shift_table(amount: int) -> dict[int, int]:
    shifted = ALPHABET[-amount:] + ALPHABET[:-amount] if amount else ALPHABET
    return str.maketrans(ALPHABET, shifted)


def shift(text: str, amount: int) -> str:
    """Subtract *amount* (mod 26) from every letter of *text*."""
    return text.translate(_shift_table(amount % 26))


def _codes(text: str) -> np.ndarray:
    return np.frombuffer(text.encode("ascii"), dtype=np.uint8).astype(np.int16) - _ORD_A


def _apply_key(text: str, key: str, sign: int) -> str:
    ensure_letters(text, allow_empty=True)
    ensure_letters(key, "key")
    if not text:
        return ""
    codes = _codes(text)
    key_codes = np.resize(_codes(key), codes.size)
    out = (codes + sign * key_codes) % 26 + _ORD_A
    return out.astype(np.uint8).tobytes().decode("ascii")


def decrypt(ciphertext: str, key: str) -> str:
    """Invert the Vigenere shift: ``P[i] = (C[i] - K[i mod |K|]) mod 26``.

    Raises:
        InvalidInputError: If the key is empty or either input contains a
            character outside A-Z.
    """
    return _apply_key(ciphertext, key, -1)


def encrypt(plaintext: str, key: str) -> str:
    """Standard Vigenere encryption: ``C[i] = (P[i] + K[i mod |K|]) mod 26``."""
    return _apply_key(plaintext, key, 1)
