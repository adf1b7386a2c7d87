"""
Analysis Conditions
====================

Exceptions raised by the cryptanalysis pipeline.  Every condition aborts
the run at the stage that detects it; no partial decryption is produced.
"""

from __future__ import annotations

from typing import Optional


class VigenereError(Exception):
    """Base class for every condition raised by the analysis pipeline."""

    pass


class InvalidInputError(VigenereError):
    """Ciphertext or key is empty or contains a character outside A-Z.

    Attributes:
        position:  Index of the first offending character, if known.
        character: The offending character, if known.
    """

    def __init__(
        self,
        message: str,
        *,
        position: Optional[int] = None,
        character: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.position = position
        self.character = character


class InvalidKeyLengthError(VigenereError):
    """Key length below 1, including the 0 "no signal" estimate."""

    def __init__(self, key_length: int) -> None:
        if key_length == 0:
            message = (
                "Key length is 0: no repeated substrings were found, "
                "so there is no signal to estimate the key length from"
            )
        else:
            message = f"Key length must be at least 1, got {key_length}"
        super().__init__(message)
        self.key_length = key_length


class UnresolvedLetterError(VigenereError):
    """No trial shift produced a positive correlation for a column."""

    def __init__(self, column: int) -> None:
        super().__init__(
            f"Could not resolve key letter for column {column}: "
            f"every trial shift scored zero correlation"
        )
        self.column = column
