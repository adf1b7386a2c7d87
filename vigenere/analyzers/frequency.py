"""
Frequency Model
================

Reference single-letter frequencies for the target language, letter
frequency profiles of observed text, and the Index of Coincidence.

Index of Coincidence landmarks (26-letter alphabet):
    - IC ~ 0.066 : monoalphabetic stream (English plaintext or a single
      Caesar-shifted column when the key length is right)
    - IC ~ 0.038 : polyalphabetic or random letters (1/26)

References:
    - Friedman, W. F. (1922). The Index of Coincidence and Its
      Applications in Cryptanalysis. Riverbank Publication No. 22.
    - Sinkov, A. (1966). Elementary Cryptanalysis: A Mathematical
      Approach. Mathematical Association of America.
"""

from __future__ import annotations

import string

from pydantic import BaseModel, ConfigDict, field_validator

from shared import math_utils
from vigenere.core.exceptions import InvalidInputError

ALPHABET: str = string.ascii_uppercase


class ReferenceFrequencyTable(BaseModel):
    """Expected relative frequency of each letter in a natural language.

    Immutable; one instance is shared by every correlation computed in a
    run and can be swapped for another language (or a test table).

    Attributes:
        language: Short language code, e.g. ``"en"``.
        frequencies: Mapping of every letter A-Z to its probability.
    """

    model_config = ConfigDict(frozen=True)

    language: str
    frequencies: dict[str, float]

    @field_validator("frequencies")
    @classmethod
    def _check_alphabet(cls, v: dict[str, float]) -> dict[str, float]:
        if set(v) != set(ALPHABET):
            missing = sorted(set(ALPHABET) - set(v))
            extra = sorted(set(v) - set(ALPHABET))
            raise ValueError(
                f"reference table must cover exactly A-Z "
                f"(missing={missing}, unexpected={extra})"
            )
        if any(p < 0 for p in v.values()):
            raise ValueError("reference frequencies must be non-negative")
        total = sum(v.values())
        if abs(total - 1.0) > 0.01:
            raise ValueError(
                f"reference frequencies must sum to ~1.0, got {total:.4f}"
            )
        return {letter: float(v[letter]) for letter in ALPHABET}

    def __getitem__(self, letter: str) -> float:
        return self.frequencies[letter]


ENGLISH = ReferenceFrequencyTable(
    language="en",
    frequencies={
        "A": 0.0812, "B": 0.0149, "C": 0.0271, "D": 0.0432,
        "E": 0.1202, "F": 0.0230, "G": 0.0203, "H": 0.0592,
        "I": 0.0731, "J": 0.0010, "K": 0.0069, "L": 0.0398,
        "M": 0.0261, "N": 0.0695, "O": 0.0768, "P": 0.0182,
        "Q": 0.0011, "R": 0.0602, "S": 0.0628, "T": 0.0910,
        "U": 0.0288, "V": 0.0111, "W": 0.0209, "X": 0.0017,
        "Y": 0.0211, "Z": 0.0007,
    },
)

REFERENCE_TABLES: dict[str, ReferenceFrequencyTable] = {
    "en": ENGLISH,
}


def get_reference_table(language: str) -> ReferenceFrequencyTable:
    """Look up a built-in reference table by language code.

    Raises:
        ValueError: If no table is registered for *language*.
    """
    try:
        return REFERENCE_TABLES[language.lower()]
    except KeyError:
        raise ValueError(
            f"No reference frequency table for language {language!r}; "
            f"available: {', '.join(sorted(REFERENCE_TABLES))}"
        ) from None


def letter_frequencies(text: str) -> dict[str, float]:
    """Relative frequency (count / length) of each letter present in *text*.

    Letters that do not occur are absent from the result; an empty text
    yields an empty profile.
    """
    if not text:
        return {}
    counts = math_utils.letter_histogram(text)
    n = len(text)
    return {
        ALPHABET[i]: int(c) / n
        for i, c in enumerate(counts)
        if c > 0
    }


def index_of_coincidence(text: str) -> float:
    """Index of Coincidence of a letter sequence.

    Order-independent: any permutation of *text* yields the same value.

    Raises:
        InvalidInputError: If *text* holds fewer than two letters.
    """
    if len(text) < 2:
        raise InvalidInputError(
            f"Index of Coincidence is undefined for {len(text)} letter(s)"
        )
    return math_utils.index_of_coincidence(math_utils.letter_histogram(text))
