"""
Key-Letter Solver
==================

Splits ciphertext into one column per key position and recovers each key
letter by trying all 26 shifts of the column and keeping the one whose
letters correlate best with the reference language.

Scoring modes (see :class:`~vigenere.core.models.ScoringMode`):

``FULL_TEXT``
    ``score = sum(F[c] * R[c] for c in shifted)`` where ``F`` is the
    relative-frequency profile of the *entire* ciphertext, computed once
    and shared by every column, and indexed by the identity of the
    *shifted* letter.  This is the classical reference behaviour and the
    default.

``COLUMN``
    ``score = sum(f[c] * R[c] for c in A..Z)`` where ``f`` is the shifted
    column's own relative-frequency profile.

Shift selection keeps the first shift whose score is strictly greater
than the best so far, starting from 0.0: on ties the lowest shift wins,
and a column where every shift scores 0.0 is unresolved.

References:
    - Sinkov, A. (1966). Elementary Cryptanalysis. Chapter 2.
    - Gaines, H. F. (1956). Cryptanalysis: A Study of Ciphers and Their
      Solution. Dover.
"""

from __future__ import annotations

from typing import Mapping, Optional

from shared.logger import VigenereLogger
from vigenere.analyzers.frequency import (
    ALPHABET,
    ENGLISH,
    ReferenceFrequencyTable,
    index_of_coincidence,
    letter_frequencies,
)
from vigenere.core.exceptions import InvalidKeyLengthError, UnresolvedLetterError
from vigenere.core.models import ColumnAnalysis, ScoringMode
from vigenere.core.transform import ensure_letters, shift


def split_columns(text: str, key_length: int) -> list[str]:
    """Partition *text* into *key_length* interleaved columns.

    Letter ``i`` goes to column ``i % key_length``; relative order within a
    column is preserved.

    Raises:
        InvalidKeyLengthError: If *key_length* is below 1.
    """
    if key_length < 1:
        raise InvalidKeyLengthError(key_length)
    return [text[i::key_length] for i in range(key_length)]


def correlation(
    text: str,
    profile: Mapping[str, float],
    reference: ReferenceFrequencyTable,
) -> float:
    """Sum of ``profile[c] * reference[c]`` over every letter of *text*.

    Letters absent from *profile* contribute 0.

    Raises:
        InvalidInputError: If *text* contains a character outside A-Z.
    """
    ensure_letters(text, allow_empty=True)
    return sum(profile.get(c, 0.0) * reference[c] for c in text)


class KeySolver:
    """Recovers key letters column by column.

    Usage::

        solver = KeySolver(ENGLISH)
        key = solver.solve(ciphertext, key_length=5)

    Args:
        reference: Reference language frequencies.
        mode: Shift scoring mode.
        logger: Optional logger; a component logger is created otherwise.
    """

    def __init__(
        self,
        reference: ReferenceFrequencyTable = ENGLISH,
        mode: ScoringMode = ScoringMode.FULL_TEXT,
        logger: Optional[VigenereLogger] = None,
    ) -> None:
        self.reference = reference
        self.mode = ScoringMode(mode)
        self.logger = logger or VigenereLogger("solver", console_output=False)

    def score(self, shifted: str, profile: Mapping[str, float]) -> float:
        """Score one shifted column according to :attr:`mode`."""
        if self.mode is ScoringMode.FULL_TEXT:
            return correlation(shifted, profile, self.reference)
        own = letter_frequencies(shifted)
        return sum(freq * self.reference[letter] for letter, freq in own.items())

    def find_shift(
        self,
        column: str,
        profile: Mapping[str, float],
        index: int = 0,
    ) -> tuple[int, float]:
        """Best trial shift for *column* and its score.

        Raises:
            InvalidInputError: If *column* contains a character outside A-Z.
            UnresolvedLetterError: If no shift scores above 0.0.
        """
        ensure_letters(column, "column", allow_empty=True)
        best_shift: Optional[int] = None
        best_score = 0.0
        for amount in range(len(ALPHABET)):
            score = self.score(shift(column, amount), profile)
            # Strict ">" keeps the first maximum
            if score > best_score:
                best_score = score
                best_shift = amount
        if best_shift is None:
            raise UnresolvedLetterError(index)
        return best_shift, best_score

    def find_letter(
        self,
        column: str,
        profile: Mapping[str, float],
        index: int = 0,
    ) -> str:
        """Key letter (``'A' + shift``) for *column*."""
        best_shift, _ = self.find_shift(column, profile, index)
        return ALPHABET[best_shift]

    def solve_columns(self, text: str, key_length: int) -> list[ColumnAnalysis]:
        """Resolve every column of *text* and collect its diagnostics.

        The column's Index of Coincidence is recorded for inspection only;
        it is ``None`` for columns with fewer than two letters.

        Raises:
            InvalidInputError: If *text* is empty or contains a character
                outside A-Z.
        """
        ensure_letters(text)
        columns = split_columns(text, key_length)
        profile = letter_frequencies(text) if self.mode is ScoringMode.FULL_TEXT else {}

        results: list[ColumnAnalysis] = []
        for index, column in enumerate(columns):
            ioc: Optional[float] = None
            if len(column) >= 2:
                ioc = index_of_coincidence(column)
            else:
                self.logger.warning(
                    "Column %d has %d letter(s); its IOC is undefined",
                    index,
                    len(column),
                )
            best_shift, best_score = self.find_shift(column, profile, index)
            self.logger.debug(
                "Column %d: %d letters, shift %d (%s), score %.6f",
                index,
                len(column),
                best_shift,
                ALPHABET[best_shift],
                best_score,
            )
            results.append(ColumnAnalysis(
                index=index,
                length=len(column),
                ioc=ioc,
                shift=best_shift,
                letter=ALPHABET[best_shift],
                score=best_score,
            ))
        return results

    def solve(self, text: str, key_length: int) -> str:
        """Recover the key of length *key_length* for *text*."""
        return "".join(col.letter for col in self.solve_columns(text, key_length))
