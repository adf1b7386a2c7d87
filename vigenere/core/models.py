"""
Vigenere Core Data Models
==========================

Pydantic models for the cryptanalysis pipeline.  Results are frozen once
built: each stage produces a value that no later stage mutates.

The field order of :class:`AnalysisResult` mirrors the order in which the
diagnostics become available: Kasiski distances, the estimated key
length, per-column Index of Coincidence, the recovered key, and finally
the plaintext.

References:
    - Kasiski, F. W. (1863). Die Geheimschriften und die Dechiffrirkunst.
    - Friedman, W. F. (1922). The Index of Coincidence and Its
      Applications in Cryptanalysis. Riverbank Publication No. 22.
"""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class ScoringMode(str, enum.Enum):
    """How each trial shift of a column is scored against the reference.

    ``FULL_TEXT`` weights each shifted letter by its relative frequency in
    the whole ciphertext (one profile shared by every column).  ``COLUMN``
    takes the dot product of the shifted column's own relative frequencies
    with the reference table.
    """

    FULL_TEXT = "full_text"
    COLUMN = "column"


# ===================================================================== #
#  Per-column diagnostics
# ===================================================================== #


class ColumnAnalysis(BaseModel):
    """Diagnostics for one key position.

    Attributes:
        index: Column (key position) index, 0-based.
        length: Number of ciphertext letters in the column.
        ioc: Index of Coincidence of the column, or ``None`` when the
            column holds fewer than two letters.
        shift: Winning trial shift (0-25).
        letter: Key letter for the shift (``'A' + shift``).
        score: Correlation score of the winning shift.
    """

    model_config = ConfigDict(frozen=True)

    index: int = Field(..., ge=0)
    length: int = Field(..., ge=0)
    ioc: Optional[float] = None
    shift: int = Field(..., ge=0, le=25)
    letter: str = Field(..., min_length=1, max_length=1)
    score: float = 0.0


class KasiskiResult(BaseModel):
    """Output of the Kasiski examination and GCD vote.

    Attributes:
        distances: Gaps between successive occurrences of each repeated
            substring, in discovery order.
        key_length: Most frequent pairwise GCD (0 means no signal).
    """

    model_config = ConfigDict(frozen=True)

    distances: list[int] = Field(default_factory=list)
    key_length: int = 0


class AnalysisResult(BaseModel):
    """Complete result of one keyless cryptanalysis run.

    Attributes:
        ciphertext_length: Number of letters analysed.
        distances: Kasiski distances in discovery order.
        key_length: Key length the columns were split on.
        columns: Per-column diagnostics in column order.
        key: Recovered key.
        plaintext: Ciphertext decrypted with :attr:`key`.
        scoring_mode: Shift scoring mode used by the solver.
    """

    model_config = ConfigDict(frozen=True)

    ciphertext_length: int = 0
    distances: list[int] = Field(default_factory=list)
    key_length: int = Field(..., ge=1)
    columns: list[ColumnAnalysis] = Field(default_factory=list)
    key: str = ""
    plaintext: str = ""
    scoring_mode: ScoringMode = ScoringMode.FULL_TEXT

    @property
    def column_iocs(self) -> list[Optional[float]]:
        """Per-column Index of Coincidence values, in column order."""
        return [col.ioc for col in self.columns]
