"""
Vigenere Analyzers
===================

The statistical stages of the pipeline: the reference frequency model and
Index of Coincidence, the Kasiski examiner with GCD voting, and the
per-column key-letter solver.
"""

from vigenere.analyzers.frequency import (
    ENGLISH,
    ReferenceFrequencyTable,
    index_of_coincidence,
    letter_frequencies,
)
from vigenere.analyzers.kasiski import KasiskiExaminer
from vigenere.analyzers.solver import KeySolver, correlation, split_columns

__all__ = [
    "ENGLISH",
    "KasiskiExaminer",
    "KeySolver",
    "ReferenceFrequencyTable",
    "correlation",
    "index_of_coincidence",
    "letter_frequencies",
    "split_columns",
]
