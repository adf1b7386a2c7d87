"""
Vigenere Core Module
=====================

Data models, analysis conditions and letter transforms.  The pipeline
orchestrator lives in :mod:`vigenere.core.engine`.
"""

from vigenere.core.exceptions import (
    InvalidInputError,
    InvalidKeyLengthError,
    UnresolvedLetterError,
    VigenereError,
)
from vigenere.core.models import (
    AnalysisResult,
    ColumnAnalysis,
    KasiskiResult,
    ScoringMode,
)

__all__ = [
    "AnalysisResult",
    "ColumnAnalysis",
    "InvalidInputError",
    "InvalidKeyLengthError",
    "KasiskiResult",
    "ScoringMode",
    "UnresolvedLetterError",
    "VigenereError",
]
