"""
Vigenere Parsers
=================

Input parsing for ciphertext files and strings.
"""

from vigenere.parsers.ciphertext_parser import CiphertextParser

__all__ = [
    "CiphertextParser",
]
