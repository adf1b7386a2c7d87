"""
Vigenere -- Keyless Cryptanalysis of the Vigenere Cipher
=========================================================

Estimates the key length from repeated-substring spacing (Kasiski
examination with pairwise-GCD voting), recovers each key letter by
frequency correlation against a reference language, and decrypts.

Modules:
    - vigenere.core.engine: Pipeline orchestrator
    - vigenere.core.models: Pydantic result models
    - vigenere.core.transform: Shift, encryption and decryption
    - vigenere.analyzers: Frequency model, Kasiski examiner, key solver
    - vigenere.parsers: Ciphertext input parsing
    - vigenere.output: Console and report output
    - vigenere.cli: Click-based command-line interface

References:
    - Kasiski, F. W. (1863). Die Geheimschriften und die Dechiffrirkunst.
    - Friedman, W. F. (1922). The Index of Coincidence and Its
      Applications in Cryptanalysis. Riverbank Publication No. 22.
"""

__version__ = "1.0.0"
__tool_name__ = "vigenere"
