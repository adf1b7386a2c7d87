"""
Mathematical Utilities
=======================

Counting and number-theoretic primitives used by the cryptanalysis
pipeline: 26-bin letter histograms, the Index of Coincidence, and the
pairwise-GCD vote behind Kasiski key-length estimation.

Every function is backed by NumPy and carries a short citation.

References:
    [1] Friedman, W. F. (1922). The Index of Coincidence and Its
        Applications in Cryptanalysis. Riverbank Publication No. 22.
    [2] Kasiski, F. W. (1863). Die Geheimschriften und die
        Dechiffrirkunst. Berlin: E. S. Mittler und Sohn.
    [3] Knuth, D. E. (1997). The Art of Computer Programming, Vol. 2:
        Seminumerical Algorithms, 3rd ed., section 4.5.2.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import NDArray


IntArray = NDArray[np.int64]

ALPHABET_SIZE: int = 26
_ORD_A: int = ord("A")


# ========================== Letter Statistics ==============================


def letter_histogram(text: str) -> IntArray:
    """Count occurrences of each letter A-Z in *text*.

    Args:
        text: Uppercase alphabetic string.

    Returns:
        1-D int64 array of length 26; index 0 is ``'A'``.

    Raises:
        ValueError: If *text* contains a character outside A-Z.
    """
    hist = np.zeros(ALPHABET_SIZE, dtype=np.int64)
    if not text:
        return hist

    codes = np.frombuffer(text.encode("ascii"), dtype=np.uint8).astype(np.int64)
    codes -= _ORD_A
    if codes.min() < 0 or codes.max() >= ALPHABET_SIZE:
        raise ValueError("letter_histogram expects only the letters A-Z")

    hist[:] = np.bincount(codes, minlength=ALPHABET_SIZE)
    return hist


def index_of_coincidence(counts: Sequence[int] | IntArray) -> float:
    """Probability that two letters drawn without replacement coincide.

    .. math::

        IC = \\frac{\\sum_i c_i (c_i - 1)}{N (N - 1)}

    For English text IC is about 0.066; for uniformly random letters it
    is 1/26 (about 0.038).

    Reference:
        Friedman, W. F. (1922). The Index of Coincidence and Its
        Applications in Cryptanalysis. Riverbank Publication No. 22.

    Args:
        counts: Occurrence count for each distinct symbol.

    Returns:
        The Index of Coincidence.

    Raises:
        ValueError: If the counts total fewer than two symbols.
    """
    arr = np.asarray(counts, dtype=np.int64)
    n = int(arr.sum())
    if n < 2:
        raise ValueError(
            f"Index of Coincidence needs at least 2 symbols, got {n}"
        )
    numerator = int(np.sum(arr * (arr - 1)))
    return numerator / (n * (n - 1))


# ========================== Number Theory ==================================


def gcd(a: int, b: int) -> int:
    """Greatest Common Divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return a


def gcd_vote(values: Sequence[int]) -> int:
    """Most frequent GCD over every unordered pair ``(values[i], values[j])``, ``i < j``.

    Pairs are visited in row-major order (``i`` ascending, then ``j``).
    Ties between equally frequent GCDs go to the value that appeared first
    in that visiting order, never to the numerically smaller one.

    The pairs are evaluated one row at a time with :func:`numpy.gcd` and
    tallied into a histogram bounded by ``max(values)``, so memory stays
    linear even though the work is quadratic in ``len(values)``.

    Reference:
        Kasiski, F. W. (1863). Die Geheimschriften und die
        Dechiffrirkunst.

    Args:
        values: Positive integers (e.g. Kasiski distances).

    Returns:
        The winning GCD, or ``0`` when fewer than two values are given.

    Raises:
        ValueError: If any value is not positive.
    """
    arr = np.asarray(values, dtype=np.int64)
    m = arr.size
    if m < 2:
        return 0
    if arr.min() <= 0:
        raise ValueError("gcd_vote expects strictly positive integers")

    upper = int(arr.max())
    counts = np.zeros(upper + 1, dtype=np.int64)
    first_seen = np.full(upper + 1, np.iinfo(np.int64).max, dtype=np.int64)

    position = 0
    for i in range(m - 1):
        row = np.gcd(arr[i], arr[i + 1:])
        uniq, first_idx = np.unique(row, return_index=True)
        first_seen[uniq] = np.minimum(first_seen[uniq], position + first_idx)
        counts += np.bincount(row, minlength=upper + 1)
        position += row.size

    best = counts.max()
    candidates = np.flatnonzero(counts == best)
    # First-encountered wins among equally frequent GCDs
    return int(candidates[np.argmin(first_seen[candidates])])
