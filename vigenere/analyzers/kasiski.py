"""
Kasiski Examiner
=================

Finds repeated substrings in ciphertext, records the gap between each
occurrence and the previous one, and estimates the key length as the
most frequent pairwise GCD of those gaps.

Only the gap since the *previous* occurrence of a substring is recorded
(chained), not every pairwise gap between all occurrences.  Distances are
emitted in discovery order: outer loop over the starting offset, inner
loop over the substring length.

References:
    - Kasiski, F. W. (1863). Die Geheimschriften und die
      Dechiffrirkunst. Berlin: E. S. Mittler und Sohn.
    - Sinkov, A. (1966). Elementary Cryptanalysis. Chapter 4.
"""

from __future__ import annotations

from typing import Optional, Sequence

from shared.logger import VigenereLogger
from shared.math_utils import gcd_vote
from vigenere.core.models import KasiskiResult


class KasiskiExaminer:
    """Kasiski examination with GCD voting.

    Usage::

        examiner = KasiskiExaminer()
        distances = examiner.examine(ciphertext)
        key_length = examiner.estimate_key_length(distances)

    Args:
        min_length: Shortest repeated substring considered.
        max_length: Longest repeated substring considered.
        logger: Optional logger; a component logger is created otherwise.
    """

    def __init__(
        self,
        min_length: int = 3,
        max_length: int = 8,
        logger: Optional[VigenereLogger] = None,
    ) -> None:
        if min_length < 1 or max_length < min_length:
            raise ValueError(
                f"Invalid substring length range [{min_length}, {max_length}]"
            )
        self.min_length = min_length
        self.max_length = max_length
        self.logger = logger or VigenereLogger("kasiski", console_output=False)

    def examine(self, text: str) -> list[int]:
        """Return the distances between successive repeats of each substring.

        Args:
            text: Ciphertext letters.

        Returns:
            One distance per repeat event, in discovery order.  Empty when
            no substring of the configured lengths occurs twice.
        """
        distances: list[int] = []
        last_seen: dict[str, int] = {}
        n = len(text)

        for i in range(n):
            for length in range(self.min_length, self.max_length + 1):
                if i + length > n:
                    break
                substring = text[i:i + length]
                previous = last_seen.get(substring)
                if previous is not None:
                    distances.append(i - previous)
                last_seen[substring] = i

        self.logger.debug(
            "Kasiski examination found %d distances over %d letters",
            len(distances),
            n,
        )
        return distances

    def estimate_key_length(self, distances: Sequence[int]) -> int:
        """Most frequent GCD over every unordered pair of distances.

        Ties go to the GCD encountered first while scanning pairs in
        order (first distance ascending, then second), not to the smallest
        value.  Returns ``0`` when fewer than two distances are available,
        meaning there is no key-length signal.
        """
        key_length = gcd_vote(distances)
        self.logger.debug(
            "GCD vote over %d distances chose key length %d",
            len(distances),
            key_length,
        )
        return key_length

    def analyze(self, text: str) -> KasiskiResult:
        """Run the examination and the GCD vote on *text*."""
        distances = self.examine(text)
        return KasiskiResult(
            distances=distances,
            key_length=self.estimate_key_length(distances),
        )
