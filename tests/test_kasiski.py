"""
Kasiski examination and GCD voting tests.
"""

import pytest

from shared.math_utils import gcd, gcd_vote
from vigenere.analyzers.kasiski import KasiskiExaminer
from vigenere.core.transform import encrypt


@pytest.fixture
def examiner():
    return KasiskiExaminer()


def test_no_repeats_gives_no_distances(examiner):
    assert examiner.examine("ABCDEFGHIJ") == []
    assert examiner.estimate_key_length([]) == 0


def test_chained_distances_in_discovery_order(examiner):
    """XYZ at offsets 0, 6 and 15: only successive gaps are recorded."""
    assert examiner.examine("XYZABCXYZDEFGHIXYZ") == [6, 9]


def test_key_length_from_chained_distances(examiner):
    assert examiner.analyze("XYZABCXYZDEFGHIXYZ").key_length == 3


def test_every_length_from_three_to_eight_is_recorded(examiner):
    """A 9-letter block repeated once yields one distance per window that fits."""
    block = "ABCDEFGHI"
    distances = examiner.examine(block + block)
    # Windows of length 3..8 starting in the second copy and ending inside it
    expected = sum(len(block) - length + 1 for length in range(3, 9))
    assert len(distances) == expected
    assert set(distances) == {9}


def test_substrings_shorter_than_minimum_ignored():
    assert KasiskiExaminer().examine("ABAB") == []
    assert KasiskiExaminer(min_length=2, max_length=2).examine("ABAB") == [2]


def test_invalid_length_range():
    with pytest.raises(ValueError):
        KasiskiExaminer(min_length=0)
    with pytest.raises(ValueError):
        KasiskiExaminer(min_length=5, max_length=4)


def test_single_distance_has_no_signal(examiner):
    assert examiner.estimate_key_length([12]) == 0


def test_gcd_vote_majority():
    assert gcd_vote([6, 9, 12, 15, 21]) == 3


def test_gcd_vote_tie_goes_to_first_encountered():
    """Pairs (6,4)=2, (6,9)=3, (4,9)=1 tie at one vote each; 2 came first."""
    assert gcd_vote([6, 4, 9]) == 2
    assert gcd_vote([9, 6, 4]) == 3


def test_gcd_vote_rejects_non_positive():
    with pytest.raises(ValueError):
        gcd_vote([4, 0, 8])


def test_gcd():
    assert gcd(12, 18) == 6
    assert gcd(7, 13) == 1
    assert gcd(5, 0) == 5


def test_engineered_repeats_recover_key_length(examiner):
    """Repeated phrases separated by blocks whose lengths are multiples of 3."""
    phrase = "ATTACKATDAWN"
    plaintext = phrase + "".join("XQJ" * i + phrase for i in range(1, 9))
    ciphertext = encrypt(plaintext, "KEY")
    result = examiner.analyze(ciphertext)
    assert result.distances
    assert result.key_length == 3
