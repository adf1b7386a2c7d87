"""
Frequency model tests: reference tables, letter profiles, Index of Coincidence.
"""

import pytest
from pydantic import ValidationError

from shared import math_utils
from vigenere.analyzers.frequency import (
    ENGLISH,
    ReferenceFrequencyTable,
    get_reference_table,
    index_of_coincidence,
    letter_frequencies,
)
from vigenere.core.exceptions import InvalidInputError


def test_english_table_covers_alphabet():
    """The built-in English table has all 26 letters and sums to about 1."""
    assert len(ENGLISH.frequencies) == 26
    assert abs(sum(ENGLISH.frequencies.values()) - 1.0) < 0.01
    assert ENGLISH["E"] == pytest.approx(0.1202)


def test_get_reference_table():
    assert get_reference_table("en") is ENGLISH
    assert get_reference_table("EN") is ENGLISH
    with pytest.raises(ValueError):
        get_reference_table("xx")


def test_reference_table_rejects_missing_letters():
    with pytest.raises(ValidationError):
        ReferenceFrequencyTable(language="bad", frequencies={"A": 1.0})


def test_reference_table_is_frozen():
    with pytest.raises(ValidationError):
        ENGLISH.language = "fr"


def test_letter_frequencies_only_present_letters():
    profile = letter_frequencies("AABC")
    assert profile == {"A": 0.5, "B": 0.25, "C": 0.25}
    assert letter_frequencies("") == {}


def test_ioc_known_value():
    """AABB: (2*1 + 2*1) / (4*3) = 1/3."""
    assert index_of_coincidence("AABB") == pytest.approx(1 / 3)


def test_ioc_single_repeated_letter_is_one():
    assert index_of_coincidence("ZZZZZ") == pytest.approx(1.0)


def test_ioc_is_permutation_invariant():
    text = "THEQUICKBROWNFOXJUMPSOVERTHELAZYDOG"
    shuffled = "".join(sorted(text))
    assert index_of_coincidence(text) == pytest.approx(index_of_coincidence(shuffled))
    assert index_of_coincidence(text) == pytest.approx(index_of_coincidence(text[::-1]))


def test_ioc_undefined_below_two_letters():
    with pytest.raises(InvalidInputError):
        index_of_coincidence("A")
    with pytest.raises(InvalidInputError):
        index_of_coincidence("")


def test_ioc_english_above_ciphertext(english_plaintext, lemon_ciphertext):
    """English sits well above the polyalphabetic ciphertext."""
    assert index_of_coincidence(english_plaintext) > 0.055
    assert index_of_coincidence(lemon_ciphertext) < index_of_coincidence(english_plaintext)


def test_letter_histogram_rejects_non_letters():
    with pytest.raises(ValueError):
        math_utils.letter_histogram("AB1")
    assert math_utils.letter_histogram("").sum() == 0
    assert math_utils.letter_histogram("AZZ")[25] == 2
