"""
Column splitting and key-letter solver tests.
"""

import pytest

from vigenere.analyzers.frequency import ALPHABET, ENGLISH, ReferenceFrequencyTable, letter_frequencies
from vigenere.analyzers.solver import KeySolver, correlation, split_columns
from vigenere.core.exceptions import InvalidInputError, InvalidKeyLengthError, UnresolvedLetterError
from vigenere.core.models import ScoringMode
from vigenere.core.transform import encrypt


def _only_e_table():
    """Reference table where every letter but E has zero weight."""
    freqs = {c: 0.0 for c in ALPHABET}
    freqs["E"] = 1.0
    return ReferenceFrequencyTable(language="e-only", frequencies=freqs)


def test_split_columns_round_robin():
    assert split_columns("ABCDEFG", 3) == ["ADG", "BE", "CF"]


def test_split_columns_lengths_and_interleave():
    text = "ABCDEFGHIJKLMNOPQRSTUVW"
    for k in range(1, 8):
        columns = split_columns(text, k)
        assert len(columns) == k
        assert sum(len(c) for c in columns) == len(text)
        assert {len(c) for c in columns} <= {len(text) // k, -(-len(text) // k)}
        rebuilt = "".join(columns[i % k][i // k] for i in range(len(text)))
        assert rebuilt == text


def test_split_columns_longer_key_leaves_empty_columns():
    assert split_columns("AB", 4) == ["A", "B", "", ""]


def test_split_columns_rejects_zero():
    with pytest.raises(InvalidKeyLengthError):
        split_columns("ABC", 0)


def test_correlation_counts_missing_letters_as_zero():
    profile = {"A": 0.5}
    assert correlation("AAB", profile, ENGLISH) == pytest.approx(2 * 0.5 * ENGLISH["A"])


def test_find_letter_column_mode_caesar(english_plaintext):
    """A Caesar shift by 7 is found as key letter H."""
    solver = KeySolver(ENGLISH, ScoringMode.COLUMN)
    column = encrypt(english_plaintext, "H")
    assert solver.find_letter(column, {}) == "H"


def test_find_letter_full_text_with_uniform_profile(english_plaintext):
    solver = KeySolver(ENGLISH, ScoringMode.FULL_TEXT)
    column = encrypt(english_plaintext, "H")
    uniform = {c: 1 / 26 for c in ALPHABET}
    assert solver.find_letter(column, uniform) == "H"


def test_full_text_score_uses_shared_profile():
    solver = KeySolver(ENGLISH, ScoringMode.FULL_TEXT)
    profile = {"E": 0.5, "T": 0.5}
    assert solver.score("EET", profile) == pytest.approx(
        2 * 0.5 * ENGLISH["E"] + 0.5 * ENGLISH["T"]
    )


def test_column_score_uses_own_frequencies():
    solver = KeySolver(ENGLISH, ScoringMode.COLUMN)
    expected = (2 / 3) * ENGLISH["E"] + (1 / 3) * ENGLISH["T"]
    assert solver.score("EET", {"Q": 1.0}) == pytest.approx(expected)


def test_ties_keep_lowest_shift():
    """With a flat reference every shift scores the same; shift 0 wins."""
    flat = ReferenceFrequencyTable(
        language="flat", frequencies={c: 1 / 26 for c in ALPHABET}
    )
    solver = KeySolver(flat, ScoringMode.COLUMN)
    assert solver.find_shift("QWERTY", {}) == (0, pytest.approx(1 / 26))


def test_unresolved_letter_when_every_shift_scores_zero():
    solver = KeySolver(_only_e_table(), ScoringMode.FULL_TEXT)
    with pytest.raises(UnresolvedLetterError) as exc_info:
        solver.find_letter("AAA", letter_frequencies("AAA"), index=2)
    assert exc_info.value.column == 2


def test_solve_recovers_key_in_column_mode(english_plaintext, lemon_ciphertext):
    solver = KeySolver(ENGLISH, ScoringMode.COLUMN)
    assert solver.solve(lemon_ciphertext, 5) == "LEMON"


def test_solve_columns_diagnostics(lemon_ciphertext):
    solver = KeySolver(ENGLISH, ScoringMode.COLUMN)
    columns = solver.solve_columns(lemon_ciphertext, 5)
    assert [c.index for c in columns] == [0, 1, 2, 3, 4]
    assert "".join(c.letter for c in columns) == "LEMON"
    for col in columns:
        assert col.letter == ALPHABET[col.shift]
        assert col.ioc is not None and col.ioc > 0.045
        assert col.score > 0


def test_short_column_has_no_ioc():
    solver = KeySolver(ENGLISH, ScoringMode.COLUMN)
    columns = solver.solve_columns("EAT", 3)
    assert [c.length for c in columns] == [1, 1, 1]
    assert all(c.ioc is None for c in columns)


def test_full_text_profile_differs_from_column_profile():
    """TEE...: whole-text profile is E-heavy, the first column holds only T."""
    text = "TEE" * 10
    solver = KeySolver(ENGLISH, ScoringMode.FULL_TEXT)
    first_column = split_columns(text, 3)[0]

    assert solver.find_letter(first_column, letter_frequencies(first_column)) == "A"
    assert solver.find_letter(first_column, letter_frequencies(text)) == "P"
    assert solver.solve(text, 3) == "PAA"


def test_solver_rejects_unvalidated_text():
    solver = KeySolver(ENGLISH, ScoringMode.FULL_TEXT)
    with pytest.raises(InvalidInputError):
        solver.solve_columns("ab-c", 2)
    with pytest.raises(InvalidInputError):
        solver.solve_columns("", 2)
    with pytest.raises(InvalidInputError):
        solver.find_shift("AB C", {})
    with pytest.raises(InvalidInputError):
        correlation("abc", {"A": 1.0}, ENGLISH)
