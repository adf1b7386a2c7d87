"""
End-to-end pipeline tests for VigenereEngine.
"""

import pytest

from shared.models import Severity
from vigenere.core.exceptions import InvalidInputError, InvalidKeyLengthError
from vigenere.core.models import AnalysisResult, ScoringMode
from vigenere.core.transform import decrypt, encrypt


def test_break_with_key_length_override(engine, english_plaintext, lemon_ciphertext):
    result = engine.break_cipher(lemon_ciphertext, key_length=5, mode=ScoringMode.COLUMN)
    assert result.key == "LEMON"
    assert result.plaintext == english_plaintext
    assert result.key_length == 5
    assert result.ciphertext_length == len(lemon_ciphertext)
    assert result.scoring_mode is ScoringMode.COLUMN
    assert len(result.column_iocs) == 5


def test_override_still_reports_distances(engine, lemon_ciphertext):
    result = engine.break_cipher(lemon_ciphertext, key_length=5, mode=ScoringMode.COLUMN)
    assert result.distances == engine.examine(lemon_ciphertext).distances
    assert result.distances


def test_estimated_key_length_and_consistent_plaintext(engine):
    phrase = "ATTACKATDAWN"
    plaintext = phrase + "".join("XQJ" * i + phrase for i in range(1, 9))
    ciphertext = encrypt(plaintext, "KEY")

    result = engine.break_cipher(ciphertext)
    assert result.key_length == 3
    assert len(result.key) == 3
    assert result.plaintext == decrypt(ciphertext, result.key)
    assert result.scoring_mode is ScoringMode.FULL_TEXT


def test_result_is_frozen(engine, lemon_ciphertext):
    result = engine.break_cipher(lemon_ciphertext, key_length=5)
    with pytest.raises(Exception):
        result.key = "OTHER"


def test_field_order_matches_pipeline(engine, lemon_ciphertext):
    result = engine.break_cipher(lemon_ciphertext, key_length=5)
    fields = [f for f in AnalysisResult.model_fields if f in result.model_dump()]
    order = ["distances", "key_length", "columns", "key", "plaintext"]
    assert [f for f in fields if f in order] == order


def test_no_repeats_raises_invalid_key_length(engine):
    with pytest.raises(InvalidKeyLengthError) as exc_info:
        engine.break_cipher("ABCDEFGHIJ")
    assert exc_info.value.key_length == 0


def test_invalid_input_raises(engine):
    with pytest.raises(InvalidInputError):
        engine.break_cipher("")
    with pytest.raises(InvalidInputError):
        engine.break_cipher("lowercase")


def test_analyze_file_success(engine, write_file, lemon_ciphertext):
    path = write_file("cipher.txt", lemon_ciphertext + "\n")
    result = engine.analyze_file(path, key_length=5, mode=ScoringMode.COLUMN)
    assert not result.failed
    assert result.metadata["key"] == "LEMON"
    assert result.end_time is not None
    assert "Key Recovered" in [f.title for f in result.findings]


def test_analyze_file_records_error(engine, write_file):
    path = write_file("cipher.txt", "ABCDEFGHIJ\n")
    result = engine.analyze_file(path)
    assert result.failed
    assert "plaintext" not in result.metadata
    assert result.metadata["error"]["type"] == "InvalidKeyLengthError"
    assert result.findings[0].title == "No Key-Length Signal"
    assert result.findings[0].severity == Severity.HIGH


def test_analyze_file_missing(engine, tmp_path):
    result = engine.analyze_file(tmp_path / "missing.txt")
    assert result.failed
    assert result.findings[0].title == "File Not Found"


def test_kasiski_file(engine, write_file):
    path = write_file("cipher.txt", "XYZABCXYZDEFGHIXYZ\n")
    result = engine.kasiski_file(path)
    assert result.metadata == {"distances": [6, 9], "key_length": 3}
    assert not result.findings


def test_kasiski_file_without_signal(engine, write_file):
    path = write_file("cipher.txt", "ABCDEFGHIJ\n")
    result = engine.kasiski_file(path)
    assert not result.failed
    assert result.findings[0].severity == Severity.MEDIUM


def test_decrypt_and_encrypt_file(engine, write_file):
    cipher_path = write_file("cipher.txt", "LXFOPVEFRNHR\n")
    assert engine.decrypt_file(cipher_path, "LEMON").metadata["plaintext"] == "ATTACKATDAWN"

    plain_path = write_file("plain.txt", "ATTACKATDAWN\n")
    assert engine.encrypt_file(plain_path, "LEMON").metadata["ciphertext"] == "LXFOPVEFRNHR"


def test_decrypt_file_bad_key(engine, write_file):
    path = write_file("cipher.txt", "LXFOPVEFRNHR\n")
    result = engine.decrypt_file(path, "lemon")
    assert result.failed
    assert result.findings[0].title == "Invalid Input"


@pytest.mark.parametrize(
    "key, key_length, recovered",
    [
        ("KEY", 3, "KEY"),
        ("LEMON", 10, "LEMONLEMON"),
        ("CRYPTO", 6, "CRYPTO"),
    ],
)
def test_default_mode_on_english_prose(engine, english_plaintext, key, key_length, recovered):
    """Full-text scoring with the estimated key length, as the classical attack reports it."""
    ciphertext = encrypt(english_plaintext, key)
    result = engine.break_cipher(ciphertext)
    assert result.scoring_mode is ScoringMode.FULL_TEXT
    assert result.key_length == key_length
    assert result.key == recovered
    assert result.plaintext == english_plaintext


def test_default_mode_scores_columns_against_whole_text(engine):
    """The T column is pulled to shift 15 by the E-heavy whole-text profile."""
    result = engine.break_cipher("TEE" * 10)
    assert result.key_length == 3
    assert result.key == "PAA"
