"""
Shift, encryption and decryption tests.
"""

import pytest

from vigenere.core.exceptions import InvalidInputError
from vigenere.core.transform import decrypt, encrypt, ensure_letters, shift


def test_decrypt_known_vector():
    assert decrypt("LXFOPVEFRNHR", "LEMON") == "ATTACKATDAWN"


def test_encrypt_known_vector():
    assert encrypt("ATTACKATDAWN", "LEMON") == "LXFOPVEFRNHR"


def test_round_trip(english_plaintext):
    for key in ("A", "KEY", "LEMON", "ZZZZZZZZZZZZZ"):
        assert decrypt(encrypt(english_plaintext, key), key) == english_plaintext


def test_key_of_a_is_identity():
    assert decrypt("HELLO", "A") == "HELLO"


def test_key_longer_than_text():
    assert decrypt("B", "BCD") == "A"


def test_shift_wraps():
    assert shift("ABC", 1) == "ZAB"
    assert shift("ABC", 0) == "ABC"
    assert shift("ABC", 27) == "ZAB"


def test_decrypt_rejects_bad_input():
    with pytest.raises(InvalidInputError):
        decrypt("ABC", "")
    with pytest.raises(InvalidInputError):
        decrypt("ABC", "lemon")
    with pytest.raises(InvalidInputError):
        decrypt("AB C", "KEY")


def test_empty_text_decrypts_to_empty():
    assert decrypt("", "KEY") == ""


def test_ensure_letters_reports_position():
    with pytest.raises(InvalidInputError) as exc_info:
        ensure_letters("ABcD")
    assert exc_info.value.position == 2
    assert exc_info.value.character == "c"


def test_ensure_letters_empty():
    with pytest.raises(InvalidInputError):
        ensure_letters("")
    assert ensure_letters("", allow_empty=True) == ""
