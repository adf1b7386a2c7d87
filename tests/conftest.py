"""
Vigenere - Pytest fixtures.
"""

import re

import pytest

from shared.config import VigenereConfig
from vigenere.core.engine import VigenereEngine
from vigenere.core.transform import encrypt


_DICKENS = (
    "It was the best of times, it was the worst of times, it was the age of "
    "wisdom, it was the age of foolishness, it was the epoch of belief, it was "
    "the epoch of incredulity, it was the season of Light, it was the season of "
    "Darkness, it was the spring of hope, it was the winter of despair, we had "
    "everything before us, we had nothing before us, we were all going direct "
    "to Heaven, we were all going direct the other way. In short, the period "
    "was so far like the present period, that some of its noisiest authorities "
    "insisted on its being received, for good or for evil, in the superlative "
    "degree of comparison only. There were a king with a large jaw and a queen "
    "with a plain face, on the throne of England; there were a king with a large "
    "jaw and a queen with a fair face, on the throne of France. In both "
    "countries it was clearer than crystal to the lords of the State preserves "
    "of loaves and fishes, that things in general were settled for ever."
)


@pytest.fixture
def english_plaintext():
    """About 750 letters of English prose, upper-cased, letters only."""
    return re.sub(r"[^A-Z]", "", _DICKENS.upper())


@pytest.fixture
def lemon_ciphertext(english_plaintext):
    """The English sample encrypted with the key LEMON."""
    return encrypt(english_plaintext, "LEMON")


@pytest.fixture
def engine():
    """Engine with default configuration and file logging disabled."""
    config = VigenereConfig()
    config.global_settings.log_level = "WARNING"
    return VigenereEngine(config)


@pytest.fixture
def write_file(tmp_path):
    """Factory writing *content* to a file under tmp_path and returning its path."""

    def _write(name, content):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
