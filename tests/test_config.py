"""
Configuration loading tests.
"""

import pytest

from shared.config import VigenereConfig
from vigenere.core.engine import VigenereEngine
from vigenere.core.models import ScoringMode


def test_defaults():
    config = VigenereConfig()
    assert config.analysis.min_substring_length == 3
    assert config.analysis.max_substring_length == 8
    assert config.analysis.scoring_mode == "full_text"
    assert config.analysis.normalize_input is False
    assert config.io.plaintext_file == "plainNoKey.txt"
    assert config.global_settings.log_level == "INFO"
    assert config.global_settings.report_format == "console"


def test_load_toml(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(
        '[global]\n'
        'log_level = "DEBUG"\n'
        '\n'
        '[analysis]\n'
        'min_substring_length = 4\n'
        'scoring_mode = "column"\n'
        'unknown_key = 1\n'
        '\n'
        '[io]\n'
        'plaintext_file = "out.txt"\n',
        encoding="utf-8",
    )
    config = VigenereConfig.load(path)
    assert config.global_settings.log_level == "DEBUG"
    assert config.analysis.min_substring_length == 4
    assert config.analysis.max_substring_length == 8
    assert config.analysis.scoring_mode == "column"
    assert config.io.plaintext_file == "out.txt"
    assert config.to_dict()["analysis"]["min_substring_length"] == 4


def test_missing_explicit_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        VigenereConfig.load(tmp_path / "nope.toml")


def test_engine_honours_config():
    config = VigenereConfig()
    config.analysis.scoring_mode = "column"
    config.analysis.normalize_input = True
    config.global_settings.log_level = "WARNING"
    engine = VigenereEngine(config)
    assert engine.mode is ScoringMode.COLUMN
    result = engine.break_cipher("lxfop vefrnhr " * 3, key_length=5)
    assert result.ciphertext_length == 36


def test_unknown_language_rejected():
    config = VigenereConfig()
    config.analysis.language = "xx"
    with pytest.raises(ValueError):
        VigenereEngine(config)
