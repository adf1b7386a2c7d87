"""
Vigenere Toolkit Shared Module
===============================

Common utilities, models, logging, and configuration management shared
by the analysis engine, its parsers, and its output layer.
"""

from shared.config import VigenereConfig, get_config

__all__ = ["VigenereConfig", "get_config"]
