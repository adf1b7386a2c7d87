"""
Vigenere Toolkit Configuration Management
==========================================

Centralized configuration for the analysis pipeline and its collaborators
using Python dataclasses and TOML-based persistence.

Every default reproduces the behaviour of the classical Kasiski /
frequency-correlation attack, so an absent configuration file changes
nothing about the results.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[no-redef]


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"


# ========================== Section Configs ================================


@dataclass(frozen=False, slots=True)
class AnalysisConfig:
    """Parameters for the cryptanalysis pipeline.

    ``min_substring_length`` / ``max_substring_length`` bound the repeated
    substrings the Kasiski examination records.  ``scoring_mode`` selects
    how each trial shift is scored (``"full_text"`` or ``"column"``).

    Reference:
        Friedman, W. F. (1922). The Index of Coincidence and Its
        Applications in Cryptanalysis. Riverbank Publication No. 22.
    """

    min_substring_length: int = 3
    max_substring_length: int = 8
    language: str = "en"
    scoring_mode: str = "full_text"
    expected_ioc: float = 0.066
    ioc_tolerance: float = 0.012
    normalize_input: bool = False
    large_distance_warning: int = 5000


@dataclass(frozen=False, slots=True)
class IOConfig:
    """Settings for reading ciphertext and persisting recovered plaintext."""

    plaintext_file: str = "plainNoKey.txt"
    encoding: str = "utf-8"


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings: logging verbosity, output directory, report format."""

    log_level: str = "INFO"
    log_file: str = ""
    log_json: bool = False
    output_dir: str = "output"
    report_format: str = "console"
    debug: bool = False


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class VigenereConfig:
    """Master configuration aggregating every section.

    Usage:
        >>> config = VigenereConfig.load()                  # from default path
        >>> config = VigenereConfig.load("custom.toml")     # from custom path
        >>> print(config.analysis.max_substring_length)
        8
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    io: IOConfig = field(default_factory=IOConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> VigenereConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        project root.  Missing keys fall back to dataclass defaults.

        Args:
            path: Filesystem path to a TOML configuration file.

        Returns:
            A fully-populated :class:`VigenereConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            analysis=cls._build_section(AnalysisConfig, raw.get("analysis", {})),
            io=cls._build_section(IOConfig, raw.get("io", {})),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are ignored.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)


# ========================= Module-level convenience ========================

def get_config(path: str | Path | None = None) -> VigenereConfig:
    """Module-level convenience wrapper around :meth:`VigenereConfig.load`.

    Caches the result so that repeated imports share one instance.
    """
    if not hasattr(get_config, "_cached") or path is not None:
        get_config._cached = VigenereConfig.load(path)  # type: ignore[attr-defined]
    return get_config._cached  # type: ignore[attr-defined]
