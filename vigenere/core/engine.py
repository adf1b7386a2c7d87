"""
Vigenere Analysis Engine
=========================

Central orchestrator for keyless Vigenere cryptanalysis.  The pipeline is
a single linear pass over immutable values:

    ciphertext -> Kasiski distances -> GCD vote (key length)
               -> columns -> per-column IOC + key-letter solver
               -> key -> decryption -> plaintext

:meth:`VigenereEngine.break_cipher` is the programmatic API and raises a
:class:`~vigenere.core.exceptions.VigenereError` on the first condition
it meets.  The ``*_file`` methods wrap the same stages in a
:class:`~shared.models.ScanResult` for the CLI and report layers,
recording failures as findings instead of raising.

References:
    - Kasiski, F. W. (1863). Die Geheimschriften und die Dechiffrirkunst.
    - Friedman, W. F. (1922). The Index of Coincidence and Its
      Applications in Cryptanalysis. Riverbank Publication No. 22.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

from shared.config import VigenereConfig, get_config
from shared.logger import VigenereLogger
from shared.models import Finding, ScanResult, Severity

from vigenere.analyzers.frequency import ReferenceFrequencyTable, get_reference_table
from vigenere.analyzers.kasiski import KasiskiExaminer
from vigenere.analyzers.solver import KeySolver
from vigenere.core.exceptions import (
    InvalidInputError,
    InvalidKeyLengthError,
    UnresolvedLetterError,
    VigenereError,
)
from vigenere.core.models import AnalysisResult, KasiskiResult, ScoringMode
from vigenere.core.transform import decrypt, encrypt, ensure_letters
from vigenere.parsers.ciphertext_parser import CiphertextParser

_TOOL_NAME = "vigenere"

_ERROR_TITLES: dict[type, str] = {
    InvalidInputError: "Invalid Input",
    InvalidKeyLengthError: "No Key-Length Signal",
    UnresolvedLetterError: "Unresolved Key Letter",
}


class VigenereEngine:
    """Orchestrates the cryptanalysis pipeline.

    Usage::

        engine = VigenereEngine()
        analysis = engine.break_cipher("LXFOPVEFRNHR...")
        print(analysis.key, analysis.plaintext)

        result = engine.analyze_file(Path("cipherNoKey.txt"))

    Attributes:
        config: Configuration instance.
        reference: Reference letter frequencies used for scoring.
        mode: Default shift scoring mode.
        logger: Logger for the engine.
    """

    def __init__(
        self,
        config: Optional[VigenereConfig] = None,
        reference: Optional[ReferenceFrequencyTable] = None,
    ) -> None:
        self.config = config or get_config()
        analysis = self.config.analysis

        self.logger = self._make_logger("engine")
        self.reference = reference or get_reference_table(analysis.language)
        self.mode = ScoringMode(analysis.scoring_mode)

        self._parser = CiphertextParser(
            normalize=analysis.normalize_input,
            encoding=self.config.io.encoding,
        )
        self._examiner = KasiskiExaminer(
            min_length=analysis.min_substring_length,
            max_length=analysis.max_substring_length,
            logger=self._make_logger("kasiski"),
        )
        self._solvers: dict[ScoringMode, KeySolver] = {}

    # ------------------------------------------------------------------ #
    #  Programmatic pipeline
    # ------------------------------------------------------------------ #

    def examine(self, ciphertext: str) -> KasiskiResult:
        """Kasiski examination and GCD vote only."""
        return self._run_kasiski(self._parser.validate(ciphertext))

    def _run_kasiski(self, ciphertext: str) -> KasiskiResult:
        with self.logger.operation("kasiski"):
            kasiski = self._examiner.analyze(ciphertext)
            threshold = self.config.analysis.large_distance_warning
            if len(kasiski.distances) > threshold:
                self.logger.warning(
                    "Kasiski examination produced %d distances (threshold %d); "
                    "the pairwise GCD vote is quadratic in this count",
                    len(kasiski.distances),
                    threshold,
                )
        return kasiski

    def break_cipher(
        self,
        ciphertext: str,
        key_length: Optional[int] = None,
        mode: Optional[ScoringMode] = None,
    ) -> AnalysisResult:
        """Recover the key and plaintext of *ciphertext* without the key.

        Args:
            ciphertext: Letters A-Z (normalised first when the parser is
                configured to normalise).
            key_length: Use this key length instead of the Kasiski estimate.
                The distances are still computed and reported.
            mode: Override the configured scoring mode.

        Returns:
            Frozen :class:`AnalysisResult` with every diagnostic.

        Raises:
            InvalidInputError: Empty or non-alphabetic ciphertext.
            InvalidKeyLengthError: No key-length signal (estimate 0) or a
                key length below 1.
            UnresolvedLetterError: A column with no positive correlation.
        """
        mode = ScoringMode(mode) if mode is not None else self.mode
        ciphertext = self._parser.validate(ciphertext)
        kasiski = self._run_kasiski(ciphertext)

        if key_length is None:
            key_length = kasiski.key_length
            self.logger.info("Probable key length from distances: %d", key_length)
        else:
            self.logger.info(
                "Using key length %d (Kasiski estimate was %d)",
                key_length,
                kasiski.key_length,
            )
        if key_length < 1:
            raise InvalidKeyLengthError(key_length)

        with self.logger.operation("solve"):
            columns = self._solver(mode).solve_columns(ciphertext, key_length)
        key = "".join(col.letter for col in columns)
        self.logger.info("Recovered key: %s", key)

        return AnalysisResult(
            ciphertext_length=len(ciphertext),
            distances=kasiski.distances,
            key_length=key_length,
            columns=columns,
            key=key,
            plaintext=decrypt(ciphertext, key),
            scoring_mode=mode,
        )

    # ------------------------------------------------------------------ #
    #  File-facing operations
    # ------------------------------------------------------------------ #

    def analyze_file(
        self,
        file_path: Path,
        key_length: Optional[int] = None,
        mode: Optional[ScoringMode] = None,
    ) -> ScanResult:
        """Break the ciphertext stored in *file_path*.

        Returns:
            ScanResult whose metadata holds the dumped
            :class:`AnalysisResult` on success.
        """
        result = ScanResult(tool_name=_TOOL_NAME, target=str(file_path))
        self.logger.info(f"Starting keyless analysis: {file_path}")

        try:
            ciphertext = self._parser.parse_file(file_path)
            with self.logger.timed("keyless analysis"):
                analysis = self.break_cipher(ciphertext, key_length, mode)
        except FileNotFoundError:
            return self._file_not_found(result, file_path)
        except VigenereError as exc:
            return self._record_error(result, exc)

        result.metadata = analysis.model_dump(mode="json")
        result.add_finding(Finding(
            title="Kasiski Examination",
            description=(
                f"Found {len(analysis.distances)} repeat distances; "
                f"probable key length {analysis.key_length}."
            ),
            severity=Severity.INFO,
            evidence={"distances": analysis.distances[:50]},
            references=[
                "Kasiski, F. W. (1863). Die Geheimschriften und die "
                "Dechiffrirkunst."
            ],
        ))
        result.add_finding(self._ioc_finding(analysis))
        result.add_finding(Finding(
            title="Key Recovered",
            description=(
                f"Recovered key {analysis.key!r} "
                f"({analysis.scoring_mode.value} scoring)."
            ),
            severity=Severity.INFO,
            evidence={"key": analysis.key},
        ))
        return result.finalize(
            f"Key length {analysis.key_length}, key {analysis.key}"
        )

    def kasiski_file(self, file_path: Path) -> ScanResult:
        """Kasiski examination and key-length estimate for *file_path*."""
        result = ScanResult(tool_name=_TOOL_NAME, target=str(file_path))
        self.logger.info(f"Starting Kasiski examination: {file_path}")

        try:
            ciphertext = self._parser.parse_file(file_path)
            kasiski = self._run_kasiski(ciphertext)
        except FileNotFoundError:
            return self._file_not_found(result, file_path)
        except VigenereError as exc:
            return self._record_error(result, exc)

        result.metadata = kasiski.model_dump(mode="json")
        if kasiski.key_length == 0:
            result.add_finding(Finding(
                title="No Key-Length Signal",
                description=(
                    "Fewer than two repeat distances were found; the key "
                    "length cannot be estimated."
                ),
                severity=Severity.MEDIUM,
                recommendation="Supply a longer ciphertext or an explicit key length.",
            ))
        return result.finalize(
            f"{len(kasiski.distances)} distances, "
            f"probable key length {kasiski.key_length}"
        )

    def decrypt_file(self, file_path: Path, key: str) -> ScanResult:
        """Decrypt the ciphertext in *file_path* with a known *key*."""
        return self._transform_file(file_path, key, decrypt, "plaintext")

    def encrypt_file(self, file_path: Path, key: str) -> ScanResult:
        """Encrypt the plaintext in *file_path* with *key*."""
        return self._transform_file(file_path, key, encrypt, "ciphertext")

    # ------------------------------------------------------------------ #
    #  Private Helpers
    # ------------------------------------------------------------------ #

    def _make_logger(self, component: str) -> VigenereLogger:
        gs = self.config.global_settings
        return VigenereLogger(
            component,
            log_level="DEBUG" if gs.debug else gs.log_level,
            log_file=gs.log_file or None,
            json_logs=gs.log_json,
        )

    def _solver(self, mode: ScoringMode) -> KeySolver:
        if mode not in self._solvers:
            self._solvers[mode] = KeySolver(
                self.reference,
                mode,
                logger=self._make_logger("solver"),
            )
        return self._solvers[mode]

    def _transform_file(
        self,
        file_path: Path,
        key: str,
        transform: Callable[[str, str], str],
        output_name: str,
    ) -> ScanResult:
        result = ScanResult(tool_name=_TOOL_NAME, target=str(file_path))
        try:
            text = self._parser.parse_file(file_path)
            key = ensure_letters(key.upper() if self._parser.normalize else key, "key")
            output = transform(text, key)
        except FileNotFoundError:
            return self._file_not_found(result, file_path)
        except VigenereError as exc:
            return self._record_error(result, exc)

        result.metadata = {"key": key, output_name: output}
        return result.finalize(f"{output_name.capitalize()} of {len(output)} letters")

    def _file_not_found(self, result: ScanResult, file_path: Path) -> ScanResult:
        self.logger.error(f"File not found: {file_path}")
        result.add_finding(Finding(
            title="File Not Found",
            description=f"File not found: {file_path}",
            severity=Severity.HIGH,
        ))
        return result.finalize(f"Error: file not found ({file_path})")

    def _record_error(self, result: ScanResult, exc: VigenereError) -> ScanResult:
        self.logger.error(f"Analysis aborted: {exc}")
        result.metadata = {
            "error": {"type": type(exc).__name__, "message": str(exc)},
        }
        result.add_finding(Finding(
            title=_ERROR_TITLES.get(type(exc), "Analysis Error"),
            description=str(exc),
            severity=Severity.HIGH,
        ))
        return result.finalize(f"Error: {exc}")

    def _ioc_finding(self, analysis: AnalysisResult) -> Finding:
        """Summarise how many columns look monoalphabetic.

        Diagnostic only; the key length is never changed because of it.
        """
        expected = self.config.analysis.expected_ioc
        tolerance = self.config.analysis.ioc_tolerance
        measured = [ioc for ioc in analysis.column_iocs if ioc is not None]
        matching = sum(1 for ioc in measured if abs(ioc - expected) <= tolerance)
        evidence = {"column_iocs": analysis.column_iocs, "expected": expected}

        if measured and matching == len(measured):
            return Finding(
                title="Columns Look Monoalphabetic",
                description=(
                    f"All {len(measured)} columns have an Index of Coincidence "
                    f"within {tolerance} of {expected}."
                ),
                severity=Severity.INFO,
                evidence=evidence,
            )
        return Finding(
            title="Column IOC Deviation",
            description=(
                f"{matching} of {len(measured)} measurable columns have an Index "
                f"of Coincidence within {tolerance} of {expected}; the key "
                f"length may be wrong."
            ),
            severity=Severity.LOW,
            evidence=evidence,
            recommendation="Try an explicit key length with --key-length.",
            references=[
                "Friedman, W. F. (1922). The Index of Coincidence."
            ],
        )
