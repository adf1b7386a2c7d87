"""
Ciphertext Parser
==================

Reads ciphertext from files and strings.  Lines are concatenated until
the first blank line, which terminates intake; line terminators are
stripped.

Two policies apply to what was read:

- strict (default): any character outside A-Z is rejected with its
  position, so a bad file never silently shifts column indices;
- normalize: letters are upper-cased and everything else is dropped.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from vigenere.core.exceptions import InvalidInputError
from vigenere.core.transform import ensure_letters


class CiphertextParser:
    """Extracts ciphertext letters from files and text input.

    Usage::

        parser = CiphertextParser()
        ciphertext = parser.parse_file(Path("cipherNoKey.txt"))
        ciphertext = parser.parse_string("LXFOP\\nVEFRNHR\\n")
    """

    def __init__(self, normalize: bool = False, encoding: str = "utf-8") -> None:
        """Initialise the parser.

        Args:
            normalize: Upper-case letters and drop non-letters instead of
                rejecting them.
            encoding: Text encoding used by :meth:`parse_file`.
        """
        self.normalize = normalize
        self.encoding = encoding

    def parse_file(self, filepath: Path) -> str:
        """Read ciphertext from *filepath*.

        Raises:
            FileNotFoundError: If the file does not exist.
            InvalidInputError: If the content is empty, cannot be decoded,
                or (in strict mode) contains characters outside A-Z.
        """
        try:
            with open(filepath, "r", encoding=self.encoding, newline="") as f:
                return self.validate(self._read_until_blank(f))
        except UnicodeDecodeError as exc:
            raise InvalidInputError(
                f"{filepath} is not valid {self.encoding} text: {exc.reason}"
            ) from exc

    def parse_string(self, text: str) -> str:
        """Read ciphertext from an in-memory string."""
        return self.validate(self._read_until_blank(text.splitlines()))

    def validate(self, text: str) -> str:
        """Apply the strict or normalize policy to raw ciphertext.

        Raises:
            InvalidInputError: If the result is empty or (in strict mode)
                contains characters outside A-Z.
        """
        if self.normalize:
            text = "".join(c for c in text.upper() if "A" <= c <= "Z")
        return ensure_letters(text, "ciphertext")

    @staticmethod
    def _read_until_blank(lines: Iterable[str]) -> str:
        parts: list[str] = []
        for line in lines:
            line = line.rstrip("\r\n")
            if not line:
                break
            parts.append(line)
        return "".join(parts)
