"""
Vigenere Console Output
========================

Rich-based console formatters for analysis results.  The keyless display
follows the order in which the pipeline produces its diagnostics:
distances, key length, per-column Index of Coincidence, key, plaintext.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Optional

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import VigenereConsole
from vigenere.core.models import AnalysisResult, KasiskiResult

# English text and a correctly split column sit near 0.066; a column mixing
# several shifts drifts towards 1/26.
_IOC_ENGLISH = 0.066
_IOC_RANDOM = 1.0 / 26.0


class VigenereConsoleOutput:
    """Console output formatters for analysis results.

    Usage::

        display = VigenereConsoleOutput()
        display.display_analysis(analysis)
    """

    def __init__(self, console: Optional[VigenereConsole] = None) -> None:
        self.console = console or VigenereConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Kasiski
    # ------------------------------------------------------------------ #

    def display_kasiski(self, result: KasiskiResult) -> None:
        """Show the raw distance sequence and the estimated key length."""
        self.console.section("Kasiski Examination")

        distances = " ".join(str(d) for d in result.distances) or "(none)"
        self._rich.print(Panel(
            Text(distances, overflow="fold"),
            title=f"Distances ({len(result.distances)})",
            border_style="cyan",
        ))

        summary = Text()
        summary.append("Probable key length based on distances: ", style="bold")
        if result.key_length:
            summary.append(str(result.key_length), style="bold bright_green")
        else:
            summary.append("0 (no signal)", style="bold red")
        self._rich.print(summary)

    # ------------------------------------------------------------------ #
    #  Full keyless analysis
    # ------------------------------------------------------------------ #

    def display_analysis(self, result: AnalysisResult) -> None:
        """Show every diagnostic of a keyless analysis, in pipeline order."""
        self.display_kasiski(
            KasiskiResult(distances=result.distances, key_length=result.key_length)
        )
        self._rich.print()

        self.console.section("Calculated IOC")
        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
        )
        tbl.add_column("Column", justify="right")
        tbl.add_column("Letters", justify="right")
        tbl.add_column("IOC", justify="right")
        tbl.add_column("Reading")
        tbl.add_column("Shift", justify="right")
        tbl.add_column("Key Letter", justify="center")
        tbl.add_column("Score", justify="right")

        for col in result.columns:
            if col.ioc is None:
                ioc_cell, reading = "n/a", "[dim]too short[/dim]"
            else:
                ioc_cell, reading = f"{col.ioc:.6f}", self._ioc_reading(col.ioc)
            tbl.add_row(
                str(col.index),
                str(col.length),
                ioc_cell,
                reading,
                str(col.shift),
                f"[bold bright_green]{col.letter}[/bold bright_green]",
                f"{col.score:.6f}",
            )
        self._rich.print(tbl)

        key_text = Text()
        key_text.append("The possible key: ", style="bold")
        key_text.append(result.key, style="bold bright_green")
        key_text.append(f"  ({result.scoring_mode.value} scoring)", style="dim")
        self._rich.print(key_text)
        self._rich.print()

        self.display_text("Plaintext", result.plaintext)

    def display_text(self, title: str, text: str, key: Optional[str] = None) -> None:
        """Show a transform output (plaintext or ciphertext) in a panel."""
        subtitle = f"key {key}" if key else None
        self._rich.print(Panel(
            Text(text, overflow="fold"),
            title=f"{title} ({len(text)} letters)",
            subtitle=subtitle,
            border_style="green",
        ))

    @staticmethod
    def _ioc_reading(ioc: float) -> str:
        """Coarse interpretation of a column IOC."""
        midpoint = (_IOC_ENGLISH + _IOC_RANDOM) / 2
        if ioc >= midpoint:
            return "[green]monoalphabetic[/green]"
        return "[yellow]mixed / polyalphabetic[/yellow]"
