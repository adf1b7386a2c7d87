"""
Console Interface
==================

Rich-powered console abstraction providing one presentation layer for
the CLI: banner, section headers, coloured status messages, tables and
status spinners, all with consistent styling.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

import datetime as _dt
from contextlib import contextmanager
from typing import Any, Generator, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

_VIGENERE_THEME = Theme(
    {
        "vig.banner": "bold bright_cyan",
        "vig.section": "bold bright_magenta",
        "vig.success": "bold green",
        "vig.warning": "bold yellow",
        "vig.error": "bold red",
        "vig.info": "bold bright_blue",
        "vig.dim": "dim white",
        "vig.highlight": "bold bright_white",
        "vig.high": "bold red",
        "vig.medium": "bold yellow",
        "vig.low": "bold bright_cyan",
        "vig.informational": "bold bright_blue",
    }
)

_BANNER_ART = r"""
[bright_cyan]
 __     __ _
 \ \   / /(_)  __ _   ___  _ __    ___  _ __  ___
  \ \ / / | | / _` | / _ \| '_ \  / _ \| '__|/ _ \
   \ V /  | || (_| ||  __/| | | ||  __/| |  |  __/
    \_/   |_| \__, | \___||_| |_| \___||_|   \___|
              |___/
[/bright_cyan]"""

_TAGLINE = "Keyless Vigenere Cryptanalysis"


class VigenereConsole:
    """Unified console interface for the CLI.

    Usage::

        con = VigenereConsole()
        con.banner()
        con.section("Kasiski Examination")
        con.success("Plaintext written")
    """

    def __init__(self, *, quiet: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet: Suppress all output (useful in library / test mode).
        """
        self._console = Console(
            theme=_VIGENERE_THEME,
            quiet=quiet,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Banner / sections
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display the ASCII-art banner with version and timestamp."""
        now = _dt.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        subtitle = (
            f"[vig.highlight]{_TAGLINE}[/vig.highlight]\n"
            f"[vig.dim]Version: {version}  |  {now}[/vig.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n" + subtitle)),
            border_style="bright_cyan",
            padding=(1, 2),
        )
        self._console.print(panel)

    def section(self, title: str) -> None:
        """Print a prominent section header."""
        self._console.rule(
            f"  {title}  ",
            style="vig.section",
            characters="─",
        )
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        self._console.print(
            f"[vig.success][✔] SUCCESS:[/vig.success] {message}"
        )

    def error(self, message: str) -> None:
        self._console.print(
            f"[vig.error][✘] ERROR:[/vig.error] {message}"
        )

    def findings_table(self, findings: Sequence[Any]) -> None:
        """Render a findings table with automatic severity colouring.

        Expects objects with ``severity``, ``title``, and ``description``
        attributes (e.g. :class:`shared.models.Finding`).
        """
        if not findings:
            return

        severity_style_map: dict[str, str] = {
            "HIGH": "vig.high",
            "MEDIUM": "vig.medium",
            "LOW": "vig.low",
            "INFO": "vig.informational",
        }

        tbl = Table(
            title="Findings",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        tbl.add_column("#", style="dim", width=4, justify="right")
        tbl.add_column("Severity", width=10)
        tbl.add_column("Title")
        tbl.add_column("Description", ratio=2)

        for idx, finding in enumerate(findings, start=1):
            sev = getattr(finding, "severity", "INFO")
            sev_name = sev.value if hasattr(sev, "value") else str(sev).upper()
            sev_style = severity_style_map.get(sev_name, "")
            sev_cell = (
                f"[{sev_style}]{sev_name}[/{sev_style}]"
                if sev_style
                else sev_name
            )
            tbl.add_row(
                str(idx),
                sev_cell,
                str(getattr(finding, "title", "")),
                str(getattr(finding, "description", "")),
            )

        self._console.print(tbl)

    @contextmanager
    def status(
        self, message: str = "Working..."
    ) -> Generator[Any, None, None]:
        """Context-manager showing a spinner with a status message."""
        with self._console.status(
            f"[vig.info]{message}[/vig.info]",
            spinner="dots",
            spinner_style="bright_cyan",
        ) as status_obj:
            yield status_obj

