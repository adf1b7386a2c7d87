"""
Vigenere CLI
=============

Click-based command-line interface for keyless Vigenere cryptanalysis.
Provides subcommands for breaking a ciphertext without its key, running
the Kasiski examination on its own, and applying the cipher with a known
key.

Usage::

    python -m vigenere break cipherNoKey.txt
    python -m vigenere break cipherNoKey.txt --key-length 5 --mode column
    python -m vigenere kasiski cipherNoKey.txt
    python -m vigenere decrypt cipher.txt --key LEMON
    python -m vigenere encrypt plain.txt --key LEMON

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import click

from shared.config import VigenereConfig
from shared.console import VigenereConsole
from shared.models import ScanResult

from vigenere import __version__
from vigenere.core.engine import VigenereEngine
from vigenere.core.models import AnalysisResult, KasiskiResult, ScoringMode
from vigenere.output.console import VigenereConsoleOutput
from vigenere.output.report import VigenereReportGenerator


_OUTPUT_FORMATS = ("console", "json", "html")


def _output_format(value: str) -> str:
    """Validate an output format taken from the command line or configuration."""
    fmt = value.lower()
    if fmt not in _OUTPUT_FORMATS:
        raise click.BadParameter(
            f"unknown report format {value!r}; expected one of {', '.join(_OUTPUT_FORMATS)}",
            param_hint="report_format",
        )
    return fmt


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(_OUTPUT_FORMATS),
    default=None,
    help="Output format (default from configuration).",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output file path (for JSON/HTML output).",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner and informational output.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Override the configured log level.",
)
@click.version_option(__version__, prog_name="vigenere")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: Optional[str],
    output_file: Optional[str],
    quiet: bool,
    log_level: Optional[str],
) -> None:
    """Vigenere -- Keyless Cryptanalysis Toolkit.

    Estimate the key length of a Vigenere ciphertext with the Kasiski
    examination, recover the key by frequency correlation, and decrypt.
    """
    ctx.ensure_object(dict)

    vig_config = VigenereConfig.load(config) if config else VigenereConfig()
    if log_level:
        vig_config.global_settings.log_level = log_level.upper()
    ctx.obj["config"] = vig_config
    ctx.obj["output_format"] = _output_format(output or vig_config.global_settings.report_format)
    ctx.obj["output_file"] = output_file
    ctx.obj["quiet"] = quiet

    console = VigenereConsole(quiet=quiet)
    ctx.obj["console"] = console
    ctx.obj["engine"] = VigenereEngine(vig_config)
    ctx.obj["display"] = VigenereConsoleOutput(console)
    ctx.obj["reporter"] = VigenereReportGenerator(version=__version__)

    if not quiet:
        console.banner(version=__version__)


def _handle_output(ctx: click.Context, result: ScanResult) -> None:
    """Emit *result* as JSON or HTML according to the selected format."""
    output_format = ctx.obj["output_format"]
    output_file = ctx.obj["output_file"]
    reporter: VigenereReportGenerator = ctx.obj["reporter"]
    console: VigenereConsole = ctx.obj["console"]

    if output_format == "json":
        if output_file:
            path = reporter.generate_json(result, Path(output_file))
            console.success(f"JSON report saved to: {path}")
        else:
            click.echo(json.dumps(
                reporter.build_json(result),
                indent=2,
                ensure_ascii=False,
                default=str,
            ))
    elif output_format == "html":
        if output_file:
            path = Path(output_file)
        else:
            config: VigenereConfig = ctx.obj["config"]
            path = Path(config.global_settings.output_dir) / "vigenere_report.html"
        path = reporter.generate_html(result, path)
        console.success(f"HTML report saved to: {path}")


def _finish(ctx: click.Context, result: ScanResult) -> None:
    """Show findings (console mode) and set the exit status."""
    if ctx.obj["output_format"] == "console":
        ctx.obj["console"].findings_table(result.findings)
    else:
        _handle_output(ctx, result)
    if result.failed:
        ctx.obj["console"].error(result.summary)
        ctx.exit(1)


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command("break")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--key-length", "-k",
    type=click.IntRange(min=1),
    default=None,
    help="Use this key length instead of the Kasiski estimate.",
)
@click.option(
    "--mode", "-m",
    type=click.Choice([m.value for m in ScoringMode]),
    default=None,
    help="Shift scoring mode (default from configuration).",
)
@click.option(
    "--plaintext-file", "-p",
    type=click.Path(dir_okay=False),
    default=None,
    help="Where to write the recovered plaintext.",
)
@click.pass_context
def break_(
    ctx: click.Context,
    file: str,
    key_length: Optional[int],
    mode: Optional[str],
    plaintext_file: Optional[str],
) -> None:
    """Recover the key and plaintext of a ciphertext without the key.

    Prints the Kasiski distances, the probable key length, the Index of
    Coincidence of each column, the key and the plaintext, then writes
    the plaintext to a file.
    """
    engine: VigenereEngine = ctx.obj["engine"]
    display: VigenereConsoleOutput = ctx.obj["display"]
    reporter: VigenereReportGenerator = ctx.obj["reporter"]
    console: VigenereConsole = ctx.obj["console"]
    config: VigenereConfig = ctx.obj["config"]

    with console.status("Breaking cipher..."):
        result = engine.analyze_file(
            Path(file),
            key_length=key_length,
            mode=ScoringMode(mode) if mode else None,
        )

    if not result.failed:
        analysis = AnalysisResult(**result.metadata)
        if ctx.obj["output_format"] == "console":
            display.display_analysis(analysis)
        path = reporter.write_plaintext(
            analysis.plaintext,
            Path(plaintext_file or config.io.plaintext_file),
            encoding=config.io.encoding,
        )
        console.success(f"Plaintext written to: {path}")

    _finish(ctx, result)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def kasiski(ctx: click.Context, file: str) -> None:
    """Run the Kasiski examination and estimate the key length.

    Lists the distance between successive occurrences of every repeated
    substring and the key length chosen by pairwise GCD voting.
    """
    engine: VigenereEngine = ctx.obj["engine"]
    display: VigenereConsoleOutput = ctx.obj["display"]

    result = engine.kasiski_file(Path(file))

    if ctx.obj["output_format"] == "console" and "distances" in result.metadata:
        display.display_kasiski(KasiskiResult(**result.metadata))
    _finish(ctx, result)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--key", "-k", required=True, help="Key letters (A-Z).")
@click.pass_context
def decrypt(ctx: click.Context, file: str, key: str) -> None:
    """Decrypt a ciphertext file with a known key."""
    engine: VigenereEngine = ctx.obj["engine"]
    display: VigenereConsoleOutput = ctx.obj["display"]

    result = engine.decrypt_file(Path(file), key)

    if ctx.obj["output_format"] == "console" and "plaintext" in result.metadata:
        display.display_text("Plaintext", result.metadata["plaintext"], result.metadata["key"])
    _finish(ctx, result)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--key", "-k", required=True, help="Key letters (A-Z).")
@click.pass_context
def encrypt(ctx: click.Context, file: str, key: str) -> None:
    """Encrypt a plaintext file with a key."""
    engine: VigenereEngine = ctx.obj["engine"]
    display: VigenereConsoleOutput = ctx.obj["display"]

    result = engine.encrypt_file(Path(file), key)

    if ctx.obj["output_format"] == "console" and "ciphertext" in result.metadata:
        display.display_text("Ciphertext", result.metadata["ciphertext"], result.metadata["key"])
    _finish(ctx, result)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the Vigenere CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
