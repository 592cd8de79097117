#!/usr/bin/env python3
"""
helm_converter.cli.cli

Typer-based CLI converting a file of notation strings (HELM by default, one
per line) into a file of canonical SMILES strings (one per line).

Every input line yields exactly one output line. Lines that fail to convert
come out blank and are reported on stderr; they never abort the run.

Examples
--------
Convert a HELM file:

    helm-to-smiles peptides.helm peptides.smi

Convert one-letter peptide sequences, with per-line tracebacks:

    helm-to-smiles --notation sequence --debug sequences.txt sequences.smi

Exit statuses
-------------
0 all lines processed (even if some failed), 1 usage or configuration
error, 2 input/output file error, 99 any other fatal error.
"""

from __future__ import annotations

import logging
import sys
import traceback
from collections.abc import Sequence
from pathlib import Path

import typer

from helm_converter import __version__
from helm_converter.errors import (
    EXIT_OK,
    EXIT_UNEXPECTED,
    EXIT_USAGE,
    ConfigurationError,
    PluginError,
)
from helm_converter.schemas import DEFAULT_MAX_LINE_LENGTH

try:
    # Recent typer releases ship their own copy of click.
    from typer._click.exceptions import Abort, UsageError
except ImportError:
    from click.exceptions import Abort, UsageError

PROG_NAME = "helm-to-smiles"
USAGE = f"Usage: {PROG_NAME} <input_helm_file.txt> <output_smiles_file.txt>"

_PACKAGE_LOGGER = "helm_converter"
_LOG_HANDLER_NAME = "helm_converter.cli.stderr"

app = typer.Typer(
    name=PROG_NAME,
    help="Convert notation strings (HELM by default, one per line) to canonical SMILES.",
    add_completion=False,
)


# -----------------------------
# Diagnostics
# -----------------------------
def _configure_logging(debug: bool) -> None:
    """Send package log records to stderr as bare messages.

    Parameters
    ----------
    debug : bool
        Lower the threshold to DEBUG so per-line tracebacks are shown.
    """
    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    for existing in list(package_logger.handlers):
        if existing.get_name() == _LOG_HANDLER_NAME:
            package_logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_LOG_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if debug else logging.INFO)


def _print_fatal_error(exc: Exception) -> int:
    """Print a fatal error with its traceback.

    Parameters
    ----------
    exc : Exception
        Exception that aborted the run.

    Returns
    -------
    int
        Process exit code: the error's ``exit_code`` when it carries one,
        otherwise 99.
    """
    typer.secho(f"✗ {type(exc).__name__}: {exc}", fg=typer.colors.RED, err=True)
    typer.echo("".join(traceback.format_exception(exc)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return EXIT_UNEXPECTED


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{PROG_NAME} {__version__}")
        raise typer.Exit()


# -----------------------------
# Command
# -----------------------------
@app.command()
def convert_cmd(
    input_path: Path = typer.Argument(
        ...,
        help="Text file with one notation string per line.",
    ),
    output_path: Path = typer.Argument(
        ...,
        help="Where to write one SMILES per input line (created or truncated).",
    ),
    notation: str = typer.Option(
        "helm",
        "--notation",
        help="Input notation plugin: helm, sequence, or one loaded via --plugin-module.",
    ),
    plugin_module: list[str] | None = typer.Option(
        None,
        "--plugin-module",
        help="Notation plugin module import path or file path (repeatable).",
    ),
    encoding: str = typer.Option(
        "utf-8", "--encoding", help="Text encoding of the input file."
    ),
    max_line_length: int = typer.Option(
        DEFAULT_MAX_LINE_LENGTH,
        "--max-line-length",
        min=1,
        help="Longer lines are reported as failures without being parsed.",
    ),
    debug: bool = typer.Option(
        False, "--debug", help="Show tracebacks for lines that fail to convert."
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Convert INPUT_PATH line by line into canonical SMILES at OUTPUT_PATH.

    Parameters
    ----------
    input_path : Path
        Notation file to read.
    output_path : Path
        SMILES file to write; one line per input line, blank on failure.
    notation : str, default="helm"
        Registered notation plugin name.
    debug : bool, default=False
        Whether to log tracebacks for failed lines.
    """
    del version
    _configure_logging(debug)

    try:
        from helm_converter.api import convert_notation_file

        convert_notation_file(
            input_path=input_path,
            output_path=output_path,
            notation=notation,
            encoding=encoding,
            max_line_length=max_line_length,
            plugin_modules=plugin_module,
        )
    except (ConfigurationError, PluginError) as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=EXIT_USAGE)
    except Exception as exc:
        raise typer.Exit(code=_print_fatal_error(exc))


def main(argv: Sequence[str] | None = None) -> int:
    """Console-script entry point returning the process exit status.

    Click reports usage errors with status 2, which this tool reserves for
    file access failures; usage errors are reported here with status 1.

    Parameters
    ----------
    argv : Sequence[str] | None, optional
        Arguments without the program name. Defaults to ``sys.argv[1:]``.

    Returns
    -------
    int
        Process exit status.
    """
    command = typer.main.get_command(app)
    try:
        rv = command.main(
            args=list(argv) if argv is not None else None,
            prog_name=PROG_NAME,
            standalone_mode=False,
        )
    except UsageError as exc:
        typer.echo(USAGE, err=True)
        typer.echo(f"Error: {exc.format_message()}", err=True)
        return EXIT_USAGE
    except Abort:
        typer.echo("Aborted!", err=True)
        return EXIT_UNEXPECTED
    return rv if isinstance(rv, int) else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
