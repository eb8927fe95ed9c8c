#!/usr/bin/env python3
"""
shiftjis2utf8.cli.cli

Typer-based CLI for converting Shift_JIS text files to UTF-8 in place.

Examples
--------
Convert explicit files (globs allowed, comma-separated):

    shiftjis2utf8 files job/tmp/sample_01.log,job/tmp/test*.log

Search a directory two levels deep:

    shiftjis2utf8 dir ./test/tmp --depth 2 --patterns "*.md,*.log"

Forget every previously processed file:

    shiftjis2utf8 clear

Run from ``.shiftjis2utf8.yaml`` in the current directory:

    shiftjis2utf8
"""

from __future__ import annotations

import logging
import os
import traceback
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import typer

from shiftjis2utf8.errors import Shiftjis2Utf8Error

if TYPE_CHECKING:
    from shiftjis2utf8.adapters.history import FileHistoryStore
    from shiftjis2utf8.application.options import RunConfig
    from shiftjis2utf8.application.results import FileReport

app = typer.Typer(
    name="shiftjis2utf8",
    help="Convert Shift_JIS text files to UTF-8 in place, remembering what was done.",
    invoke_without_command=True,
)

HISTORY_ENVVAR = "SHIFTJIS2UTF8_HISTORY"
SEPARATOR = "---------------------------------"

CONFIG_EXAMPLE = """\
Config file (.shiftjis2utf8.yaml):
  mode: files
  files:
    - job/tmp/sample_01.log
    - "test*.log"

  or

  mode: dir
  dir: ./test/tmp
  depth: 2
  patterns:
    - "*.md"
    - "*.log"
"""


@dataclass(frozen=True)
class CliState:
    """Global options shared by all commands."""

    debug: bool
    history_file: Path | None
    config_file: Path


def _print_error(exc: BaseException, debug: bool) -> int:
    """Print a user-friendly error and return the process exit code.

    Parameters
    ----------
    exc : BaseException
        Exception raised by a command.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.secho(f"✗ {type(exc).__name__}: {exc}", fg=typer.colors.RED, err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _state(ctx: typer.Context) -> CliState:
    return ctx.obj


def _build_store(state: CliState) -> FileHistoryStore:
    from shiftjis2utf8.adapters.history import FileHistoryStore

    if state.history_file is not None:
        return FileHistoryStore(state.history_file)
    return FileHistoryStore.default()


def _display(path: str) -> str:
    # Undecodable file names carry surrogates that cannot be printed as-is.
    return os.fsencode(path).decode("utf-8", errors="replace")


def _report_file(report: FileReport) -> None:
    """Print one per-file progress line."""
    from shiftjis2utf8.application.results import FileOutcome

    name = _display(os.path.basename(report.path))
    if report.outcome is FileOutcome.CONVERTED:
        typer.secho(f"Converted: {name}", fg=typer.colors.GREEN)
    elif report.outcome is FileOutcome.ALREADY_CANONICAL:
        typer.echo(f"Already UTF-8: {name}")
    elif report.outcome is FileOutcome.MISSING:
        typer.secho(f"Not found: {_display(report.path)}", fg=typer.colors.YELLOW, err=True)
    elif report.outcome is FileOutcome.FAILED:
        typer.secho(f"Failed: {name} - {_display(str(report.detail))}", fg=typer.colors.RED, err=True)


def _print_header(config: RunConfig) -> None:
    if config.mode == "files":
        typer.echo("Files mode")
        typer.echo(f"Targets: {', '.join(config.files)}")
    else:
        typer.echo("Directory mode")
        typer.echo(f"Directory: {config.directory}")
        typer.echo(f"Depth: {config.depth}")
        typer.echo(f"Patterns: {', '.join(config.patterns)}")
    typer.echo(SEPARATOR)


def _run_config(state: CliState, config: RunConfig) -> None:
    """Execute a resolved run configuration and print the summary."""
    from shiftjis2utf8.application.use_cases import clear_history, execute

    try:
        store = _build_store(state)
        if config.mode == "clear":
            clear_history(store)
            typer.echo("Conversion history cleared")
            return
        _print_header(config)
        result = execute(config, store=store, reporter=_report_file)
    except Shiftjis2Utf8Error as exc:
        raise typer.Exit(code=_print_error(exc, state.debug))
    except Exception as exc:
        raise typer.Exit(code=_print_error(exc, state.debug))

    typer.echo(SEPARATOR)
    if not result.history_saved:
        typer.secho("Warning: conversion history could not be saved.", fg=typer.colors.YELLOW, err=True)
    typer.echo(f"converted: {result.converted} | skipped: {result.skipped}")


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show tracebacks and debug logging."),
    history_file: Path | None = typer.Option(
        None,
        "--history-file",
        envvar=HISTORY_ENVVAR,
        help="History file location (default: ~/.local.shiftjis2utf8).",
    ),
    config_file: Path = typer.Option(
        Path(".shiftjis2utf8.yaml"),
        "--config",
        help="YAML config used when no command is given.",
    ),
) -> None:
    """Initialize shared CLI state; without a command, run from the config file.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug error output.
    history_file : Path | None, default=None
        Override for the persisted history location.
    config_file : Path
        YAML config consulted when no subcommand is given.
    """
    _configure_logging(debug)
    state = CliState(debug=debug, history_file=history_file, config_file=config_file)
    ctx.obj = state
    if ctx.invoked_subcommand is not None:
        return

    from shiftjis2utf8.config import load_run_config

    try:
        config = load_run_config(config_file)
    except Shiftjis2Utf8Error as exc:
        raise typer.Exit(code=_print_error(exc, debug))

    if config is None:
        typer.echo(ctx.get_help())
        typer.echo("")
        typer.echo(CONFIG_EXAMPLE)
        raise typer.Exit(code=0)

    _run_config(state, config)


# -----------------------------
# Commands
# -----------------------------
@app.command("files")
def files_cmd(
    ctx: typer.Context,
    paths: str = typer.Argument(
        ...,
        help="Comma-separated file paths; glob patterns allowed. Example: sample.csv,test*.log",
    ),
) -> None:
    """Convert the given files.

    Parameters
    ----------
    ctx : typer.Context
        Typer context containing global options.
    paths : str
        Comma-separated paths or glob patterns. A pattern with no matches is
        treated as a literal path.
    """
    from shiftjis2utf8.application.options import RunConfig

    try:
        config = RunConfig.for_files(paths)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="PATHS") from exc
    _run_config(_state(ctx), config)


@app.command("dir")
def dir_cmd(
    ctx: typer.Context,
    directory: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=False,
        dir_okay=True,
        help="Directory to search.",
    ),
    depth: int = typer.Option(1, "--depth", min=0, help="Recursive search depth."),
    patterns: str = typer.Option(
        "*.txt", "--patterns", help="Comma-separated file name patterns."
    ),
) -> None:
    """Convert matching files inside a directory.

    Parameters
    ----------
    ctx : typer.Context
        Typer context containing global options.
    directory : Path
        Search root.
    depth : int, default=1
        Files deeper than ``depth - 1`` directories below the root are ignored.
    patterns : str, default="*.txt"
        Comma-separated base-name patterns; a file matching several patterns
        is processed once.
    """
    from shiftjis2utf8.application.options import RunConfig

    try:
        config = RunConfig.for_directory(directory, patterns, depth)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--patterns") from exc
    _run_config(_state(ctx), config)


@app.command("clear")
def clear_cmd(ctx: typer.Context) -> None:
    """Delete the conversion history."""
    from shiftjis2utf8.application.options import RunConfig

    _run_config(_state(ctx), RunConfig.for_clear())


if __name__ == "__main__":
    app()
