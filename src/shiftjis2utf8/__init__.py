"""Convert Shift_JIS text files to UTF-8 in place with a persisted history."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from shiftjis2utf8.application.options import RunConfig
from shiftjis2utf8.application.results import FileOutcome, FileReport, RunResult
from shiftjis2utf8.errors import (
    ConfigError,
    ConversionError,
    DecodeError,
    HistoryError,
    HomeDirectoryError,
    Shiftjis2Utf8Error,
    UsageError,
)

__version__ = "0.1.0"


def convert_files(
    patterns: Iterable[str],
    history_path: Path | None = None,
) -> RunResult:
    """Convert explicit paths or glob patterns to UTF-8.

    Parameters
    ----------
    patterns : Iterable[str]
        Paths or flat glob patterns, processed in order.
    history_path : Path | None, default=None
        History file; defaults to ``~/.local.shiftjis2utf8``.

    Returns
    -------
    RunResult
        Per-file reports and converted/skipped counts.
    """
    from shiftjis2utf8.adapters.history import FileHistoryStore
    from shiftjis2utf8.application.use_cases import convert_files as _impl

    store = FileHistoryStore(history_path) if history_path else FileHistoryStore.default()
    return _impl(patterns, store=store)


def convert_directory(
    directory: Path | str,
    patterns: Iterable[str] = ("*.txt",),
    depth: int = 1,
    history_path: Path | None = None,
) -> RunResult:
    """Search ``directory`` and convert every matching file once.

    Parameters
    ----------
    directory : Path | str
        Search root.
    patterns : Iterable[str], default=("*.txt",)
        Base-name glob patterns; results are de-duplicated.
    depth : int, default=1
        Exclusive depth bound; ``1`` only searches the root itself.
    history_path : Path | None, default=None
        History file; defaults to ``~/.local.shiftjis2utf8``.

    Returns
    -------
    RunResult
        Per-file reports and converted/skipped counts.
    """
    from shiftjis2utf8.adapters.history import FileHistoryStore
    from shiftjis2utf8.application.use_cases import convert_directory as _impl

    store = FileHistoryStore(history_path) if history_path else FileHistoryStore.default()
    return _impl(directory, patterns, depth, store=store)


__all__ = [
    "ConfigError",
    "ConversionError",
    "DecodeError",
    "FileOutcome",
    "FileReport",
    "HistoryError",
    "HomeDirectoryError",
    "RunConfig",
    "RunResult",
    "Shiftjis2Utf8Error",
    "UsageError",
    "__version__",
    "convert_directory",
    "convert_files",
]
