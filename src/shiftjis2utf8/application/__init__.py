"""Application-layer use-cases and option objects."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from shiftjis2utf8.application.options import RunConfig, split_patterns
from shiftjis2utf8.application.ports import (
    EncodingDetector,
    FileConverter,
    HistoryStore,
    ProgressReporter,
)
from shiftjis2utf8.application.results import (
    ConversionReport,
    FileOutcome,
    FileReport,
    RunResult,
)


def convert_files(
    patterns: Iterable[str],
    *,
    store: HistoryStore,
    detector: EncodingDetector | None = None,
    converter: FileConverter | None = None,
    reporter: ProgressReporter | None = None,
) -> RunResult:
    """Convert explicit paths/globs via lazy use-case import."""
    from shiftjis2utf8.application.use_cases import convert_files as _impl

    return _impl(
        patterns,
        store=store,
        detector=detector,
        converter=converter,
        reporter=reporter,
    )


def convert_directory(
    directory: Path | str,
    patterns: Iterable[str],
    depth: int,
    *,
    store: HistoryStore,
    detector: EncodingDetector | None = None,
    converter: FileConverter | None = None,
    reporter: ProgressReporter | None = None,
) -> RunResult:
    """Search and convert a directory via lazy use-case import."""
    from shiftjis2utf8.application.use_cases import convert_directory as _impl

    return _impl(
        directory,
        patterns,
        depth,
        store=store,
        detector=detector,
        converter=converter,
        reporter=reporter,
    )


def execute(
    config: RunConfig,
    *,
    store: HistoryStore,
    reporter: ProgressReporter | None = None,
) -> RunResult | None:
    """Run a resolved configuration via lazy use-case import."""
    from shiftjis2utf8.application.use_cases import execute as _impl

    return _impl(config, store=store, reporter=reporter)


__all__ = [
    "ConversionReport",
    "FileOutcome",
    "FileReport",
    "RunConfig",
    "RunResult",
    "convert_directory",
    "convert_files",
    "execute",
    "split_patterns",
]
