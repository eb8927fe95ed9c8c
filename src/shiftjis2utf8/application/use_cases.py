"""Application use-cases orchestrating the conversion pipeline."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from shiftjis2utf8.adapters.detection import Utf8Detector
from shiftjis2utf8.adapters.discovery import (
    expand_file_pattern,
    find_matches_for_patterns,
    glob_all,
)
from shiftjis2utf8.adapters.history import normalize_path
from shiftjis2utf8.adapters.transcoding import ShiftJisConverter
from shiftjis2utf8.application.options import RunConfig, split_patterns
from shiftjis2utf8.application.ports import (
    EncodingDetector,
    FileConverter,
    HistoryRecordLike,
    HistoryStore,
    ProgressReporter,
)
from shiftjis2utf8.application.results import FileOutcome, FileReport, RunResult
from shiftjis2utf8.errors import ConversionError, HistoryError
from shiftjis2utf8.types import GlobFunction, WalkFunction

logger = logging.getLogger(__name__)


class _Pipeline:
    """Per-run state: the loaded history plus collaborators."""

    def __init__(
        self,
        record: HistoryRecordLike,
        detector: EncodingDetector,
        converter: FileConverter,
        reporter: ProgressReporter | None,
    ) -> None:
        self.record = record
        self.detector = detector
        self.converter = converter
        self.reporter = reporter
        self.reports: list[FileReport] = []

    def _finish(
        self, path: str, absolute: str, outcome: FileOutcome, detail: str | None = None
    ) -> FileReport:
        report = FileReport(
            path=path, absolute_path=absolute, outcome=outcome, detail=detail
        )
        self.reports.append(report)
        if self.reporter is not None:
            self.reporter(report)
        return report

    def process(self, path: str) -> FileReport:
        """Drive one candidate to exactly one terminal outcome."""
        absolute = normalize_path(path)
        name = os.path.basename(path)

        if not os.path.exists(path):
            logger.warning("file not found: %s", path)
            return self._finish(path, absolute, FileOutcome.MISSING)

        if self.record.is_converted(absolute):
            logger.debug("already in history: %s", absolute)
            return self._finish(path, absolute, FileOutcome.ALREADY_KNOWN)

        try:
            canonical = self.detector.is_canonical(Path(path))
        except OSError as exc:
            logger.warning("detection failed: %s - %s", name, exc)
            return self._finish(path, absolute, FileOutcome.FAILED, str(exc))

        if canonical:
            self.record.mark_converted(absolute)
            return self._finish(path, absolute, FileOutcome.ALREADY_CANONICAL)

        try:
            self.converter.convert(Path(path))
        except ConversionError as exc:
            logger.warning("conversion failed: %s - %s", name, exc)
            return self._finish(path, absolute, FileOutcome.FAILED, str(exc))

        self.record.mark_converted(absolute)
        return self._finish(path, absolute, FileOutcome.CONVERTED)


def _run(
    candidates: Iterable[str],
    *,
    store: HistoryStore,
    detector: EncodingDetector | None,
    converter: FileConverter | None,
    reporter: ProgressReporter | None,
) -> RunResult:
    record = store.load()
    pipeline = _Pipeline(
        record=record,
        detector=detector or Utf8Detector(),
        converter=converter or ShiftJisConverter(),
        reporter=reporter,
    )
    for path in candidates:
        pipeline.process(path)

    history_saved = True
    try:
        store.save(record)
    except HistoryError as exc:
        logger.error("%s", exc)
        history_saved = False

    return RunResult(reports=tuple(pipeline.reports), history_saved=history_saved)


def _iter_file_candidates(patterns: Iterable[str], glob: GlobFunction) -> Iterable[str]:
    for pattern in split_patterns(patterns):
        yield from expand_file_pattern(pattern, glob=glob)


def convert_files(
    patterns: Iterable[str],
    *,
    store: HistoryStore,
    detector: EncodingDetector | None = None,
    converter: FileConverter | None = None,
    reporter: ProgressReporter | None = None,
    glob: GlobFunction = glob_all,
) -> RunResult:
    """Use-case: convert an explicit list of paths or globs.

    Patterns are processed in the order given. A pattern that expands to
    nothing is processed as a literal path.
    """
    return _run(
        _iter_file_candidates(patterns, glob),
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
    walk: WalkFunction = os.walk,
) -> RunResult:
    """Use-case: search ``directory`` and convert every unique match once."""
    candidates = find_matches_for_patterns(
        directory, split_patterns(patterns), depth, walk=walk
    )
    logger.debug("found %d candidate(s) under %s", len(candidates), directory)
    return _run(
        candidates,
        store=store,
        detector=detector,
        converter=converter,
        reporter=reporter,
    )


def clear_history(store: HistoryStore) -> None:
    """Use-case: delete persisted history so every file is eligible again."""
    store.clear()


def execute(
    config: RunConfig,
    *,
    store: HistoryStore,
    detector: EncodingDetector | None = None,
    converter: FileConverter | None = None,
    reporter: ProgressReporter | None = None,
) -> RunResult | None:
    """Dispatch ``config`` to its use-case; ``clear`` returns ``None``."""
    if config.mode == "files":
        return convert_files(
            config.files,
            store=store,
            detector=detector,
            converter=converter,
            reporter=reporter,
        )
    if config.mode == "dir":
        return convert_directory(
            config.directory or Path(os.curdir),
            config.patterns,
            config.depth,
            store=store,
            detector=detector,
            converter=converter,
            reporter=reporter,
        )
    clear_history(store)
    return None
