"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Protocol, TypeAlias

from shiftjis2utf8.application.results import ConversionReport, FileReport


class HistoryRecordLike(Protocol):
    """In-memory set of already processed absolute paths."""

    def is_converted(self, path: str) -> bool:
        """Return whether ``path`` was already processed."""

    def mark_converted(self, path: str) -> None:
        """Record ``path`` as processed."""

    def __iter__(self) -> Iterator[str]:
        """Iterate over recorded paths."""


class HistoryStore(Protocol):
    """Load, persist and clear the conversion history."""

    def load(self) -> HistoryRecordLike:
        """Return the persisted record, empty if none exists."""

    def save(self, record: HistoryRecordLike) -> None:
        """Overwrite persisted history with ``record``."""

    def clear(self) -> None:
        """Remove persisted history."""


class EncodingDetector(Protocol):
    """Classify a file as already canonical or needing conversion."""

    def is_canonical(self, path: Path) -> bool:
        """Return ``True`` when the sampled content is valid UTF-8."""


class FileConverter(Protocol):
    """Rewrite a legacy-encoded file in place as UTF-8."""

    def convert(self, path: Path) -> ConversionReport:
        """Convert ``path`` or raise ``ConversionError``."""


ProgressReporter: TypeAlias = Callable[[FileReport], None]
