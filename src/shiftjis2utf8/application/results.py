"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FileOutcome(str, Enum):
    """Terminal state of one file candidate."""

    CONVERTED = "converted"
    ALREADY_CANONICAL = "already_canonical"
    ALREADY_KNOWN = "already_known"
    MISSING = "missing"
    FAILED = "failed"

    @property
    def is_converted(self) -> bool:
        """Whether this outcome counts towards the converted total."""
        return self is FileOutcome.CONVERTED


@dataclass(frozen=True)
class FileReport:
    """Outcome of processing one discovered path."""

    path: str
    absolute_path: str
    outcome: FileOutcome
    detail: str | None = None


@dataclass(frozen=True)
class ConversionReport:
    """Byte counts of a successful in-place rewrite."""

    path: str
    bytes_read: int
    bytes_written: int


@dataclass(frozen=True)
class RunResult:
    """Structured outcome of one pipeline pass."""

    reports: tuple[FileReport, ...] = ()
    history_saved: bool = True

    @property
    def converted(self) -> int:
        """Number of files rewritten during the run."""
        return sum(1 for report in self.reports if report.outcome.is_converted)

    @property
    def skipped(self) -> int:
        """Number of files that ended in any other outcome."""
        return len(self.reports) - self.converted
