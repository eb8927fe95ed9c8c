"""Flat-file conversion history store."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from shiftjis2utf8.errors import HistoryError, HomeDirectoryError

logger = logging.getLogger(__name__)

HISTORY_FILENAME = ".local.shiftjis2utf8"


def normalize_path(path: str | os.PathLike[str]) -> str:
    """Return the absolute, case-preserving identity used as history key."""
    return os.path.abspath(os.fspath(path))


def default_history_path() -> Path:
    """Resolve the history file location under the user's home directory.

    Raises
    ------
    HomeDirectoryError
        If the home directory cannot be determined.
    """
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as exc:
        raise HomeDirectoryError(f"Failed to resolve home directory: {exc}") from exc
    return home / HISTORY_FILENAME


class HistoryRecord:
    """Set of absolute paths already processed."""

    def __init__(self, paths: Iterable[str] = ()) -> None:
        self._paths: set[str] = set(paths)

    def is_converted(self, path: str) -> bool:
        """Return whether ``path`` is already recorded."""
        return path in self._paths

    def mark_converted(self, path: str) -> None:
        """Record ``path``; recording it twice is a no-op."""
        self._paths.add(path)

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._paths))

    def __len__(self) -> int:
        return len(self._paths)


class FileHistoryStore:
    """History persisted as one absolute path per line.

    Paths are stored as their raw file-system bytes, so names that are not
    valid UTF-8 round-trip unchanged.

    Parameters
    ----------
    path : Path
        History file location.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    @classmethod
    def default(cls) -> FileHistoryStore:
        """Store bound to the well-known location in the home directory."""
        return cls(default_history_path())

    def load(self) -> HistoryRecord:
        """Read the persisted record; a missing file yields an empty record."""
        try:
            text = self.path.read_text(encoding="utf-8", errors="surrogateescape")
        except FileNotFoundError:
            logger.debug("no history at %s", self.path)
            return HistoryRecord()
        record = HistoryRecord(line for line in text.split("\n") if line)
        logger.debug("loaded %d history entries from %s", len(record), self.path)
        return record

    def save(self, record: HistoryRecord) -> None:
        """Overwrite the history file with the record's contents.

        Raises
        ------
        HistoryError
            If the file cannot be written.
        """
        payload = "".join(f"{entry}\n" for entry in record)
        try:
            self.path.write_text(payload, encoding="utf-8", errors="surrogateescape")
        except (OSError, UnicodeError) as exc:
            raise HistoryError(f"Failed to save history to {self.path}: {exc}") from exc

    def clear(self) -> None:
        """Delete the history file; deleting a missing file succeeds."""
        try:
            self.path.unlink(missing_ok=True)
        except OSError as exc:
            raise HistoryError(f"Failed to delete history {self.path}: {exc}") from exc
