"""Typed run configuration shared by the CLI and the config file loader."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from shiftjis2utf8.types import RunMode

DEFAULT_DEPTH = 1
DEFAULT_PATTERNS: tuple[str, ...] = ("*.txt",)


def split_patterns(raw: str | Iterable[str]) -> tuple[str, ...]:
    """Normalize a comma-separated string or iterable into trimmed patterns.

    Empty entries are dropped, order is preserved.
    """
    items = raw.split(",") if isinstance(raw, str) else raw
    return tuple(item.strip() for item in items if item and item.strip())


@dataclass(frozen=True)
class RunConfig:
    """Resolved operating parameters for one invocation.

    Parameters
    ----------
    mode : {"files", "dir", "clear"}
        Invocation mode.
    files : tuple[str, ...], default=()
        Ordered path/glob patterns, populated only for ``files`` mode.
    directory : Path | None, default=None
        Search root, populated only for ``dir`` mode.
    patterns : tuple[str, ...], default=()
        Ordered base-name patterns, populated only for ``dir`` mode.
    depth : int, default=1
        Maximum recursion depth for ``dir`` mode.
    """

    mode: RunMode
    files: tuple[str, ...] = ()
    directory: Path | None = None
    patterns: tuple[str, ...] = ()
    depth: int = DEFAULT_DEPTH

    def __post_init__(self) -> None:
        if self.mode == "files":
            if not self.files:
                raise ValueError("files mode requires at least one path or pattern.")
            if self.directory is not None or self.patterns:
                raise ValueError("files mode does not accept dir/patterns.")
        elif self.mode == "dir":
            if self.directory is None:
                raise ValueError("dir mode requires a target directory.")
            if not self.patterns:
                raise ValueError("dir mode requires at least one pattern.")
            if self.files:
                raise ValueError("dir mode does not accept files.")
            if self.depth < 0:
                raise ValueError("depth must be a non-negative integer.")
        elif self.mode == "clear":
            if self.files or self.directory is not None or self.patterns:
                raise ValueError("clear mode takes no arguments.")
        else:
            raise ValueError(f"unknown mode: {self.mode}")

    @classmethod
    def for_files(cls, files: str | Iterable[str]) -> RunConfig:
        """Build a ``files`` mode configuration."""
        return cls(mode="files", files=split_patterns(files))

    @classmethod
    def for_directory(
        cls,
        directory: Path | str,
        patterns: str | Iterable[str] = DEFAULT_PATTERNS,
        depth: int = DEFAULT_DEPTH,
    ) -> RunConfig:
        """Build a ``dir`` mode configuration."""
        return cls(
            mode="dir",
            directory=Path(directory),
            patterns=split_patterns(patterns),
            depth=depth,
        )

    @classmethod
    def for_clear(cls) -> RunConfig:
        """Build a ``clear`` mode configuration."""
        return cls(mode="clear")
