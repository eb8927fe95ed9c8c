"""Shared type aliases for the conversion pipeline."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Literal, TypeAlias

RunMode: TypeAlias = Literal["files", "dir", "clear"]

WalkEntry: TypeAlias = tuple[str, list[str], list[str]]
WalkFunction: TypeAlias = Callable[[str], Iterator[WalkEntry]]
GlobFunction: TypeAlias = Callable[[str], Iterable[str]]
