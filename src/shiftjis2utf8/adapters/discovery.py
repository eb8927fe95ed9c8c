"""Glob expansion and depth-limited directory search."""

from __future__ import annotations

import fnmatch
import glob as globmod
import os
from collections.abc import Iterable, Iterator

from shiftjis2utf8.adapters.history import normalize_path
from shiftjis2utf8.types import GlobFunction, WalkFunction


def _depth_of(root: str, dirpath: str) -> int:
    """Count separators between ``root`` and files inside ``dirpath``."""
    rel = os.path.relpath(dirpath, root)
    if rel == os.curdir:
        return 0
    return rel.count(os.sep) + 1


def find_matches(
    root: str | os.PathLike[str],
    pattern: str,
    max_depth: int,
    *,
    walk: WalkFunction = os.walk,
) -> Iterator[str]:
    """Yield files under ``root`` whose base name matches ``pattern``.

    A file at depth ``d`` (``root/a.txt`` is depth 0) is yielded only when
    ``d < max_depth``. Subdirectories whose files would exceed the limit are
    pruned before they are entered. Unreadable entries are skipped.

    Parameters
    ----------
    root : str | os.PathLike[str]
        Search root.
    pattern : str
        Shell-style pattern matched against base names.
    max_depth : int
        Exclusive depth bound.
    walk : WalkFunction, default=os.walk
        Top-down walker; pruning mutates the yielded directory list in place.

    Yields
    ------
    str
        Matching file paths, joined onto ``root``.
    """
    top = os.fspath(root)
    for dirpath, dirnames, filenames in walk(top):
        depth = _depth_of(top, dirpath)
        if depth + 1 >= max_depth:
            dirnames[:] = []
        if depth >= max_depth:
            continue
        for name in filenames:
            if fnmatch.fnmatchcase(name, pattern):
                yield os.path.join(dirpath, name)


def find_matches_for_patterns(
    root: str | os.PathLike[str],
    patterns: Iterable[str],
    max_depth: int,
    *,
    walk: WalkFunction = os.walk,
) -> list[str]:
    """Union of :func:`find_matches` over ``patterns``, de-duplicated."""
    seen: set[str] = set()
    unique: list[str] = []
    for pattern in patterns:
        for path in find_matches(root, pattern, max_depth, walk=walk):
            key = normalize_path(path)
            if key in seen:
                continue
            seen.add(key)
            unique.append(path)
    return unique


def glob_all(pattern: str) -> list[str]:
    """Flat glob that, like directory search, also matches dotfiles."""
    return globmod.glob(pattern, include_hidden=True)


def expand_file_pattern(pattern: str, *, glob: GlobFunction = glob_all) -> list[str]:
    """Expand ``pattern`` without recursion, falling back to the literal path.

    An empty expansion is not an error: the pattern is returned unchanged and
    its existence is checked when the file is processed.
    """
    matches = sorted(glob(pattern))
    return matches or [pattern]
