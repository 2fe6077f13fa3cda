"""Relative-path helpers shared by the scanner, manifest codec and diff engine."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path, PurePath


def path_sort_key(path: str) -> tuple[str, ...]:
    """Order paths component by component, so ``a/b`` sorts before ``a-b``."""
    return tuple(path.split("/"))


def sorted_mapping(items: Iterable[tuple[str, str]]) -> dict[str, str]:
    """Build a path-ordered mapping; later duplicates overwrite earlier ones."""
    merged = dict(items)
    return {path: merged[path] for path in sorted(merged, key=path_sort_key)}


def normalize_relative_path(raw: str | PurePath) -> str:
    """Normalize a user-supplied relative path to the POSIX form used as mapping keys."""
    return PurePath(raw).as_posix()


def relative_name(root: Path, path: Path) -> str:
    """Render *path* relative to *root* when possible, as a POSIX string."""
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()
