"""Reconcile a freshly computed digest mapping with one loaded from a manifest."""

from __future__ import annotations

import logging

from quickdash.algorithms import is_placeholder
from quickdash.compare.model import (
    Added,
    Comparison,
    CompareFileResult,
    CompareResult,
    Differs,
    Ignored,
    Matches,
    Removed,
)
from quickdash.exceptions import CompareError
from quickdash.types import DigestMapping
from quickdash.utils import path_sort_key

logger = logging.getLogger(__name__)


def compare_hashes(current: DigestMapping, loaded: DigestMapping) -> Comparison:
    """Classify every path of *current* and *loaded*.

    Paths on one side only become ``Added`` (current) or ``Removed`` (loaded),
    all current-only paths first. Placeholder digests turn a path into
    ``Ignored`` instead. The remaining shared paths are compared digest by
    digest. Raises ``CompareError`` when the two mappings hold digests of
    different lengths, since they were then produced by different algorithms.
    """
    _check_digest_lengths(current, loaded)

    differences: list[CompareResult] = []
    for path in sorted(current.keys() - loaded.keys(), key=path_sort_key):
        differences.append(Ignored(path) if is_placeholder(current[path]) else Added(path))
    for path in sorted(loaded.keys() - current.keys(), key=path_sort_key):
        differences.append(Ignored(path) if is_placeholder(loaded[path]) else Removed(path))

    shared = sorted(current.keys() & loaded.keys(), key=path_sort_key)
    file_results: list[CompareFileResult] = []
    for path in shared:
        previous_digest = loaded[path]
        current_digest = current[path]
        if is_placeholder(previous_digest) or is_placeholder(current_digest):
            differences.append(Ignored(path))
        elif previous_digest == current_digest:
            file_results.append(Matches(path))
        else:
            file_results.append(Differs(path, previous_digest, current_digest))

    logger.debug(
        "Compared %d current and %d loaded entries: %d set differences, %d content results",
        len(current),
        len(loaded),
        len(differences),
        len(file_results),
    )
    return Comparison(differences, file_results)


def _check_digest_lengths(current: DigestMapping, loaded: DigestMapping) -> None:
    """Compare one sample digest from each side; mappings hold a single algorithm each."""
    if not current or not loaded:
        return
    current_len = len(next(iter(current.values())))
    previous_len = len(next(iter(loaded.values())))
    if current_len != previous_len:
        raise CompareError(previous_len=previous_len, current_len=current_len)
