"""Scan-and-hash entry points combining discovery, ordering and hashing."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from quickdash.algorithms import Algorithm
from quickdash.exceptions import ConfigError
from quickdash.scanner.discovery import discover_files
from quickdash.scanner.hashing import ParallelHasher
from quickdash.scanner.ordering import OrderStrategy, optimize_file_order
from quickdash.types import DigestMapping, FileEntry, ProgressCallback
from quickdash.utils import relative_name, sorted_mapping

logger = logging.getLogger(__name__)


def create_hashes(
    root: Path,
    *,
    algorithm: Algorithm,
    ignored_files: Iterable[str | Path] = (),
    max_depth: int | None = None,
    follow_symlinks: bool = False,
    jobs: int = 0,
    track_ignored: bool = False,
    order_strategy: OrderStrategy | None = None,
    on_progress: ProgressCallback | None = None,
) -> DigestMapping:
    """Map every regular file under *root* to its digest.

    With ``track_ignored`` each ignored file that exists is recorded with the
    algorithm's placeholder digest instead of being dropped.
    """
    root = _require_directory(root)
    hasher = ParallelHasher(algorithm, jobs=jobs, on_progress=on_progress)

    discovered = discover_files(
        root,
        max_depth=max_depth,
        follow_symlinks=follow_symlinks,
        ignored=ignored_files,
    )
    entries = optimize_file_order(discovered.files, order_strategy)
    logger.info("Hashing %d files under %s with %d workers", len(entries), root, hasher.workers)

    hashes = hasher.hash_entries(entries)
    if track_ignored and discovered.ignored_files:
        placeholder = algorithm.placeholder()
        hashes = sorted_mapping([*hashes.items(), *((path, placeholder) for path in discovered.ignored_files)])
    return hashes


def create_hashes_for_files(
    root: Path,
    files: Iterable[str | Path],
    *,
    algorithm: Algorithm,
    jobs: int = 0,
    order_strategy: OrderStrategy | None = None,
    on_progress: ProgressCallback | None = None,
) -> DigestMapping:
    """Digest only the listed *files* (relative to *root*) that still exist."""
    root = _require_directory(root)
    hasher = ParallelHasher(algorithm, jobs=jobs, on_progress=on_progress)

    entries: list[FileEntry] = []
    for item in files:
        candidate = Path(item)
        path = candidate if candidate.is_absolute() else root / candidate
        try:
            if not path.is_file():
                logger.debug("Listed file is missing: %s", item)
                continue
            stat = path.stat()
        except OSError as exc:
            logger.warning("Cannot stat %s: %s", path, exc)
            continue
        entries.append(
            FileEntry(path=path, relative=relative_name(root, path), device=stat.st_dev, inode=stat.st_ino)
        )

    entries = optimize_file_order(entries, order_strategy)
    logger.info("Hashing %d listed files under %s with %d workers", len(entries), root, hasher.workers)
    return hasher.hash_entries(entries)


def _require_directory(root: Path) -> Path:
    resolved = root.resolve()
    if not resolved.is_dir():
        raise ConfigError(f"Scan root does not exist or is not a directory: {resolved}")
    return resolved
