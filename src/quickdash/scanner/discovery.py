"""Directory walking with ignore pruning and depth limits."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from quickdash.types import DiscoveredFiles, FileEntry
from quickdash.utils import normalize_relative_path

logger = logging.getLogger(__name__)


def discover_files(
    root: Path,
    *,
    max_depth: int | None = None,
    follow_symlinks: bool = False,
    ignored: Iterable[str | Path] = (),
) -> DiscoveredFiles:
    """Walk *root* and collect the regular files beneath it.

    ``max_depth`` bounds descent below the root: ``0`` only lists the root's
    own files, ``None`` is unbounded. Entries whose root-relative path is in
    *ignored* are skipped; an ignored directory is never entered. Ignored
    regular files are reported separately so callers can record them.
    """
    ignored_paths = {normalize_relative_path(item) for item in ignored}
    limit = None if max_depth is None else max_depth + 1

    files: list[FileEntry] = []
    ignored_files: list[str] = []
    root_id = _dir_identity(root)
    # (directory, relative prefix, depth of the directory, identities of ancestors)
    pending: list[tuple[Path, str, int, frozenset[tuple[int, int]]]] = [
        (root, "", 0, frozenset({root_id}) if root_id else frozenset())
    ]

    while pending:
        directory, prefix, depth, ancestors = pending.pop()
        try:
            with os.scandir(directory) as iterator:
                entries = sorted(iterator, key=lambda item: item.name)
        except OSError as exc:
            logger.warning("Cannot read directory %s: %s", directory, exc)
            continue

        child_depth = depth + 1
        subdirectories: list[tuple[Path, str, int, frozenset[tuple[int, int]]]] = []
        for entry in entries:
            relative = f"{prefix}/{entry.name}" if prefix else entry.name
            try:
                is_dir = entry.is_dir(follow_symlinks=follow_symlinks)
                is_file = not is_dir and entry.is_file(follow_symlinks=follow_symlinks)
            except OSError as exc:
                logger.warning("Cannot stat %s: %s", entry.path, exc)
                continue

            if relative in ignored_paths:
                logger.debug("Ignoring %s", relative)
                if is_file:
                    ignored_files.append(relative)
                continue

            if is_dir:
                if limit is not None and child_depth >= limit:
                    continue
                identity = _dir_identity(Path(entry.path)) if follow_symlinks else None
                if identity is not None and identity in ancestors:
                    logger.warning("Skipping symlink loop at %s", entry.path)
                    continue
                child_ancestors = ancestors | {identity} if identity is not None else ancestors
                subdirectories.append((Path(entry.path), relative, child_depth, child_ancestors))
                continue

            if not is_file:
                continue
            try:
                stat = entry.stat(follow_symlinks=follow_symlinks)
            except OSError as exc:
                logger.warning("Cannot stat %s: %s", entry.path, exc)
                continue
            files.append(FileEntry(path=Path(entry.path), relative=relative, device=stat.st_dev, inode=stat.st_ino))

        # Reversed so the stack pops subdirectories in name order.
        pending.extend(reversed(subdirectories))

    return DiscoveredFiles(files=tuple(files), ignored_files=tuple(ignored_files))


def _dir_identity(path: Path) -> tuple[int, int] | None:
    """Return ``(device, inode)`` for a directory, or None when it cannot be stat'd."""
    try:
        stat = path.stat()
    except OSError:
        return None
    return (stat.st_dev, stat.st_ino)
