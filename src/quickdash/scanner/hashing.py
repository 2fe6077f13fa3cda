"""Bounded worker pool that digests files in parallel."""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed

from quickdash.algorithms import Algorithm, hash_file
from quickdash.algorithms.hashers import new_digest
from quickdash.types import DigestMapping, FileEntry, ProgressCallback
from quickdash.utils import sorted_mapping

logger = logging.getLogger(__name__)


def resolve_worker_count(jobs: int) -> int:
    """Translate a ``--jobs`` value into a worker count; ``0`` means every available CPU."""
    if jobs < 0:
        raise ValueError(f"jobs must be non-negative, got {jobs}")
    if jobs == 0:
        return os.cpu_count() or 1
    return jobs


class ParallelHasher:
    """Hash a fixed list of files with at most ``workers`` concurrent reads.

    Each task reads one file and produces one ``(path, digest)`` pair, so the
    workers share nothing. The returned mapping is ordered by path regardless
    of completion order.
    """

    def __init__(
        self,
        algorithm: Algorithm,
        *,
        jobs: int = 0,
        on_progress: ProgressCallback | None = None,
    ) -> None:
        # Fails fast for algorithms that cannot hash in this runtime.
        new_digest(algorithm)
        self.algorithm = algorithm
        self.workers = resolve_worker_count(jobs)
        self._on_progress = on_progress

    def hash_entries(self, entries: Sequence[FileEntry]) -> DigestMapping:
        """Digest every entry and return the path-ordered mapping.

        Files that disappear or cannot be read are logged and left out.
        """
        total = len(entries)
        self._report(0, total)
        if total == 0:
            return {}

        results: list[tuple[str, str]] = []
        if self.workers == 1:
            for done, entry in enumerate(entries, start=1):
                digest = self._hash_one(entry)
                if digest is not None:
                    results.append((entry.relative, digest))
                self._report(done, total)
            return sorted_mapping(results)

        with ThreadPoolExecutor(max_workers=self.workers, thread_name_prefix="quickdash-hash") as executor:
            futures = {executor.submit(self._hash_one, entry): entry for entry in entries}
            for done, future in enumerate(as_completed(futures), start=1):
                digest = future.result()
                if digest is not None:
                    results.append((futures[future].relative, digest))
                self._report(done, total)

        return sorted_mapping(results)

    def _hash_one(self, entry: FileEntry) -> str | None:
        try:
            return hash_file(self.algorithm, entry.path)
        except OSError as exc:
            logger.warning("Failed to hash %s: %s", entry.relative, exc)
            return None

    def _report(self, done: int, total: int) -> None:
        if self._on_progress is not None:
            self._on_progress(done, total)
