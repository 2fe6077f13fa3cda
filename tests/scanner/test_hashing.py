"""Tests for the parallel hasher."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path

import pytest

from quickdash.algorithms import Algorithm, hash_bytes
from quickdash.exceptions import UnsupportedAlgorithmError
from quickdash.scanner import ParallelHasher, discover_files, resolve_worker_count
from quickdash.types import FileEntry


def _tree(make_tree: Callable[..., Path]) -> Path:
    return make_tree({f"dir{index % 3}/file{index:02d}.txt": f"content {index}" for index in range(20)})


@pytest.mark.parametrize("jobs", [1, 2, 8])
def test_hash_entries_is_path_ordered_and_independent_of_jobs(make_tree: Callable[..., Path], jobs: int) -> None:
    root = _tree(make_tree)
    entries = list(reversed(discover_files(root).files))

    hashes = ParallelHasher(Algorithm.MD5, jobs=jobs).hash_entries(entries)

    assert list(hashes) == sorted(hashes, key=lambda path: path.split("/"))
    assert len(hashes) == 20
    assert hashes["dir1/file01.txt"] == hash_bytes(Algorithm.MD5, b"content 1")


def test_progress_reports_every_file(make_tree: Callable[..., Path]) -> None:
    root = _tree(make_tree)
    calls: list[tuple[int, int]] = []

    ParallelHasher(Algorithm.CRC32, jobs=4, on_progress=lambda done, total: calls.append((done, total))).hash_entries(
        discover_files(root).files
    )

    assert calls[0] == (0, 20)
    assert calls[-1] == (20, 20)
    assert [done for done, _ in calls] == list(range(21))


def test_empty_entry_list() -> None:
    assert ParallelHasher(Algorithm.BLAKE3, jobs=2).hash_entries([]) == {}


def test_unreadable_file_is_logged_and_omitted(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    present = tmp_path / "present.txt"
    present.write_text("here", encoding="utf-8")
    entries = [
        FileEntry(path=present, relative="present.txt"),
        FileEntry(path=tmp_path / "gone.txt", relative="gone.txt"),
    ]

    with caplog.at_level(logging.WARNING):
        hashes = ParallelHasher(Algorithm.SHA1, jobs=2).hash_entries(entries)

    assert list(hashes) == ["present.txt"]
    assert "gone.txt" in caplog.text


def test_unsupported_algorithm_fails_before_hashing() -> None:
    with pytest.raises(UnsupportedAlgorithmError):
        ParallelHasher(Algorithm.UNSPECIFIED)


def test_resolve_worker_count() -> None:
    assert resolve_worker_count(3) == 3
    assert resolve_worker_count(0) == (os.cpu_count() or 1)
    with pytest.raises(ValueError, match="non-negative"):
        resolve_worker_count(-1)
