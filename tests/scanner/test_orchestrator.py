"""Tests for the scan-and-hash entry points."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from quickdash.algorithms import Algorithm, hash_bytes
from quickdash.exceptions import ConfigError
from quickdash.scanner import PreserveOrder, create_hashes, create_hashes_for_files


def test_create_hashes_maps_relative_paths_to_uppercase_digests(make_tree: Callable[..., Path]) -> None:
    root = make_tree({"a.txt": "alpha", "sub/b.txt": "beta"})

    hashes = create_hashes(root, algorithm=Algorithm.SHA2256, jobs=2)

    assert hashes == {
        "a.txt": hash_bytes(Algorithm.SHA2256, b"alpha"),
        "sub/b.txt": hash_bytes(Algorithm.SHA2256, b"beta"),
    }


def test_ignored_file_excluded_from_hashing(make_tree: Callable[..., Path]) -> None:
    root = make_tree({"a.txt": "alpha", "secret.bin": b"\x00\x01"})

    hashes = create_hashes(root, algorithm=Algorithm.BLAKE3, ignored_files=["secret.bin"], jobs=1)

    assert list(hashes) == ["a.txt"]


def test_ignored_file_tracked_with_placeholder(make_tree: Callable[..., Path]) -> None:
    root = make_tree({"a.txt": "alpha", "secret.bin": b"\x00\x01"})

    hashes = create_hashes(
        root,
        algorithm=Algorithm.BLAKE3,
        ignored_files=["secret.bin"],
        jobs=1,
        track_ignored=True,
    )

    assert list(hashes) == ["a.txt", "secret.bin"]
    assert hashes["secret.bin"] == "-" * Algorithm.BLAKE3.hexlen


def test_order_strategy_does_not_change_result(make_tree: Callable[..., Path]) -> None:
    root = make_tree({f"f{index}.txt": str(index) for index in range(10)})

    default = create_hashes(root, algorithm=Algorithm.XXH64, jobs=3)
    preserved = create_hashes(root, algorithm=Algorithm.XXH64, jobs=3, order_strategy=PreserveOrder())

    assert default == preserved


def test_create_hashes_rejects_missing_root(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not a directory"):
        create_hashes(tmp_path / "missing", algorithm=Algorithm.MD5)


def test_create_hashes_for_files_skips_missing_entries(make_tree: Callable[..., Path]) -> None:
    root = make_tree({"a.txt": "alpha", "sub/b.txt": "beta", "extra.txt": "not listed"})

    hashes = create_hashes_for_files(root, ["sub/b.txt", "a.txt", "gone.txt"], algorithm=Algorithm.MD5, jobs=2)

    assert hashes == {
        "a.txt": hash_bytes(Algorithm.MD5, b"alpha"),
        "sub/b.txt": hash_bytes(Algorithm.MD5, b"beta"),
    }
