"""Tests for manifest reading and writing."""

from __future__ import annotations

from pathlib import Path

import pytest

import quickdash.io.atomic as atomic_module
from quickdash.algorithms import Algorithm
from quickdash.exceptions import ConfigError, ManifestNotFoundError, ManifestParseError
from quickdash.manifest import (
    default_manifest_path,
    normalize_manifest_path,
    parse_line,
    read_hashes,
    render_hashes,
    write_hashes,
)


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("A1B2C3  dir/file.txt", ("dir/file.txt", "A1B2C3")),
        ("a1b2c3  dir/file.txt", ("dir/file.txt", "A1B2C3")),
        ("A1B2C3 *dir/file.txt", ("dir/file.txt", "A1B2C3")),
        ("dir/file.txt\tA1B2C3", ("dir/file.txt", "A1B2C3")),
        ("dir/file with spaces.txt\t\ta1b2c3", ("dir/file with spaces.txt", "A1B2C3")),
        ("--------  secret.bin", ("secret.bin", "--------")),
    ],
)
def test_parse_line_accepts_both_layouts(line: str, expected: tuple[str, str]) -> None:
    assert parse_line(line) == expected


def test_parse_line_rejects_line_without_digest() -> None:
    with pytest.raises(ManifestParseError) as exc_info:
        parse_line("no_digest_here")

    assert exc_info.value.line == "no_digest_here"


def test_read_hashes_skips_comments_and_blank_lines(tmp_path: Path) -> None:
    manifest = tmp_path / "tree.hash"
    manifest.write_text(
        "; generated by hand\n"
        "\n"
        "   \n"
        "  ; indented comment\n"
        "b2  b.txt\r\n"
        "a1  a.txt\n",
        encoding="utf-8",
    )

    assert read_hashes(manifest) == {"a.txt": "A1", "b.txt": "B2"}


def test_read_hashes_orders_paths_and_keeps_last_duplicate(tmp_path: Path) -> None:
    manifest = tmp_path / "tree.hash"
    manifest.write_text("AA  a-b\nBB  a/b\nCC  a-b\n", encoding="utf-8")

    hashes = read_hashes(manifest)

    assert list(hashes) == ["a/b", "a-b"]
    assert hashes["a-b"] == "CC"


def test_read_hashes_reports_failing_line(tmp_path: Path) -> None:
    manifest = tmp_path / "tree.hash"
    manifest.write_text("AA  a.txt\n; comment\nbroken\n", encoding="utf-8")

    with pytest.raises(ManifestParseError) as exc_info:
        read_hashes(manifest)

    assert exc_info.value.line == "broken"
    assert exc_info.value.line_number == 3
    assert exc_info.value.path == manifest


def test_read_hashes_rejects_undecodable_bytes(tmp_path: Path) -> None:
    manifest = tmp_path / "tree.hash"
    manifest.write_bytes(b"AA  \xff\xfe.txt\n")

    with pytest.raises(ManifestParseError):
        read_hashes(manifest)


def test_read_hashes_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ManifestNotFoundError):
        read_hashes(tmp_path / "absent.hash")


def test_empty_manifest_reads_as_empty_mapping(tmp_path: Path) -> None:
    manifest = tmp_path / "empty.hash"
    manifest.write_text("", encoding="utf-8")

    assert read_hashes(manifest) == {}


def test_normalize_manifest_path() -> None:
    assert normalize_manifest_path("  *dir/file.txt ") == "dir/file.txt"
    assert normalize_manifest_path("dir\\sub\\file.txt", windows=False) == "dir/sub/file.txt"
    assert normalize_manifest_path("dir\\sub\\file.txt", windows=True) == "dir\\sub\\file.txt"
    assert normalize_manifest_path("dir/odd\\name.txt", windows=False) == "dir/odd\\name.txt"


def test_render_hashes_aligns_digest_column() -> None:
    assert render_hashes({"a": "ABCD", "b": "AB"}) == "ABCD  a\nAB    b\n"


def test_write_then_read_round_trip_records_manifest_itself(tmp_path: Path) -> None:
    out_file = tmp_path / "tree.hash"
    hashes = {"sub/b.txt": "B" * 32, "a.txt": "A" * 32}

    write_hashes(out_file, hashes, algorithm=Algorithm.MD5, root=tmp_path)
    loaded = read_hashes(out_file)

    assert loaded.pop("tree.hash") == "-" * 32
    assert loaded == {"a.txt": "A" * 32, "sub/b.txt": "B" * 32}
    assert out_file.read_text(encoding="utf-8").splitlines()[0] == f"{'A' * 32}  a.txt"


def test_write_hashes_without_algorithm_writes_only_given_records(tmp_path: Path) -> None:
    out_file = tmp_path / "plain.hash"

    write_hashes(out_file, {"x": "01"})

    assert out_file.read_text(encoding="utf-8") == "01  x\n"


def test_failed_write_keeps_previous_manifest(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    out_file = tmp_path / "tree.hash"
    out_file.write_text("OLD  content\n", encoding="utf-8")

    def _fail_replace(source: str, target: object) -> None:
        raise OSError("disk full")

    monkeypatch.setattr(atomic_module.os, "replace", _fail_replace)

    with pytest.raises(OSError, match="disk full"):
        write_hashes(out_file, {"a.txt": "AA"})

    assert out_file.read_text(encoding="utf-8") == "OLD  content\n"
    assert sorted(path.name for path in tmp_path.iterdir()) == ["tree.hash"]


def test_default_manifest_path_uses_directory_name(tmp_path: Path) -> None:
    root = tmp_path / "project"
    root.mkdir()

    assert default_manifest_path(root) == root.resolve() / "project.hash"


def test_default_manifest_path_rejects_filesystem_root() -> None:
    with pytest.raises(ConfigError):
        default_manifest_path(Path("/"))
