"""Shared pytest fixtures for on-disk file trees."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TypeAlias

import pytest

TreeFactory: TypeAlias = Callable[[dict[str, bytes | str]], Path]


def write_tree(root: Path, files: dict[str, bytes | str]) -> Path:
    """Create *files* (relative POSIX path -> content) under *root*."""
    root.mkdir(parents=True, exist_ok=True)
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_bytes(content)
    return root


@pytest.fixture()
def make_tree(tmp_path: Path) -> TreeFactory:
    """Return a factory that writes a file tree under ``tmp_path / "tree"``."""

    def _make(files: dict[str, bytes | str]) -> Path:
        return write_tree(tmp_path / "tree", files)

    return _make
