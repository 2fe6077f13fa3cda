"""Atomic text and JSON persistence."""

from __future__ import annotations

import json
import os
import tempfile
from collections.abc import Callable
from contextlib import suppress
from pathlib import Path
from typing import TextIO


def write_text_atomic(
    *,
    path: Path,
    content: str,
    temp_prefix: str,
    temp_suffix: str,
    encoding: str = "utf-8",
) -> None:
    """Persist text atomically by writing to a temp file then renaming."""
    _write_atomic(path, lambda handle: handle.write(content), temp_prefix, temp_suffix, encoding)


def write_json_atomic(
    *,
    path: Path,
    payload: object,
    temp_prefix: str,
    temp_suffix: str,
) -> None:
    """Persist JSON atomically by writing to a temp file then renaming."""

    def _dump(handle: TextIO) -> None:
        json.dump(payload, handle, indent=2, sort_keys=True)
        handle.write("\n")

    _write_atomic(path, _dump, temp_prefix, temp_suffix, "utf-8")


def _write_atomic(
    path: Path,
    write: Callable[[TextIO], object],
    temp_prefix: str,
    temp_suffix: str,
    encoding: str,
) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding=encoding,
            newline="\n",
            dir=path.parent,
            prefix=temp_prefix,
            suffix=temp_suffix,
            delete=False,
        ) as handle:
            temp_name = handle.name
            write(handle)
        os.replace(temp_name, path)
    except BaseException:
        if temp_name:
            with suppress(FileNotFoundError):
                Path(temp_name).unlink()
        raise
