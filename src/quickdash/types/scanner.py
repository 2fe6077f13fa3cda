"""Frozen dataclasses for the scanner subsystem."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FileEntry:
    """A regular file discovered under the scan root."""

    path: Path
    relative: str
    device: int = 0
    inode: int = 0


@dataclass(frozen=True)
class DiscoveredFiles:
    """Result of walking a scan root."""

    files: tuple[FileEntry, ...]
    ignored_files: tuple[str, ...] = ()
