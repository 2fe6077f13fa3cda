"""Reorder discovered files for sequential disk access before hashing.

Ordering only affects throughput; every strategy returns the same entries.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Protocol

from quickdash.types import FileEntry
from quickdash.utils import path_sort_key


class OrderStrategy(Protocol):
    """Reorders file entries without adding or dropping any."""

    name: str

    def order(self, entries: Sequence[FileEntry]) -> list[FileEntry]: ...


class InodeOrder:
    """Sort by inode number, which tracks allocation order on ext-style filesystems."""

    name = "inode"

    def order(self, entries: Sequence[FileEntry]) -> list[FileEntry]:
        return sorted(entries, key=lambda entry: entry.inode)


class DeviceInodeOrder:
    """Sort by ``(device, inode)``, falling back to path order for entries without an inode."""

    name = "device-inode"

    def order(self, entries: Sequence[FileEntry]) -> list[FileEntry]:
        return sorted(
            entries,
            key=lambda entry: (entry.inode == 0, entry.device, entry.inode, path_sort_key(entry.relative)),
        )


class PathOrder:
    """Sort by relative path for a deterministic order."""

    name = "path"

    def order(self, entries: Sequence[FileEntry]) -> list[FileEntry]:
        return sorted(entries, key=lambda entry: path_sort_key(entry.relative))


class PreserveOrder:
    """Keep discovery order."""

    name = "preserve"

    def order(self, entries: Sequence[FileEntry]) -> list[FileEntry]:
        return list(entries)


def select_order_strategy(platform: str | None = None) -> OrderStrategy:
    """Pick the ordering strategy best suited to *platform* (defaults to ``sys.platform``)."""
    platform = sys.platform if platform is None else platform
    if platform.startswith("linux"):
        return InodeOrder()
    if platform == "darwin":
        return DeviceInodeOrder()
    if platform in {"win32", "cygwin"}:
        return PathOrder()
    return PreserveOrder()


def optimize_file_order(
    entries: Sequence[FileEntry],
    strategy: OrderStrategy | None = None,
) -> list[FileEntry]:
    """Return *entries* reordered by *strategy* (the platform default when omitted)."""
    if strategy is None:
        strategy = select_order_strategy()
    return strategy.order(entries)
