"""Directory scanning, file ordering and parallel hashing."""

from __future__ import annotations

from .discovery import discover_files
from .hashing import ParallelHasher, resolve_worker_count
from .ordering import (
    DeviceInodeOrder,
    InodeOrder,
    OrderStrategy,
    PathOrder,
    PreserveOrder,
    optimize_file_order,
    select_order_strategy,
)
from .orchestrator import create_hashes, create_hashes_for_files

__all__ = [
    "DeviceInodeOrder",
    "InodeOrder",
    "OrderStrategy",
    "ParallelHasher",
    "PathOrder",
    "PreserveOrder",
    "create_hashes",
    "create_hashes_for_files",
    "discover_files",
    "optimize_file_order",
    "resolve_worker_count",
    "select_order_strategy",
]
