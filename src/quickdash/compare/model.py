"""Classification results produced by comparing two digest mappings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, TypeAlias


@dataclass(frozen=True)
class Added:
    """Present in the fresh scan only."""

    path: str


@dataclass(frozen=True)
class Removed:
    """Present in the manifest only."""

    path: str


@dataclass(frozen=True)
class Ignored:
    """Marked with a placeholder digest on at least one side."""

    path: str


@dataclass(frozen=True)
class Matches:
    """Present on both sides with the same digest."""

    path: str


@dataclass(frozen=True)
class Differs:
    """Present on both sides with different digests."""

    path: str
    previous_digest: str
    current_digest: str


CompareResult: TypeAlias = Added | Removed | Ignored
CompareFileResult: TypeAlias = Matches | Differs


class Comparison(NamedTuple):
    """Set differences and per-file content results of one comparison."""

    differences: list[CompareResult]
    file_results: list[CompareFileResult]
