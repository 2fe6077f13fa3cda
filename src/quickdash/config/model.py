"""Config data model for Quickdash runs."""

from __future__ import annotations

from dataclasses import dataclass

from quickdash.algorithms import Algorithm
from quickdash.constants.config import DEFAULT_COLOR, DEFAULT_FOLLOW_SYMLINKS, DEFAULT_JOBS


@dataclass(frozen=True)
class QuickdashConfig:
    """Resolved run configuration."""

    algorithm: Algorithm = Algorithm.UNSPECIFIED
    depth: int | None = None
    follow_symlinks: bool = DEFAULT_FOLLOW_SYMLINKS
    ignored_files: tuple[str, ...] = ()
    jobs: int = DEFAULT_JOBS
    color: bool = DEFAULT_COLOR
