"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "quickdash.yaml"

DEFAULT_JOBS: int = 0
DEFAULT_FOLLOW_SYMLINKS: bool = False
DEFAULT_COLOR: bool = True

CONFIG_ALLOWED_KEYS: frozenset[str] = frozenset(
    {"algorithm", "depth", "follow_symlinks", "ignored_files", "jobs", "color"}
)
