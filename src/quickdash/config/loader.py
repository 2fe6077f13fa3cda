"""Config loading and validation for ``quickdash.yaml``."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from quickdash.algorithms import Algorithm
from quickdash.config.model import QuickdashConfig
from quickdash.constants.config import (
    CONFIG_ALLOWED_KEYS,
    CONFIG_FILENAME,
    DEFAULT_COLOR,
    DEFAULT_FOLLOW_SYMLINKS,
    DEFAULT_JOBS,
)
from quickdash.exceptions import ConfigError, UnknownAlgorithmError
from quickdash.utils import normalize_relative_path


def load_config(root: Path, config_path: Path | None = None) -> QuickdashConfig:
    """Load config from ``quickdash.yaml`` under *root* or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return QuickdashConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    for key in raw:
        if key not in CONFIG_ALLOWED_KEYS:
            raise ConfigError(f"Unknown config key {key!r} in {path}{_suggest_key(str(key), CONFIG_ALLOWED_KEYS)}")

    algorithm_raw = raw.get("algorithm")
    algorithm = Algorithm.UNSPECIFIED
    if algorithm_raw is not None:
        if not isinstance(algorithm_raw, str):
            raise ConfigError("algorithm must be a string")
        try:
            algorithm = Algorithm.parse(algorithm_raw)
        except UnknownAlgorithmError as exc:
            raise ConfigError(f"algorithm: {exc}") from exc

    depth = raw.get("depth")
    if depth is not None and not _is_non_negative_int(depth):
        raise ConfigError("depth must be a non-negative integer or null")

    jobs = raw.get("jobs", DEFAULT_JOBS)
    if not _is_non_negative_int(jobs):
        raise ConfigError("jobs must be a non-negative integer")

    follow_symlinks = raw.get("follow_symlinks", DEFAULT_FOLLOW_SYMLINKS)
    if not isinstance(follow_symlinks, bool):
        raise ConfigError("follow_symlinks must be a boolean")

    color = raw.get("color", DEFAULT_COLOR)
    if not isinstance(color, bool):
        raise ConfigError("color must be a boolean")

    return QuickdashConfig(
        algorithm=algorithm,
        depth=depth,
        follow_symlinks=follow_symlinks,
        ignored_files=tuple(
            normalize_relative_path(item)
            for item in _ensure_string_list(raw.get("ignored_files", []), "ignored_files")
            if item.strip()
        ),
        jobs=jobs,
        color=color,
    )


def _is_non_negative_int(value: Any) -> bool:
    return not isinstance(value, bool) and isinstance(value, int) and value >= 0


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    return f" (did you mean {matches[0]!r}?)" if matches else ""
