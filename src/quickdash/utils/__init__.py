"""Shared utility helpers."""

from __future__ import annotations

from .paths import normalize_relative_path, path_sort_key, relative_name, sorted_mapping

__all__ = ["normalize_relative_path", "path_sort_key", "relative_name", "sorted_mapping"]
