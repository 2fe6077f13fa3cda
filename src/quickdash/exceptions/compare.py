"""Comparison exceptions."""

from __future__ import annotations

from quickdash.exceptions.base import QuickdashError


class CompareError(QuickdashError):
    """Raised when two digest mappings were produced by different algorithms."""

    def __init__(self, *, previous_len: int, current_len: int) -> None:
        super().__init__(f"Hash lengths do not match; previous: {previous_len}, current: {current_len}")
        self.previous_len = previous_len
        self.current_len = current_len
