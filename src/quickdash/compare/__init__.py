"""Digest mapping comparison."""

from .engine import compare_hashes
from .model import (
    Added,
    Comparison,
    CompareFileResult,
    CompareResult,
    Differs,
    Ignored,
    Matches,
    Removed,
)

__all__ = [
    "Added",
    "CompareFileResult",
    "CompareResult",
    "Comparison",
    "Differs",
    "Ignored",
    "Matches",
    "Removed",
    "compare_hashes",
]
