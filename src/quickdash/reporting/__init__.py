"""Reporting package for Quickdash outputs."""

from __future__ import annotations

from .json_report import build_report, write_json_report
from .stdout import ComparisonReporter, count_differences, exit_status, write_hash_comparison_results

__all__ = [
    "ComparisonReporter",
    "build_report",
    "count_differences",
    "exit_status",
    "write_hash_comparison_results",
    "write_json_report",
]
