"""Human-readable comparison output and exit status derivation."""

from __future__ import annotations

from typing import TextIO

from quickdash.compare import Added, Comparison, Differs, Ignored, Matches, Removed
from quickdash.constants.exit_codes import (
    EXIT_FILES_DIFFER_BASE,
    EXIT_HASH_LENGTH_DIFFERS,
    EXIT_OK,
    EXIT_STATUS_MAX,
)
from quickdash.constants.reporting import (
    ANSI_DIM,
    ANSI_GREEN,
    ANSI_RED,
    ANSI_RESET,
    ANSI_YELLOW,
    FILE_ADDED_LABEL,
    FILE_DIFFERS_LABEL,
    FILE_IGNORED_LABEL,
    FILE_MATCHES_LABEL,
    FILE_REMOVED_LABEL,
    NOTHING_LEFT_MESSAGE,
    NOTHING_TO_VERIFY_MESSAGE,
)
from quickdash.exceptions import CompareError
from quickdash.utils import path_sort_key

_DIFFERENCE_RANK: dict[type, int] = {Added: 0, Removed: 1, Ignored: 2}


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


def count_differences(comparison: Comparison) -> int:
    """Count entries that make a verification fail: added, removed or changed files."""
    changed = sum(1 for result in comparison.file_results if isinstance(result, Differs))
    moved = sum(1 for result in comparison.differences if isinstance(result, (Added, Removed)))
    return changed + moved


def exit_status(comparison: Comparison) -> int:
    """Return 0 for a clean comparison, otherwise 3 + the number of differences (capped)."""
    differing = count_differences(comparison)
    if differing == 0:
        return EXIT_OK
    return min(EXIT_FILES_DIFFER_BASE + differing, EXIT_STATUS_MAX)


class ComparisonReporter:
    """Writes comparison results: matches and set differences to *output*, mismatches to *error*."""

    def __init__(
        self,
        output: TextIO,
        error: TextIO,
        *,
        color: bool = False,
        show_matches: bool = True,
    ) -> None:
        self._output = output
        self._error = error
        self._color = color
        self._show_matches = show_matches

    def write(self, comparison: Comparison) -> int:
        """Render *comparison* and return the process exit status."""
        differences = sorted(
            comparison.differences,
            key=lambda result: (_DIFFERENCE_RANK[type(result)], path_sort_key(result.path)),
        )
        for result in differences:
            if isinstance(result, Added):
                self._line(self._output, FILE_ADDED_LABEL, result.path, ANSI_YELLOW)
            elif isinstance(result, Removed):
                self._line(self._output, FILE_REMOVED_LABEL, result.path, ANSI_YELLOW)
            else:
                self._line(self._output, FILE_IGNORED_LABEL, result.path, ANSI_DIM)

        if not comparison.file_results:
            message = NOTHING_LEFT_MESSAGE if not comparison.differences else NOTHING_TO_VERIFY_MESSAGE
            self._output.write(f"{message}\n")
        else:
            for file_result in sorted(comparison.file_results, key=lambda result: path_sort_key(result.path)):
                if isinstance(file_result, Matches):
                    if self._show_matches:
                        self._line(self._output, FILE_MATCHES_LABEL, file_result.path, ANSI_GREEN)
                else:
                    self._write_differs(file_result)

        self._flush()
        return exit_status(comparison)

    def write_error(self, exc: CompareError) -> int:
        """Report a digest length mismatch and return its exit status."""
        message = f"Hash lengths do not match; previous: {exc.previous_len}, current: {exc.current_len}"
        self._error.write(f"{_colorize(message, ANSI_RED) if self._color else message}\n")
        self._flush()
        return EXIT_HASH_LENGTH_DIFFERS

    def _write_differs(self, result: Differs) -> None:
        self._line(self._error, FILE_DIFFERS_LABEL, result.path, ANSI_RED)
        self._error.write(f"  was: {result.previous_digest}\n")
        self._error.write(f"  is:  {result.current_digest}\n")

    def _line(self, stream: TextIO, label: str, path: str, color: str) -> None:
        text = _colorize(label, color) if self._color else label
        stream.write(f"{text}{path}\n")

    def _flush(self) -> None:
        self._output.flush()
        self._error.flush()


def write_hash_comparison_results(
    output: TextIO,
    error: TextIO,
    comparison: Comparison,
    *,
    color: bool = False,
) -> int:
    """Convenience wrapper around ``ComparisonReporter.write``."""
    return ComparisonReporter(output, error, color=color).write(comparison)
