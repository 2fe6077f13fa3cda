"""Constants for report rendering and JSON report output."""

from __future__ import annotations

REPORT_TEMP_PREFIX: str = ".tmp-"
REPORT_TEMP_SUFFIX: str = ".json"

SCHEMA_VERSION: str = "1.0.0"

FILE_ADDED_LABEL: str = "File added: "
FILE_REMOVED_LABEL: str = "File removed: "
FILE_IGNORED_LABEL: str = "File ignored, skipping: "
FILE_MATCHES_LABEL: str = "File matches: "
FILE_DIFFERS_LABEL: str = "File doesn't match: "
NOTHING_LEFT_MESSAGE: str = "No files left to verify"
NOTHING_TO_VERIFY_MESSAGE: str = "No files to verify"

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_BOLD: str = "\033[1m"
ANSI_RED: str = "\033[31;1m"
ANSI_YELLOW: str = "\033[33;1m"
ANSI_GREEN: str = "\033[32;1m"
ANSI_DIM: str = "\033[2m"

PROGRESS_DESCRIPTION: str = "Hashing files"
PROGRESS_UNIT: str = "file"
