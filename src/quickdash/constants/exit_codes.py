"""Process exit statuses returned by the CLI."""

from __future__ import annotations

EXIT_OK: int = 0
EXIT_OPTION_ERROR: int = 1
EXIT_HASH_LENGTH_DIFFERS: int = 2
EXIT_MANIFEST_PARSE_FAILURE: int = 3
# N differing entries exit with ``EXIT_FILES_DIFFER_BASE + N``.
EXIT_FILES_DIFFER_BASE: int = 3
EXIT_STATUS_MAX: int = 255
