"""Manifest file naming and line grammar constants."""

from __future__ import annotations

import re

MANIFEST_EXTENSION: str = ".hash"
MANIFEST_ENCODING: str = "utf-8"
MANIFEST_TEMP_PREFIX: str = ".quickdash-"
MANIFEST_TEMP_SUFFIX: str = ".tmp"
COMMENT_PREFIX: str = ";"
FIELD_SEPARATOR: str = "  "
BINARY_MODE_MARKER: str = "*"

# Digest first, as produced by ``write_hashes``: ``A1B2C3  path/to/file``.
DIGEST_FIRST_PATTERN: re.Pattern[str] = re.compile(r"^([0-9A-F-]+)\s+(.+?)$", re.IGNORECASE)

# Path first, digest anchored at the end: ``path/to/file\tA1B2C3``.
PATH_FIRST_PATTERN: re.Pattern[str] = re.compile(r"^(.+?)\t*\s+([0-9A-F-]+)$", re.IGNORECASE)
