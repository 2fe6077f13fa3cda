"""Manifest reading and writing exceptions."""

from __future__ import annotations

from pathlib import Path

from quickdash.exceptions.base import QuickdashError


class ManifestParseError(QuickdashError, ValueError):
    """Raised when a manifest line matches neither line grammar."""

    def __init__(self, line: str, *, path: Path | None = None, line_number: int | None = None) -> None:
        location = ""
        if path is not None:
            location = f"{path}:{line_number}: " if line_number is not None else f"{path}: "
        super().__init__(f"{location}unparseable manifest line: {line!r}")
        self.line = line
        self.path = path
        self.line_number = line_number


class ManifestNotFoundError(QuickdashError, FileNotFoundError):
    """Raised when the manifest to read does not exist."""


class ManifestExistsError(QuickdashError, FileExistsError):
    """Raised when creating a manifest would overwrite an existing file."""
