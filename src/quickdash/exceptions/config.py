"""Configuration-related exceptions."""

from __future__ import annotations

from quickdash.exceptions.base import QuickdashError


class ConfigError(QuickdashError, ValueError):
    """Raised when command-line or file configuration is invalid."""
