"""Shared exception hierarchy for Quickdash."""

from __future__ import annotations

from .algorithm import AutodetectError, UnknownAlgorithmError, UnsupportedAlgorithmError
from .base import QuickdashError
from .compare import CompareError
from .config import ConfigError
from .manifest import ManifestExistsError, ManifestNotFoundError, ManifestParseError

__all__ = [
    "AutodetectError",
    "CompareError",
    "ConfigError",
    "ManifestExistsError",
    "ManifestNotFoundError",
    "ManifestParseError",
    "QuickdashError",
    "UnknownAlgorithmError",
    "UnsupportedAlgorithmError",
]
