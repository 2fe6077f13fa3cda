"""Algorithm selection and autodetection exceptions."""

from __future__ import annotations

from quickdash.exceptions.base import QuickdashError


class UnknownAlgorithmError(QuickdashError, ValueError):
    """Raised when an algorithm token does not name a supported algorithm."""

    def __init__(self, token: str) -> None:
        super().__init__(f'"{token}" is not a recognised hashing algorithm')
        self.token = token


class UnsupportedAlgorithmError(QuickdashError):
    """Raised when an algorithm cannot hash data in the current runtime."""


class AutodetectError(QuickdashError):
    """Raised when no digest is available to infer an algorithm from."""
