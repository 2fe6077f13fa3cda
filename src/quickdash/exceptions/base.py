"""Root exception type for Quickdash."""

from __future__ import annotations


class QuickdashError(Exception):
    """Base class for all errors raised by Quickdash."""
