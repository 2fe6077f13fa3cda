"""Shared type aliases for Quickdash."""

from .common import DigestMapping, ProgressCallback
from .scanner import DiscoveredFiles, FileEntry

__all__ = ["DigestMapping", "DiscoveredFiles", "FileEntry", "ProgressCallback"]
