"""Manifest reading and writing."""

from .codec import (
    LINE_GRAMMARS,
    default_manifest_path,
    manifest_key,
    normalize_manifest_path,
    parse_line,
    read_hashes,
    render_hashes,
    write_hashes,
)

__all__ = [
    "LINE_GRAMMARS",
    "default_manifest_path",
    "manifest_key",
    "normalize_manifest_path",
    "parse_line",
    "read_hashes",
    "render_hashes",
    "write_hashes",
]
