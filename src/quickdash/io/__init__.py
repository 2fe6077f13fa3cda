"""Shared file I/O helpers."""

from .atomic import write_json_atomic, write_text_atomic

__all__ = ["write_json_atomic", "write_text_atomic"]
