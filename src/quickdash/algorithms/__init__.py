"""Algorithm registry and hashing primitives."""

from .hashers import hash_bytes, hash_file
from .registry import Algorithm, autodetect_from_hash, is_placeholder, parse_algorithm

__all__ = [
    "Algorithm",
    "autodetect_from_hash",
    "hash_bytes",
    "hash_file",
    "is_placeholder",
    "parse_algorithm",
]
