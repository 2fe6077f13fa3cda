"""Digest lengths, name aliases and autodetection tables for hashing algorithms."""

from __future__ import annotations

FILE_HASH_CHUNK_SIZE: int = 1024 * 1024

PLACEHOLDER_CHAR: str = "-"
HEX_PREFIXES: tuple[str, ...] = ("0x", "0X")

# Hex digest length -> algorithm name preferred when several algorithms share a length.
AUTODETECT_BY_LENGTH: dict[int, str] = {
    8: "CRC32",
    16: "XXH64",
    32: "MD5",
    40: "SHA1",
    56: "SHA2224",
    64: "BLAKE3",
    96: "SHA2384",
    128: "BLAKE2B",
}

# Upper bounds (exclusive) for snapping unusual hex lengths to a common algorithm.
AUTODETECT_LENGTH_BUCKETS: tuple[tuple[int, str], ...] = (
    (12, "CRC32"),
    (36, "MD5"),
    (52, "BLAKE3"),
    (110, "SHA2384"),
)
AUTODETECT_LARGEST_BUCKET: str = "BLAKE2B"
AUTODETECT_FALLBACK: str = "BLAKE3"

DEFAULT_CREATE_ALGORITHM: str = "BLAKE3"
