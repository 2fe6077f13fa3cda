"""Byte-level hashing primitives behind each ``Algorithm``."""

from __future__ import annotations

import hashlib
import zlib
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Protocol

import blake3
import xxhash

from quickdash.algorithms.registry import Algorithm
from quickdash.constants.algorithms import FILE_HASH_CHUNK_SIZE
from quickdash.exceptions import UnsupportedAlgorithmError


class _Digest(Protocol):
    def update(self, data: bytes, /) -> object: ...

    def hexdigest(self) -> str: ...


class _Crc32:
    """Incremental CRC-32 with the hashlib ``update``/``hexdigest`` interface."""

    def __init__(self) -> None:
        self._value = 0

    def update(self, data: bytes) -> None:
        self._value = zlib.crc32(data, self._value)

    def hexdigest(self) -> str:
        return f"{self._value & 0xFFFFFFFF:08x}"


def _whirlpool() -> _Digest:
    try:
        return hashlib.new("whirlpool")
    except ValueError as exc:
        raise UnsupportedAlgorithmError(
            "WHIRLPOOL is not available from this Python's OpenSSL build"
        ) from exc


_FACTORIES: dict[Algorithm, Callable[[], _Digest]] = {
    Algorithm.SHA1: hashlib.sha1,
    Algorithm.SHA2224: hashlib.sha224,
    Algorithm.SHA2256: hashlib.sha256,
    Algorithm.SHA2384: hashlib.sha384,
    Algorithm.SHA2512: hashlib.sha512,
    Algorithm.SHA3224: hashlib.sha3_224,
    Algorithm.SHA3256: hashlib.sha3_256,
    Algorithm.SHA3384: hashlib.sha3_384,
    Algorithm.SHA3512: hashlib.sha3_512,
    Algorithm.XXH32: xxhash.xxh32,
    Algorithm.XXH64: xxhash.xxh64,
    Algorithm.XXH3: xxhash.xxh3_64,
    Algorithm.CRC32: _Crc32,
    Algorithm.MD5: hashlib.md5,
    Algorithm.WHIRLPOOL: _whirlpool,
    Algorithm.BLAKE2B: hashlib.blake2b,
    Algorithm.BLAKE2S: hashlib.blake2s,
    Algorithm.BLAKE3: blake3.blake3,
}


def new_digest(algorithm: Algorithm) -> _Digest:
    """Return a fresh incremental digest object for *algorithm*."""
    factory = _FACTORIES.get(algorithm)
    if factory is None:
        raise UnsupportedAlgorithmError(f"{algorithm.value} cannot be used to hash data")
    return factory()


def hash_chunks(algorithm: Algorithm, chunks: Iterable[bytes]) -> str:
    """Digest a stream of byte chunks and return the uppercase hex digest."""
    digest = new_digest(algorithm)
    for chunk in chunks:
        digest.update(chunk)
    return digest.hexdigest().upper()


def hash_bytes(algorithm: Algorithm, data: bytes) -> str:
    """Return the uppercase hex digest of *data*."""
    return hash_chunks(algorithm, (data,))


def hash_file(algorithm: Algorithm, path: Path) -> str:
    """Return the uppercase hex digest of the file at *path*."""
    with path.open("rb") as handle:
        return hash_chunks(algorithm, iter(lambda: handle.read(FILE_HASH_CHUNK_SIZE), b""))
