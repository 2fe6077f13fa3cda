"""Tests for the byte hashing primitives behind each algorithm."""

from __future__ import annotations

import hashlib
from pathlib import Path

import pytest

from quickdash.algorithms import Algorithm, hash_bytes, hash_file
from quickdash.constants.algorithms import FILE_HASH_CHUNK_SIZE
from quickdash.exceptions import UnsupportedAlgorithmError

_HAS_WHIRLPOOL = "whirlpool" in hashlib.algorithms_available


@pytest.mark.parametrize(
    ("algorithm", "data", "expected"),
    [
        (Algorithm.MD5, b"abc", "900150983CD24FB0D6963F7D28E17F72"),
        (Algorithm.SHA1, b"abc", "A9993E364706816ABA3E25717850C26C9CD0D89D"),
        (Algorithm.SHA2256, b"abc", "BA7816BF8F01CFEA414140DE5DAE2223B00361A396177A9CB410FF61F20015AD"),
        (Algorithm.CRC32, b"abc", "352441C2"),
        (Algorithm.CRC32, b"", "00000000"),
        (Algorithm.BLAKE3, b"abc", "6437B3AC38465133FFB63B75273A8DB548C558465D79DB03FD359C6CD5BD9D85"),
        (Algorithm.XXH64, b"", "EF46DB3751D8E999"),
        (Algorithm.XXH32, b"", "02CC5D05"),
    ],
)
def test_known_digests(algorithm: Algorithm, data: bytes, expected: str) -> None:
    assert hash_bytes(algorithm, data) == expected


@pytest.mark.parametrize(
    "algorithm",
    [
        pytest.param(
            algorithm,
            marks=pytest.mark.skipif(
                algorithm is Algorithm.WHIRLPOOL and not _HAS_WHIRLPOOL,
                reason="OpenSSL build lacks whirlpool",
            ),
        )
        for algorithm in Algorithm
        if algorithm is not Algorithm.UNSPECIFIED
    ],
    ids=lambda algorithm: algorithm.value,
)
def test_digest_length_matches_registry(algorithm: Algorithm) -> None:
    digest = hash_bytes(algorithm, b"quickdash")

    assert len(digest) == algorithm.hexlen
    assert digest == digest.upper()


def test_hash_file_matches_hash_bytes_across_chunks(tmp_path: Path) -> None:
    data = bytes(range(256)) * (FILE_HASH_CHUNK_SIZE // 256 * 2 + 3)
    path = tmp_path / "big.bin"
    path.write_bytes(data)

    assert hash_file(Algorithm.BLAKE3, path) == hash_bytes(Algorithm.BLAKE3, data)
    assert hash_file(Algorithm.CRC32, path) == hash_bytes(Algorithm.CRC32, data)


def test_unspecified_cannot_hash() -> None:
    with pytest.raises(UnsupportedAlgorithmError, match="UNSPECIFIED"):
        hash_bytes(Algorithm.UNSPECIFIED, b"data")
