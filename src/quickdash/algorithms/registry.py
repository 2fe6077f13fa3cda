"""Closed set of digest algorithms, their digest lengths and autodetection."""

from __future__ import annotations

import enum

from quickdash.constants.algorithms import (
    AUTODETECT_BY_LENGTH,
    AUTODETECT_FALLBACK,
    AUTODETECT_LARGEST_BUCKET,
    AUTODETECT_LENGTH_BUCKETS,
    HEX_PREFIXES,
    PLACEHOLDER_CHAR,
)
from quickdash.exceptions import UnknownAlgorithmError

_HEX_DIGITS: frozenset[str] = frozenset("0123456789abcdefABCDEF")


class Algorithm(enum.Enum):
    """A supported hashing algorithm."""

    UNSPECIFIED = "UNSPECIFIED"
    SHA1 = "SHA1"
    SHA2224 = "SHA2224"
    SHA2256 = "SHA2256"
    SHA2384 = "SHA2384"
    SHA2512 = "SHA2512"
    SHA3224 = "SHA3224"
    SHA3256 = "SHA3256"
    SHA3384 = "SHA3384"
    SHA3512 = "SHA3512"
    XXH32 = "XXH32"
    XXH64 = "XXH64"
    XXH3 = "XXH3"
    CRC32 = "CRC32"
    MD5 = "MD5"
    WHIRLPOOL = "WHIRLPOOL"
    BLAKE2B = "BLAKE2B"
    BLAKE2S = "BLAKE2S"
    BLAKE3 = "BLAKE3"

    @property
    def hexlen(self) -> int:
        """Length of the algorithm's digest as a hex string."""
        return _HEXLEN[self]

    def placeholder(self) -> str:
        """Return the all-dash digest that marks an ignored file."""
        return PLACEHOLDER_CHAR * self.hexlen

    @classmethod
    def parse(cls, token: str) -> Algorithm:
        """Parse a user-supplied name such as ``sha3-256`` or ``SHA3_256``."""
        normalized = token.strip().replace("_", "-").lower()
        try:
            return _ALIASES[normalized]
        except KeyError:
            raise UnknownAlgorithmError(token) from None

    @classmethod
    def autodetect_from_hash(cls, digest: str) -> Algorithm:
        """Guess which algorithm produced *digest* from its length and shape.

        Best effort only: several algorithms share a digest length, in which
        case the fastest integrity-oriented one is chosen. Callers should let
        an explicit algorithm override this guess.
        """
        text = digest.strip()
        if text.startswith(HEX_PREFIXES):
            text = text[2:]
        text = "".join(text.split())

        if text and all(char == PLACEHOLDER_CHAR for char in text):
            return cls[AUTODETECT_BY_LENGTH.get(len(text), AUTODETECT_FALLBACK)]

        if text and all(char in _HEX_DIGITS for char in text):
            exact = AUTODETECT_BY_LENGTH.get(len(text))
            if exact is not None:
                return cls[exact]
            for upper_bound, name in AUTODETECT_LENGTH_BUCKETS:
                if len(text) < upper_bound:
                    return cls[name]
            return cls[AUTODETECT_LARGEST_BUCKET]

        return cls[AUTODETECT_FALLBACK]


_HEXLEN: dict[Algorithm, int] = {
    Algorithm.CRC32: 8,
    Algorithm.XXH32: 8,
    Algorithm.XXH64: 16,
    Algorithm.XXH3: 16,
    Algorithm.MD5: 32,
    Algorithm.SHA1: 40,
    Algorithm.SHA2224: 56,
    Algorithm.SHA3224: 56,
    Algorithm.SHA2256: 64,
    Algorithm.SHA3256: 64,
    Algorithm.BLAKE2S: 64,
    Algorithm.BLAKE3: 64,
    Algorithm.UNSPECIFIED: 64,
    Algorithm.SHA2384: 96,
    Algorithm.SHA3384: 96,
    Algorithm.SHA2512: 128,
    Algorithm.SHA3512: 128,
    Algorithm.BLAKE2B: 128,
    Algorithm.WHIRLPOOL: 128,
}

_ALIASES: dict[str, Algorithm] = {
    "unspecified": Algorithm.UNSPECIFIED,
    "sha1": Algorithm.SHA1,
    "sha-1": Algorithm.SHA1,
    "sha2224": Algorithm.SHA2224,
    "sha2-224": Algorithm.SHA2224,
    "sha-224": Algorithm.SHA2224,
    "sha-2-224": Algorithm.SHA2224,
    "sha2256": Algorithm.SHA2256,
    "sha2-256": Algorithm.SHA2256,
    "sha-256": Algorithm.SHA2256,
    "sha-2-256": Algorithm.SHA2256,
    "sha2384": Algorithm.SHA2384,
    "sha2-384": Algorithm.SHA2384,
    "sha-384": Algorithm.SHA2384,
    "sha-2-384": Algorithm.SHA2384,
    "sha2512": Algorithm.SHA2512,
    "sha2-512": Algorithm.SHA2512,
    "sha-512": Algorithm.SHA2512,
    "sha-2-512": Algorithm.SHA2512,
    "sha3224": Algorithm.SHA3224,
    "sha3-224": Algorithm.SHA3224,
    "sha-3-224": Algorithm.SHA3224,
    "sha3256": Algorithm.SHA3256,
    "sha3-256": Algorithm.SHA3256,
    "sha-3-256": Algorithm.SHA3256,
    "sha3384": Algorithm.SHA3384,
    "sha3-384": Algorithm.SHA3384,
    "sha-3-384": Algorithm.SHA3384,
    "sha3512": Algorithm.SHA3512,
    "sha3-512": Algorithm.SHA3512,
    "sha-3-512": Algorithm.SHA3512,
    "crc32": Algorithm.CRC32,
    "xxh32": Algorithm.XXH32,
    "xxhash32": Algorithm.XXH32,
    "xxh64": Algorithm.XXH64,
    "xxhash64": Algorithm.XXH64,
    "xxh3": Algorithm.XXH3,
    "xxhash3": Algorithm.XXH3,
    "md5": Algorithm.MD5,
    "whirlpool": Algorithm.WHIRLPOOL,
    "blake2b": Algorithm.BLAKE2B,
    "blake2s": Algorithm.BLAKE2S,
    "blake3": Algorithm.BLAKE3,
}


def parse_algorithm(token: str) -> Algorithm:
    """Parse an algorithm name, raising ``UnknownAlgorithmError`` when unrecognised."""
    return Algorithm.parse(token)


def autodetect_from_hash(digest: str) -> Algorithm:
    """Module-level alias for ``Algorithm.autodetect_from_hash``."""
    return Algorithm.autodetect_from_hash(digest)


def is_placeholder(digest: str) -> bool:
    """Return True if *digest* is an ignore placeholder (a non-empty run of dashes)."""
    return bool(digest) and digest.strip(PLACEHOLDER_CHAR) == ""
