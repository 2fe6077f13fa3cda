"""Manifest text format: one ``<DIGEST>  <path>`` record per line.

Reading also accepts the path-first layout ``<path>\\t<DIGEST>`` used by
some other checksum tools, plus ``;`` comment lines and blank lines.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from quickdash.algorithms import Algorithm
from quickdash.constants.manifest import (
    BINARY_MODE_MARKER,
    COMMENT_PREFIX,
    DIGEST_FIRST_PATTERN,
    FIELD_SEPARATOR,
    MANIFEST_ENCODING,
    MANIFEST_EXTENSION,
    MANIFEST_TEMP_PREFIX,
    MANIFEST_TEMP_SUFFIX,
    PATH_FIRST_PATTERN,
)
from quickdash.exceptions import ConfigError, ManifestNotFoundError, ManifestParseError
from quickdash.io import write_text_atomic
from quickdash.types import DigestMapping
from quickdash.utils import relative_name, sorted_mapping

logger = logging.getLogger(__name__)

# (pattern, digest group, path group), tried in order.
LINE_GRAMMARS: tuple[tuple[re.Pattern[str], int, int], ...] = (
    (DIGEST_FIRST_PATTERN, 1, 2),
    (PATH_FIRST_PATTERN, 2, 1),
)


def default_manifest_path(root: Path) -> Path:
    """Return ``<root>/<root-name>.hash`` for a resolved *root*."""
    resolved = root.resolve()
    if not resolved.name:
        raise ConfigError(f"Could not derive a manifest name from {resolved}; pass --file explicitly")
    return resolved / f"{resolved.name}{MANIFEST_EXTENSION}"


def manifest_key(out_file: Path, root: Path | None) -> str:
    """Return the key under which a manifest records itself."""
    if root is None:
        return out_file.name
    return relative_name(root.resolve(), out_file.resolve())


def render_hashes(hashes: DigestMapping) -> str:
    """Render *hashes* as manifest text, digests left-aligned in one column."""
    width = max((len(digest) for digest in hashes.values()), default=0)
    return "".join(f"{digest.ljust(width)}{FIELD_SEPARATOR}{path}\n" for path, digest in hashes.items())


def write_hashes(
    out_file: Path,
    hashes: DigestMapping,
    *,
    algorithm: Algorithm | None = None,
    root: Path | None = None,
) -> None:
    """Serialise *hashes* to *out_file* atomically.

    When *algorithm* is given the manifest also records itself with that
    algorithm's placeholder digest, so the file always carries a sample of
    the digest length it was written with.
    """
    records = dict(hashes)
    if algorithm is not None:
        records[manifest_key(out_file, root)] = algorithm.placeholder()
    records = sorted_mapping(records.items())

    write_text_atomic(
        path=out_file,
        content=render_hashes(records),
        temp_prefix=MANIFEST_TEMP_PREFIX,
        temp_suffix=MANIFEST_TEMP_SUFFIX,
        encoding=MANIFEST_ENCODING,
    )
    logger.info("Wrote %d entries to %s", len(records), out_file)


def read_hashes(path: Path) -> DigestMapping:
    """Parse the manifest at *path* into a path-ordered mapping of uppercase digests.

    Later records for the same path overwrite earlier ones.
    """
    try:
        text = path.read_text(encoding=MANIFEST_ENCODING)
    except FileNotFoundError as exc:
        raise ManifestNotFoundError(f"Manifest not found: {path}") from exc
    except UnicodeDecodeError as exc:
        raise ManifestParseError(f"<undecodable bytes: {exc.reason}>", path=path) from exc

    records: list[tuple[str, str]] = []
    for line_number, raw_line in enumerate(text.split("\n"), start=1):
        line = raw_line.rstrip("\r")
        if not line.strip() or line.lstrip().startswith(COMMENT_PREFIX):
            continue
        try:
            records.append(parse_line(line))
        except ManifestParseError as exc:
            raise ManifestParseError(line, path=path, line_number=line_number) from exc

    return sorted_mapping(records)


def parse_line(line: str) -> tuple[str, str]:
    """Parse one record into ``(path, DIGEST)`` trying each line grammar in order."""
    for pattern, digest_group, path_group in LINE_GRAMMARS:
        match = pattern.match(line)
        if match is not None:
            return normalize_manifest_path(match.group(path_group)), match.group(digest_group).upper()
    raise ManifestParseError(line)


def normalize_manifest_path(raw: str, *, windows: bool | None = None) -> str:
    """Clean a manifest path field.

    Surrounding whitespace and ``*`` binary-mode markers are removed. Off
    Windows, a path that uses only backslashes is converted to forward
    slashes so manifests written on Windows still resolve.
    """
    if windows is None:
        windows = os.name == "nt"
    cleaned = raw.strip().replace(BINARY_MODE_MARKER, "")
    if not windows and "\\" in cleaned and "/" not in cleaned:
        cleaned = cleaned.replace("\\", "/")
    return cleaned
