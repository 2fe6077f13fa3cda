"""End-to-end ``create``, ``verify`` and ``check`` runs.

``create`` scans a tree and writes its manifest. ``verify`` re-scans the
whole tree and diffs it against the manifest. ``check`` only re-hashes the
files the manifest lists.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from quickdash.algorithms import Algorithm, is_placeholder
from quickdash.compare import Comparison, compare_hashes
from quickdash.constants.algorithms import DEFAULT_CREATE_ALGORITHM
from quickdash.exceptions import AutodetectError, ManifestExistsError
from quickdash.manifest import default_manifest_path, manifest_key, read_hashes, write_hashes
from quickdash.scanner import create_hashes, create_hashes_for_files
from quickdash.types import DigestMapping, ProgressCallback

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateResult:
    """Outcome of writing a manifest."""

    manifest: Path
    algorithm: Algorithm
    entries: int


@dataclass(frozen=True)
class VerificationResult:
    """Outcome of comparing a tree against its manifest."""

    manifest: Path
    algorithm: Algorithm
    comparison: Comparison


def resolve_manifest_path(root: Path, manifest: Path | None) -> Path:
    """Return the explicit manifest path (resolved against the CWD) or the root's default."""
    if manifest is None:
        return default_manifest_path(root)
    return manifest.resolve()


def resolve_algorithm(requested: Algorithm, loaded: DigestMapping) -> Algorithm:
    """Return *requested*, or infer the algorithm from a manifest's digests when unspecified.

    Real digests are preferred; a manifest holding only placeholders is
    inferred from a placeholder's length.
    """
    if requested is not Algorithm.UNSPECIFIED:
        return requested
    if not loaded:
        raise AutodetectError("Manifest has no entries to detect the algorithm from; pass --algorithm")

    sample = next((digest for digest in loaded.values() if not is_placeholder(digest)), None)
    if sample is None:
        sample = next(iter(loaded.values()))
        logger.info("Manifest holds only placeholder digests; inferring the algorithm from their length")
    detected = Algorithm.autodetect_from_hash(sample)
    logger.info("Autodetected algorithm %s from a %d-character digest", detected.value, len(sample))
    return detected


def create_manifest(
    root: Path,
    manifest: Path | None = None,
    *,
    algorithm: Algorithm = Algorithm.UNSPECIFIED,
    ignored_files: Iterable[str | Path] = (),
    max_depth: int | None = None,
    follow_symlinks: bool = False,
    jobs: int = 0,
    force: bool = False,
    on_progress: ProgressCallback | None = None,
) -> CreateResult:
    """Hash every file under *root* and write the manifest."""
    root = root.resolve()
    out_file = resolve_manifest_path(root, manifest)
    if out_file.exists() and not force:
        raise ManifestExistsError(f"File already exists: {out_file}. Use --force to overwrite.")
    if algorithm is Algorithm.UNSPECIFIED:
        algorithm = Algorithm[DEFAULT_CREATE_ALGORITHM]

    hashes = create_hashes(
        root,
        algorithm=algorithm,
        ignored_files=[*ignored_files, manifest_key(out_file, root)],
        max_depth=max_depth,
        follow_symlinks=follow_symlinks,
        jobs=jobs,
        track_ignored=True,
        on_progress=on_progress,
    )
    write_hashes(out_file, hashes, algorithm=algorithm, root=root)
    return CreateResult(manifest=out_file, algorithm=algorithm, entries=len(hashes))


def verify_manifest(
    root: Path,
    manifest: Path | None = None,
    *,
    algorithm: Algorithm = Algorithm.UNSPECIFIED,
    ignored_files: Iterable[str | Path] = (),
    max_depth: int | None = None,
    follow_symlinks: bool = False,
    jobs: int = 0,
    on_progress: ProgressCallback | None = None,
) -> VerificationResult:
    """Re-scan the whole tree under *root* and diff it against the manifest."""
    root = root.resolve()
    in_file = resolve_manifest_path(root, manifest)
    loaded = read_hashes(in_file)
    algorithm = resolve_algorithm(algorithm, loaded)

    current = create_hashes(
        root,
        algorithm=algorithm,
        ignored_files=[*ignored_files, manifest_key(in_file, root)],
        max_depth=max_depth,
        follow_symlinks=follow_symlinks,
        jobs=jobs,
        track_ignored=True,
        on_progress=on_progress,
    )
    return VerificationResult(manifest=in_file, algorithm=algorithm, comparison=compare_hashes(current, loaded))


def check_manifest(
    root: Path,
    manifest: Path | None = None,
    *,
    algorithm: Algorithm = Algorithm.UNSPECIFIED,
    jobs: int = 0,
    on_progress: ProgressCallback | None = None,
) -> VerificationResult:
    """Re-hash only the files the manifest lists and diff them against it."""
    root = root.resolve()
    in_file = resolve_manifest_path(root, manifest)
    loaded = read_hashes(in_file)
    algorithm = resolve_algorithm(algorithm, loaded)

    listed = [path for path, digest in loaded.items() if not is_placeholder(digest)]
    current = create_hashes_for_files(root, listed, algorithm=algorithm, jobs=jobs, on_progress=on_progress)
    return VerificationResult(manifest=in_file, algorithm=algorithm, comparison=compare_hashes(current, loaded))
