"""JSON verification report."""

from __future__ import annotations

from pathlib import Path

from quickdash.algorithms import Algorithm
from quickdash.compare import Added, Comparison, Differs, Ignored, Matches, Removed
from quickdash.constants.reporting import REPORT_TEMP_PREFIX, REPORT_TEMP_SUFFIX, SCHEMA_VERSION
from quickdash.io import write_json_atomic
from quickdash.reporting.stdout import exit_status
from quickdash.utils import path_sort_key


def build_report(
    comparison: Comparison,
    *,
    mode: str,
    root: Path,
    manifest: Path,
    algorithm: Algorithm,
) -> dict[str, object]:
    """Build a JSON-serialisable report of one verification run."""
    added = [result.path for result in comparison.differences if isinstance(result, Added)]
    removed = [result.path for result in comparison.differences if isinstance(result, Removed)]
    ignored = [result.path for result in comparison.differences if isinstance(result, Ignored)]
    matched = [result.path for result in comparison.file_results if isinstance(result, Matches)]
    changed = [
        {
            "path": result.path,
            "previous_digest": result.previous_digest,
            "current_digest": result.current_digest,
        }
        for result in comparison.file_results
        if isinstance(result, Differs)
    ]
    changed.sort(key=lambda item: path_sort_key(str(item["path"])))

    return {
        "schema_version": SCHEMA_VERSION,
        "mode": mode,
        "root": root.as_posix(),
        "manifest": manifest.as_posix(),
        "algorithm": algorithm.value,
        "exit_status": exit_status(comparison),
        "counts": {
            "added": len(added),
            "removed": len(removed),
            "ignored": len(ignored),
            "matched": len(matched),
            "changed": len(changed),
        },
        "added": sorted(added, key=path_sort_key),
        "removed": sorted(removed, key=path_sort_key),
        "ignored": sorted(ignored, key=path_sort_key),
        "matched": sorted(matched, key=path_sort_key),
        "changed": changed,
    }


def write_json_report(path: Path, report: dict[str, object]) -> None:
    """Persist *report* atomically."""
    write_json_atomic(
        path=path,
        payload=report,
        temp_prefix=REPORT_TEMP_PREFIX,
        temp_suffix=REPORT_TEMP_SUFFIX,
    )
