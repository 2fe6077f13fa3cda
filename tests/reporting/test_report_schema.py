"""Validate JSON reports against the published schema."""

from __future__ import annotations

import json
from pathlib import Path

from jsonschema import Draft202012Validator

from quickdash.algorithms import Algorithm
from quickdash.compare import Added, Comparison, Differs, Ignored, Matches, Removed
from quickdash.reporting import build_report, write_json_report

SCHEMA_PATH = Path(__file__).resolve().parents[2] / "schemas" / "report.schema.json"


def _load_schema() -> dict[str, object]:
    return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


def _comparison() -> Comparison:
    return Comparison(
        differences=[Removed("gone.txt"), Added("new.txt"), Ignored("tree.hash")],
        file_results=[Matches("a.txt"), Differs("b.txt", "AA", "BB")],
    )


def test_schema_is_valid() -> None:
    Draft202012Validator.check_schema(_load_schema())


def test_report_matches_schema(tmp_path: Path) -> None:
    report = build_report(
        _comparison(),
        mode="verify",
        root=tmp_path,
        manifest=tmp_path / "tree.hash",
        algorithm=Algorithm.MD5,
    )

    errors = list(Draft202012Validator(_load_schema()).iter_errors(report))

    assert errors == []
    assert report["counts"] == {"added": 1, "removed": 1, "ignored": 1, "matched": 1, "changed": 1}
    assert report["exit_status"] == 6
    assert report["changed"] == [{"path": "b.txt", "previous_digest": "AA", "current_digest": "BB"}]


def test_written_report_round_trips(tmp_path: Path) -> None:
    report = build_report(
        Comparison([], [Matches("a.txt")]),
        mode="check",
        root=tmp_path,
        manifest=tmp_path / "tree.hash",
        algorithm=Algorithm.BLAKE3,
    )
    out_file = tmp_path / "reports" / "run.json"

    write_json_report(out_file, report)

    assert json.loads(out_file.read_text(encoding="utf-8")) == report
    assert not list(out_file.parent.glob(".tmp-*"))
