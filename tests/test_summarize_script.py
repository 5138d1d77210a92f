from __future__ import annotations

import json
from pathlib import Path

import pytest

from scripts import summarize_tickets


def test_summarize_prints_and_writes(write_csv, example_rows, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    out = tmp_path / "results" / "summary.json"
    code = summarize_tickets.main(["--csv", str(write_csv(example_rows)), "--out", str(out)])
    assert code == 0

    written = json.loads(out.read_text(encoding="utf-8"))
    assert written["total_tickets"] == 3
    assert written["closed_tickets"] == 2
    assert f"Wrote {out}" in capsys.readouterr().out


def test_summarize_missing_csv(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert summarize_tickets.main(["--csv", str(tmp_path / "missing.csv")]) == 1
    assert "Failed to load CSV" in capsys.readouterr().out


def test_summarize_reports_skipped_rows(write_csv, capsys: pytest.CaptureFixture[str]) -> None:
    path = write_csv(["1,2026-01-05,,Printer,Low,Open", "2,yesterday,,Printer,Low,Open"])
    assert summarize_tickets.main(["--csv", str(path)]) == 0
    out = capsys.readouterr().out
    assert "Skipped 1 row(s)" in out
    assert '"total_tickets": 1' in out
