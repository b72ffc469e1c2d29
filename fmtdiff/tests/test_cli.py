"""
Tests for cli.py
"""
import json
import sys
from pathlib import Path

import pytest

from fmtdiff import cli
from fmtdiff.config.settings import Settings
from fmtdiff.services.format_service import FormatService
from fmtdiff.tests.conftest import posix_only, write_fake_formatter


@pytest.fixture
def saved_report(tmp_path: Path, source_file: Path) -> Path:
    report = tmp_path / "rustfmt.diff"
    report.write_text(
        f"Diff of {source_file}:\n"
        "Diff at line 1\n"
        "-fn main(){⏎\n"
        "+fn main() {⏎\n",
        encoding="utf-8",
    )
    return report


def _run(monkeypatch, *argv: str) -> None:
    monkeypatch.setattr(sys, "argv", ["fmtdiff", *argv])
    cli.main()


def test_edits_from_saved_report(monkeypatch, capsys, source_file: Path, saved_report: Path):
    _run(monkeypatch, "edits", str(source_file), "--report", str(saved_report))

    edits = json.loads(capsys.readouterr().out)
    assert edits == [
        {
            "range_start_line": 0,
            "range_end_line": 0,
            "start_character": 0,
            "end_character": None,
            "replacement_text": "fn main() {",
        }
    ]


def test_preview_from_saved_report(monkeypatch, capsys, source_file: Path, saved_report: Path):
    _run(monkeypatch, "preview", str(source_file), "--report", str(saved_report))

    assert capsys.readouterr().out == "fn main() {\nlet x=1;\n}\n"


@posix_only
def test_failure_exits_nonzero(monkeypatch, capsys, source_file: Path, tmp_path: Path):
    script = write_fake_formatter(tmp_path, "exit 1\n")
    monkeypatch.setattr(cli, "FormatService", lambda: FormatService(Settings(formatter_path=str(script))))

    with pytest.raises(SystemExit) as exc:
        _run(monkeypatch, "edits", str(source_file))

    assert exc.value.code == 1
    assert "Cannot format due to syntax errors" in capsys.readouterr().err
