"""
Tests for formatter.py
"""
from pathlib import Path

import pytest

from fmtdiff.domain.schemas.format import OutputMode
from fmtdiff.tests.conftest import posix_only, write_fake_formatter
from fmtdiff.tools.formatter import (
    ToolNotFound,
    ToolReportedFailure,
    build_format_command,
    find_formatter_executable,
    run_formatter,
)


def test_build_format_command():
    assert build_format_command("src/main.rs", OutputMode.diff, executable="rustfmt") == [
        "rustfmt",
        "--write-mode=diff",
        "src/main.rs",
    ]
    assert build_format_command("a.rs", "display", executable="/opt/rustfmt")[1] == "--write-mode=display"


def test_find_executable_falls_back_to_configured_name():
    assert find_formatter_executable("definitely-not-a-real-formatter-xyz") == "definitely-not-a-real-formatter-xyz"


@posix_only
def test_find_executable_accepts_existing_path(tmp_path: Path):
    script = write_fake_formatter(tmp_path, "exit 0\n")
    assert find_formatter_executable(str(script)) == str(script)


@pytest.mark.asyncio
async def test_missing_executable_raises_tool_not_found(tmp_path: Path):
    with pytest.raises(ToolNotFound) as exc:
        await run_formatter(str(tmp_path / "a.rs"), executable=str(tmp_path / "no-such-rustfmt"))
    assert exc.value.executable.endswith("no-such-rustfmt")


@posix_only
@pytest.mark.asyncio
async def test_stdout_returned_on_success(tmp_path: Path):
    script = write_fake_formatter(tmp_path, 'echo "mode=$1 file=$2"\n')
    out = await run_formatter("x.rs", OutputMode.diff, executable=str(script))
    assert out == "mode=--write-mode=diff file=x.rs\n"


@posix_only
@pytest.mark.asyncio
async def test_nonzero_exit_raises_reported_failure(tmp_path: Path):
    script = write_fake_formatter(tmp_path, 'echo "partial"\necho "error: expected one of" >&2\nexit 1\n')
    with pytest.raises(ToolReportedFailure) as exc:
        await run_formatter("x.rs", executable=str(script))

    assert exc.value.returncode == 1
    assert "expected one of" in exc.value.stderr
    assert str(exc.value) == "Cannot format due to syntax errors"


@posix_only
@pytest.mark.asyncio
async def test_timeout_raises_reported_failure(tmp_path: Path):
    script = write_fake_formatter(tmp_path, "exec sleep 5\n")
    with pytest.raises(ToolReportedFailure):
        await run_formatter("x.rs", executable=str(script), timeout_sec=0.2)
