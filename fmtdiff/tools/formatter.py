from __future__ import annotations

import asyncio
import logging
import os
import shutil
from typing import List, Optional

from fmtdiff.domain.schemas.format import OutputMode

logger = logging.getLogger(__name__)


class FormatterError(RuntimeError):
    pass


class ToolNotFound(FormatterError):
    """formatter 실행 파일을 찾지 못함 (실행 자체가 안 됨)."""

    def __init__(self, executable: str):
        super().__init__(f"Formatter executable not found: {executable}")
        self.executable = executable


class ToolReportedFailure(FormatterError):
    """formatter 가 실행됐지만 실패 코드로 종료 (대부분 syntax error)."""

    def __init__(self, message: str = "Cannot format due to syntax errors", *, returncode: Optional[int] = None, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


def find_formatter_executable(configured: str) -> str:
    """
    - 존재하는 경로면 그대로
    - 아니면 PATH 에서 검색
    - 못 찾으면 설정값 그대로 (실행 시 ToolNotFound)
    """
    expanded = os.path.expanduser(configured)
    if os.path.sep in expanded and os.path.isfile(expanded):
        return expanded
    found = shutil.which(expanded)
    return found or configured


def build_format_command(path: str, mode: OutputMode, *, executable: str) -> List[str]:
    return [executable, f"--write-mode={OutputMode(mode).value}", path]


async def run_formatter(
    path: str,
    mode: OutputMode = OutputMode.diff,
    *,
    executable: str = "rustfmt",
    timeout_sec: Optional[float] = None,
) -> str:
    """
    formatter 를 한 번 실행하고 stdout 텍스트를 돌려준다.
    실패하면 partial output 은 버린다.
    """
    cmd = build_format_command(path, mode, executable=executable)
    logger.info("FORMATTER_START cmd=%s", " ".join(cmd))

    try:
        proc = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except (FileNotFoundError, PermissionError) as e:
        raise ToolNotFound(executable) from e

    try:
        stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=timeout_sec)
    except asyncio.TimeoutError:
        proc.kill()
        await proc.wait()
        raise ToolReportedFailure(f"Formatter timed out after {timeout_sec}s")

    err_text = (stderr or b"").decode("utf-8", errors="replace")
    if proc.returncode != 0:
        logger.warning("FORMATTER_FAILED returncode=%s stderr=%s", proc.returncode, err_text.strip())
        raise ToolReportedFailure(returncode=proc.returncode, stderr=err_text)

    out = (stdout or b"").decode("utf-8", errors="replace")
    logger.info("FORMATTER_DONE chars=%d", len(out))
    return out
