from __future__ import annotations

import logging
import re
from dataclasses import replace
from typing import Iterable, List, Tuple

from fmtdiff.domain.schemas.diff import (
    Added,
    Context,
    EditOperation,
    FileHeader,
    Hunk,
    HunkStart,
    LineKind,
    Other,
    Removed,
    ScanState,
)
from fmtdiff.domain.tools.ansi import strip_color_codes
from fmtdiff.domain.tools.paths import same_path

logger = logging.getLogger(__name__)

FILE_HEADER_PREFIX = "Diff of"
HUNK_START_PREFIX = "Diff at line"
RETURN_SYMBOL = "⏎"

_LINE_NO_RE = re.compile(r"^\s*(\d+)")


def clean_diff_line(line: str) -> str:
    """
    leading marker(+ / space) 한 글자를 떼고,
    끝이 return symbol(⏎) 이면 그것을 실제 개행으로 바꾼다.
    """
    if line.endswith(RETURN_SYMBOL):
        return line[1:-1] + "\n"
    return line[1:]


def _header_path(line: str) -> str:
    path = line[len(FILE_HEADER_PREFIX):]
    if path.startswith(" "):
        path = path[1:]
    if path.endswith(":"):
        path = path[:-1]
    return path


def classify_line(line: str) -> LineKind:
    """
    report 한 줄을 LineKind 로 분류한다.
    CRLF 출력에서 남은 '\\r' 은 분류 전에 제거한다.
    """
    if line.endswith("\r"):
        line = line[:-1]

    if line.startswith(FILE_HEADER_PREFIX):
        return FileHeader(path=_header_path(line))

    if line.startswith(HUNK_START_PREFIX):
        m = _LINE_NO_RE.match(line[len(HUNK_START_PREFIX):])
        if not m:
            return Other()
        return HunkStart(line_no=int(m.group(1)))

    if line.startswith("+"):
        return Added(text=clean_diff_line(line))
    if line.startswith("-"):
        return Removed()
    if line.startswith(" "):
        return Context(text=clean_diff_line(line))
    return Other()


def _sealed(state: ScanState) -> Tuple[Hunk, ...]:
    if state.open_hunk is None:
        return state.sealed_hunks
    return state.sealed_hunks + (state.open_hunk,)


def _matches(header_path: str, target_path: str, resolve_symlinks: bool) -> bool:
    if header_path == target_path:
        return True
    return same_path(header_path, target_path, resolve_symlinks=resolve_symlinks)


def advance(
    state: ScanState,
    kind: LineKind,
    target_path: str,
    *,
    resolve_symlinks: bool = True,
) -> ScanState:
    """
    fold transition: (state, line kind) -> new state.
    입력 state 는 변경하지 않는다.
    """
    if isinstance(kind, FileHeader):
        # 파일 블록이 끝나면 열린 hunk 는 봉인
        return ScanState(
            current_file_path=kind.path,
            in_target=_matches(kind.path, target_path, resolve_symlinks),
            open_hunk=None,
            sealed_hunks=_sealed(state),
        )

    if not state.in_target:
        return state

    if isinstance(kind, HunkStart):
        return replace(state, open_hunk=Hunk(start_line=kind.line_no), sealed_hunks=_sealed(state))

    hunk = state.open_hunk
    if hunk is None:
        # hunk 시작 전 body line: 붙일 곳이 없으므로 무시
        return state

    if isinstance(kind, Added):
        return replace(state, open_hunk=hunk.add_line(kind.text))
    if isinstance(kind, Removed):
        return replace(state, open_hunk=hunk.remove_line())
    if isinstance(kind, Context):
        return replace(state, open_hunk=hunk.replace_line(kind.text))
    return state


def collect_hunks(
    target_path: str,
    report: str,
    *,
    resolve_symlinks: bool = True,
) -> Tuple[Hunk, ...]:
    state = ScanState()
    for line in (report or "").split("\n"):
        state = advance(state, classify_line(line), target_path, resolve_symlinks=resolve_symlinks)
    return _sealed(state)


def _replacement_text(new_lines: Iterable[str]) -> str:
    lines = list(new_lines)
    if lines and lines[-1].endswith("\n"):
        lines[-1] = lines[-1][:-1]
    return "".join(lines)


def hunks_to_edits(hunks: Iterable[Hunk]) -> List[EditOperation]:
    """
    hunk -> EditOperation.
    앞선 hunk 들이 만든 라인 수 차이(cumulative offset)를 시작 라인에 반영한다.
    """
    edits: List[EditOperation] = []
    cumulative_offset = 0

    for hunk in hunks:
        start = hunk.start_line - 1 + cumulative_offset
        removed = hunk.removed_line_count
        end = start if removed == 0 else start + removed - 1
        cumulative_offset += removed - len(hunk.new_lines)

        edits.append(
            EditOperation(
                range_start_line=start,
                range_end_line=end,
                start_character=0,
                # removed == 0: column 0 의 zero-width 삽입 지점
                end_character=0 if removed == 0 else None,
                replacement_text=_replacement_text(hunk.new_lines),
            )
        )
    return edits


def interpret(
    target_path: str,
    report: str,
    *,
    resolve_symlinks: bool = True,
    sanitize: bool = False,
) -> List[EditOperation]:
    """
    formatter diff report 에서 target_path 에 해당하는 edit 목록을 만든다.
    report 는 이미 strip_color_codes 를 거친 텍스트로 가정한다(sanitize=True 면 여기서 처리).
    파싱은 예외를 던지지 않는다. 인식 못 하는 줄은 무시한다.
    """
    if sanitize:
        report = strip_color_codes(report)

    hunks = collect_hunks(target_path, report, resolve_symlinks=resolve_symlinks)
    edits = hunks_to_edits(hunks)
    logger.debug("INTERPRET path=%s hunks=%d edits=%d", target_path, len(hunks), len(edits))
    return edits
