from __future__ import annotations

from typing import List, Sequence, Tuple

from fmtdiff.domain.schemas.diff import EditOperation


def _line_spans(text: str) -> List[Tuple[int, int]]:
    """
    각 라인의 (시작 offset, 내용 끝 offset). 내용 끝은 '\\n' / '\\r\\n' 앞.
    """
    spans: List[Tuple[int, int]] = []
    offset = 0
    for line in text.splitlines(keepends=True):
        content = line.rstrip("\r\n")
        spans.append((offset, offset + len(content)))
        offset += len(line)
    return spans


def _offset(spans: List[Tuple[int, int]], text_len: int, line: int, character: int | None) -> int:
    if line < 0:
        raise ValueError(f"Negative line in edit: {line}")
    if line >= len(spans):
        return text_len
    start, content_end = spans[line]
    if character is None:
        return content_end
    return min(start + character, content_end)


def apply_edits(text: str, edits: Sequence[EditOperation]) -> str:
    """
    원본 문서 좌표의 edit 들을 한 번에 적용한다.
    edit 들은 시작 위치 순서대로, 겹치지 않아야 한다.
    """
    spans = _line_spans(text)
    resolved: List[Tuple[int, int, str]] = []

    prev_end = 0
    for edit in edits:
        start = _offset(spans, len(text), edit.range_start_line, edit.start_character)
        end = _offset(spans, len(text), edit.range_end_line, edit.end_character)
        if end < start:
            raise ValueError(f"Edit range ends before it starts: {edit}")
        if start < prev_end:
            raise ValueError(f"Overlapping or out-of-order edit: {edit}")
        resolved.append((start, end, edit.replacement_text))
        prev_end = end

    out: List[str] = []
    cursor = 0
    for start, end, replacement in resolved:
        out.append(text[cursor:start])
        out.append(replacement)
        cursor = end
    out.append(text[cursor:])
    return "".join(out)
