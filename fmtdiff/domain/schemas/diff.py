from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class Hunk:
    """
    하나의 "Diff at line N" 블록.

    Attributes:
        start_line: 선언된 시작 라인 (1-based, 원본 문서 기준)
        removed_line_count: '-' 라인 + context(' ') 라인 수
        new_lines: '+' 라인과 context 라인의 텍스트 (순서 유지)
    """
    start_line: int
    removed_line_count: int = 0
    new_lines: Tuple[str, ...] = ()

    def add_line(self, text: str) -> "Hunk":
        return Hunk(self.start_line, self.removed_line_count, self.new_lines + (text,))

    def remove_line(self) -> "Hunk":
        return Hunk(self.start_line, self.removed_line_count + 1, self.new_lines)

    def replace_line(self, text: str) -> "Hunk":
        # context line: 지우고 다시 넣는다
        return Hunk(self.start_line, self.removed_line_count + 1, self.new_lines + (text,))


# --------------------
# Line kinds
# --------------------
@dataclass(frozen=True)
class FileHeader:
    path: str


@dataclass(frozen=True)
class HunkStart:
    line_no: int


@dataclass(frozen=True)
class Added:
    text: str


@dataclass(frozen=True)
class Removed:
    pass


@dataclass(frozen=True)
class Context:
    text: str


@dataclass(frozen=True)
class Other:
    pass


LineKind = Union[FileHeader, HunkStart, Added, Removed, Context, Other]


@dataclass(frozen=True)
class ScanState:
    current_file_path: Optional[str] = None
    in_target: bool = False
    open_hunk: Optional[Hunk] = None
    sealed_hunks: Tuple[Hunk, ...] = field(default_factory=tuple)


class EditOperation(BaseModel):
    """
    원본 문서 좌표(0-based line)의 치환 연산.

    end_character=None 은 end 라인의 내용 끝(라인 종결자 제외)까지를 뜻한다.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)
    range_start_line: int
    range_end_line: int
    start_character: int = Field(default=0, ge=0)
    end_character: Optional[int] = Field(default=None, ge=0)
    replacement_text: str = ""

    @property
    def is_insertion(self) -> bool:
        return self.end_character == 0 and self.range_start_line == self.range_end_line
