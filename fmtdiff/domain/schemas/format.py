from __future__ import annotations

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict

from fmtdiff.domain.schemas.diff import EditOperation


class OutputMode(str, Enum):
    diff = "diff"
    display = "display"


class Meta(BaseModel):
    model_config = ConfigDict(extra="forbid")
    run_id: str = Field(default="unknown")
    formatter: str = Field(default="")
    generation: int = Field(default=0)
    generated_at: str = Field(default="")


class FormatRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")
    path: str
    mode: OutputMode = Field(default=OutputMode.diff)


class FormatResult(BaseModel):
    model_config = ConfigDict(extra="forbid")
    path: str
    mode: OutputMode = OutputMode.diff
    edits: List[EditOperation] = Field(default_factory=list)
    advisory: Optional[str] = None
    stale: bool = False
    meta: Meta = Field(default_factory=Meta)


class InterpretRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")
    path: str
    report: str


class InterpretResult(BaseModel):
    model_config = ConfigDict(extra="forbid")
    path: str
    edits: List[EditOperation] = Field(default_factory=list)
