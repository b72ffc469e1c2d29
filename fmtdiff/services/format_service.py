from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

from fmtdiff.config.settings import Settings, settings as default_settings
from fmtdiff.core.context import run_id_var
from fmtdiff.domain.schemas.diff import EditOperation
from fmtdiff.domain.schemas.format import FormatRequest, FormatResult, Meta, OutputMode
from fmtdiff.domain.tools.ansi import strip_color_codes
from fmtdiff.domain.tools.diff_interpreter import interpret
from fmtdiff.domain.tools.paths import normalize_path
from fmtdiff.tools.formatter import ToolNotFound, find_formatter_executable, run_formatter

logger = logging.getLogger(__name__)


class RequestGenerations:
    """
    문서별 요청 세대(generation) 카운터.
    늦게 끝난 이전 요청의 결과가 최신 결과를 덮어쓰지 않도록 한다.
    """

    def __init__(self) -> None:
        self._latest: Dict[str, int] = {}

    def begin(self, key: str) -> int:
        gen = self._latest.get(key, 0) + 1
        self._latest[key] = gen
        return gen

    def is_current(self, key: str, generation: int) -> bool:
        return self._latest.get(key, 0) == generation


def whole_document_edit(original: str, formatted: str) -> EditOperation:
    lines = original.splitlines()
    last = max(len(lines) - 1, 0)
    if formatted.endswith("\n") and original.endswith("\n"):
        formatted = formatted[:-1]
    return EditOperation(range_start_line=0, range_end_line=last, replacement_text=formatted)


class FormatService:
    """
    얇은 오케스트레이터(Facade).

    - formatter 실행 (subprocess)
    - ANSI 제거 -> diff 해석
    - ToolNotFound 는 advisory 로 바꾸고, ToolReportedFailure 는 그대로 올린다.
    """

    def __init__(self, config: Optional[Settings] = None) -> None:
        self._settings = config or default_settings
        self._generations = RequestGenerations()

    @property
    def executable(self) -> str:
        return find_formatter_executable(self._settings.formatter_path)

    async def format(self, req: FormatRequest) -> FormatResult:
        return await self.format_file(req.path, req.mode)

    async def format_file(self, path: str, mode: Optional[OutputMode] = None) -> FormatResult:
        mode = OutputMode(mode or self._settings.default_mode)
        key = normalize_path(path, resolve_symlinks=self._settings.resolve_symlinks)
        generation = self._generations.begin(key)
        meta = Meta(
            run_id=run_id_var.get(),
            formatter=self._settings.formatter_name,
            generation=generation,
            generated_at=datetime.now().isoformat(),
        )

        try:
            output = await run_formatter(
                path,
                mode,
                executable=self.executable,
                timeout_sec=self._settings.formatter_timeout_sec,
            )
        except ToolNotFound as e:
            logger.warning("FORMATTER_NOT_FOUND executable=%s", e.executable)
            return FormatResult(path=path, mode=mode, advisory=self._settings.not_found_message, meta=meta)

        edits = self.edits_from_output(path, output, mode)

        if not self._generations.is_current(key, generation):
            logger.info("FORMAT_STALE path=%s generation=%d", path, generation)
            return FormatResult(path=path, mode=mode, stale=True, meta=meta)

        logger.info("FORMAT_DONE path=%s mode=%s edits=%d", path, mode.value, len(edits))
        return FormatResult(path=path, mode=mode, edits=edits, meta=meta)

    def edits_from_output(self, path: str, output: str, mode: OutputMode = OutputMode.diff) -> List[EditOperation]:
        text = strip_color_codes(output)
        if mode == OutputMode.display:
            original = Path(path).read_text(encoding="utf-8")
            if text == original:
                return []
            return [whole_document_edit(original, text)]
        return interpret(path, text, resolve_symlinks=self._settings.resolve_symlinks)
