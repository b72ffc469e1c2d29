from fastapi import APIRouter

from fmtdiff.domain.schemas.format import (
    FormatRequest,
    FormatResult,
    InterpretRequest,
    InterpretResult,
)
from fmtdiff.domain.tools.ansi import strip_color_codes
from fmtdiff.domain.tools.diff_interpreter import interpret
from fmtdiff.config.settings import settings
from fmtdiff.services.format_service import FormatService


router = APIRouter()
service = FormatService()


@router.get("/health")
async def health():
    return {"ok": True}


@router.get("/schema/format")
async def format_schema():
    return {
        "request": FormatRequest.model_json_schema(),
        "response": FormatResult.model_json_schema(),
    }


@router.post("/format", response_model=FormatResult)
async def format_document(req: FormatRequest):
    # ToolReportedFailure 는 exception handler 에서 422 로
    return await service.format(req)


@router.post("/interpret", response_model=InterpretResult)
async def interpret_report(req: InterpretRequest):
    edits = interpret(req.path, strip_color_codes(req.report), resolve_symlinks=settings.resolve_symlinks)
    return InterpretResult(path=req.path, edits=edits)
