# fmtdiff/exceptions/handlers.py
from __future__ import annotations

import logging
from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from fmtdiff.core.context import run_id_var
from fmtdiff.tools.formatter import ToolReportedFailure

logger = logging.getLogger("fmtdiff")


def register_exception_handlers(app) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        run_id = run_id_var.get()
        logger.warning(
            "VALIDATION run_id=%s path=%s errors=%s",
            run_id,
            request.url.path,
            exc.errors(),
        )
        return JSONResponse(status_code=422, content={"detail": exc.errors(), "run_id": run_id})

    @app.exception_handler(ToolReportedFailure)
    async def formatter_failure_handler(request: Request, exc: ToolReportedFailure):
        run_id = run_id_var.get()
        logger.warning(
            "FORMATTER_FAILURE run_id=%s path=%s returncode=%s",
            run_id,
            request.url.path,
            exc.returncode,
        )
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc), "stderr": exc.stderr, "run_id": run_id},
        )
