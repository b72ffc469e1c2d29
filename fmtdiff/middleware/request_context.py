from __future__ import annotations

import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from fmtdiff.core.context import resolve_run_id, run_id_var

logger = logging.getLogger("fmtdiff")

RUN_ID_HEADER = "X-Run-Id"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    요청마다 run_id 를 ContextVar 에 심고, 응답 헤더와 로그에 남긴다.
    format 요청은 formatter subprocess 시간이 대부분이라 elapsed 도 같이 기록.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        run_id = resolve_run_id(request.headers.get(RUN_ID_HEADER))
        token = run_id_var.set(run_id)

        start = time.perf_counter()
        try:
            response = await call_next(request)
        finally:
            run_id_var.reset(token)
        elapsed_ms = (time.perf_counter() - start) * 1000

        response.headers[RUN_ID_HEADER] = run_id
        response.headers["X-Elapsed-Ms"] = f"{elapsed_ms:.1f}"

        log = logger.warning if response.status_code >= 400 else logger.info
        log(
            "REQ run_id=%s %s %s status=%s elapsed=%.1fms",
            run_id,
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response
