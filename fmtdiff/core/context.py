from __future__ import annotations

import re
import uuid
from contextvars import ContextVar
from typing import Optional

run_id_var: ContextVar[str] = ContextVar("run_id", default="unknown")

# 클라이언트(에디터)가 보낸 X-Run-Id 는 이 형식일 때만 그대로 쓴다
_RUN_ID_RE = re.compile(r"^[A-Za-z0-9._-]{1,64}$")


def resolve_run_id(incoming: Optional[str]) -> str:
    if incoming and _RUN_ID_RE.match(incoming):
        return incoming
    return str(uuid.uuid4())
