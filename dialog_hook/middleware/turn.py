from __future__ import annotations

import logging
import time
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

TURN_ID_HEADER = "X-Turn-ID"

logger = logging.getLogger("dialog_hook.turn")

turn_id_var: ContextVar[str] = ContextVar("turn_id", default="-")


class TurnIdFilter(logging.Filter):
    """Stamp every log record with the id of the dialog turn being served."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.turn_id = turn_id_var.get()
        return True


class TurnMiddleware(BaseHTTPMiddleware):
    """Scope a turn id to each request's logs and report how long the turn took.

    The id is echoed from X-Turn-ID when the caller sends one.
    """

    def __init__(self, app, slow_ms: int = 500):
        super().__init__(app)
        self.slow_ms = slow_ms

    async def dispatch(self, request: Request, call_next):
        tid = request.headers.get(TURN_ID_HEADER) or str(uuid.uuid4())
        request.state.turn_id = tid
        token = turn_id_var.set(tid)
        start = time.perf_counter()
        try:
            response: Response = await call_next(request)
            elapsed_ms = (time.perf_counter() - start) * 1000
            if elapsed_ms > self.slow_ms:
                logger.warning(f"Slow turn {request.url.path} took {elapsed_ms:.0f}ms")
            else:
                logger.info(f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.0f}ms")
        finally:
            turn_id_var.reset(token)
        response.headers[TURN_ID_HEADER] = tid
        response.headers["X-Process-Time"] = f"{elapsed_ms:.2f}ms"
        return response
