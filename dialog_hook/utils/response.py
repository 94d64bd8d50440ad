"""Envelopes for replies that are not dialog directives (errors, health)."""
from __future__ import annotations

from typing import Any, Dict

from fastapi.responses import JSONResponse


def success(data: Any = None, **meta: Any) -> Dict[str, Any]:
    out = {"status": "success"}
    if data is not None:
        out["data"] = data
    if meta:
        out["meta"] = meta
    return out


def failure(message: str, code: int = 400, **details: Any) -> Dict[str, Any]:
    out = {"status": "error", "message": message, "code": code}
    if details:
        out["details"] = details
    return out


def error_response(message: str, code: int, **details: Any) -> JSONResponse:
    # the platform only sees the status; the body is for whoever reads the logs
    return JSONResponse(status_code=code, content=failure(message, code=code, **details))
