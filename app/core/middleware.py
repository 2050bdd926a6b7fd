# app/core/middleware.py
from __future__ import annotations

import logging
import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.logging import request_id_ctx

log = logging.getLogger("chef_ai.request")

# probes hit these every few seconds
QUIET_PATHS = ("/health", "/health/ready", "/version")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """One structured line per request, tagged with the caller's user id and a request id."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        token = request_id_ctx.set(request_id)
        started = time.perf_counter()

        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            response.headers["X-Request-ID"] = request_id
            return response
        finally:
            path = request.url.path
            level = logging.DEBUG if path in QUIET_PATHS and status_code < 500 else logging.INFO
            log.log(
                level,
                "request",
                extra={
                    "method": request.method,
                    "path": path,
                    "status_code": status_code,
                    "duration_ms": int((time.perf_counter() - started) * 1000),
                    "user_id": request.headers.get("X-User-Id"),
                },
            )
            request_id_ctx.reset(token)
