"""Access log with request latency.

Probe paths are not logged; every response carries ``X-Response-Time``.
"""
from __future__ import annotations

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

QUIET_PATHS = frozenset({"/healthz", "/readyz"})


class RequestTimingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        took_ms = (time.perf_counter() - started) * 1000
        response.headers["X-Response-Time"] = f"{took_ms:.1f}ms"

        path = request.url.path
        if path in QUIET_PATHS:
            return response

        status = response.status_code
        if status >= 500:
            level = logging.WARNING
        elif status == 429:
            level = logging.INFO
        else:
            level = logging.DEBUG if request.method == "GET" else logging.INFO
        logger.log(level, "%s %s -> %d in %.1fms", request.method, path, status, took_ms)
        return response
