"""Request logging middleware; records request metadata, never bodies."""

from __future__ import annotations

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger("lifepath.requests")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and latency for every request."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = int((time.perf_counter() - started) * 1000)
        response.headers["X-Response-Time-ms"] = str(duration_ms)

        logger.info(
            "request.completed %s %s %s",
            request.method,
            request.url.path,
            response.status_code,
            extra={
                "method": request.method,
                "path": request.url.path,
                "status": response.status_code,
                "duration_ms": duration_ms,
                "client": getattr(request.client, "host", None),
            },
        )
        return response


__all__ = ["RequestLoggingMiddleware"]
