"""
Children's Church API — Request Logging Middleware
====================================================

What:  One access log line per HTTP request.
How:   Measures the time from middleware entry to response, then logs method,
       path, status, duration, request ID and client IP.

Level by status:
    5xx → ERROR, 4xx → WARNING, everything else → INFO

What we log vs what we DON'T log (privacy):
    ✅ Log: method, path, status, duration, IP, request ID
    ❌ Don't log: request bodies (children's names and questions)
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from church_api.middleware.request_id import request_id_var

logger = logging.getLogger("church_api.access")

# Polled by uptime monitors; logging them drowns real traffic
QUIET_PATHS = {"/health"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and duration of each request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in QUIET_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        rid = request_id_var.get("")
        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
