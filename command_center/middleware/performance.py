"""Request ID and request timing middleware.

Provides:
- RequestIDMiddleware: Assigns a UUID to every request for log traceability.
- RequestTimingMiddleware: Measures and logs request duration, warns on slow requests.
"""

import logging
import time
import uuid
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

SLOW_REQUEST_THRESHOLD_MS = 1000.0


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assign a unique request ID to every request.

    Honors an incoming ``X-Request-ID`` header, stores the ID in
    ``request.state.request_id`` and echoes it in the response.
    """

    async def dispatch(self, request: Request, call_next: Any) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id

        response: Response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


class RequestTimingMiddleware(BaseHTTPMiddleware):
    """Add ``X-Response-Time`` and log requests slower than one second."""

    async def dispatch(self, request: Request, call_next: Any) -> Response:
        start = time.perf_counter()

        response: Response = await call_next(request)

        duration_ms = (time.perf_counter() - start) * 1000.0
        response.headers["X-Response-Time"] = f"{duration_ms:.2f}ms"

        if duration_ms >= SLOW_REQUEST_THRESHOLD_MS:
            logger.warning(
                "Slow request: %s %s completed in %.2f ms [request_id=%s, status=%d]",
                request.method,
                request.url.path,
                duration_ms,
                getattr(request.state, "request_id", "unknown"),
                response.status_code,
            )
        else:
            logger.debug(
                "%s %s -> %d in %.2f ms",
                request.method,
                request.url.path,
                response.status_code,
                duration_ms,
            )

        return response
