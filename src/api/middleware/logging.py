"""Structured request logging middleware."""

import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = structlog.get_logger()

# Polled by orchestrators; logged at debug only
PROBE_PATHS = frozenset({"/health", "/ready"})


class StructuredLoggingMiddleware(BaseHTTPMiddleware):
    """Binds request_id (and the caller's user id, if any) to every log line
    emitted while the request is handled, then logs one ``http_request`` event."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id

        bound = {"request_id": request_id}
        if user_id := request.headers.get("X-User-ID"):
            bound["user_id"] = user_id.strip()
        structlog.contextvars.bind_contextvars(**bound)

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        finally:
            structlog.contextvars.unbind_contextvars(*bound)
        duration_ms = round((time.perf_counter() - start_time) * 1000, 2)

        log = logger.debug if request.url.path in PROBE_PATHS else logger.info
        log(
            "http_request",
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=duration_ms,
        )

        response.headers["X-Request-ID"] = request_id
        return response
