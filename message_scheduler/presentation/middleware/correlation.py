"""
Correlation ID middleware for request tracing.

The ID is taken from X-Request-ID or X-Correlation-ID when present,
generated otherwise, bound to every log line of the request and echoed in
the response headers.
"""

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from ...infrastructure.logging import Timer, get_correlation_id, set_correlation_id

logger = structlog.get_logger()


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to handle correlation IDs for request tracing."""

    async def dispatch(self, request: Request, call_next) -> Response:
        set_correlation_id(
            request.headers.get("X-Request-ID")
            or request.headers.get("X-Correlation-ID")
            or ""
        )
        correlation_id = get_correlation_id()

        with structlog.contextvars.bound_contextvars(
            correlation_id=correlation_id,
            method=request.method,
            path=request.url.path,
        ):
            logger.info("Request started")

            with Timer() as t:
                response = await call_next(request)

            logger.info(
                "Request completed",
                status_code=response.status_code,
                duration_ms=t.duration_ms,
            )

        response.headers["X-Request-ID"] = correlation_id
        response.headers["X-Correlation-ID"] = correlation_id

        return response
