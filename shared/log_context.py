"""
FastAPI middleware for automatic request logging and context management.

Provides:
- Request ID generation for correlation (echoed as X-Request-ID)
- Request/response logging with timing
- Request context bound into structlog contextvars for the request lifetime
"""

from __future__ import annotations

import time
import uuid
from typing import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from shared.logging import get_logger

log = get_logger("recaptcha_form.request")

# Paths polled by load balancers; logging them is noise
_QUIET_PATHS = frozenset({"/health"})


def generate_request_id() -> str:
    """Generate a unique request ID for correlation."""
    return f"req_{uuid.uuid4().hex[:12]}"


def log_request_end(method: str, path: str, status_code: int, duration_ms: int) -> None:
    """Log the end of a request with timing and status."""
    if status_code >= 500:
        log_fn = log.error
    elif status_code >= 400:
        log_fn = log.warning
    else:
        log_fn = log.info

    log_fn(
        "request_completed",
        method=method,
        path=path,
        status_code=status_code,
        duration_ms=duration_ms,
    )


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        if request.url.path in _QUIET_PATHS:
            return await call_next(request)

        request_id = generate_request_id()
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            user_agent=request.headers.get("User-Agent", "")[:100],
        )

        start = time.perf_counter()
        # Unhandled exceptions propagate to errors.unhandled_exception_handler,
        # which logs them with the bound request_id.
        response = await call_next(request)
        duration_ms = int((time.perf_counter() - start) * 1000)

        log_request_end(
            request.method, request.url.path, response.status_code, duration_ms
        )
        response.headers["X-Request-ID"] = request_id
        return response
