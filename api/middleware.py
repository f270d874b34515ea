"""aiohttp middleware for API endpoints.

- security_headers_middleware: standard security headers on every response.
- request_logging_middleware: correlation_id + latency per request.
- app_error_middleware: AppError -> JSON error response with its status.
"""

from __future__ import annotations

import time
import uuid
from collections.abc import Awaitable, Callable

import structlog
from aiohttp import web

from app.exceptions import AppError, InvalidPayloadError

log = structlog.get_logger()

Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]


@web.middleware
async def security_headers_middleware(
    request: web.Request,
    handler: Handler,
) -> web.StreamResponse:
    """Add security headers to every HTTP response."""
    response = await handler(request)
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    # X-XSS-Protection: 0 disables legacy XSS auditor (modern CSP is preferred)
    response.headers["X-XSS-Protection"] = "0"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    response.headers["Content-Security-Policy"] = "default-src 'none'"
    return response


@web.middleware
async def request_logging_middleware(
    request: web.Request,
    handler: Handler,
) -> web.StreamResponse:
    """Bind a correlation_id (UUID4) for the request and log its latency.

    The id is echoed back in the X-Correlation-Id header.
    """
    correlation_id = str(uuid.uuid4())
    start = time.monotonic()
    with structlog.contextvars.bound_contextvars(correlation_id=correlation_id):
        try:
            response = await handler(request)
        except web.HTTPException as exc:
            log.info(
                "request_handled",
                method=request.method,
                path=request.path,
                status=exc.status,
                latency_ms=round((time.monotonic() - start) * 1000, 2),
            )
            raise
        except Exception:
            log.error(
                "request_failed",
                method=request.method,
                path=request.path,
                latency_ms=round((time.monotonic() - start) * 1000, 2),
                exc_info=True,
            )
            raise
        log.info(
            "request_handled",
            method=request.method,
            path=request.path,
            status=response.status,
            latency_ms=round((time.monotonic() - start) * 1000, 2),
        )
    response.headers["X-Correlation-Id"] = correlation_id
    return response


@web.middleware
async def app_error_middleware(
    request: web.Request,
    handler: Handler,
) -> web.StreamResponse:
    """Convert AppError raised by a handler into ``{"error": user_message}``."""
    try:
        return await handler(request)
    except AppError as exc:
        body: dict[str, object] = {"error": exc.user_message}
        if isinstance(exc, InvalidPayloadError) and exc.details:
            body["details"] = exc.details
        log.warning("api_error", path=request.path, status=exc.status, error=exc.message)
        return web.json_response(body, status=exc.status)
