"""aiohttp application factory: logging, Sentry, middleware, routes."""

from __future__ import annotations

import sentry_sdk
import structlog
from aiohttp import web

from api.bookings import booking_quote_handler
from api.coach_requests import coach_request_quote_handler
from api.generator import generator_quote_handler
from api.health import health_handler
from api.middleware import (
    app_error_middleware,
    request_logging_middleware,
    security_headers_middleware,
)
from api.tokens import packs_handler, topup_quote_handler
from app.config import Settings, get_settings

log = structlog.get_logger()


def configure_logging(settings: Settings) -> None:
    """structlog: JSON lines in deployment, console renderer for local runs."""
    if settings.json_logs:
        renderers = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        renderers = [structlog.dev.ConsoleRenderer()]
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            *renderers,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(settings.log_level_value),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def _init_sentry(dsn: str) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if dsn:
        sentry_sdk.init(dsn=dsn, traces_sample_rate=0.1)
        log.info("sentry_initialized")


def setup_routes(app: web.Application) -> None:
    app.router.add_get("/api/health", health_handler)
    app.router.add_get("/api/tokens/packs", packs_handler)
    app.router.add_post("/api/tokens/quote", topup_quote_handler)
    app.router.add_post("/api/generator/quote", generator_quote_handler)
    app.router.add_post("/api/coach-requests/quote", coach_request_quote_handler)
    app.router.add_post("/api/bookings/quote", booking_quote_handler)


def create_app(settings: Settings | None = None) -> web.Application:
    """Create the aiohttp application.

    ``settings`` defaults to the cached environment settings; tests pass their own.
    """
    settings = settings or get_settings()
    configure_logging(settings)
    _init_sentry(settings.sentry_dsn)

    app = web.Application(
        middlewares=[
            security_headers_middleware,
            request_logging_middleware,
            app_error_middleware,
        ]
    )
    app["settings"] = settings
    setup_routes(app)

    log.info("app_created", default_currency=settings.default_currency)
    return app
