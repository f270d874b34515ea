"""Health check endpoint.

GET /api/health — public status, or detailed checks with Bearer token.
"""

import time
from typing import Any

import structlog
from aiohttp import web

from services.exchange import EXCHANGE_RATES
from services.tokens import BASELINE_TOKENS, GeneratorOptions, calc_full_course_tokens

log = structlog.get_logger()

_VERSION = "1.0.0"
_START_TIME = time.monotonic()


def _pricing_check() -> dict[str, Any]:
    """Self-test of the pricing tables: default course must cost the baseline."""
    course_tokens = calc_full_course_tokens(GeneratorOptions())
    if course_tokens != BASELINE_TOKENS or EXCHANGE_RATES["EUR"] != 1:
        log.error("health_pricing_mismatch", course_tokens=course_tokens, baseline=BASELINE_TOKENS)
        return {"status": "error", "baseline_tokens": BASELINE_TOKENS, "course_tokens": course_tokens}
    return {"status": "ok", "baseline_tokens": BASELINE_TOKENS}


async def health_handler(request: web.Request) -> web.Response:
    """Health check: public or detailed depending on Bearer token."""
    auth = request.headers.get("Authorization", "")
    settings = request.app["settings"]
    token = settings.health_check_token.get_secret_value()

    # Public response (no token or invalid token): no version/details
    if not token or not auth.startswith("Bearer ") or auth[7:] != token:
        return web.json_response({"status": "ok"})

    checks = {"pricing": _pricing_check()}
    overall = "ok" if all(c["status"] == "ok" for c in checks.values()) else "degraded"

    return web.json_response(
        {
            "status": overall,
            "version": _VERSION,
            "uptime_s": round(time.monotonic() - _START_TIME),
            "baseline_tokens": BASELINE_TOKENS,
            "checks": checks,
        }
    )
