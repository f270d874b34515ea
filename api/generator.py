"""AI course generator quote.

POST /api/generator/quote — token cost and titles for one course configuration.
Accepts the options at the top level or wrapped as ``{"opts": {...}}`` /
``{"options": {...}}``.
``approxWeeks`` is measured on ``balance`` when one is sent, else on the quoted
cost; ``affordable`` is only returned alongside ``balance``.
"""

from typing import Any

import structlog
from aiohttp import web

from api import parse_payload, read_json_object
from api.models import GeneratorQuotePayload
from services.tokens import (
    BASELINE_TOKENS,
    PREVIEW_COST,
    REGEN_DAY,
    REGEN_WEEK,
    calc_full_course_tokens,
    generate_course_title,
    generate_short_course_title,
    tokens_to_approx_weeks,
)

log = structlog.get_logger()


def _unwrap_options(body: dict[str, Any]) -> dict[str, Any]:
    wrapped = body.get("opts") or body.get("options")
    if not isinstance(wrapped, dict):
        return body
    if "balance" in body:
        return {**wrapped, "balance": body["balance"]}
    return wrapped


async def generator_quote_handler(request: web.Request) -> web.Response:
    """POST /api/generator/quote."""
    payload = parse_payload(GeneratorQuotePayload, _unwrap_options(await read_json_object(request)))
    opts = payload.to_options()
    tokens = calc_full_course_tokens(opts)

    result: dict[str, Any] = {
        "tokens": tokens,
        "title": generate_course_title(opts),
        "shortTitle": generate_short_course_title(opts),
        "baselineTokens": BASELINE_TOKENS,
        "previewCost": PREVIEW_COST,
        "regenerate": {"day": REGEN_DAY, "week": REGEN_WEEK},
        "approxWeeks": tokens_to_approx_weeks(tokens if payload.balance is None else payload.balance),
    }
    if payload.balance is not None:
        result["affordable"] = payload.balance >= tokens

    log.info("course_quoted", weeks=opts.weeks, sessions_per_week=opts.sessions_per_week, tokens=tokens)
    return web.json_response(result)
