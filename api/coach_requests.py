"""Coach-request quote.

POST /api/coach-requests/quote — itemized cost of a coach-built plan.
Days per week is validated here; the calculator itself is lenient.
"""

import structlog
from aiohttp import web

from api import parse_payload, read_json_object
from api.models import CoachRequestQuotePayload
from app.exceptions import InvalidPayloadError
from services.coach_requests import MAX_DAYS_PER_WEEK, MIN_DAYS_PER_WEEK, calc_coach_request_tokens

log = structlog.get_logger()


async def coach_request_quote_handler(request: web.Request) -> web.Response:
    """POST /api/coach-requests/quote."""
    payload = parse_payload(CoachRequestQuotePayload, await read_json_object(request))

    if not MIN_DAYS_PER_WEEK <= payload.days_per_week <= MAX_DAYS_PER_WEEK:
        raise InvalidPayloadError(
            f"days_per_week out of range: {payload.days_per_week}",
            user_message=f"daysPerWeek must be between {MIN_DAYS_PER_WEEK} and {MAX_DAYS_PER_WEEK}",
        )

    breakdown = calc_coach_request_tokens(payload.to_input())
    if breakdown.unmatched:
        # Unknown choices price at 0
        log.warning(
            "coach_request_unmatched",
            fields=list(breakdown.unmatched),
            level=payload.level,
            training_type=payload.training_type,
            equipment=payload.equipment,
        )

    return web.json_response(
        {
            "base": breakdown.base,
            "levelAdd": breakdown.level_add,
            "trainingTypeAdd": breakdown.training_type_add,
            "equipmentAdd": breakdown.equipment_add,
            "daysAdd": breakdown.days_add,
            "total": breakdown.total,
            "unmatched": list(breakdown.unmatched),
        }
    )
