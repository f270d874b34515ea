"""Coach session booking quote.

POST /api/bookings/quote — cost and free start slots for a session.
"""

import structlog
from aiohttp import web

from api import parse_payload, read_json_object
from api.models import BookingQuotePayload
from app.exceptions import InvalidPayloadError
from services.coach_sessions import (
    HOURLY_RATE,
    generate_available_slots,
    get_session_cost,
    is_date_in_past,
    is_valid_duration,
)

log = structlog.get_logger()


async def booking_quote_handler(request: web.Request) -> web.Response:
    """POST /api/bookings/quote."""
    payload = parse_payload(BookingQuotePayload, await read_json_object(request))

    if not is_valid_duration(payload.duration_hours):
        raise InvalidPayloadError(
            f"Invalid duration: {payload.duration_hours}",
            user_message="Invalid session duration",
        )
    if is_date_in_past(payload.date):
        raise InvalidPayloadError(
            f"Date in the past: {payload.date.isoformat()}",
            user_message="Cannot book a date in the past",
        )

    cost = get_session_cost(payload.duration_hours)
    log.info("booking_quoted", duration_hours=payload.duration_hours, cost=cost)
    return web.json_response(
        {
            "date": payload.date.isoformat(),
            "durationHours": payload.duration_hours,
            "hourlyRate": HOURLY_RATE,
            "cost": cost,
            "slots": generate_available_slots(payload.date, payload.duration_hours),
        }
    )
