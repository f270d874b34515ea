"""HTTP API endpoints (aiohttp.web) — read-only pricing quotes and health."""

from typing import Any, TypeVar

import structlog
from aiohttp import web
from pydantic import BaseModel, ValidationError

from app.exceptions import InvalidPayloadError

log = structlog.get_logger()

ModelT = TypeVar("ModelT", bound=BaseModel)


async def read_json_object(request: web.Request) -> dict[str, Any]:
    """Decode the request body; it must be a JSON object."""
    try:
        body = await request.json()
    except ValueError:
        raise InvalidPayloadError("Request body is not valid JSON", user_message="Invalid JSON") from None
    if not isinstance(body, dict):
        raise InvalidPayloadError("Request body must be a JSON object", user_message="Invalid JSON")
    return body


def parse_payload(model: type[ModelT], data: dict[str, Any]) -> ModelT:
    """Validate ``data`` against ``model``; ValidationError becomes InvalidPayloadError (400)."""
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        details = exc.errors(include_url=False, include_context=False, include_input=False)
        raise InvalidPayloadError(f"{model.__name__} validation failed", details=details) from exc
