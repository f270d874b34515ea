"""Token pack catalogue and top-up quotes.

GET  /api/tokens/packs — packs with net prices in every supported currency.
POST /api/tokens/quote — price a pack or a custom (ENTERPRISE) amount.
Quotes only: nothing is charged or credited here.
"""

import math

import structlog
from aiohttp import web

from api import parse_payload, read_json_object
from api.models import TopupQuotePayload
from app.exceptions import InvalidPayloadError
from services.exchange import SUPPORTED_CURRENCIES
from services.payments.packages import (
    CUSTOM_PACKAGE_ID,
    QUICK_AMOUNTS,
    TOKEN_PACKS,
    get_pack_by_api_id,
    pack_price,
    quote_pack,
)
from services.payments.rates import TOKEN_RATES, TopupQuote, quote_custom_amount

log = structlog.get_logger()


def _quote_json(quote: TopupQuote, package_id: str) -> dict:
    return {
        "packageId": package_id,
        "tokens": quote.tokens,
        "currency": quote.currency,
        "net": quote.net,
        "vat": quote.vat,
        "gross": quote.gross,
        "rounded": quote.rounded,
    }


def _parse_custom_amount(raw: str | float | None) -> float:
    """Positive finite number from the custom amount field (``"12,50"`` accepted)."""
    if raw is None:
        raise InvalidPayloadError("Custom amount missing", user_message="Invalid custom amount")
    try:
        amount = float(raw.replace(",", ".")) if isinstance(raw, str) else float(raw)
    except ValueError:
        raise InvalidPayloadError(f"Custom amount not numeric: {raw!r}", user_message="Invalid custom amount") from None
    if not math.isfinite(amount) or amount <= 0:
        raise InvalidPayloadError(f"Custom amount not positive: {raw!r}", user_message="Invalid custom amount")
    return amount


async def packs_handler(request: web.Request) -> web.Response:
    """GET /api/tokens/packs."""
    packs = [
        {
            "uiId": pack.ui_id,
            "apiId": pack.api_id,
            "title": pack.title,
            "tokens": pack.tokens,
            "microcopy": pack.microcopy,
            "highlight": pack.highlight,
            "prices": {currency: pack_price(pack, currency) for currency in SUPPORTED_CURRENCIES},
        }
        for pack in TOKEN_PACKS
    ]
    return web.json_response(
        {
            "packs": packs,
            "currencies": list(SUPPORTED_CURRENCIES),
            "defaultCurrency": request.app["settings"].default_currency,
            "quickAmounts": {currency: list(amounts) for currency, amounts in QUICK_AMOUNTS.items()},
            "tokenRates": dict(TOKEN_RATES),
        }
    )


async def topup_quote_handler(request: web.Request) -> web.Response:
    """POST /api/tokens/quote."""
    payload = parse_payload(TopupQuotePayload, await read_json_object(request))
    currency = payload.currency or request.app["settings"].default_currency

    if payload.package_id == CUSTOM_PACKAGE_ID:
        quote = quote_custom_amount(_parse_custom_amount(payload.amount), currency)
    else:
        pack = get_pack_by_api_id(payload.package_id)
        if pack is None:
            raise InvalidPayloadError(f"Unknown package {payload.package_id}", user_message="Invalid package")
        quote = quote_pack(pack, currency)

    if quote.tokens <= 0:
        raise InvalidPayloadError(f"Quote yields {quote.tokens} tokens", user_message="Invalid token amount")

    log.info(
        "tokens_quoted",
        package_id=payload.package_id,
        currency=currency,
        tokens=quote.tokens,
        net=quote.net,
        rounded=quote.rounded,
    )
    return web.json_response(_quote_json(quote, payload.package_id))
