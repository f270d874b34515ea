"""Exchange rates and VAT arithmetic — single source of truth for currency math.

Base currency is EUR; every other rate is "1 EUR expressed in that currency"
(mid-market). The table is built once at import time and never mutated.
Zero dependencies on aiohttp.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from types import MappingProxyType
from typing import Literal

from app.exceptions import UnsupportedCurrencyError

Currency = Literal["EUR", "GBP", "USD"]

BASE_CURRENCY: Currency = "EUR"

EXCHANGE_RATES: Mapping[str, float] = MappingProxyType(
    {
        "EUR": 1.0,
        "GBP": 0.8696,  # 1 EUR ≈ 0.87 GBP
        "USD": 1.1850,  # 1 EUR ≈ 1.19 USD
    }
)

SUPPORTED_CURRENCIES: tuple[str, ...] = tuple(EXCHANGE_RATES)

CURRENCY_SYMBOLS: Mapping[str, str] = MappingProxyType({"EUR": "€", "GBP": "£", "USD": "$"})

VAT_RATE = 0.2  # 20% UK/EU VAT


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round half-up (towards +inf on ties) to ``ndigits`` decimal places.

    Python's ``round`` uses banker's rounding; prices need the
    ``floor(x + 0.5)`` rule. NaN and inf are returned unchanged.
    """
    factor = 10**ndigits
    scaled = value * factor
    if not math.isfinite(scaled):
        return scaled
    return math.floor(scaled + 0.5) / factor


def round_cents(value: float) -> float:
    return round_half_up(value, 2)


def get_exchange_rate(currency: str) -> float:
    """Rate of ``currency`` against EUR. Raises UnsupportedCurrencyError for unknown codes."""
    try:
        return EXCHANGE_RATES[currency]
    except KeyError:
        raise UnsupportedCurrencyError(currency) from None


def convert_from_eur(amount_eur: float, currency: str) -> float:
    """Convert an EUR amount to ``currency``, rounded to the cent."""
    return round_cents(amount_eur * get_exchange_rate(currency))


def convert_to_eur(amount: float, currency: str) -> float:
    """Convert an amount in ``currency`` back to EUR, rounded to the cent."""
    return round_cents(amount / get_exchange_rate(currency))


def add_vat(net_price: float) -> float:
    """Gross price: net * (1 + VAT_RATE), rounded to the cent."""
    return round_cents(net_price * (1 + VAT_RATE))


def vat_amount(net_price: float) -> float:
    """VAT portion of a net price, rounded to the cent."""
    return round_cents(net_price * VAT_RATE)


def format_price(price: float, currency: str = BASE_CURRENCY) -> str:
    """Display string, e.g. ``€12.50``."""
    symbol = CURRENCY_SYMBOLS.get(currency)
    if symbol is None:
        raise UnsupportedCurrencyError(currency)
    return f"{symbol}{price:.2f}"
