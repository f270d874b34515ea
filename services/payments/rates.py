"""Token rates and the custom top-up calculator.

Anchor: 100 tokens = €1.00. Rates for other currencies are derived from
services.exchange.EXCHANGE_RATES so the same real-world value buys the same
number of tokens whatever currency the user pays in (up to rounding).
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from app.exceptions import UnsupportedCurrencyError
from services.exchange import EXCHANGE_RATES, add_vat, round_cents, vat_amount

TOKENS_PER_EUR = 100

TOKEN_RATES: Mapping[str, float] = MappingProxyType(
    {
        "EUR": TOKENS_PER_EUR,
        "GBP": TOKENS_PER_EUR / EXCHANGE_RATES["GBP"],  # ≈ 115.0 tokens per £1
        "USD": TOKENS_PER_EUR / EXCHANGE_RATES["USD"],  # ≈ 84.39 tokens per $1
    }
)

# Absorbs IEEE 754 noise before flooring (173.92 * 115.00 = 19999.9999996, not 20000)
FP_EPSILON = 0.01

# Custom top-ups are credited in steps of 10 tokens
TOKEN_STEP = 10


def get_token_rate(currency: str) -> float:
    """Tokens per one unit of ``currency``."""
    try:
        return TOKEN_RATES[currency]
    except KeyError:
        raise UnsupportedCurrencyError(currency) from None


def calculate_tokens_from_amount(amount: float, currency: str) -> int:
    """Tokens for a net (pre-VAT) amount, rounded down to the nearest 10.

    Returns 0 for amount <= 0 and for amounts whose token count overflows.
    """
    if amount <= 0:
        return 0
    tokens = amount * get_token_rate(currency)
    if not math.isfinite(tokens):
        return 0
    return math.floor((tokens + FP_EPSILON) / TOKEN_STEP) * TOKEN_STEP


def was_rounded(amount: float, currency: str) -> bool:
    """True if flooring to the token step dropped more than one token.

    Sub-1-token differences are floating-point noise, not rounding.
    """
    if amount <= 0:
        return False
    exact_tokens = amount * get_token_rate(currency)
    if not math.isfinite(exact_tokens):
        return False
    return abs(exact_tokens - calculate_tokens_from_amount(amount, currency)) > 1


@dataclass(frozen=True, slots=True)
class TopupQuote:
    """Priced top-up: what the user pays and what gets credited."""

    tokens: int
    currency: str
    net: float
    vat: float
    gross: float
    rounded: bool = False


def quote_custom_amount(amount: float, currency: str) -> TopupQuote:
    """Quote an irregular top-up of ``amount`` (net, in ``currency``)."""
    net = round_cents(amount)
    return TopupQuote(
        tokens=calculate_tokens_from_amount(amount, currency),
        currency=currency,
        net=net,
        vat=vat_amount(net),
        gross=add_vat(net),
        rounded=was_rounded(amount, currency),
    )
