"""Token purchases — pack catalogue, token rates, custom top-ups."""

from services.payments.packages import QUICK_AMOUNTS, TOKEN_PACKS, TokenPack, quote_pack
from services.payments.rates import (
    TOKEN_RATES,
    TopupQuote,
    calculate_tokens_from_amount,
    quote_custom_amount,
    was_rounded,
)

__all__ = [
    "QUICK_AMOUNTS",
    "TOKEN_PACKS",
    "TOKEN_RATES",
    "TokenPack",
    "TopupQuote",
    "calculate_tokens_from_amount",
    "quote_custom_amount",
    "quote_pack",
    "was_rounded",
]
