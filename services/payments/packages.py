"""Token package definitions.

Packs are priced from their token count at the base rate (100 tokens = €1.00)
and converted to the user's currency. ENTERPRISE is the custom top-up:
it has no catalogue entry, its tokens come from calculate_tokens_from_amount.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal

from services.exchange import add_vat, convert_from_eur, vat_amount
from services.payments.rates import TOKENS_PER_EUR, TopupQuote

UiPackId = Literal["starter", "momentum", "elite"]
PackApiId = Literal["STARTER", "POPULAR", "PRO"]

CUSTOM_PACKAGE_ID = "ENTERPRISE"


@dataclass(frozen=True, slots=True)
class TokenPack:
    """One-time token pack."""

    ui_id: UiPackId
    api_id: PackApiId
    title: str
    tokens: int
    microcopy: str
    highlight: bool = False


# ---------------------------------------------------------------------------
# Pack catalogue (3 tiers, ordered by size)
# ---------------------------------------------------------------------------

TOKEN_PACKS: tuple[TokenPack, ...] = (
    TokenPack(
        ui_id="starter",
        api_id="STARTER",
        title="Starter Spark",
        tokens=10_000,
        microcopy="For a quick start",
    ),
    TokenPack(
        ui_id="momentum",
        api_id="POPULAR",
        title="Momentum Pack",
        tokens=20_000,
        microcopy="Best value for consistency",
        highlight=True,
    ),
    TokenPack(
        ui_id="elite",
        api_id="PRO",
        title="Elite Performance",
        tokens=30_000,
        microcopy="Built for long-term progress",
    ),
)

# Quick amount chips (currency-adaptive, net)
QUICK_AMOUNTS: Mapping[str, tuple[int, ...]] = MappingProxyType(
    {
        "EUR": (50, 100, 200),
        "GBP": (45, 90, 180),
        "USD": (70, 140, 280),
    }
)


def get_pack_by_ui_id(ui_id: str) -> TokenPack | None:
    return next((p for p in TOKEN_PACKS if p.ui_id == ui_id), None)


def get_pack_by_api_id(api_id: str) -> TokenPack | None:
    """Catalogue lookup by API id. ENTERPRISE (custom) has no pack."""
    if api_id == CUSTOM_PACKAGE_ID:
        return None
    return next((p for p in TOKEN_PACKS if p.api_id == api_id), None)


def pack_price(pack: TokenPack, currency: str) -> float:
    """Net price of a pack in ``currency``."""
    return convert_from_eur(pack.tokens / TOKENS_PER_EUR, currency)


def quote_pack(pack: TokenPack, currency: str) -> TopupQuote:
    net = pack_price(pack, currency)
    return TopupQuote(
        tokens=pack.tokens,
        currency=currency,
        net=net,
        vat=vat_amount(net),
        gross=add_vat(net),
    )
