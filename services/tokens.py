"""Token costs for AI-generated courses — full-course pricing, baseline, titles.

Every line item is expressed in base cost points, scaled by COURSE_MARKUP
and rounded half-up to an integer on its own before summing.
Zero dependencies on aiohttp.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

from services.exchange import round_half_up

# ---------------------------------------------------------------------------
# Token costs
# ---------------------------------------------------------------------------

PREVIEW_COST = 50
REGEN_DAY = 30
REGEN_WEEK = 120

COURSE_MARKUP = 1.3

COST_COURSE_BASE = 400
COST_PER_WEEK = 120
COST_PER_SESSION = 8
COST_INJURY_SAFE = 120
COST_SPECIAL_EQUIPMENT = 80
COST_NUTRITION_TIPS = 100
COST_PDF = 60
COST_PER_IMAGE = 10
COST_PER_WORKOUT_TYPE = 15
COST_PER_TARGET_MUSCLE = 8

PdfStyle = Literal["text", "illustrated"]


@dataclass(frozen=True, slots=True)
class GeneratorOptions:
    """One AI-course configuration. ``gender`` never affects the price."""

    weeks: int = 4
    sessions_per_week: int = 4
    injury_safe: bool = False
    special_equipment: bool = False
    nutrition_tips: bool = False
    pdf: str = "text"
    images: int = 0
    gender: str = "male"
    workout_types: Sequence[str] = ()
    target_muscles: Sequence[str] = ()


def _marked_up(points: float) -> int:
    return int(round_half_up(points * COURSE_MARKUP))


def calc_full_course_tokens(opts: GeneratorOptions) -> int:
    """Total token cost of one generated course.

    A PDF is always included; unknown styles (legacy "none") are priced as "text".
    """
    total = _marked_up(
        COST_COURSE_BASE + opts.weeks * COST_PER_WEEK + opts.sessions_per_week * opts.weeks * COST_PER_SESSION
    )
    if opts.injury_safe:
        total += _marked_up(COST_INJURY_SAFE)
    if opts.special_equipment:
        total += _marked_up(COST_SPECIAL_EQUIPMENT)
    if opts.nutrition_tips:
        total += _marked_up(COST_NUTRITION_TIPS)

    if opts.pdf == "illustrated":
        total += _marked_up(COST_PDF + opts.images * COST_PER_IMAGE)
    else:
        total += _marked_up(COST_PDF)

    if opts.workout_types:
        total += _marked_up(len(opts.workout_types) * COST_PER_WORKOUT_TYPE)
    if opts.target_muscles:
        total += _marked_up(len(opts.target_muscles) * COST_PER_TARGET_MUSCLE)

    return max(0, total)


# 4 weeks / 4 sessions + text PDF, no add-ons
BASELINE_TOKENS = int(round_half_up(1068 * COURSE_MARKUP))


def tokens_to_approx_weeks(tokens: int) -> int:
    """Rough number of baseline weeks ``tokens`` can buy. Display only, never billed."""
    if tokens <= 0:
        return 0
    return math.floor(tokens / BASELINE_TOKENS * 4)


def currency_for_region(region: str) -> tuple[str, str]:
    """(symbol, currency code) for a storefront region: EU, UK or US."""
    if region == "UK":
        return "£", "GBP"
    if region == "EU":
        return "€", "EUR"
    return "$", "USD"


# ---------------------------------------------------------------------------
# Course titles
# ---------------------------------------------------------------------------


def generate_course_title(opts: GeneratorOptions) -> str:
    """Descriptive course name, e.g. ``4-Week Fitness Program (3 sessions/week) - HIIT for Lats (Men)``."""
    title = f"{opts.weeks}-Week Fitness Program"
    if opts.sessions_per_week > 0:
        title += f" ({opts.sessions_per_week} sessions/week)"

    if opts.workout_types:
        title += f" - {opts.workout_types[0]}"

    muscles = list(opts.target_muscles)
    if len(muscles) == 1:
        title += f" for {muscles[0]}"
    elif 1 < len(muscles) <= 3:
        title += f" for {', '.join(muscles[:-1])} and {muscles[-1]}"
    elif len(muscles) > 3:
        title += f" for {', '.join(muscles[:2])} and {len(muscles) - 2} more"

    features = []
    if opts.injury_safe:
        features.append("Injury-Safe")
    if opts.special_equipment:
        features.append("Special Equipment")
    if opts.nutrition_tips:
        features.append("Nutrition Tips")
    if features:
        title += f" - {', '.join(features)}"

    title += " (Men)" if opts.gender == "male" else " (Women)"
    return title


def generate_short_course_title(opts: GeneratorOptions) -> str:
    """Compact label, e.g. ``4W HIIT Lats``."""
    title = f"{opts.weeks}W"
    if opts.workout_types:
        title += f" {opts.workout_types[0].split(' ')[0]}"
    if opts.target_muscles:
        muscle = opts.target_muscles[0].split("_")[0]
        title += f" {muscle[:1].upper()}{muscle[1:]}"
    return title
