"""Coach-request pricing: additive lookup tables over four categorical inputs.

Lenient by contract: a value missing from its table adds 0 instead of
raising, and is reported in ``unmatched``. Range checks (days per week in
[MIN_DAYS_PER_WEEK, MAX_DAYS_PER_WEEK]) belong to the API boundary.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

BASE_COST = 10_000

MIN_DAYS_PER_WEEK = 2
MAX_DAYS_PER_WEEK = 6

LEVEL_ADD: Mapping[str, int] = MappingProxyType(
    {
        "beginner": 0,
        "intermediate": 5_000,
        "advanced": 12_000,
    }
)

TRAINING_TYPE_ADD: Mapping[str, int] = MappingProxyType(
    {
        "home": 0,
        "gym": 0,
        "mixed": 4_000,
    }
)

EQUIPMENT_ADD: Mapping[str, int] = MappingProxyType(
    {
        "none": 0,
        "basic": 3_000,
        "full_gym": 6_000,
    }
)

DAYS_ADD: Mapping[int, int] = MappingProxyType(
    {
        2: 0,
        3: 0,
        4: 4_000,
        5: 8_000,
        6: 12_000,
    }
)

_FULL_GYM_SYNONYMS = frozenset({"full gym", "fullgym", "full_gym"})
_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True, slots=True)
class CoachRequestInput:
    level: str
    training_type: str
    equipment: str
    days_per_week: int


@dataclass(frozen=True, slots=True)
class CoachRequestCostBreakdown:
    """Itemized cost. ``unmatched`` lists input fields that fell back to 0."""

    base: int
    level_add: int
    training_type_add: int
    equipment_add: int
    days_add: int
    total: int
    unmatched: tuple[str, ...] = ()


def normalize_choice(value: str) -> str:
    return value.lower().strip()


def normalize_equipment(value: str) -> str:
    """Canonical equipment token: ``Full Gym`` / ``fullgym`` -> ``full_gym``."""
    equipment = normalize_choice(value)
    if equipment in _FULL_GYM_SYNONYMS:
        return "full_gym"
    return _WHITESPACE_RE.sub("_", equipment)


def calc_coach_request_tokens(data: CoachRequestInput) -> CoachRequestCostBreakdown:
    """Price a coach-built plan request. Never raises for well-typed input."""
    lookups = (
        ("level", LEVEL_ADD, normalize_choice(data.level)),
        ("training_type", TRAINING_TYPE_ADD, normalize_choice(data.training_type)),
        ("equipment", EQUIPMENT_ADD, normalize_equipment(data.equipment)),
        ("days_per_week", DAYS_ADD, data.days_per_week),
    )

    adds: list[int] = []
    unmatched: list[str] = []
    for field, table, key in lookups:
        if key in table:
            adds.append(table[key])
        else:
            adds.append(0)
            unmatched.append(field)

    level_add, training_type_add, equipment_add, days_add = adds
    return CoachRequestCostBreakdown(
        base=BASE_COST,
        level_add=level_add,
        training_type_add=training_type_add,
        equipment_add=equipment_add,
        days_add=days_add,
        total=BASE_COST + sum(adds),
        unmatched=tuple(unmatched),
    )
