"""Pydantic v2 models for quote request payloads (camelCase on the wire)."""

import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from services.coach_requests import CoachRequestInput
from services.tokens import GeneratorOptions


# Request bounds for the generator quote; the calculator itself takes any size.
MAX_WEEKS = 52
MAX_SESSIONS_PER_WEEK = 7
MAX_IMAGES = 1000
MAX_BALANCE = 10**12


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class TopupQuotePayload(_CamelModel):
    """POST /api/tokens/quote. ``amount`` is required for ENTERPRISE (custom) only."""

    package_id: Literal["STARTER", "POPULAR", "PRO", "ENTERPRISE"]
    currency: Literal["EUR", "GBP", "USD"] | None = None
    amount: str | float | None = None


class GeneratorQuotePayload(_CamelModel):
    """POST /api/generator/quote."""

    weeks: int = Field(default=4, ge=1, le=MAX_WEEKS)
    sessions_per_week: int = Field(default=4, ge=1, le=MAX_SESSIONS_PER_WEEK)
    injury_safe: bool = False
    special_equipment: bool = False
    nutrition_tips: bool = False
    pdf: str = "text"
    images: int = Field(default=0, ge=0, le=MAX_IMAGES)
    gender: Literal["male", "female"] = "male"
    workout_types: list[str] = Field(default_factory=list)
    target_muscles: list[str] = Field(default_factory=list)
    balance: int | None = Field(default=None, le=MAX_BALANCE)

    def to_options(self) -> GeneratorOptions:
        return GeneratorOptions(
            weeks=self.weeks,
            sessions_per_week=self.sessions_per_week,
            injury_safe=self.injury_safe,
            special_equipment=self.special_equipment,
            nutrition_tips=self.nutrition_tips,
            pdf=self.pdf,
            images=self.images,
            gender=self.gender,
            workout_types=tuple(self.workout_types),
            target_muscles=tuple(self.target_muscles),
        )


class CoachRequestQuotePayload(_CamelModel):
    """POST /api/coach-requests/quote."""

    level: str = Field(min_length=1)
    training_type: str = Field(min_length=1)
    equipment: str = Field(min_length=1)
    days_per_week: int

    def to_input(self) -> CoachRequestInput:
        return CoachRequestInput(
            level=self.level,
            training_type=self.training_type,
            equipment=self.equipment,
            days_per_week=self.days_per_week,
        )


class BookingQuotePayload(_CamelModel):
    """POST /api/bookings/quote."""

    duration_hours: int
    date: datetime.date
