"""Tests for api/models.py and api/__init__.py — payload parsing and validation."""

from __future__ import annotations

from datetime import date

import pytest

from api import parse_payload
from api.models import (
    BookingQuotePayload,
    CoachRequestQuotePayload,
    GeneratorQuotePayload,
    TopupQuotePayload,
)
from app.exceptions import InvalidPayloadError
from services.tokens import GeneratorOptions


class TestTopupQuotePayload:
    def test_camel_case_alias(self) -> None:
        payload = parse_payload(TopupQuotePayload, {"packageId": "POPULAR", "currency": "GBP"})
        assert payload.package_id == "POPULAR"
        assert payload.currency == "GBP"
        assert payload.amount is None

    def test_currency_optional(self) -> None:
        assert parse_payload(TopupQuotePayload, {"packageId": "PRO"}).currency is None

    def test_unknown_package_rejected(self) -> None:
        with pytest.raises(InvalidPayloadError) as exc_info:
            parse_payload(TopupQuotePayload, {"packageId": "MEGA"})
        assert exc_info.value.details[0]["loc"] == ("packageId",)

    def test_unknown_currency_rejected(self) -> None:
        with pytest.raises(InvalidPayloadError):
            parse_payload(TopupQuotePayload, {"packageId": "PRO", "currency": "JPY"})

    def test_amount_string_kept(self) -> None:
        payload = parse_payload(TopupQuotePayload, {"packageId": "ENTERPRISE", "amount": "12.50"})
        assert payload.amount == "12.50"


class TestGeneratorQuotePayload:
    def test_defaults_match_options_defaults(self) -> None:
        payload = parse_payload(GeneratorQuotePayload, {})
        assert payload.to_options() == GeneratorOptions()

    def test_camel_case_fields(self) -> None:
        payload = parse_payload(
            GeneratorQuotePayload,
            {
                "weeks": 6,
                "sessionsPerWeek": 3,
                "injurySafe": True,
                "pdf": "illustrated",
                "images": 4,
                "workoutTypes": ["HIIT"],
                "targetMuscles": ["lats", "traps"],
            },
        )
        opts = payload.to_options()
        assert opts.weeks == 6
        assert opts.sessions_per_week == 3
        assert opts.injury_safe is True
        assert opts.images == 4
        assert opts.workout_types == ("HIIT",)
        assert opts.target_muscles == ("lats", "traps")

    @pytest.mark.parametrize("body", [{"weeks": 0}, {"sessionsPerWeek": 0}, {"images": -1}])
    def test_range_checks(self, body: dict) -> None:
        with pytest.raises(InvalidPayloadError):
            parse_payload(GeneratorQuotePayload, body)

    def test_unknown_gender_rejected(self) -> None:
        with pytest.raises(InvalidPayloadError):
            parse_payload(GeneratorQuotePayload, {"gender": "robot"})

    def test_large_image_count_accepted(self) -> None:
        assert parse_payload(GeneratorQuotePayload, {"images": 500}).images == 500

    @pytest.mark.parametrize(
        "body",
        [
            {"weeks": 53},
            {"weeks": 10**400},
            {"sessionsPerWeek": 8},
            {"images": 1001},
            {"balance": 10**400},
        ],
    )
    def test_upper_bounds(self, body: dict) -> None:
        with pytest.raises(InvalidPayloadError):
            parse_payload(GeneratorQuotePayload, body)

    def test_upper_bounds_inclusive(self) -> None:
        payload = parse_payload(GeneratorQuotePayload, {"weeks": 52, "sessionsPerWeek": 7, "images": 1000})
        assert (payload.weeks, payload.sessions_per_week, payload.images) == (52, 7, 1000)


class TestCoachRequestQuotePayload:
    def test_to_input(self) -> None:
        payload = parse_payload(
            CoachRequestQuotePayload,
            {"level": "Advanced", "trainingType": "gym", "equipment": "Full Gym", "daysPerWeek": 5},
        )
        data = payload.to_input()
        assert data.level == "Advanced"
        assert data.training_type == "gym"
        assert data.equipment == "Full Gym"
        assert data.days_per_week == 5

    def test_missing_field_rejected(self) -> None:
        with pytest.raises(InvalidPayloadError):
            parse_payload(CoachRequestQuotePayload, {"level": "beginner", "trainingType": "home", "daysPerWeek": 3})

    def test_empty_string_rejected(self) -> None:
        with pytest.raises(InvalidPayloadError):
            parse_payload(
                CoachRequestQuotePayload,
                {"level": "", "trainingType": "home", "equipment": "none", "daysPerWeek": 3},
            )


class TestBookingQuotePayload:
    def test_iso_date(self) -> None:
        payload = parse_payload(BookingQuotePayload, {"durationHours": 2, "date": "2030-05-17"})
        assert payload.date == date(2030, 5, 17)
        assert payload.duration_hours == 2

    def test_bad_date_rejected(self) -> None:
        with pytest.raises(InvalidPayloadError):
            parse_payload(BookingQuotePayload, {"durationHours": 2, "date": "tomorrow"})
