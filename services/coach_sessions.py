"""Coach session pricing — flat hourly rate for all coaches, bookable slots."""

from __future__ import annotations

from datetime import date

HOURLY_RATE = 10_000  # tokens per hour

SESSION_DURATIONS: tuple[tuple[int, str], ...] = (
    (1, "1 hour"),
    (2, "2 hours"),
    (3, "3 hours"),
)

VALID_DURATIONS = frozenset(hours for hours, _ in SESSION_DURATIONS)

DAY_START_HOUR = 8
DAY_END_HOUR = 20


def is_valid_duration(hours: int) -> bool:
    return hours in VALID_DURATIONS


def get_session_cost(duration_hours: int) -> int:
    return duration_hours * HOURLY_RATE


def generate_available_slots(day: date, duration_hours: int) -> list[str]:
    """Start times from 08:00 in 1-hour steps; the session must finish by 20:00.

    Every coach shares the same working day, so ``day`` does not change the result.
    """
    last_start = DAY_END_HOUR - duration_hours
    return [f"{hour:02d}:00" for hour in range(DAY_START_HOUR, last_start + 1)]


def is_date_in_past(day: date, today: date | None = None) -> bool:
    """True if ``day`` is before today."""
    return day < (today or date.today())


def is_today(day: date, today: date | None = None) -> bool:
    return day == (today or date.today())
