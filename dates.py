# dates.py
"""Local calendar-day helpers shared by the model, storage and reminders."""

import re
from datetime import date, datetime, timedelta
from typing import Iterator, Union

DayLike = Union[date, datetime, str]

# Sunday-first, matching the weekday numbers stored on habits (0=Sun .. 6=Sat)
DAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


def today() -> date:
    return date.today()


def to_day(value: DayLike) -> date:
    """
    Normalize a day-like value to a calendar day.

    Strings are read from their year/month/day components ("2024-03-09" or
    "2024-03-09T23:30:00" or "2024-03-09 23:30:00"), so no timezone shift
    can move the day.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        raw = re.split(r"[T ]", value.strip(), maxsplit=1)[0]
        try:
            year, month, day = (int(part) for part in raw.split("-"))
            return date(year, month, day)
        except ValueError:
            raise ValueError(f"Invalid calendar day '{value}'. Use YYYY-MM-DD.") from None
    raise TypeError(f"Cannot read a calendar day from {type(value).__name__}")


def day_key(value: DayLike) -> str:
    """Canonical YYYY-MM-DD key."""
    return to_day(value).isoformat()


def weekday_number(value: DayLike) -> int:
    # date.weekday() is Monday=0; shift so Sunday=0
    return (to_day(value).weekday() + 1) % 7


def add_days(value: DayLike, n: int) -> date:
    return to_day(value) + timedelta(days=n)


def days_inclusive(start: DayLike, end: DayLike) -> int:
    """Inclusive day count from start to end (0 or less when start is after end)."""
    return (to_day(end) - to_day(start)).days + 1


def iter_days(start: DayLike, end: DayLike) -> Iterator[date]:
    """Yield every day from start through end inclusive."""
    current = to_day(start)
    last = to_day(end)
    while current <= last:
        yield current
        current += timedelta(days=1)
