# models.py
"""Habit entity: schedule, completions, streaks and statistics."""

import math
import random
import re
import string
import time
from collections.abc import Iterable
from dataclasses import asdict, dataclass, field
from datetime import timedelta
from typing import List, Optional, Union

import dates
from dates import DAY_NAMES, DayLike

TIME_PATTERN = re.compile(r"^([01][0-9]|2[0-3]):([0-5][0-9])$")
ALL_DAYS = frozenset(range(7))
WEEKDAYS = [1, 2, 3, 4, 5]
WEEKENDS = [0, 6]

# Hard cap on the backward walk for the current streak
MAX_STREAK_WALK_DAYS = 365

_ID_ALPHABET = string.digits + string.ascii_lowercase


class ValidationError(ValueError):
    """Raised when a habit field would be set to an invalid value."""


def generate_id() -> str:
    suffix = "".join(random.choice(_ID_ALPHABET) for _ in range(9))
    return f"habit_{int(time.time() * 1000)}_{suffix}"


def normalize_days_of_week(days) -> Optional[List[int]]:
    """
    Validate a weekday list and return it de-duplicated and sorted.
    None or an empty collection means "every day" and returns None.
    """
    if days is None:
        return None
    if isinstance(days, (str, bytes)) or not isinstance(days, Iterable):
        raise ValidationError("Invalid days list. Must be integers between 0-6.")
    days = list(days)
    if not days:
        return None
    for day in days:
        if isinstance(day, bool) or not isinstance(day, int) or not 0 <= day <= 6:
            raise ValidationError("Invalid days list. Must be integers between 0-6.")
    return sorted(set(days))


def validate_time_string(value: Optional[str]) -> Optional[str]:
    """Return a valid HH:MM string, None for a cleared time, or raise."""
    if value is None or value == "":
        return None
    if not isinstance(value, str) or not TIME_PATTERN.match(value):
        raise ValidationError(
            f"Invalid time format '{value}'. Use HH:MM (e.g. \"09:00\" or \"14:30\")."
        )
    return value


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


@dataclass
class HabitStatistics:
    total_completions: int
    current_streak: int
    longest_streak: int
    completion_rate: int
    days_since_creation: int
    scheduled_days_passed: int

    def to_dict(self) -> dict:
        return {
            "totalCompletions": self.total_completions,
            "currentStreak": self.current_streak,
            "longestStreak": self.longest_streak,
            "completionRate": self.completion_rate,
            "daysSinceCreation": self.days_since_creation,
            "scheduledDaysPassed": self.scheduled_days_passed,
        }


@dataclass
class Habit:
    name: str
    created_date: str = field(default_factory=lambda: dates.today().isoformat())
    completions: List[str] = field(default_factory=list)
    notification_time: Optional[str] = None
    days_of_week: Optional[List[int]] = None  # None means every day
    notes: str = ""
    tags: List[str] = field(default_factory=list)
    id: str = field(default_factory=generate_id)

    def __post_init__(self):
        self.created_date = dates.day_key(self.created_date)
        self.completions = sorted({dates.day_key(d) for d in self.completions or []})
        self.notification_time = validate_time_string(self.notification_time)
        self.days_of_week = normalize_days_of_week(self.days_of_week)
        self.notes = self.notes or ""
        self.tags = list(self.tags or [])

    # -------- Completions --------
    def _completion_keys(self) -> set:
        return {dates.day_key(d) for d in self.completions}

    def mark_completed(self, day: DayLike):
        # rebuilt on every insert; completions may have been reassigned directly
        self.completions = sorted(self._completion_keys() | {dates.day_key(day)})

    def mark_incomplete(self, day: DayLike):
        self.completions = sorted(self._completion_keys() - {dates.day_key(day)})

    def is_completed_on(self, day: DayLike) -> bool:
        return dates.day_key(day) in self._completion_keys()

    # -------- Schedule --------
    def has_schedule_restriction(self) -> bool:
        return bool(self.days_of_week) and set(self.days_of_week) != ALL_DAYS

    def is_active_on_day(self, day_or_weekday: Union[int, DayLike]) -> bool:
        """True if the habit is scheduled for a weekday number (0=Sun) or a day."""
        if not self.has_schedule_restriction():
            return True
        if isinstance(day_or_weekday, int) and not isinstance(day_or_weekday, bool):
            weekday = day_or_weekday
        else:
            weekday = dates.weekday_number(day_or_weekday)
        return weekday in self.days_of_week

    def set_days_of_week(self, days):
        self.days_of_week = normalize_days_of_week(days)

    def get_days_of_week(self) -> Optional[List[int]]:
        return self.days_of_week

    def days_of_week_label(self) -> str:
        if not self.has_schedule_restriction():
            return "Every day"
        if self.days_of_week == WEEKDAYS:
            return "Weekdays"
        if self.days_of_week == WEEKENDS:
            return "Weekends"
        return ", ".join(DAY_NAMES[d] for d in self.days_of_week)

    # -------- Reminders --------
    def set_notification_time(self, value: Optional[str]):
        self.notification_time = validate_time_string(value)

    def get_notification_time(self) -> Optional[str]:
        return self.notification_time

    # -------- Streaks / statistics --------
    def calculate_streak(self, today: Optional[DayLike] = None) -> int:
        """
        Count completed scheduled days walking back from today.

        Unscheduled days are skipped. A missing completion on today itself
        is tolerated; any earlier scheduled day without one ends the walk.
        """
        if not self.completions:
            return 0
        first = dates.to_day(today) if today is not None else dates.today()
        done = set(self.completions)
        current = first
        streak = 0
        for _ in range(MAX_STREAK_WALK_DAYS):
            if self.is_active_on_day(current):
                if current.isoformat() in done:
                    streak += 1
                elif current != first:
                    break
            current -= timedelta(days=1)
        return streak

    def calculate_longest_streak(self) -> int:
        longest = 0
        run = 0
        previous = None
        for key in self.completions:
            day = dates.to_day(key)
            if previous is None:
                run = 1
            elif self._only_unscheduled_between(previous, day):
                run += 1
            else:
                longest = max(longest, run)
                run = 1
            previous = day
        return max(longest, run)

    def _only_unscheduled_between(self, start, end) -> bool:
        gap_start = start + timedelta(days=1)
        gap_end = end - timedelta(days=1)
        return not any(self.is_active_on_day(d) for d in dates.iter_days(gap_start, gap_end))

    def scheduled_days_passed(self, today: Optional[DayLike] = None) -> int:
        end = dates.to_day(today) if today is not None else dates.today()
        if not self.has_schedule_restriction():
            return max(dates.days_inclusive(self.created_date, end), 0)
        return sum(1 for d in dates.iter_days(self.created_date, end) if self.is_active_on_day(d))

    def get_statistics(self, today: Optional[DayLike] = None) -> HabitStatistics:
        ref = dates.to_day(today) if today is not None else dates.today()
        total = len(self.completions)
        scheduled = self.scheduled_days_passed(ref)
        rate = _round_half_up(total / scheduled * 100) if scheduled > 0 else 0
        return HabitStatistics(
            total_completions=total,
            current_streak=self.calculate_streak(ref),
            longest_streak=self.calculate_longest_streak(),
            completion_rate=rate,
            days_since_creation=dates.days_inclusive(self.created_date, ref),
            scheduled_days_passed=scheduled,
        )

    # -------- Serialization --------
    def to_dict(self) -> dict:
        data = asdict(self)
        return {
            "id": data["id"],
            "name": data["name"],
            "createdDate": data["created_date"],
            "completions": data["completions"],
            "notificationTime": data["notification_time"],
            "daysOfWeek": data["days_of_week"],
            "notes": data["notes"],
            "tags": data["tags"],
        }

    @classmethod
    def from_dict(cls, record: dict) -> "Habit":
        """Rebuild a habit from its stored record, keeping its id."""
        return cls(
            id=record["id"],
            name=record["name"],
            created_date=record.get("createdDate") or dates.today().isoformat(),
            completions=record.get("completions") or [],
            notification_time=record.get("notificationTime"),
            days_of_week=record.get("daysOfWeek"),
            notes=record.get("notes") or "",
            tags=record.get("tags") or [],
        )
