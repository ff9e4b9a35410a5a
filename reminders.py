# reminders.py
"""Decide when habit reminders are due and poll for them on the Tk loop."""

import logging
from datetime import datetime, timedelta
from typing import Callable, Iterable, List, Optional

from models import Habit

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_MS = 60000


def _parse_time(value: str):
    hour, minute = (int(part) for part in value.split(":"))
    return hour, minute


def should_notify(habit: Habit, now: datetime) -> bool:
    """Due when scheduled today, not yet completed, and the minute matches."""
    if not habit.notification_time:
        return False
    if not habit.is_active_on_day(now):
        logger.debug("%s: not active today", habit.name)
        return False
    if habit.is_completed_on(now):
        logger.debug("%s: already completed today", habit.name)
        return False
    hour, minute = _parse_time(habit.notification_time)
    return now.hour == hour and now.minute == minute


def next_notification_time(habit: Habit, now: datetime) -> Optional[datetime]:
    if not habit.notification_time:
        return None
    hour, minute = _parse_time(habit.notification_time)
    upcoming = now.replace(hour=hour, minute=minute, second=0, microsecond=0)
    if upcoming <= now:
        upcoming += timedelta(days=1)
    if habit.has_schedule_restriction():
        for _ in range(7):
            if habit.is_active_on_day(upcoming):
                break
            upcoming += timedelta(days=1)
    return upcoming


def check_all_habits(
    habits: Iterable[Habit], now: datetime, notify: Callable[[Habit], None]
) -> int:
    sent = 0
    for habit in habits:
        if should_notify(habit, now):
            logger.info("Reminder due for %s at %s", habit.name, habit.notification_time)
            notify(habit)
            sent += 1
    return sent


def reminder_stats(habits: List[Habit], enabled: bool) -> dict:
    return {
        "total": len(habits),
        "withNotifications": sum(1 for h in habits if h.notification_time),
        "enabled": enabled,
    }


def sample_habit(now: datetime) -> Habit:
    """Throwaway habit used to show what a reminder looks like."""
    return Habit(
        name="Test Reminder",
        id="habit_test_reminder",
        created_date=now.date(),
        notification_time=now.strftime("%H:%M"),
    )


class ReminderScheduler:
    """
    Periodic reminder check driven by a Tk widget's after() timer.

    Runs on the UI thread, so habit state is only ever read between user
    actions. habits_provider returns the current collection on every tick.
    """

    def __init__(
        self,
        widget,
        habits_provider: Callable[[], List[Habit]],
        notify: Callable[[Habit], None],
        interval_ms: int = DEFAULT_INTERVAL_MS,
        enabled: bool = True,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.widget = widget
        self.habits_provider = habits_provider
        self.notify = notify
        self.interval_ms = interval_ms
        self.enabled = enabled
        self.clock = clock
        self._after_id = None

    @property
    def running(self) -> bool:
        return self._after_id is not None

    def start(self):
        if not self.enabled:
            logger.info("Reminders disabled; scheduler not started")
            return
        if self.running:
            return
        self._schedule()

    def stop(self):
        if self._after_id is not None:
            self.widget.after_cancel(self._after_id)
            self._after_id = None

    def set_enabled(self, enabled: bool):
        """Turn reminders on or off while the app is running."""
        self.enabled = enabled
        if enabled:
            self.start()
        else:
            self.stop()
        logger.info("Reminders %s", "enabled" if enabled else "disabled")

    def check_now(self) -> int:
        habits = self.habits_provider()
        logger.debug("Checking %d habits for reminders", len(habits))
        return check_all_habits(habits, self.clock(), self.notify)

    def _schedule(self):
        self._after_id = self.widget.after(self.interval_ms, self._tick)

    def _tick(self):
        try:
            self.check_now()
        except Exception:
            logger.exception("Reminder check failed")
        self._schedule()
