from datetime import datetime

from models import Habit
from reminders import (
    ReminderScheduler,
    check_all_habits,
    next_notification_time,
    reminder_stats,
    sample_habit,
    should_notify,
)

# Wednesday 2024-03-13, 09:00
NOW = datetime(2024, 3, 13, 9, 0, 30)


class FakeWidget:
    def __init__(self):
        self.pending = {}
        self.cancelled = []
        self._next = 0

    def after(self, ms, callback):
        self._next += 1
        after_id = f"after#{self._next}"
        self.pending[after_id] = (ms, callback)
        return after_id

    def after_cancel(self, after_id):
        self.cancelled.append(after_id)
        self.pending.pop(after_id, None)

    def fire(self):
        after_id, (_ms, callback) = self.pending.popitem()
        callback()


def test_should_notify_on_matching_minute():
    habit = Habit(name="Read", notification_time="09:00")
    assert should_notify(habit, NOW)
    assert not should_notify(habit, NOW.replace(minute=1))


def test_no_time_means_no_reminder():
    assert not should_notify(Habit(name="Read"), NOW)


def test_completed_or_unscheduled_habits_are_quiet():
    done = Habit(name="Read", notification_time="09:00", completions=["2024-03-13"])
    off_day = Habit(name="Gym", notification_time="09:00", days_of_week=[1, 5])
    assert not should_notify(done, NOW)
    assert not should_notify(off_day, NOW)


def test_next_notification_time_later_today_or_tomorrow():
    habit = Habit(name="Read", notification_time="18:15")
    assert next_notification_time(habit, NOW) == datetime(2024, 3, 13, 18, 15)
    habit.set_notification_time("08:00")
    assert next_notification_time(habit, NOW) == datetime(2024, 3, 14, 8, 0)
    habit.set_notification_time(None)
    assert next_notification_time(habit, NOW) is None


def test_next_notification_time_skips_to_scheduled_day():
    habit = Habit(name="Gym", notification_time="07:00", days_of_week=[1])  # Mondays
    assert next_notification_time(habit, NOW) == datetime(2024, 3, 18, 7, 0)


def test_check_all_habits_notifies_due_habits():
    habits = [
        Habit(name="Read", notification_time="09:00"),
        Habit(name="Run", notification_time="10:00"),
        Habit(name="Walk", notification_time="09:00"),
    ]
    fired = []
    assert check_all_habits(habits, NOW, fired.append) == 2
    assert [h.name for h in fired] == ["Read", "Walk"]


def test_reminder_stats():
    habits = [Habit(name="Read", notification_time="09:00"), Habit(name="Run")]
    assert reminder_stats(habits, True) == {"total": 2, "withNotifications": 1, "enabled": True}


def test_scheduler_rearms_and_stops():
    widget = FakeWidget()
    habits = [Habit(name="Read", notification_time="09:00")]
    fired = []
    scheduler = ReminderScheduler(
        widget, lambda: habits, fired.append, interval_ms=1000, clock=lambda: NOW
    )
    scheduler.start()
    assert scheduler.running
    assert [ms for ms, _ in widget.pending.values()] == [1000]

    widget.fire()
    assert [h.name for h in fired] == ["Read"]
    assert len(widget.pending) == 1

    scheduler.stop()
    assert not scheduler.running
    assert widget.pending == {}


def test_scheduler_disabled_never_arms():
    widget = FakeWidget()
    scheduler = ReminderScheduler(widget, list, lambda h: None, enabled=False)
    scheduler.start()
    assert not scheduler.running
    assert widget.pending == {}


def test_scheduler_survives_failed_check():
    widget = FakeWidget()

    def broken():
        raise RuntimeError("boom")

    scheduler = ReminderScheduler(widget, broken, lambda h: None, clock=lambda: NOW)
    scheduler.start()
    widget.fire()
    assert scheduler.running


def test_scheduler_can_be_toggled_at_runtime():
    widget = FakeWidget()
    scheduler = ReminderScheduler(widget, list, lambda h: None, enabled=False, clock=lambda: NOW)

    scheduler.set_enabled(True)
    assert scheduler.enabled and scheduler.running
    assert len(widget.pending) == 1

    scheduler.set_enabled(True)
    assert len(widget.pending) == 1

    scheduler.set_enabled(False)
    assert not scheduler.enabled and not scheduler.running
    assert widget.pending == {}
    assert len(widget.cancelled) == 1

    scheduler.start()
    assert not scheduler.running


def test_reminder_stats_follow_the_toggle():
    widget = FakeWidget()
    habits = [Habit(name="Read", notification_time="09:00")]
    scheduler = ReminderScheduler(widget, lambda: habits, lambda h: None)
    scheduler.set_enabled(False)
    assert reminder_stats(habits, scheduler.enabled)["enabled"] is False
    scheduler.set_enabled(True)
    assert reminder_stats(habits, scheduler.enabled)["enabled"] is True


def test_sample_habit_is_due_right_now():
    habit = sample_habit(NOW)
    assert habit.notification_time == "09:00"
    assert should_notify(habit, NOW)
