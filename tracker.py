# tracker.py
"""Owns the habit collection and keeps it in sync with the JSON store."""

import logging
from datetime import date
from typing import Callable, List, Optional

import analytics
import dates
from models import Habit, ValidationError, normalize_days_of_week, validate_time_string
from repo_json import JSONRepo

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 100

VIEW_TODAY = "today"
VIEW_ALL = "all"


class HabitTracker:
    def __init__(
        self,
        repo: JSONRepo,
        clock: Callable[[], date] = dates.today,
        max_name_length: int = MAX_NAME_LENGTH,
    ):
        self.repo = repo
        self.clock = clock
        self.max_name_length = max_name_length
        self._habits: List[Habit] = []

    # -------- Collection --------
    @property
    def habits(self) -> List[Habit]:
        return self._habits

    def load(self) -> List[Habit]:
        self._habits = self.repo.load_habits()
        logger.info("Loaded %d habits", len(self._habits))
        return self._habits

    def save(self) -> bool:
        return self.repo.save_habits(self._habits)

    def get(self, habit_id: str) -> Optional[Habit]:
        for habit in self._habits:
            if habit.id == habit_id:
                return habit
        return None

    def visible_habits(self, view: str = VIEW_ALL) -> List[Habit]:
        if view == VIEW_TODAY:
            return self.habits_for_today()
        return list(self._habits)

    def habits_for_today(self) -> List[Habit]:
        today = self.clock()
        return [h for h in self._habits if h.is_active_on_day(today)]

    # -------- Create / edit / delete --------
    def _clean_name(self, name: str) -> str:
        name = (name or "").strip()
        if not name:
            raise ValidationError("Please enter a habit name")
        if len(name) > self.max_name_length:
            raise ValidationError(
                f"Habit name is too long (max {self.max_name_length} characters)"
            )
        return name

    def add_habit(
        self,
        name: str,
        notification_time: Optional[str] = None,
        days_of_week: Optional[List[int]] = None,
        notes: str = "",
        tags: Optional[List[str]] = None,
    ) -> Habit:
        habit = Habit(
            name=self._clean_name(name),
            created_date=self.clock().isoformat(),
            notification_time=notification_time,
            days_of_week=days_of_week,
            notes=(notes or "").strip(),
            tags=tags or [],
        )
        self._habits.append(habit)
        self.save()
        logger.info("Created habit %s (%s)", habit.name, habit.id)
        return habit

    def update_habit(
        self,
        habit_id: str,
        name: str,
        notification_time: Optional[str] = None,
        days_of_week: Optional[List[int]] = None,
        notes: str = "",
        tags: Optional[List[str]] = None,
    ) -> Optional[Habit]:
        """Apply an edit form; nothing changes unless every field is valid."""
        habit = self.get(habit_id)
        if habit is None:
            logger.warning("Habit with id %s not found", habit_id)
            return None

        clean_name = self._clean_name(name)
        validate_time_string(notification_time)
        normalize_days_of_week(days_of_week)

        habit.name = clean_name
        habit.set_notification_time(notification_time)
        habit.set_days_of_week(days_of_week)
        habit.notes = (notes or "").strip()
        habit.tags = list(tags or [])
        self.save()
        logger.info("Updated habit %s (%s)", habit.name, habit.id)
        return habit

    def delete_habit(self, habit_id: str) -> bool:
        habit = self.get(habit_id)
        if habit is None:
            logger.warning("Habit with id %s not found", habit_id)
            return False
        self._habits.remove(habit)
        logger.info("Deleted habit %s (%s)", habit.name, habit.id)
        return self.save()

    def set_completed(self, habit_id: str, done: bool, day=None) -> bool:
        habit = self.get(habit_id)
        if habit is None:
            logger.warning("Habit with id %s not found", habit_id)
            return False
        day = day if day is not None else self.clock()
        if done:
            habit.mark_completed(day)
        else:
            habit.mark_incomplete(day)
        return self.save()

    # -------- Settings actions --------
    def export_to(self, path: str) -> bool:
        return self.repo.export_to_file(path)

    def import_from(self, path: str, merge: bool = False) -> bool:
        if not self.repo.import_from_file(path, merge=merge):
            return False
        self.load()
        return True

    def clear(self) -> bool:
        if not self.repo.clear_all_data():
            return False
        self._habits = []
        return True

    def stats(self) -> dict:
        stats = analytics.app_stats(self._habits, self.clock())
        stats["storageStats"] = self.repo.get_storage_stats()
        return stats
