# repo_json.py
import json
import logging
import os
from datetime import date, datetime
from typing import List, Optional

from models import Habit

logger = logging.getLogger(__name__)

CURRENT_VERSION = "1.0"


def default_export_filename(day: date) -> str:
    return f"habit-tracker-{day.isoformat()}.json"


class JSONRepo:
    """Habit collection stored as one JSON document: {"version", "habits"}."""

    def __init__(self, path: str):
        self.path = path
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

    def _read(self):
        with open(self.path, "r", encoding="utf-8") as f:
            return json.load(f)

    def _write(self, obj):
        tmp = self.path + ".tmp"
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(obj, f, indent=2)
        os.replace(tmp, self.path)

    # -------- Habits --------
    def load_habits(self) -> List[Habit]:
        try:
            data = self._read()
        except FileNotFoundError:
            return []
        except (OSError, ValueError) as exc:
            logger.error("Error loading habits from %s: %s", self.path, exc)
            return []

        records = data.get("habits") if isinstance(data, dict) else None
        if not isinstance(records, list):
            logger.warning("Invalid habits data in %s, treating as empty", self.path)
            return []

        habits = []
        for record in records:
            try:
                habits.append(Habit.from_dict(record))
            except (KeyError, TypeError, ValueError, AttributeError) as exc:
                logger.warning("Skipping malformed habit record %r: %s", record, exc)
        return habits

    def save_habits(self, habits: List[Habit]) -> bool:
        payload = {"version": CURRENT_VERSION, "habits": [h.to_dict() for h in habits]}
        try:
            self._write(payload)
        except OSError as exc:
            logger.error("Error saving habits to %s: %s", self.path, exc)
            return False
        return True

    def save_habit(self, habit: Habit) -> bool:
        """Update the stored habit with the same id, or append it."""
        habits = self.load_habits()
        for i, existing in enumerate(habits):
            if existing.id == habit.id:
                habits[i] = habit
                break
        else:
            habits.append(habit)
        return self.save_habits(habits)

    def delete_habit(self, habit_id: str) -> bool:
        habits = self.load_habits()
        remaining = [h for h in habits if h.id != habit_id]
        if len(remaining) == len(habits):
            logger.warning("Habit with id %s not found", habit_id)
            return False
        return self.save_habits(remaining)

    def get_habit(self, habit_id: str) -> Optional[Habit]:
        for habit in self.load_habits():
            if habit.id == habit_id:
                return habit
        return None

    # -------- Store maintenance --------
    def clear_all_data(self) -> bool:
        try:
            if os.path.exists(self.path):
                os.remove(self.path)
        except OSError as exc:
            logger.error("Error clearing %s: %s", self.path, exc)
            return False
        return True

    def get_storage_version(self) -> Optional[str]:
        try:
            data = self._read()
        except (OSError, ValueError):
            return None
        if not isinstance(data, dict):
            return None
        return data.get("version")

    def is_storage_available(self) -> bool:
        probe = self.path + ".probe"
        try:
            with open(probe, "w", encoding="utf-8") as f:
                f.write("test")
            os.remove(probe)
        except OSError as exc:
            logger.warning("Storage is not available at %s: %s", self.path, exc)
            return False
        return True

    def get_storage_stats(self) -> dict:
        try:
            size = os.path.getsize(self.path)
        except OSError:
            size = 0
        return {
            "habitCount": len(self.load_habits()),
            "storageSize": size,
            "version": self.get_storage_version() or "unknown",
            "isAvailable": self.is_storage_available(),
        }

    # -------- Export / import --------
    def export_data(self, now: Optional[datetime] = None) -> str:
        now = now or datetime.now()
        data = {
            "version": CURRENT_VERSION,
            "exportDate": now.isoformat(),
            "habits": [h.to_dict() for h in self.load_habits()],
        }
        return json.dumps(data, indent=2)

    def import_data(self, json_string: str, merge: bool = False) -> bool:
        """
        Import an export document.

        merge=False replaces the collection; merge=True overwrites habits with
        a matching id in place and appends the rest. Nothing is written when
        the document is invalid.
        """
        try:
            data = json.loads(json_string)
            records = data["habits"]
            if not isinstance(records, list):
                raise ValueError("Invalid data format: missing habits array")
            imported = [Habit.from_dict(r) for r in records]
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            logger.error("Error importing data: %s", exc)
            return False

        if not merge:
            return self.save_habits(imported)

        habits = self.load_habits()
        positions = {h.id: i for i, h in enumerate(habits)}
        for habit in imported:
            if habit.id in positions:
                habits[positions[habit.id]] = habit
            else:
                positions[habit.id] = len(habits)
                habits.append(habit)
        return self.save_habits(habits)

    def export_to_file(self, path: str, now: Optional[datetime] = None) -> bool:
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(self.export_data(now))
        except OSError as exc:
            logger.error("Error exporting to %s: %s", path, exc)
            return False
        return True

    def import_from_file(self, path: str, merge: bool = False) -> bool:
        try:
            with open(path, "r", encoding="utf-8") as f:
                content = f.read()
        except OSError as exc:
            logger.error("Error reading import file %s: %s", path, exc)
            return False
        return self.import_data(content, merge=merge)
