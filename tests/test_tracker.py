import pytest

from models import ValidationError
from repo_json import JSONRepo
from tracker import VIEW_ALL, VIEW_TODAY, HabitTracker


@pytest.fixture
def tracker(tmp_path, today):
    repo = JSONRepo(str(tmp_path / "habits.json"))
    return HabitTracker(repo, clock=lambda: today)


def reloaded(tracker):
    fresh = HabitTracker(tracker.repo, clock=tracker.clock)
    fresh.load()
    return fresh


def test_add_habit_persists_with_defaults(tracker, today):
    habit = tracker.add_habit("  Read  ", tags=["mind"])
    assert habit.name == "Read"
    assert habit.created_date == today.isoformat()
    assert habit.days_of_week is None
    assert reloaded(tracker).habits == [habit]


@pytest.mark.parametrize("name", ["", "   ", "x" * 101])
def test_add_habit_rejects_bad_names(tracker, name):
    with pytest.raises(ValidationError):
        tracker.add_habit(name)
    assert tracker.habits == []


def test_add_habit_rejects_bad_time(tracker):
    with pytest.raises(ValidationError):
        tracker.add_habit("Read", notification_time="25:00")
    assert tracker.habits == []


def test_update_habit_is_all_or_nothing(tracker):
    habit = tracker.add_habit("Read", notification_time="08:00", days_of_week=[1, 3])
    with pytest.raises(ValidationError):
        tracker.update_habit(habit.id, "Read more", "08:00", [1, 9], "notes", ["x"])
    assert habit.name == "Read"
    assert habit.days_of_week == [1, 3]

    updated = tracker.update_habit(habit.id, "Read more", None, [3, 1, 5], " daily pages ", ["x"])
    assert updated is habit
    assert habit.name == "Read more"
    assert habit.notification_time is None
    assert habit.days_of_week == [1, 3, 5]
    assert habit.notes == "daily pages"
    assert reloaded(tracker).get(habit.id) == habit


def test_unknown_ids_report_absence(tracker):
    assert tracker.get("nope") is None
    assert tracker.update_habit("nope", "Name") is None
    assert tracker.delete_habit("nope") is False
    assert tracker.set_completed("nope", True) is False


def test_set_completed_defaults_to_today(tracker, today):
    habit = tracker.add_habit("Read")
    assert tracker.set_completed(habit.id, True)
    assert habit.is_completed_on(today)
    assert reloaded(tracker).get(habit.id).completions == [today.isoformat()]
    assert tracker.set_completed(habit.id, False)
    assert habit.completions == []


def test_delete_habit(tracker):
    keep = tracker.add_habit("Read")
    gone = tracker.add_habit("Run")
    assert tracker.delete_habit(gone.id)
    assert [h.id for h in reloaded(tracker).habits] == [keep.id]


def test_today_view_filters_by_schedule(tracker):
    daily = tracker.add_habit("Read")
    tracker.add_habit("Weekend hike", days_of_week=[0, 6])
    assert tracker.habits_for_today() == [daily]  # fixture day is a Wednesday
    assert tracker.visible_habits(VIEW_TODAY) == [daily]
    assert len(tracker.visible_habits(VIEW_ALL)) == 2


def test_export_import_and_clear(tracker, tmp_path):
    habit = tracker.add_habit("Read")
    path = str(tmp_path / "export.json")
    assert tracker.export_to(path)

    assert tracker.clear()
    assert tracker.habits == []

    assert tracker.import_from(path)
    assert [h.id for h in tracker.habits] == [habit.id]
    assert tracker.import_from(str(tmp_path / "missing.json")) is False


def test_stats_include_storage(tracker):
    habit = tracker.add_habit("Read")
    tracker.set_completed(habit.id, True)
    stats = tracker.stats()
    assert stats["totalHabits"] == 1
    assert stats["completedToday"] == 1
    assert stats["storageStats"]["habitCount"] == 1
