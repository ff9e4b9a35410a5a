from datetime import date

import analytics
from models import Habit


def habits():
    return [
        Habit(
            name="Read",
            id="h1",
            created_date="2024-03-01",
            completions=["2024-03-04", "2024-03-05", "2024-03-06", "2024-03-13"],
        ),
        Habit(
            name="Gym",
            id="h2",
            created_date="2024-03-01",
            days_of_week=[1, 3, 5],
            completions=["2024-03-08", "2024-03-11"],
        ),
        Habit(name="Hike", id="h3", created_date="2024-03-01", days_of_week=[0, 6]),
    ]


def test_app_stats(today):
    assert analytics.app_stats(habits(), today) == {
        "totalHabits": 3,
        "activeToday": 2,
        "completedToday": 1,
        "totalCompletions": 6,
    }


def test_progress_today(today):
    progress = analytics.progress_today(habits(), today)
    assert progress["overall"]["percent_complete"] == 50.0
    assert progress["overall"]["status"] == "in_progress"
    assert [(g["label"], g["completed"]) for g in progress["goals"]] == [
        ("Read", True),
        ("Gym", False),
    ]


def test_compute_progress_statuses():
    assert analytics.compute_progress(0, 3)["status"] == "not_started"
    assert analytics.compute_progress(1, 3)["percent_complete"] == 33.33
    assert analytics.compute_progress(3, 3)["status"] == "completed"
    assert analytics.compute_progress(0, 0)["percent_complete"] == 100.0


def test_longest_active_run_prefers_earliest_tie():
    run = analytics.longest_active_run(habits())
    assert run == {"length_days": 3, "start_date": "2024-03-04", "end_date": "2024-03-06"}
    assert analytics.longest_active_run([])["length_days"] == 0


def test_activity_heatmap_window(today):
    heatmap = analytics.activity_heatmap(habits(), today, days=7)
    assert list(heatmap) == [
        "2024-03-07",
        "2024-03-08",
        "2024-03-09",
        "2024-03-10",
        "2024-03-11",
        "2024-03-12",
        "2024-03-13",
    ]
    assert heatmap["2024-03-08"] == 1
    assert heatmap["2024-03-13"] == 1
    assert sum(heatmap.values()) == 3


def test_weekly_trend_buckets_by_monday():
    assert analytics.weekly_trend(habits()) == {
        "2024-03-04": 4,
        "2024-03-11": 2,
    }


def test_completion_history(today):
    gym = habits()[1]
    history = analytics.completion_history(gym, today, days=7)
    assert len(history) == 7
    assert history[0].day == date(2024, 3, 7)
    assert history[-1].is_today and history[-1].scheduled and not history[-1].completed
    friday = history[1]
    assert friday.day == date(2024, 3, 8) and friday.completed
    assert not history[2].scheduled  # Saturday


def test_trailing_windows_cross_leap_day():
    habit = Habit(name="Read", created_date="2024-02-01", completions=["2024-02-29"])
    today = date(2024, 3, 2)
    history = analytics.completion_history(habit, today, days=4)
    assert [h.day for h in history] == [
        date(2024, 2, 28),
        date(2024, 2, 29),
        date(2024, 3, 1),
        date(2024, 3, 2),
    ]
    assert [h.completed for h in history] == [False, True, False, False]
    heatmap = analytics.activity_heatmap([habit], today, days=4)
    assert list(heatmap) == ["2024-02-28", "2024-02-29", "2024-03-01", "2024-03-02"]
    assert heatmap["2024-02-29"] == 1
    assert len(analytics.completion_history(habit, today, days=1)) == 1


def test_snapshot_has_every_section(today):
    data = analytics.snapshot(habits(), today)
    assert set(data) == {"app", "progress", "streaks", "activity", "trend"}
    by_name = {e["habit"].name: e["stats"] for e in data["streaks"]}
    assert by_name["Read"].current_streak == 1
    assert by_name["Gym"].current_streak == 2
