# analytics.py
"""Aggregations behind the Analytics screen and the dashboard header."""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Dict, List

import dates
from models import Habit


@dataclass
class HistoryDay:
    day: date
    completed: bool
    scheduled: bool
    is_today: bool


# ---------- Collection stats ----------
def app_stats(habits: List[Habit], today: date) -> dict:
    return {
        "totalHabits": len(habits),
        "activeToday": sum(1 for h in habits if h.is_active_on_day(today)),
        "completedToday": sum(1 for h in habits if h.is_completed_on(today)),
        "totalCompletions": sum(len(h.completions) for h in habits),
    }


# ---------- Today's progress ----------
def compute_progress(current: int, target: int) -> dict:
    """
    Percent and status for one goal.
    A zero target counts as completed.
    """
    if target == 0:
        percent = 100.0
    else:
        percent = current / target * 100.0
    completed = current >= target

    if completed:
        status = "completed"
    elif current <= 0:
        status = "not_started"
    else:
        status = "in_progress"

    return {
        "current": current,
        "target": target,
        "percent_complete": round(percent, 2),
        "completed": completed,
        "status": status,
    }


def progress_today(habits: List[Habit], today: date) -> dict:
    scheduled = [h for h in habits if h.is_active_on_day(today)]
    goals = []
    for habit in scheduled:
        goal = compute_progress(1 if habit.is_completed_on(today) else 0, 1)
        goal["id"] = habit.id
        goal["label"] = habit.name
        goals.append(goal)
    done = sum(g["current"] for g in goals)
    return {"overall": compute_progress(done, len(scheduled)), "goals": goals}


# ---------- Activity ----------
def _all_completion_days(habits: List[Habit]) -> List[date]:
    return sorted({dates.to_day(d) for h in habits for d in h.completions})


def longest_active_run(habits: List[Habit]) -> dict:
    """
    Longest run of consecutive days with at least one completion.
    Ties keep the earliest run.
    """
    days = _all_completion_days(habits)
    if not days:
        return {"length_days": 0, "start_date": None, "end_date": None}

    best_start = best_end = run_start = days[0]
    best_length = run_length = 1
    for prev, curr in zip(days, days[1:]):
        if curr == prev + timedelta(days=1):
            run_length += 1
        else:
            run_start = curr
            run_length = 1
        if run_length > best_length:
            best_length = run_length
            best_start = run_start
            best_end = curr

    return {
        "length_days": best_length,
        "start_date": best_start.isoformat(),
        "end_date": best_end.isoformat(),
    }


def activity_heatmap(habits: List[Habit], today: date, days: int = 14) -> Dict[str, int]:
    """Completion counts per day for the trailing window ending today."""
    start = dates.add_days(today, -(days - 1))
    counts = {d.isoformat(): 0 for d in dates.iter_days(start, today)}
    for habit in habits:
        for key in habit.completions:
            if key in counts:
                counts[key] += 1
    return counts


def bucket_for_week(d: date) -> str:
    """Monday that starts the week, as YYYY-MM-DD."""
    return (d - timedelta(days=d.weekday())).isoformat()


def weekly_trend(habits: List[Habit]) -> Dict[str, int]:
    buckets: Dict[str, int] = {}
    for habit in habits:
        for key in habit.completions:
            bucket = bucket_for_week(dates.to_day(key))
            buckets[bucket] = buckets.get(bucket, 0) + 1
    return dict(sorted(buckets.items()))


# ---------- Per habit ----------
def completion_history(habit: Habit, today: date, days: int = 30) -> List[HistoryDay]:
    """The trailing window of days for one habit, oldest first."""
    start = dates.add_days(today, -(days - 1))
    return [
        HistoryDay(
            day=d,
            completed=habit.is_completed_on(d),
            scheduled=habit.is_active_on_day(d),
            is_today=d == today,
        )
        for d in dates.iter_days(start, today)
    ]


def snapshot(habits: List[Habit], today: date) -> dict:
    """Everything the Analytics screen shows, in one call."""
    return {
        "app": app_stats(habits, today),
        "progress": progress_today(habits, today),
        "streaks": [
            {"habit": h, "stats": h.get_statistics(today)} for h in habits
        ],
        "activity": {
            "longest_run": longest_active_run(habits),
            "heatmap": activity_heatmap(habits, today),
        },
        "trend": weekly_trend(habits),
    }
