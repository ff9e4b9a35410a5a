import tkinter as tk

import analytics
from ui import theme


class Analytics(tk.Frame):
    def __init__(self, parent, controller):
        super().__init__(parent, bg=theme.BG)
        self.controller = controller

        header = theme.card(self)
        header.pack(fill="x", padx=16, pady=(14, 10))
        head_row = tk.Frame(header, bg=theme.CARD_BG)
        head_row.pack(fill="x", padx=14, pady=12)
        theme.heading_label(head_row, "Analytics", theme.TITLE).pack(anchor="w")
        theme.muted_label(
            head_row,
            "Today's progress, streaks, recent activity and weekly trends.",
            wrap=740,
        ).pack(anchor="w", pady=(4, 0))

        buttons = tk.Frame(header, bg=theme.CARD_BG)
        buttons.pack(fill="x", padx=14, pady=(6, 6))
        theme.primary_button(buttons, "Refresh", self.refresh).pack(side="left")
        theme.ghost_button(
            buttons, "Back to Hatchery", lambda: controller.show("Hatchery")
        ).pack(side="left", padx=8)

        self.progress_var = self._section("Today's Progress")
        self.streaks_var = self._section("Streaks by Habit")
        self.activity_var = self._section("Activity")
        self.trend_var = self._section("Trends (per week)")

    def _section(self, title: str):
        frame = theme.card(self)
        frame.pack(fill="x", padx=16, pady=8)
        tk.Label(
            frame, text=title, font=theme.HEADING, bg=theme.CARD_BG, fg=theme.TEXT
        ).pack(anchor="w", padx=12, pady=(10, 0))
        var = tk.StringVar()
        tk.Label(
            frame,
            textvariable=var,
            anchor="w",
            justify="left",
            wraplength=780,
            bg=theme.CARD_BG,
            fg=theme.TEXT,
            font=theme.BODY,
        ).pack(fill="x", padx=12, pady=8)
        return var

    def refresh(self):
        tracker = self.controller.tracker
        data = analytics.snapshot(tracker.habits, tracker.clock())
        self.progress_var.set(render_progress(data["progress"]))
        self.streaks_var.set(render_streaks(data["streaks"]))
        self.activity_var.set(render_activity(data["activity"]))
        self.trend_var.set(render_trend(data["trend"]))


# ---------- Render helpers ----------
def render_progress(progress: dict) -> str:
    goals = progress.get("goals") or []
    if not goals:
        return "Nothing scheduled today."

    overall = progress["overall"]
    lines = [
        f"Today: {overall['percent_complete']}% "
        f"({overall['current']}/{overall['target']}) - status: {overall['status']}"
    ]
    parts = [f"{g['label']}: {'done' if g['completed'] else 'open'}" for g in goals]
    lines.append("Per habit: " + "; ".join(parts))
    return "\n".join(lines)


def render_streaks(entries: list) -> str:
    if not entries:
        return "No habits yet."
    lines = []
    for entry in entries:
        habit, stats = entry["habit"], entry["stats"]
        if not stats.total_completions:
            lines.append(f"{habit.name}: No completions yet.")
            continue
        lines.append(
            f"{habit.name}: current {stats.current_streak}, longest {stats.longest_streak}, "
            f"rate {stats.completion_rate}%"
        )
    return "\n".join(lines)


def render_activity(activity: dict) -> str:
    longest = activity.get("longest_run") or {}
    length = longest.get("length_days", 0)
    if length:
        run_line = (
            f"Longest active run: {length} day(s) "
            f"({longest['start_date']} to {longest['end_date']})"
        )
    else:
        run_line = "Longest active run: none yet."

    heatmap = activity.get("heatmap") or {}
    completed_days = sum(1 for count in heatmap.values() if count)
    total_events = sum(heatmap.values())
    heat_line = (
        f"Last {len(heatmap)} days: {total_events} completion(s) "
        f"across {completed_days} day(s)."
    )
    return "\n".join([run_line, heat_line])


def render_trend(buckets: dict) -> str:
    if not buckets:
        return "No completions to chart yet."
    return "\n".join(f"Week of {key}: {count} completion(s)" for key, count in buckets.items())
