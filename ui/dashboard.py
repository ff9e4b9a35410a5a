# ui/dashboard.py (Hatchery screen)
import tkinter as tk
import tkinter.messagebox as mbox
from tkinter import filedialog

from PIL import ImageTk

import analytics
from repo_json import default_export_filename
from tracker import VIEW_ALL, VIEW_TODAY
from ui import theme
from ui.calendar_strip import render_history


class Hatchery(tk.Frame):
    def __init__(self, parent, controller):
        super().__init__(parent, bg=theme.BG)
        self.controller = controller
        self.view = VIEW_TODAY

        main = theme.card(self)
        main.pack(fill="both", expand=True, padx=16, pady=14)

        # Header
        header = tk.Frame(main, bg=main.cget("bg"))
        header.pack(fill="x", padx=12, pady=(12, 6))
        theme.heading_label(header, "Hatchery", theme.TITLE).pack(side="left", anchor="w")
        creature_box = tk.Frame(header, bg=main.cget("bg"))
        creature_box.pack(side="right")
        self.creature_face = tk.Label(
            creature_box,
            text="(・⊝・)",
            font=("Georgia", 18, "bold"),
            bg=main.cget("bg"),
            fg=theme.ACCENT,
        )
        self.creature_face.pack(anchor="e")
        self.creature_note = theme.muted_label(creature_box, "Waiting for a snack", wrap=220)
        self.creature_note.pack(anchor="e")

        self.summary = theme.muted_label(main, "", wrap=700)
        self.summary.pack(anchor="w", padx=12, pady=(0, 8))

        # Controls row
        controls = tk.Frame(main, bg=main.cget("bg"))
        controls.pack(fill="x", padx=12, pady=(0, 6))
        theme.ghost_button(controls, "Start Screen", lambda: controller.show("StartScreen")).pack(
            side="left", padx=(0, 8)
        )
        theme.primary_button(controls, "Create Habit", controller.create_habit).pack(
            side="left", padx=8
        )
        theme.ghost_button(controls, "Analytics", lambda: controller.show("Analytics")).pack(
            side="left", padx=8
        )
        self.view_btn = theme.ghost_button(controls, "", self._toggle_view)
        self.view_btn.pack(side="left", padx=8)

        settings_row = tk.Frame(main, bg=main.cget("bg"))
        settings_row.pack(fill="x", padx=12, pady=(0, 10))
        theme.ghost_button(settings_row, "Export", self._export).pack(side="left", padx=(0, 8))
        theme.ghost_button(settings_row, "Import", self._import).pack(side="left", padx=8)
        theme.danger_button(settings_row, "Clear Data", self._clear).pack(side="left", padx=8)

        # List container
        self.list_frame = tk.Frame(main, bg=main.cget("bg"))
        self.list_frame.pack(fill="both", expand=True, padx=12, pady=(4, 6))
        self.base_row_bg = theme.CARD_BG

        self.rows = []  # dicts: {"frame", "btn", "id", "name"}
        self.selected_idx = None
        self._images = []  # PhotoImage refs must outlive the labels

        self.bind_all("<Up>", self._move_up)
        self.bind_all("<Down>", self._move_down)
        self.bind_all("<space>", self._activate_selected)
        self.bind_all("<Delete>", self._delete_selected)

    def refresh(self):
        for w in self.list_frame.winfo_children():
            w.destroy()
        self.rows.clear()
        self._images.clear()
        self.selected_idx = None

        tracker = self.controller.tracker
        today = tracker.clock()
        stats = analytics.app_stats(tracker.habits, today)
        self.summary.configure(
            text=(
                f"{stats['completedToday']} of {stats['activeToday']} habits done today · "
                f"{stats['totalHabits']} habits · {stats['totalCompletions']} completions"
            )
        )
        self.view_btn.configure(text="Show All" if self.view == VIEW_TODAY else "Show Today")

        habits = tracker.visible_habits(self.view)
        if not habits:
            empty = theme.card(self.list_frame)
            empty.pack(fill="x", pady=6, padx=2)
            theme.heading_label(empty, "No habits yet.", theme.HEADING).pack(
                anchor="w", padx=12, pady=(10, 2)
            )
            theme.muted_label(
                empty, "Create your first habit to start building streaks.", wrap=700
            ).pack(anchor="w", padx=12, pady=(0, 12))
            return

        for i, habit in enumerate(habits):
            self._habit_row(i, habit, today)
        self._select_row(0)

    def _habit_row(self, index, habit, today):
        row = tk.Frame(
            self.list_frame,
            bg=self.base_row_bg,
            highlightthickness=1,
            highlightbackground=theme.BORDER,
            padx=12,
            pady=8,
        )
        row.pack(fill="x", pady=6)

        top = tk.Frame(row, bg=row.cget("bg"))
        top.pack(fill="x")
        btn = tk.Button(top, width=12, font=theme.BUTTON, bd=0, relief="flat", cursor="hand2")
        btn["command"] = lambda b=btn, hid=habit.id: self.toggle(b, hid)
        theme.style_complete_button(btn, habit.is_completed_on(today))
        btn.configure(takefocus=False)
        btn.pack(side="left")

        name = tk.Label(
            top, text=habit.name, anchor="w", bg=row.cget("bg"), fg=theme.TEXT, font=theme.SUBTITLE
        )
        name.pack(side="left", padx=12, fill="x", expand=True)
        theme.danger_button(top, "Delete", lambda hid=habit.id: self._delete_habit(hid)).pack(
            side="right", padx=2
        )
        theme.ghost_button(top, "Edit", lambda hid=habit.id: self.controller.edit_habit(hid)).pack(
            side="right", padx=6
        )

        meta = tk.Frame(row, bg=row.cget("bg"))
        meta.pack(fill="x", pady=(6, 0))
        theme.pill(meta, habit.days_of_week_label()).pack(side="left", padx=(0, 4))
        if habit.notification_time:
            theme.pill(meta, f"⏰ {habit.notification_time}").pack(side="left", padx=4)
        for tag in habit.tags:
            theme.pill(meta, f"#{tag}", fg=theme.MUTED).pack(side="left", padx=4)

        stats = habit.get_statistics(today)
        theme.muted_label(
            row,
            f"Streak {stats.current_streak} · Best {stats.longest_streak} · "
            f"{stats.completion_rate}% of {stats.scheduled_days_passed} scheduled days",
            font=theme.SMALL,
        ).pack(anchor="w", pady=(4, 0))
        if habit.notes:
            theme.muted_label(row, habit.notes, font=theme.SMALL, wrap=640).pack(anchor="w")

        history = analytics.completion_history(habit, today, self.controller.settings.HISTORY_DAYS)
        photo = ImageTk.PhotoImage(render_history(history))
        self._images.append(photo)
        tk.Label(row, image=photo, bd=0, bg=row.cget("bg")).pack(anchor="w", pady=(6, 0))

        for widget in (row, btn, name):
            widget.bind("<Button-1>", lambda _e, j=index: self._select_row(j))
        self.rows.append({"frame": row, "btn": btn, "id": habit.id, "name": name})

    # ---------- Selection helpers ----------
    def _clear_highlights(self):
        for r in self.rows:
            r["frame"].configure(highlightbackground=theme.BORDER)

    def _select_row(self, idx: int):
        if not self.rows:
            return
        idx = max(0, min(idx, len(self.rows) - 1))
        self.selected_idx = idx
        self._clear_highlights()
        self.rows[idx]["frame"].configure(highlightbackground=theme.ACCENT)
        self.rows[idx]["frame"].focus_set()

    def _move_up(self, _event=None):
        if self.selected_idx is not None:
            self._select_row(self.selected_idx - 1)

    def _move_down(self, _event=None):
        if self.selected_idx is not None:
            self._select_row(self.selected_idx + 1)

    def _activate_selected(self, _event=None):
        if self.selected_idx is None or self.controller.current != "Hatchery":
            return
        row = self.rows[self.selected_idx]
        self.toggle(row["btn"], row["id"])

    def _delete_habit(self, habit_id: str):
        habit = self.controller.tracker.get(habit_id)
        if habit is None:
            mbox.showerror("Habit not found", "That habit no longer exists.")
            return
        if not mbox.askyesno(
            "Delete habit?",
            f'Are you sure you want to delete "{habit.name}"?\nThis action cannot be undone.',
        ):
            return
        if not self.controller.tracker.delete_habit(habit_id):
            mbox.showerror("Delete failed", "Failed to delete habit. Please try again.")
        self.refresh()

    def _delete_selected(self, _event=None):
        if self.selected_idx is None or not self.rows or self.controller.current != "Hatchery":
            return
        self._delete_habit(self.rows[self.selected_idx]["id"])

    def _toggle_view(self):
        self.view = VIEW_ALL if self.view == VIEW_TODAY else VIEW_TODAY
        self.refresh()

    # ---------- Completion toggle ----------
    def toggle(self, button: tk.Button, habit_id: str):
        tracker = self.controller.tracker
        habit = tracker.get(habit_id)
        if habit is None:
            mbox.showerror("Habit not found", "That habit no longer exists.")
            return
        will_complete = not habit.is_completed_on(tracker.clock())
        if not tracker.set_completed(habit_id, will_complete):
            mbox.showerror("Save failed", "Failed to update habit. Please try again.")
        self.refresh()

        if will_complete:
            self._set_creature_state(True, f'It ate! "{habit.name}" done.')
            self.after(900, lambda: self._set_creature_state(False, "Ready for the next snack"))
        else:
            self._set_creature_state(False, "Waiting for a snack")

    def _set_creature_state(self, fed: bool, message: str):
        face = "(ᵔᴥᵔ)" if fed else "(・⊝・)"
        self.creature_face.configure(text=face, fg=theme.SUCCESS if fed else theme.ACCENT)
        self.creature_note.configure(text=message)

    # ---------- Settings actions ----------
    def _export(self):
        path = filedialog.asksaveasfilename(
            defaultextension=".json",
            initialfile=default_export_filename(self.controller.tracker.clock()),
            filetypes=[("JSON", "*.json")],
        )
        if not path:
            return
        if self.controller.tracker.export_to(path):
            mbox.showinfo("Export", "Data exported successfully!")
        else:
            mbox.showerror("Export", "Failed to export data")

    def _import(self):
        path = filedialog.askopenfilename(filetypes=[("JSON", "*.json")])
        if not path:
            return
        merge = mbox.askyesno(
            "Import", "Merge with existing habits?\nChoose No to replace everything."
        )
        if self.controller.tracker.import_from(path, merge=merge):
            mbox.showinfo("Import", "Data imported successfully!")
        else:
            mbox.showerror("Import", "Failed to import data")
        self.refresh()

    def _clear(self):
        if not mbox.askyesno(
            "Clear data?", "Are you sure you want to delete ALL habits? This cannot be undone!"
        ):
            return
        if not self.controller.tracker.clear():
            mbox.showerror("Clear data", "Failed to clear data")
        self.refresh()
