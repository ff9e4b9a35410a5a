# ui/habit_form.py
import tkinter as tk
import tkinter.messagebox as mbox

from dates import DAY_NAMES
from models import ValidationError
from ui import theme
from ui.forms import day_flags, read_form


class HabitForm(tk.Frame):
    """Create a habit, or edit one when load() is given a habit."""

    def __init__(self, parent, controller):
        super().__init__(parent, bg=theme.BG)
        self.controller = controller
        self.habit_id = None

        wrapper = theme.card(self)
        wrapper.pack(fill="x", padx=16, pady=18)

        header = tk.Frame(wrapper, bg=wrapper.cget("bg"))
        header.pack(fill="x", padx=14, pady=(12, 2))
        self.heading = theme.heading_label(header, "Create Habit", theme.TITLE)
        self.heading.pack(anchor="w")
        theme.muted_label(
            header,
            "Name is required. Leave every day unticked or all ticked for a daily habit.",
            wrap=720,
        ).pack(anchor="w", pady=(4, 0))

        form = tk.Frame(wrapper, bg=wrapper.cget("bg"))
        form.pack(padx=14, pady=10, fill="x")
        form.columnconfigure(1, weight=1)

        self.name = self._entry(form, "Name", 0)
        self.time = self._entry(form, "Reminder (HH:MM)", 1)

        self._label(form, "Days", 2)
        days_row = tk.Frame(form, bg=form.cget("bg"))
        days_row.grid(row=2, column=1, sticky="w", padx=8, pady=4)
        self.day_vars = []
        for i, label in enumerate(DAY_NAMES):
            var = tk.BooleanVar(value=True)
            tk.Checkbutton(
                days_row,
                text=label,
                variable=var,
                bg=form.cget("bg"),
                fg=theme.TEXT,
                selectcolor=theme.CARD_BG,
                font=theme.BODY,
            ).grid(row=0, column=i, padx=2)
            self.day_vars.append(var)

        self.notes = self._entry(form, "Notes", 3)
        self.tags = self._entry(form, "Tags (comma separated)", 4)

        controls = tk.Frame(wrapper, bg=wrapper.cget("bg"))
        controls.pack(fill="x", padx=14, pady=(0, 14))
        theme.primary_button(controls, "Save", self.save).pack(side="left")
        theme.ghost_button(
            controls, "Back to Hatchery", lambda: controller.show("Hatchery")
        ).pack(side="left", padx=8)

        self.bind_all("<Return>", self._on_return)

    def _label(self, form, text, row):
        tk.Label(form, text=text, bg=form.cget("bg"), fg=theme.TEXT, font=theme.BODY).grid(
            row=row, column=0, sticky="w", pady=4
        )

    def _entry(self, form, text, row):
        self._label(form, text, row)
        entry = tk.Entry(
            form,
            bg=theme.FIELD_BG,
            insertbackground=theme.TEXT,
            fg=theme.TEXT,
            relief="solid",
            bd=1,
            highlightbackground=theme.BORDER,
            highlightcolor=theme.ACCENT,
            font=theme.BODY,
        )
        entry.grid(row=row, column=1, sticky="ew", padx=8, pady=4)
        return entry

    @staticmethod
    def _set(entry, value):
        entry.delete(0, "end")
        entry.insert(0, value)

    def load(self, habit=None):
        self.habit_id = habit.id if habit else None
        self.heading.configure(text="Edit Habit" if habit else "Create Habit")
        self._set(self.name, habit.name if habit else "")
        self._set(self.time, (habit.notification_time or "") if habit else "")
        self._set(self.notes, habit.notes if habit else "")
        self._set(self.tags, ", ".join(habit.tags) if habit else "")
        for var, checked in zip(self.day_vars, day_flags(habit.days_of_week if habit else None)):
            var.set(checked)
        self.name.focus_set()

    def _on_return(self, _event=None):
        if self.controller.current == "HabitForm":
            self.save()

    def save(self):
        data = read_form(
            self.name.get(),
            self.time.get(),
            [var.get() for var in self.day_vars],
            self.notes.get(),
            self.tags.get(),
        )
        tracker = self.controller.tracker
        try:
            if self.habit_id is None:
                tracker.add_habit(
                    data.name, data.notification_time, data.days_of_week, data.notes, data.tags
                )
            elif tracker.update_habit(
                self.habit_id,
                data.name,
                data.notification_time,
                data.days_of_week,
                data.notes,
                data.tags,
            ) is None:
                mbox.showerror("Habit not found", "That habit no longer exists.")
        except ValidationError as exc:
            mbox.showerror("Invalid habit", str(exc))
            return
        self.load()
        self.controller.show("Hatchery")
