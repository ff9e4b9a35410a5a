import logging
import tkinter as tk

from config import settings
from logger import setup_logger
from reminders import ReminderScheduler, reminder_stats, sample_habit
from repo_json import JSONRepo
from tracker import HabitTracker
from ui import theme
from ui.analytics import Analytics
from ui.dashboard import Hatchery
from ui.habit_form import HabitForm
from ui.reminder_toast import ReminderToast
from ui.start_screen import StartScreen

logger = logging.getLogger(__name__)


class App(tk.Tk):
    def __init__(self):
        super().__init__()
        self.title("Habit Hatchery")
        self.geometry("820x640")
        self.settings = settings
        self.current = None

        try:
            theme.apply_palette(settings.THEME)
        except ValueError as exc:
            logger.warning("%s Falling back to the light theme.", exc)
            theme.apply_palette(theme.LIGHT)

        self.repo = JSONRepo(settings.DATA_PATH)
        if not self.repo.is_storage_available():
            logger.warning("Habit data will not persist at %s", settings.DATA_PATH)
        self.tracker = HabitTracker(self.repo, max_name_length=settings.MAX_NAME_LENGTH)
        self.tracker.load()

        self.container = tk.Frame(self)
        self.container.pack(fill="both", expand=True)
        self.container.rowconfigure(0, weight=1)
        self.container.columnconfigure(0, weight=1)

        self.frames = {}
        self._build_frames()

        self.reminders = ReminderScheduler(
            self,
            lambda: self.tracker.habits,
            self.show_reminder,
            interval_ms=settings.REMINDER_INTERVAL_MS,
            enabled=settings.REMINDERS_ENABLED,
        )
        self.reminders.start()
        self.protocol("WM_DELETE_WINDOW", self.close)

        self.show("StartScreen")

    def _build_frames(self):
        for frame in self.frames.values():
            frame.destroy()
        self.frames = {}
        self.configure(bg=theme.BG)
        self.container.configure(bg=theme.BG)
        for F in (StartScreen, Hatchery, HabitForm, Analytics):
            frame = F(parent=self.container, controller=self)
            self.frames[F.__name__] = frame
            frame.grid(row=0, column=0, sticky="nsew")

    def show(self, name):
        frame = self.frames[name]
        self.current = name
        if hasattr(frame, "refresh"):
            frame.refresh()
        frame.tkraise()

    def create_habit(self):
        self.frames["HabitForm"].load()
        self.show("HabitForm")

    def edit_habit(self, habit_id: str):
        habit = self.tracker.get(habit_id)
        if habit is None:
            logger.warning("Habit with id %s not found", habit_id)
            return
        self.frames["HabitForm"].load(habit)
        self.show("HabitForm")

    # ---------- Theme ----------
    def toggle_theme(self):
        # widgets read the palette when built, so every screen is rebuilt
        name = theme.toggle_palette()
        logger.info("Switched to the %s theme", name)
        self._build_frames()
        self.show(self.current or "StartScreen")

    # ---------- Reminders ----------
    def reminder_stats(self) -> dict:
        return reminder_stats(self.tracker.habits, self.reminders.enabled)

    def set_reminders_enabled(self, enabled: bool):
        self.reminders.set_enabled(enabled)
        if self.current == "StartScreen":
            self.frames["StartScreen"].refresh()

    def show_reminder(self, habit):
        def complete():
            self.tracker.set_completed(habit.id, True)
            self.frames["Hatchery"].refresh()

        ReminderToast(self, habit, on_complete=complete)

    def test_reminder(self):
        logger.info("Showing a test reminder")
        ReminderToast(
            self,
            sample_habit(self.reminders.clock()),
            message="If you can see this, reminders are working!",
        )

    def close(self):
        self.reminders.stop()
        self.destroy()


def main():
    setup_logger(settings.LOG_FILE, settings.LOG_LEVEL)
    App().mainloop()


if __name__ == "__main__":
    main()
