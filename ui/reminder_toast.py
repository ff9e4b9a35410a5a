# ui/reminder_toast.py
import tkinter as tk

from ui import theme

AUTO_CLOSE_MS = 10000
DEFAULT_MESSAGE = "Don't forget to complete your habit today!"


class ReminderToast(tk.Toplevel):
    """Small always-on-top reminder window for one habit."""

    def __init__(self, parent, habit, on_complete=None, message=DEFAULT_MESSAGE):
        super().__init__(parent, bg=theme.CARD_BG, padx=16, pady=12)
        self.title("Habit reminder")
        self.attributes("-topmost", True)
        self.resizable(False, False)

        theme.heading_label(self, f"Time for: {habit.name}", theme.HEADING).pack(anchor="w")
        theme.muted_label(self, message, wrap=300).pack(anchor="w", pady=(4, 10))

        buttons = tk.Frame(self, bg=theme.CARD_BG)
        buttons.pack(anchor="e")
        if on_complete is not None:
            theme.primary_button(
                buttons, "Mark Complete", lambda: self._complete(on_complete)
            ).pack(side="left", padx=(0, 8))
        theme.ghost_button(buttons, "Dismiss", self.destroy).pack(side="left")

        self.bell()
        self.after(AUTO_CLOSE_MS, self._close)

    def _complete(self, on_complete):
        on_complete()
        self.destroy()

    def _close(self):
        if self.winfo_exists():
            self.destroy()
