import tkinter as tk

from ui import theme


class StartScreen(tk.Frame):
    def __init__(self, parent, controller):
        super().__init__(parent, bg=theme.BG)
        self.controller = controller

        overlay = theme.card(self, padx=22, pady=20)
        overlay.place(relx=0.5, rely=0.5, anchor="center")

        theme.heading_label(overlay, "Welcome to Habit Hatchery", theme.TITLE).pack(
            anchor="center"
        )
        theme.muted_label(
            overlay,
            "Set your habits, pick the days they count, and grow your streaks.",
            wrap=420,
        ).pack(anchor="center", pady=(6, 4))
        self.reminder_note = theme.muted_label(overlay, "", font=theme.SMALL, wrap=420)
        self.reminder_note.pack(anchor="center", pady=(0, 12))

        btns = tk.Frame(overlay, bg=theme.CARD_BG)
        btns.pack(pady=(6, 4))
        theme.primary_button(btns, "Enter Hatchery", lambda: controller.show("Hatchery")).pack(
            side="left", padx=6
        )
        theme.ghost_button(btns, "Create Habit", controller.create_habit).pack(
            side="left", padx=6
        )
        theme.ghost_button(btns, "View Analytics", lambda: controller.show("Analytics")).pack(
            side="left", padx=6
        )

        prefs = tk.Frame(overlay, bg=theme.CARD_BG)
        prefs.pack(pady=(10, 0))
        self.reminder_btn = theme.ghost_button(prefs, "", self._toggle_reminders)
        self.reminder_btn.pack(side="left", padx=6)
        theme.ghost_button(prefs, "Test reminder", controller.test_reminder).pack(
            side="left", padx=6
        )
        theme.ghost_button(
            prefs,
            "Light mode" if theme.current == theme.DARK else "Dark mode",
            controller.toggle_theme,
        ).pack(side="left", padx=6)

    def _toggle_reminders(self):
        enabled = self.controller.reminders.enabled
        self.controller.set_reminders_enabled(not enabled)

    def refresh(self):
        stats = self.controller.reminder_stats()
        if not stats["enabled"]:
            text = "Reminders are turned off."
        else:
            text = f"Reminders on for {stats['withNotifications']} of {stats['total']} habits."
        self.reminder_note.configure(text=text)
        self.reminder_btn.configure(
            text="Turn reminders off" if stats["enabled"] else "Turn reminders on"
        )
