"""Shared visual style helpers for the Tk UI (warm farmhouse palette, light or dark)."""

import tkinter as tk

LIGHT = "light"
DARK = "dark"

PALETTES = {
    LIGHT: {
        "BG": "#f8f1e7",
        "CARD_BG": "#fffaf3",
        "FIELD_BG": "#f8fafc",
        "BORDER": "#e3d6c8",
        "TEXT": "#2f241d",
        "MUTED": "#7a675b",
        "ACCENT": "#d48a52",
        "ACCENT_DARK": "#b26a39",
        "SUCCESS": "#6c8f52",
        "DANGER": "#b75c4a",
        "HILITE": "#f3e2cf",
        "ON_ACCENT": "#fffaf3",
    },
    DARK: {
        "BG": "#1f1a16",
        "CARD_BG": "#2a231e",
        "FIELD_BG": "#3a3029",
        "BORDER": "#4a3d33",
        "TEXT": "#f3e9dd",
        "MUTED": "#b8a596",
        "ACCENT": "#e09a62",
        "ACCENT_DARK": "#c27a45",
        "SUCCESS": "#86a86b",
        "DANGER": "#c96b58",
        "HILITE": "#3d3128",
        "ON_ACCENT": "#1f1a16",
    },
}

# Palette (module attributes are read at widget construction time)
current = LIGHT
BG = CARD_BG = FIELD_BG = BORDER = TEXT = MUTED = ""
ACCENT = ACCENT_DARK = SUCCESS = DANGER = HILITE = ON_ACCENT = ""


def apply_palette(name: str) -> str:
    """Switch the module colors to a named palette. Already-built widgets keep their colors."""
    global current
    key = (name or "").strip().lower()
    if key not in PALETTES:
        raise ValueError(f"Unknown theme '{name}'. Use one of: {', '.join(PALETTES)}.")
    globals().update(PALETTES[key])
    current = key
    return current


def toggle_palette() -> str:
    return apply_palette(LIGHT if current == DARK else DARK)


apply_palette(LIGHT)

# Typography
FONT_FAMILY = "Georgia"
TITLE = (FONT_FAMILY, 20, "bold")
SUBTITLE = (FONT_FAMILY, 12)
HEADING = (FONT_FAMILY, 13, "bold")
BODY = (FONT_FAMILY, 11)
SMALL = (FONT_FAMILY, 9)
BUTTON = (FONT_FAMILY, 10, "bold")


def card(parent, **kwargs):
    """Bordered card frame."""
    return tk.Frame(
        parent,
        bg=CARD_BG,
        bd=0,
        highlightbackground=BORDER,
        highlightthickness=1,
        **kwargs,
    )


def heading_label(parent, text, font=TITLE):
    return tk.Label(parent, text=text, bg=parent.cget("bg"), fg=TEXT, font=font)


def muted_label(parent, text, font=BODY, wrap=None):
    return tk.Label(
        parent,
        text=text,
        bg=parent.cget("bg"),
        fg=MUTED,
        font=font,
        justify="left",
        wraplength=wrap,
        anchor="w",
    )


def _button(parent, text, command, bg, fg, active_bg, **kwargs):
    return tk.Button(
        parent,
        text=text,
        command=command,
        bg=bg,
        fg=fg,
        activebackground=active_bg,
        activeforeground=fg,
        font=BUTTON,
        cursor="hand2",
        **kwargs,
    )


def primary_button(parent, text, command):
    return _button(
        parent, text, command, ACCENT, ON_ACCENT, ACCENT_DARK,
        relief="flat", bd=0, padx=14, pady=8, highlightthickness=0,
    )


def ghost_button(parent, text, command):
    return _button(
        parent, text, command, CARD_BG, ACCENT, HILITE,
        relief="solid", bd=1, highlightbackground=ACCENT, padx=12, pady=7,
    )


def danger_button(parent, text, command):
    return _button(
        parent, text, command, DANGER, "#ffffff", DANGER,
        relief="flat", bd=0, padx=10, pady=4,
    )


def style_complete_button(button: tk.Button, done: bool):
    color = SUCCESS if done else ACCENT
    button.configure(
        text="Completed" if done else "Complete",
        bg=color,
        fg=ON_ACCENT,
        activebackground=SUCCESS if done else ACCENT_DARK,
        activeforeground=ON_ACCENT,
    )


def pill(parent, text, fg=None, bg=None):
    """Small tag-style label."""
    return tk.Label(
        parent,
        text=text,
        bg=bg or HILITE,
        fg=fg or ACCENT,
        font=(FONT_FAMILY, 9, "bold"),
        padx=8,
        pady=2,
    )
