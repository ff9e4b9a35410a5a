# ui/calendar_strip.py
"""Completion history drawn as a strip of day cells with Pillow."""

from typing import List

from PIL import Image, ImageDraw

from analytics import HistoryDay

# Same hues as ui/theme.py, kept here so drawing needs no Tk
CELL_BG = "#fffaf3"
DONE = "#6c8f52"
MISSED = "#f3e2cf"
OFF = "#ece6de"
TODAY_RING = "#d48a52"
CHECK = "#fffaf3"


def strip_size(count: int, cell: int = 16, gap: int = 3):
    width = count * cell + (count + 1) * gap
    return width, cell + 2 * gap


def cell_box(index: int, cell: int = 16, gap: int = 3):
    left = gap + index * (cell + gap)
    return left, gap, left + cell - 1, gap + cell - 1


def render_history(history: List[HistoryDay], cell: int = 16, gap: int = 3) -> Image.Image:
    """
    One cell per day, oldest on the left. Completed days are filled,
    unscheduled days are greyed, today gets an outline.
    """
    image = Image.new("RGB", strip_size(len(history), cell, gap), CELL_BG)
    draw = ImageDraw.Draw(image)

    for i, entry in enumerate(history):
        box = cell_box(i, cell, gap)
        if entry.completed:
            fill = DONE
        elif entry.scheduled:
            fill = MISSED
        else:
            fill = OFF
        outline = TODAY_RING if entry.is_today else None
        draw.rounded_rectangle(box, radius=3, fill=fill, outline=outline, width=2)

        if entry.completed:
            left, top, right, bottom = box
            draw.line(
                [
                    (left + cell * 0.25, top + cell * 0.55),
                    (left + cell * 0.45, top + cell * 0.75),
                    (left + cell * 0.78, top + cell * 0.3),
                ],
                fill=CHECK,
                width=2,
            )
    return image
