# ui/forms.py
"""Turn raw form widget values into habit fields (no Tk needed)."""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence


@dataclass
class HabitFormData:
    name: str
    notification_time: Optional[str] = None
    days_of_week: Optional[List[int]] = None
    notes: str = ""
    tags: List[str] = field(default_factory=list)


def parse_tags(text: str) -> List[str]:
    """Comma separated tags, trimmed, blanks dropped."""
    return [tag.strip() for tag in (text or "").split(",") if tag.strip()]


def selected_days(flags: Sequence[bool]) -> Optional[List[int]]:
    """
    flags[i] is the checkbox for weekday i (0=Sun).
    No box or every box ticked both mean "every day" (None).
    """
    days = [i for i, checked in enumerate(flags) if checked]
    if not days or len(days) == 7:
        return None
    return days


def day_flags(days_of_week: Optional[Sequence[int]]) -> List[bool]:
    if not days_of_week:
        return [True] * 7
    return [i in days_of_week for i in range(7)]


def read_form(
    name: str,
    notification_time: str,
    flags: Sequence[bool],
    notes: str,
    tags_text: str,
) -> HabitFormData:
    return HabitFormData(
        name=(name or "").strip(),
        notification_time=(notification_time or "").strip() or None,
        days_of_week=selected_days(flags),
        notes=(notes or "").strip(),
        tags=parse_tags(tags_text),
    )
