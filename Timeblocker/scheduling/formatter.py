"""Text renderings of a scheduled task."""

from __future__ import annotations

from datetime import datetime

from ..shared.models import ScheduledTask

WEEKDAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


def datetime_to_human_readable(dt: datetime) -> str:
    """
    Render as ``<Weekday> MM/DD/YYYY @ H:MM am|pm``.

    Only hours past 12 are folded onto the 12-hour clock, so midnight shows
    as ``0:MM am`` and noon as ``12:MM pm``.
    """
    date = f"{WEEKDAYS[dt.weekday()]} {dt.month:02d}/{dt.day:02d}/{dt.year:04d}"
    hours = dt.hour
    ampm = "am"
    if hours > 12:
        ampm = "pm"
        hours -= 12
    elif hours == 12:
        ampm = "pm"
    return f"{date} @ {hours}:{dt.minute:02d} {ampm}"


def write_todo_as_formatted_text(todo: ScheduledTask) -> str:
    """Normalized form: ``<description> [length:: N minutes] [scheduled:: YYYY-MM-DDTHH:MM]``"""
    length = f"[length:: {todo.duration.to_minutes()} minutes]"
    start = todo.start
    scheduled = (
        f"[scheduled:: {start.year:04d}-{start.month:02d}-{start.day:02d}"
        f"T{start.hour:02d}:{start.minute:02d}]"
    )
    return f"{todo.description} {length} {scheduled}"

