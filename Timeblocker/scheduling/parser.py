"""
Inverse of the normalized task format.

Turns ``<description> [length:: N minutes] [scheduled:: YYYY-MM-DDTHH:MM]``
back into a task whose time expression reads like something a person would
type, omitting the date when the task simply follows its predecessor.
"""

from __future__ import annotations

import logging
from datetime import datetime

from ..shared.models import (
    MINUTES_PER_DAY,
    MINUTES_PER_HOUR,
    Duration,
    ScheduledTask,
    to_local_naive,
)
from .formatter import datetime_to_human_readable

logger = logging.getLogger(__name__)

LENGTH_MARKER = "[length::"
SCHEDULED_MARKER = "[scheduled::"


class MalformedScheduledTaskError(ValueError):
    """A normalized task line is missing or has an unreadable marker"""

    def __init__(self, marker: str, line: str, reason: str = "missing"):
        super().__init__(f"malformed scheduled task: {reason} {marker} marker in {line!r}")
        self.marker = marker
        self.line = line


def maybe_convert_minutes_to_hours_or_days(minutes: int) -> str:
    if minutes % MINUTES_PER_DAY == 0:
        days = minutes // MINUTES_PER_DAY
        return "1 day" if days == 1 else f"{days} days"
    if minutes % MINUTES_PER_HOUR == 0:
        hours = minutes // MINUTES_PER_HOUR
        return "1 hour" if hours == 1 else f"{hours} hours"
    return f"{minutes} minutes"


def _extract_marker(text: str, marker: str, line: str) -> tuple[str, str]:
    """Return (marker interior, text with the marker span removed)"""
    start = text.find(marker)
    if start < 0:
        raise MalformedScheduledTaskError(marker, line)
    end = text.find("]", start)
    if end < 0:
        raise MalformedScheduledTaskError(marker, line, reason="unterminated")
    interior = text[start + len(marker) : end]
    return interior, text[:start] + text[end + 1 :]


def _split_indentation(task: str) -> tuple[str, str]:
    stripped = task.lstrip(" \t")
    return task[: len(task) - len(stripped)], stripped


def _ends_at(todo: ScheduledTask | None, moment: datetime) -> bool:
    if todo is None:
        return False
    try:
        return todo.end == moment
    except OverflowError:
        return False


def parse_scheduled_task(task: str, previous_task: str | None = None) -> ScheduledTask:
    """
    Parse one normalized line.

    ``previous_task`` is the raw line just above; it is parsed on its own (one
    level only) to find out where it ends. A predecessor that is not a
    normalized line is ignored.
    """
    previous_todo = None
    if previous_task is not None:
        try:
            previous_todo = parse_scheduled_task(previous_task)
        except MalformedScheduledTaskError as e:
            logger.debug(f"Ignoring predecessor: {e}")

    indentation, text = _split_indentation(task)
    text = text.strip()

    length, text = _extract_marker(text, LENGTH_MARKER, task)
    try:
        minutes = int(length.replace("minutes", "", 1).strip())
    except ValueError:
        raise MalformedScheduledTaskError(LENGTH_MARKER, task, reason="unreadable") from None
    if minutes < 0:
        raise MalformedScheduledTaskError(LENGTH_MARKER, task, reason="unreadable")

    scheduled, text = _extract_marker(text, SCHEDULED_MARKER, task)
    try:
        start = to_local_naive(datetime.fromisoformat(scheduled.strip()))
    except ValueError:
        raise MalformedScheduledTaskError(SCHEDULED_MARKER, task, reason="unreadable") from None

    while "  " in text:
        text = text.replace("  ", " ")

    time_expression = f"for {maybe_convert_minutes_to_hours_or_days(minutes)}"
    if not _ends_at(previous_todo, start):
        time_expression += f" on {datetime_to_human_readable(start)}"

    return ScheduledTask(
        time_expression=time_expression,
        description=indentation + text.strip(),
        start=start,
        duration=Duration(minutes=minutes),
    )
