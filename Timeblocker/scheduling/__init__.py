from .extractor import get_text_between_brackets, split_task_line
from .formatter import (
    datetime_to_human_readable,
    write_todo_as_formatted_text,
)
from .parser import (
    MalformedScheduledTaskError,
    maybe_convert_minutes_to_hours_or_days,
    parse_scheduled_task,
)
from .patterns import get_datetime_from_regex
from .reorder import resort_tasks_by_completion

__all__ = [
    "get_text_between_brackets",
    "split_task_line",
    "datetime_to_human_readable",
    "write_todo_as_formatted_text",
    "MalformedScheduledTaskError",
    "maybe_convert_minutes_to_hours_or_days",
    "parse_scheduled_task",
    "get_datetime_from_regex",
    "resort_tasks_by_completion",
]
