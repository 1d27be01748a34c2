"""
Editor commands.

Each command takes the current selection text and returns its replacement;
reading and writing the selection is left to the editor host.
"""

from __future__ import annotations

from typing import Callable

from .agents.base import LlmWrapper
from .agents.config import TimeblockerConfig
from .agents.time_resolver import NaturalLanguageTimeResolver
from .scheduling.formatter import write_todo_as_formatted_text
from .scheduling.parser import parse_scheduled_task
from .scheduling.pipeline import Scheduler
from .scheduling.reorder import resort_tasks_by_completion


def build_scheduler(
    config: TimeblockerConfig, notify: Callable[[str], None] | None = None
) -> Scheduler:
    llm = LlmWrapper(
        model=config.duration_model,
        temperature=config.temperature,
        host=config.ollama_host,
        api_key=config.api_key,
    )
    resolver = NaturalLanguageTimeResolver(llm, config, notify=notify)
    return Scheduler(resolver, notify=notify)


async def schedule_selection(selection: str, scheduler: Scheduler) -> str:
    """Schedule / Reschedule"""
    todos = await scheduler.parse_todos_with_schedule(selection.strip())
    return "\n".join(write_todo_as_formatted_text(todo) for todo in todos)


def unschedule_selection(selection: str) -> str:
    """Unschedule: normalized lines back to ``<description> [<time expression>]``"""
    lines = []
    previous_line = None
    for line in selection.split("\n"):
        todo = parse_scheduled_task(line, previous_line)
        lines.append(f"{todo.description} [{todo.time_expression}]")
        previous_line = line
    return "\n".join(lines)


def resort_selection(selection: str) -> str:
    """Resort Tasks By Completion"""
    return resort_tasks_by_completion(selection)


COMMANDS = {
    "schedule": "Schedule / Reschedule",
    "unschedule": "Unschedule",
    "resort": "Resort Tasks By Completion",
}
