"""
Scheduling pipeline.

Walks task lines in order and resolves each bracketed time expression, first
with the fixed patterns and then with the language model. The end time of the
last resolved task is carried forward so a task without an explicit start
follows the one before it.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from ..agents.time_resolver import NaturalLanguageTimeResolver
from ..shared.models import Duration, ScheduledTask
from .extractor import split_task_line
from .patterns import get_datetime_from_regex

logger = logging.getLogger(__name__)


class Scheduler:
    """Turns informal task lines into scheduled tasks, one line at a time"""

    def __init__(
        self,
        resolver: NaturalLanguageTimeResolver,
        notify: Callable[[str], None] | None = None,
    ):
        self.resolver = resolver
        self.notify = notify

    async def resolve(
        self, time_expression: str, previous_end: datetime | None
    ) -> tuple[datetime | None, Duration | None]:
        dt, duration = get_datetime_from_regex(time_expression, previous_end)
        if dt is not None and duration is not None:
            return dt, duration
        return await self.resolver.resolve(time_expression, previous_end)

    async def parse_todos_with_schedule(self, text: str) -> list[ScheduledTask]:
        """
        Schedule every line of ``text``.

        Lines whose expression cannot be resolved are left out of the result
        and reported through ``notify``; the chain end time is not advanced
        for them.
        """
        lines = text.split("\n")
        todos: list[ScheduledTask] = []
        previous_end: datetime | None = None

        for i, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            logger.info(f"Scheduling task {i}/{len(lines)}")

            description, time_expression = split_task_line(line)
            if not time_expression:
                self._report(f"No time expression found in task {i}: {line.strip()}")
                continue

            dt, duration = await self.resolve(time_expression, previous_end)
            if dt is None or duration is None:
                self._report(f"Unable to schedule task {i}: [{time_expression}]")
                continue

            todo = ScheduledTask(
                time_expression=time_expression,
                description=description,
                start=dt,
                duration=duration,
            )
            try:
                end = todo.end
            except OverflowError:
                self._report(
                    f"Task {i} ends past the last representable date: [{time_expression}]"
                )
                continue

            todos.append(todo)
            if end is not None:
                previous_end = end
            logger.info(f"Finished with task {i}")

        return todos

    def _report(self, message: str):
        logger.warning(message)
        if self.notify:
            self.notify(message)
