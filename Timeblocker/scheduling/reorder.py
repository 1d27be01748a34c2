"""Reorder task lines by their completion marker."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

COMPLETE = "complete"
CANCELLED = "cancelled"
IN_PROGRESS = "in_progress"
INCOMPLETE = "incomplete"

MARKERS = {
    "- [x]": COMPLETE,
    "- [-]": CANCELLED,
    "- [/]": IN_PROGRESS,
    "- [ ]": INCOMPLETE,
}
GROUP_ORDER = (COMPLETE, CANCELLED, IN_PROGRESS, INCOMPLETE)


def resort_tasks_by_completion(text: str) -> str:
    """
    Group lines as complete, cancelled, in progress, incomplete, then anything else.

    Indented lines stay with the task placed just before them. Relative order
    inside each group is preserved.
    """
    groups: dict[str, list[str]] = {name: [] for name in GROUP_ORDER}
    unknown: list[str] = []
    last_placed = None

    for line in text.split("\n"):
        group = next((g for m, g in MARKERS.items() if line.startswith(m)), None)
        if group is not None:
            groups[group].append(line)
            last_placed = group
        elif line.startswith("  ") or line.startswith("\t"):
            if last_placed is not None:
                groups[last_placed].append(line)
            else:
                logger.debug(f"Indented line with no parent task: {line!r}")
                unknown.append(line)
        else:
            unknown.append(line)

    ordered = [line for name in GROUP_ORDER for line in groups[name]] + unknown
    return "\n".join(ordered).strip()
