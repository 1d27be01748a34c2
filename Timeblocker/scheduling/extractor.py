"""Bracketed time-expression extraction from raw task lines."""

from __future__ import annotations

UNCHECKED_MARKER = "- [ ]"
CHECKED_MARKER = "- [x]"
# Marker plus the single space that follows it
MARKER_PREFIX_LENGTH = len(UNCHECKED_MARKER) + 1


def strip_completion_marker(line: str) -> str:
    text = line.strip()
    if text.startswith(UNCHECKED_MARKER) or text.startswith(CHECKED_MARKER):
        return text[MARKER_PREFIX_LENGTH:]
    return text


def get_text_between_brackets(line: str) -> str:
    """
    Return the first ``[...]`` span of a task line, brackets included.

    A leading completion marker is skipped so its own brackets never match.
    Nesting is not understood: the first ``]`` after the first ``[`` closes
    the span. Returns "" when either bracket is missing.
    """
    text = strip_completion_marker(line)
    start = text.find("[")
    if start < 0:
        return ""
    end = text.find("]", start)
    if end < 0:
        return ""
    return text[start : end + 1]


def split_task_line(line: str) -> tuple[str, str]:
    """Split a task line into (description, time expression)"""
    text = strip_completion_marker(line)
    bracketed = get_text_between_brackets(line)
    if not bracketed:
        return text.strip(), ""

    start = text.find(bracketed)
    description = (text[:start] + text[start + len(bracketed) :]).strip()
    return description, bracketed[1:-1].strip()
