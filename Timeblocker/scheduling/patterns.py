"""
Deterministic time resolver.

Recognises the fixed phrasings this tool writes itself (see
``parser.parse_scheduled_task``) so that rescheduling an unscheduled list needs no language-model call.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime

from ..shared.models import Duration

logger = logging.getLogger(__name__)

DAYS_RE = re.compile(r"for (?P<duration>\d+) days?", re.ASCII)
HOURS_RE = re.compile(r"for (?P<duration>\d+) hours?", re.ASCII)
MINUTES_RE = re.compile(r"for (?P<duration>\d+) minutes?", re.ASCII)
FULL_RE = re.compile(
    r"for (?P<duration>\d+) (?P<unit>minute|hour|day)s? on "
    r"(?:Sunday|Monday|Tuesday|Wednesday|Thursday|Friday|Saturday)? ?"
    r"(?P<month>\d+)/(?P<day>\d+)/(?P<year>\d+) @ "
    r"(?P<hour>\d+):(?P<minute>\d+) (?P<ampm>am|pm)",
    re.ASCII,
)

PASS_THROUGH = (
    (DAYS_RE, "days"),
    (HOURS_RE, "hours"),
    (MINUTES_RE, "minutes"),
)


def _expand_year(year: int) -> int:
    if year < 50:
        return 2000 + year
    if year < 100:
        return 1900 + year
    return year


def _to_24_hour(hour: int, ampm: str) -> int:
    if ampm == "am":
        return 0 if hour == 12 else hour
    return hour if hour >= 12 else hour + 12


def _build_datetime(groups: dict) -> datetime | None:
    try:
        return datetime(
            _expand_year(int(groups["year"])),
            int(groups["month"]),
            int(groups["day"]),
            _to_24_hour(int(groups["hour"]), groups["ampm"]),
            int(groups["minute"]),
        )
    except ValueError as e:
        logger.debug(f"Pattern matched an impossible date/time: {e}")
        return None


def get_datetime_from_regex(
    time_expression: str, last_known_datetime: datetime | None = None
) -> tuple[datetime | None, Duration | None]:
    """
    Resolve ``time_expression`` without any external call.

    Duration-only phrasings pass ``last_known_datetime`` through unchanged.
    Returns (None, None) when no pattern matches the whole expression.
    """
    for pattern, unit in PASS_THROUGH:
        m = pattern.fullmatch(time_expression)
        if m:
            return last_known_datetime, Duration(**{unit: int(m.group("duration"))})

    m = FULL_RE.fullmatch(time_expression)
    if m:
        dt = _build_datetime(m.groupdict())
        if dt is not None:
            unit = m.group("unit") + "s"
            return dt, Duration(**{unit: int(m.group("duration"))})

    return None, None
