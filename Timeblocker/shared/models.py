from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 60 * 24


class Duration(BaseModel):
    """
    A task length kept as separate day/hour/minute components.

    Components are never folded into each other: ``Duration(hours=4)`` stays
    four hours. A duration with no component set is the "unresolved" value.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    minutes: Optional[int] = Field(default=None, ge=0)
    hours: Optional[int] = Field(default=None, ge=0)
    days: Optional[int] = Field(default=None, ge=0)

    @property
    def is_resolved(self) -> bool:
        return not (self.minutes is None and self.hours is None and self.days is None)

    def to_minutes(self) -> int | None:
        """Total length in minutes, or None when no component is set"""
        if not self.is_resolved:
            return None
        return (
            (self.minutes or 0)
            + (self.hours or 0) * MINUTES_PER_HOUR
            + (self.days or 0) * MINUTES_PER_DAY
        )


class ScheduledTask(BaseModel):
    time_expression: str
    description: str
    start: datetime
    duration: Duration

    @property
    def end(self) -> datetime | None:
        """Start plus duration; None if the duration is unresolved"""
        minutes = self.duration.to_minutes()
        if minutes is None:
            return None
        return self.start + timedelta(minutes=minutes)


def to_local_naive(value: datetime) -> datetime:
    """Drop timezone information, converting aware values to local time first"""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)
