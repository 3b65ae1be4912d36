"""Time interval value type."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta


class InvalidIntervalError(ValueError):
    """Raised when an interval cannot be built from its parts."""

    @classmethod
    def end_before_start(cls, start: datetime, end: datetime) -> "InvalidIntervalError":
        return cls(f"The end instant must be greater than or equal to the start: {start.isoformat()} > {end.isoformat()}")

    @classmethod
    def naive_bound(cls, bound: datetime) -> "InvalidIntervalError":
        return cls(f"Interval bounds must be timezone-aware: {bound.isoformat()}")


@dataclass(frozen=True)
class Interval:
    """Half-open span ``[start, end)`` between two aware datetimes."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        for bound in (self.start, self.end):
            if bound.tzinfo is None:
                raise InvalidIntervalError.naive_bound(bound)
        if self.end < self.start:
            raise InvalidIntervalError.end_before_start(self.start, self.end)

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment < self.end

    def __str__(self) -> str:
        return f"{self.start.isoformat()}/{self.end.isoformat()}"


__all__ = ["Interval", "InvalidIntervalError"]
