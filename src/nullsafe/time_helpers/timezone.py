"""Default timezone helpers used when interpreting zone-less values."""

from __future__ import annotations

import time
from datetime import date, datetime, timedelta, timezone

import pytz

from ..config import get_conversion_settings


def get_default_timezone() -> pytz.BaseTzInfo:
    """Return the configured default timezone (``NULLSAFE_TIMEZONE``)."""
    return get_conversion_settings().timezone


def localize(naive: datetime) -> datetime:
    """Interpret a naive datetime as wall-clock time in the default zone."""
    return get_default_timezone().localize(naive)


def localize_strict(naive: datetime) -> datetime:
    """
    Like ``localize``, but refuse wall-clock times skipped by a DST transition.

    Times repeated when clocks go back resolve to the earlier instant.

    Raises:
        pytz.NonExistentTimeError: If the time falls in a DST gap
    """
    zone = get_default_timezone()
    try:
        return zone.localize(naive, is_dst=None)
    except pytz.AmbiguousTimeError:
        return zone.localize(naive, is_dst=True)


def to_default_zone(value: datetime) -> datetime:
    """Return ``value`` as an aware datetime expressed in the default zone."""
    if value.tzinfo is None:
        return localize(value)
    return value.astimezone(get_default_timezone())


def start_of_day(value: date) -> datetime:
    return localize(datetime(value.year, value.month, value.day))


def fixed_offset(minutes: int) -> timezone:
    return timezone(timedelta(minutes=minutes))


def from_struct_time(value: time.struct_time) -> datetime:
    """Build an aware datetime from a calendar tuple, honoring ``tm_gmtoff`` when present."""
    naive = datetime(*value[:6])
    offset = getattr(value, "tm_gmtoff", None)
    if offset is None:
        return localize(naive)
    return to_default_zone(naive.replace(tzinfo=timezone(timedelta(seconds=offset))))


def to_struct_time(value: datetime) -> time.struct_time:
    """Build a calendar tuple carrying the zone name and UTC offset of ``value``."""
    aware = to_default_zone(value)
    offset = aware.utcoffset()
    gmtoff = int(offset.total_seconds()) if offset is not None else None
    return time.struct_time(tuple(aware.timetuple()) + (aware.tzname(), gmtoff))


def format_offset(value: datetime) -> str:
    """Render the UTC offset of an aware datetime as ``+HH:MM``."""
    offset = value.utcoffset() or timedelta(0)
    total_minutes = int(offset.total_seconds()) // 60
    sign = "-" if total_minutes < 0 else "+"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


__all__ = [
    "fixed_offset",
    "format_offset",
    "from_struct_time",
    "get_default_timezone",
    "localize",
    "start_of_day",
    "to_default_zone",
    "to_struct_time",
]
