"""
XML schema calendar values (``xsd:date`` / ``xsd:dateTime``).

SOAP and XML-binding payloads carry dates as calendars where every field may
be undefined. ``XmlCalendar`` keeps that shape: time fields and the timezone
offset are ``None`` when absent, and a calendar counts as a date-time only when
hour, minute and second are all defined and in range.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Optional

from dateutil import parser as dateutil_parser

from ..time_helpers import fixed_offset, localize, to_default_zone

HOURS_OF_DAY = 23
MINUTES_OF_HOUR = 59
SECONDS_OF_MINUTE = 59

_DATE_PATTERN = re.compile(r"^(-?\d{4,})-(\d{2})-(\d{2})(Z|[+-]\d{2}:\d{2})?$")
_FRACTION_PATTERN = re.compile(r"T\d{2}(?::?\d{2}){2}[.,]\d")


class XmlCalendarError(ValueError):
    """Raised when an XML calendar is malformed or cannot be interpreted."""

    @classmethod
    def invalid_lexical(cls, text: str) -> "XmlCalendarError":
        return cls(f"Invalid xsd:date or xsd:dateTime value: {text!r}")


def _parse_offset(text: Optional[str]) -> Optional[int]:
    if not text:
        return None
    if text == "Z":
        return 0
    sign = -1 if text[0] == "-" else 1
    hours, minutes = text[1:].split(":")
    return sign * (int(hours) * 60 + int(minutes))


def _format_offset(minutes: Optional[int]) -> str:
    if minutes is None:
        return ""
    if minutes == 0:
        return "Z"
    sign = "-" if minutes < 0 else "+"
    hours, remainder = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}:{remainder:02d}"


@dataclass(frozen=True)
class XmlCalendar:
    year: int
    month: int
    day: int
    hour: Optional[int] = None
    minute: Optional[int] = None
    second: Optional[int] = None
    millisecond: Optional[int] = None
    timezone: Optional[int] = None  # offset from UTC in minutes

    @classmethod
    def date_only(cls, year: int, month: int, day: int) -> "XmlCalendar":
        return cls(year=year, month=month, day=day)

    @classmethod
    def from_datetime(cls, value: datetime) -> "XmlCalendar":
        """Build a date-time calendar keeping the offset of an aware ``value``."""
        offset = value.utcoffset()
        return cls(
            year=value.year,
            month=value.month,
            day=value.day,
            hour=value.hour,
            minute=value.minute,
            second=value.second,
            millisecond=value.microsecond // 1000,
            timezone=int(offset.total_seconds()) // 60 if offset is not None else None,
        )

    @classmethod
    def parse(cls, text: str) -> "XmlCalendar":
        """
        Parse the lexical form of ``xsd:date`` or ``xsd:dateTime``.

        Raises:
            XmlCalendarError: If the text is neither form
        """
        stripped = text.strip()
        date_match = _DATE_PATTERN.match(stripped)
        if date_match:
            year, month, day, offset = date_match.groups()
            return cls(year=int(year), month=int(month), day=int(day), timezone=_parse_offset(offset))
        if "T" not in stripped:
            raise XmlCalendarError.invalid_lexical(text)
        try:
            parsed = dateutil_parser.isoparse(stripped)
        except ValueError as exc:
            raise XmlCalendarError.invalid_lexical(text) from exc
        calendar = cls.from_datetime(parsed)
        if not _FRACTION_PATTERN.search(stripped):
            return replace(calendar, millisecond=None)
        return calendar

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def to_datetime(self) -> datetime:
        """
        Return an aware datetime in the default zone.

        Date-only calendars become midnight in the default zone. Calendars with
        a timezone offset are read in that offset, otherwise in the default zone.
        """
        if not is_date_time(self):
            return localize(datetime(self.year, self.month, self.day))
        naive = datetime(
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            (self.millisecond or 0) * 1000,
        )
        if self.timezone is None:
            return localize(naive)
        return to_default_zone(naive.replace(tzinfo=fixed_offset(self.timezone)))

    def to_xml_format(self) -> str:
        text = f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
        if is_date_time(self):
            text += f"T{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
            if self.millisecond is not None:
                text += f".{self.millisecond:03d}"
        return text + _format_offset(self.timezone)

    def __str__(self) -> str:
        return self.to_xml_format()


def _in_range(value: Optional[int], upper: int) -> bool:
    return value is not None and 0 <= value <= upper


def is_date_time(calendar: Optional[XmlCalendar]) -> bool:
    """Return True when hour, minute and second are all defined and valid."""
    if calendar is None:
        return False
    return (
        _in_range(calendar.hour, HOURS_OF_DAY)
        and _in_range(calendar.minute, MINUTES_OF_HOUR)
        and _in_range(calendar.second, SECONDS_OF_MINUTE)
    )


def is_date_only(calendar: Optional[XmlCalendar]) -> bool:
    if calendar is None:
        return False
    return not is_date_time(calendar)


__all__ = ["XmlCalendar", "XmlCalendarError", "is_date_only", "is_date_time"]
