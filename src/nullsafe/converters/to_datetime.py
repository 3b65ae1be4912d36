"""
Null-safe conversion to aware datetimes in the default zone.

Accepted inputs are text with a ``TemporalFormat``, ``time.struct_time``,
``XmlCalendar``, ``date`` and naive or aware ``datetime``. Naive datetimes are
read as wall-clock time in the default zone.
"""

from __future__ import annotations

import time
from datetime import date, datetime
from typing import Any, Optional

from ..conversion_request import ConversionRequest
from ..converter import Converter, Transform, transform
from ..converter_helpers import input_dispatch
from ..formats import TemporalFormat, XmlCalendar
from ..time_helpers import from_struct_time, start_of_day, to_default_zone
from . import to_value

DATEFORMAT_DESCRIPTION = "Dateformat: "


def string_to_datetime(fmt: TemporalFormat) -> Transform:
    def _parse(request: ConversionRequest) -> Any:
        try:
            return fmt.parse(request.value)
        except ValueError as exc:
            return request.fail(DATEFORMAT_DESCRIPTION + fmt.pattern, exc)

    return _parse


def calendar_to_datetime(request: ConversionRequest) -> datetime:
    value: time.struct_time = request.value
    return from_struct_time(value)


def xml_calendar_to_datetime(request: ConversionRequest) -> datetime:
    value: XmlCalendar = request.value
    return value.to_datetime()


def date_to_datetime(request: ConversionRequest) -> datetime:
    value: date = request.value
    return start_of_day(value)


def datetime_to_datetime(request: ConversionRequest) -> datetime:
    return to_default_zone(request.value)


_TRANSFORMS = {
    input_dispatch.DATETIME: datetime_to_datetime,
    input_dispatch.DATE: date_to_datetime,
    input_dispatch.CALENDAR: calendar_to_datetime,
    input_dispatch.XML_CALENDAR: xml_calendar_to_datetime,
}


def convert(value: Any, fmt: Optional[TemporalFormat] = None) -> Converter[datetime]:
    """
    Start a conversion of ``value`` to an aware datetime.

    Args:
        value: Text, struct_time, XmlCalendar, date or datetime
        fmt: Format of ``value`` when it is text

    Raises:
        MissingFormatError: If ``value`` is text and ``fmt`` is missing
    """
    return transform(value, input_dispatch.select_transform(value, fmt, _TRANSFORMS, string_to_datetime, "datetime"))


def from_value(value: Any, fmt: Optional[TemporalFormat] = None) -> Optional[datetime]:
    """Convert ``value``, trimming text input; ``None`` when missing or invalid."""
    return convert(value, fmt).trim_input().with_none_as_default()


def from_element(element: Any, fmt: Optional[TemporalFormat] = None) -> Optional[datetime]:
    return from_value(to_value.from_element(element), fmt)


def _year_date(year: Any, month_day: str) -> Any:
    return None if year is None else f"{year}-{month_day}"


def for_start_of_year(year: Any) -> Optional[datetime]:
    """Midnight of January 1st of ``year`` (``"2012"`` or ``2012``) in the default zone."""
    return convert(_year_date(year, "01-01"), TemporalFormat.ISO8601_DATE_ONLY).with_none_as_default()


def for_end_of_year(year: Any) -> Optional[datetime]:
    """Midnight of December 31st of ``year`` in the default zone."""
    return convert(_year_date(year, "12-31"), TemporalFormat.ISO8601_DATE_ONLY).with_none_as_default()


__all__ = [
    "calendar_to_datetime",
    "convert",
    "date_to_datetime",
    "datetime_to_datetime",
    "for_end_of_year",
    "for_start_of_year",
    "from_element",
    "from_value",
    "string_to_datetime",
    "xml_calendar_to_datetime",
]
