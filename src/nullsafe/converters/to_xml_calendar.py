"""
Null-safe conversion to ``XmlCalendar``.

``as_date_only`` keeps year, month and day and leaves every time field and the
timezone undefined. ``as_date_time`` fills in all fields and the UTC offset;
naive datetimes and zone-less text take the offset of the default zone.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Callable, Optional

from ..conversion_request import ConversionRequest
from ..converter import Converter, Transform, transform
from ..converter_helpers import input_dispatch
from ..formats import TemporalFormat, XmlCalendar
from ..time_helpers import from_struct_time, localize, start_of_day
from . import to_value
from .to_datetime import DATEFORMAT_DESCRIPTION


def _date_only(moment: date) -> XmlCalendar:
    return XmlCalendar.date_only(moment.year, moment.month, moment.day)


def _date_time(moment: datetime) -> XmlCalendar:
    return XmlCalendar.from_datetime(moment if moment.tzinfo is not None else localize(moment))


def _string_transform(build: Callable[[datetime], XmlCalendar]) -> Callable[[TemporalFormat], Transform]:
    def _for_format(fmt: TemporalFormat) -> Transform:
        def _parse(request: ConversionRequest) -> Any:
            try:
                moment = fmt.parse(request.value)
            except ValueError as exc:
                return request.fail(DATEFORMAT_DESCRIPTION + fmt.pattern, exc)
            return build(moment)

        return _parse

    return _for_format


string_as_date_only = _string_transform(_date_only)
string_as_date_time = _string_transform(_date_time)


def calendar_as_date_only(request: ConversionRequest) -> XmlCalendar:
    return _date_only(from_struct_time(request.value))


def date_as_date_only(request: ConversionRequest) -> XmlCalendar:
    return _date_only(request.value)


def calendar_as_date_time(request: ConversionRequest) -> XmlCalendar:
    return _date_time(from_struct_time(request.value))


def date_as_date_time(request: ConversionRequest) -> XmlCalendar:
    return _date_time(start_of_day(request.value))


def datetime_as_date_time(request: ConversionRequest) -> XmlCalendar:
    return _date_time(request.value)


def xml_calendar_as_date_only(request: ConversionRequest) -> XmlCalendar:
    calendar: XmlCalendar = request.value
    return XmlCalendar.date_only(calendar.year, calendar.month, calendar.day)


def xml_calendar_as_date_time(request: ConversionRequest) -> XmlCalendar:
    return _date_time(request.value.to_datetime())


_DATE_ONLY_TRANSFORMS = {
    input_dispatch.DATETIME: date_as_date_only,
    input_dispatch.DATE: date_as_date_only,
    input_dispatch.CALENDAR: calendar_as_date_only,
    input_dispatch.XML_CALENDAR: xml_calendar_as_date_only,
}

_DATE_TIME_TRANSFORMS = {
    input_dispatch.DATETIME: datetime_as_date_time,
    input_dispatch.DATE: date_as_date_time,
    input_dispatch.CALENDAR: calendar_as_date_time,
    input_dispatch.XML_CALENDAR: xml_calendar_as_date_time,
}


def convert_as_date_only(value: Any, fmt: Optional[TemporalFormat] = None) -> Converter[XmlCalendar]:
    return transform(
        value,
        input_dispatch.select_transform(value, fmt, _DATE_ONLY_TRANSFORMS, string_as_date_only, "an xsd:date calendar"),
    )


def convert_as_date_time(value: Any, fmt: Optional[TemporalFormat] = None) -> Converter[XmlCalendar]:
    return transform(
        value,
        input_dispatch.select_transform(value, fmt, _DATE_TIME_TRANSFORMS, string_as_date_time, "an xsd:dateTime calendar"),
    )


def as_date_only(value: Any, fmt: Optional[TemporalFormat] = None) -> Optional[XmlCalendar]:
    """
    Convert ``value`` to a date-only calendar.

    Args:
        value: Text, struct_time, XmlCalendar, date or datetime
        fmt: Format of ``value`` when it is text

    Returns:
        The calendar, or ``None`` when the value is missing or invalid
    """
    return convert_as_date_only(value, fmt).trim_input().with_none_as_default()


def as_date_time(value: Any, fmt: Optional[TemporalFormat] = None) -> Optional[XmlCalendar]:
    return convert_as_date_time(value, fmt).trim_input().with_none_as_default()


def element_as_date_only(element: Any, fmt: Optional[TemporalFormat] = None) -> Optional[XmlCalendar]:
    return as_date_only(to_value.from_element(element), fmt)


def element_as_date_time(element: Any, fmt: Optional[TemporalFormat] = None) -> Optional[XmlCalendar]:
    return as_date_time(to_value.from_element(element), fmt)


__all__ = [
    "as_date_only",
    "as_date_time",
    "calendar_as_date_only",
    "calendar_as_date_time",
    "convert_as_date_only",
    "convert_as_date_time",
    "date_as_date_only",
    "date_as_date_time",
    "datetime_as_date_time",
    "element_as_date_only",
    "element_as_date_time",
    "string_as_date_only",
    "string_as_date_time",
    "xml_calendar_as_date_only",
    "xml_calendar_as_date_time",
]
