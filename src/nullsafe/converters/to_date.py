"""Null-safe conversion to ``datetime.date``."""

from __future__ import annotations

from datetime import date
from typing import Any, Optional

from ..conversion_request import ConversionRequest
from ..converter import Converter, Transform, transform
from ..converter_helpers import input_dispatch
from ..formats import TemporalFormat
from ..time_helpers import from_struct_time
from . import to_value
from .to_datetime import DATEFORMAT_DESCRIPTION


def string_to_date(fmt: TemporalFormat) -> Transform:
    def _parse(request: ConversionRequest) -> Any:
        try:
            return fmt.parse(request.value).date()
        except ValueError as exc:
            return request.fail(DATEFORMAT_DESCRIPTION + fmt.pattern, exc)

    return _parse


def calendar_to_date(request: ConversionRequest) -> date:
    return from_struct_time(request.value).date()


def xml_calendar_to_date(request: ConversionRequest) -> date:
    return request.value.to_date()


def datetime_to_date(request: ConversionRequest) -> date:
    # Aware values keep the calendar day of their own zone
    return request.value.date()


def date_to_date(request: ConversionRequest) -> date:
    return request.value


_TRANSFORMS = {
    input_dispatch.DATETIME: datetime_to_date,
    input_dispatch.DATE: date_to_date,
    input_dispatch.CALENDAR: calendar_to_date,
    input_dispatch.XML_CALENDAR: xml_calendar_to_date,
}


def convert(value: Any, fmt: Optional[TemporalFormat] = None) -> Converter[date]:
    return transform(value, input_dispatch.select_transform(value, fmt, _TRANSFORMS, string_to_date, "date"))


def from_value(value: Any, fmt: Optional[TemporalFormat] = None) -> Optional[date]:
    return convert(value, fmt).trim_input().with_none_as_default()


def from_element(element: Any, fmt: Optional[TemporalFormat] = None) -> Optional[date]:
    return from_value(to_value.from_element(element), fmt)


def for_start_of_year(year: Any) -> Optional[date]:
    text = None if year is None else f"{year}-01-01"
    return convert(text, TemporalFormat.ISO8601_DATE_ONLY).with_none_as_default()


def for_end_of_year(year: Any) -> Optional[date]:
    text = None if year is None else f"{year}-12-31"
    return convert(text, TemporalFormat.ISO8601_DATE_ONLY).with_none_as_default()


__all__ = [
    "calendar_to_date",
    "convert",
    "date_to_date",
    "datetime_to_date",
    "for_end_of_year",
    "for_start_of_year",
    "from_element",
    "from_value",
    "string_to_date",
    "xml_calendar_to_date",
]
