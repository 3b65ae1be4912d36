"""
Null-safe conversion to ``time.struct_time`` calendar tuples.

Results are expressed in the default zone and carry ``tm_zone`` and
``tm_gmtoff``. Calendar tuples have whole-second resolution, so milliseconds
are dropped.
"""

from __future__ import annotations

import time
from typing import Any, Optional

from ..conversion_request import ConversionRequest
from ..converter import Converter, Transform, transform
from ..converter_helpers import input_dispatch
from ..formats import TemporalFormat
from ..time_helpers import start_of_day, to_struct_time
from . import to_value
from .to_datetime import DATEFORMAT_DESCRIPTION


def string_to_calendar(fmt: TemporalFormat) -> Transform:
    def _parse(request: ConversionRequest) -> Any:
        try:
            moment = fmt.parse(request.value)
        except ValueError as exc:
            return request.fail(DATEFORMAT_DESCRIPTION + fmt.pattern, exc)
        return to_struct_time(moment)

    return _parse


def date_to_calendar(request: ConversionRequest) -> time.struct_time:
    return to_struct_time(start_of_day(request.value))


def datetime_to_calendar(request: ConversionRequest) -> time.struct_time:
    return to_struct_time(request.value)


def xml_calendar_to_calendar(request: ConversionRequest) -> time.struct_time:
    return to_struct_time(request.value.to_datetime())


def calendar_to_calendar(request: ConversionRequest) -> time.struct_time:
    return request.value


_TRANSFORMS = {
    input_dispatch.DATETIME: datetime_to_calendar,
    input_dispatch.DATE: date_to_calendar,
    input_dispatch.CALENDAR: calendar_to_calendar,
    input_dispatch.XML_CALENDAR: xml_calendar_to_calendar,
}


def convert(value: Any, fmt: Optional[TemporalFormat] = None) -> Converter[time.struct_time]:
    return transform(value, input_dispatch.select_transform(value, fmt, _TRANSFORMS, string_to_calendar, "calendar"))


def from_value(value: Any, fmt: Optional[TemporalFormat] = None) -> Optional[time.struct_time]:
    return convert(value, fmt).trim_input().with_none_as_default()


def from_element(element: Any, fmt: Optional[TemporalFormat] = None) -> Optional[time.struct_time]:
    return from_value(to_value.from_element(element), fmt)


__all__ = [
    "calendar_to_calendar",
    "convert",
    "date_to_calendar",
    "datetime_to_calendar",
    "from_element",
    "from_value",
    "string_to_calendar",
    "xml_calendar_to_calendar",
]
