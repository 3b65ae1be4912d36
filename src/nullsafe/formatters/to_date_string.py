"""Null-safe printing of dates, datetimes and calendars with a ``TemporalFormat``."""

from __future__ import annotations

from datetime import date
from typing import Any, Optional

from ..conversion_request import ConversionRequest
from ..converter import Converter, Transform, transform
from ..converter_helpers import input_dispatch
from ..formats import TemporalFormat
from ..time_helpers import from_struct_time


def _printable(value: Any) -> date:
    kind = input_dispatch.temporal_kind(value)
    if kind == input_dispatch.CALENDAR:
        return from_struct_time(value)
    if kind == input_dispatch.XML_CALENDAR:
        return value.to_datetime()
    return value


def printer(fmt: TemporalFormat) -> Transform:
    """Transform printing a date, datetime, struct_time or XmlCalendar in ``fmt``."""

    def _print(request: ConversionRequest) -> str:
        return fmt.format(_printable(request.value))

    return _print


def format_value(value: Any, fmt: TemporalFormat) -> Converter[str]:
    return transform(value, printer(fmt))


def from_value(value: Any, fmt: TemporalFormat) -> Optional[str]:
    """Print ``value`` in ``fmt``; ``None`` when the value is missing or cannot be printed."""
    return format_value(value, fmt).with_none_as_default()


__all__ = ["format_value", "from_value", "printer"]
