"""
Null-safe conversion to ``Interval``.

An interval string is two equally formatted instants joined by a separator,
like ``"23.02.2007 - 18.09.2008"`` with ``DD_MM_YYYY`` and ``" - "``. The text
must be exactly as long as two printed instants plus the separator; each half
is then parsed on its own.

Intervals built from two temporal values print each bound (dates with
``ISO8601_DATE_ONLY``, everything else with ``ISO8601_DATE_TIME_WITH_MILLIS``)
and parse the result, so a missing bound yields the default like any other
invalid interval string.
"""

from __future__ import annotations

from typing import Any, Optional

from ..conversion_request import ConversionRequest
from ..converter import Converter, Transform, transform
from ..converter_helpers import input_dispatch
from ..formats import Interval, TemporalFormat
from ..formatters import to_date_string
from . import to_datetime

SEPARATOR = "/"
INVALID_FORMAT = "Invalid format"


def invalid_interval_string(separator: str, fmt: TemporalFormat) -> str:
    return f"Invalid interval string. Separator: '{separator}', format: '{fmt.pattern}'"


def string_to_interval(fmt: TemporalFormat, separator: str) -> Transform:
    def _parse(request: ConversionRequest) -> Any:
        text: str = request.value
        if len(text) != fmt.length * 2 + len(separator):
            return request.fail(invalid_interval_string(separator, fmt))
        start = to_datetime.from_value(text[: fmt.length], fmt)
        end = to_datetime.from_value(text[fmt.length + len(separator) :], fmt)
        if start is None or end is None:
            return request.fail(INVALID_FORMAT)
        return Interval(start, end)

    return _parse


def convert(text: Optional[str], fmt: TemporalFormat, separator: str) -> Converter[Interval]:
    return transform(text, string_to_interval(fmt, separator)).trim_input()


def from_value(text: Optional[str], fmt: TemporalFormat, separator: str) -> Optional[Interval]:
    return convert(text, fmt, separator).with_none_as_default()


def convert_for_year(year: Any) -> Converter[Interval]:
    """Interval from midnight January 1st to midnight December 31st of ``year``."""
    return convert(f"{year}-01-01{SEPARATOR}{year}-12-31", TemporalFormat.ISO8601_DATE_ONLY, SEPARATOR)


def for_year(year: Any) -> Optional[Interval]:
    return convert_for_year(year).with_none_as_default()


def _bound_text(value: Any, fmt: TemporalFormat) -> str:
    return str(to_date_string.from_value(value, fmt))


def _bounds_format(start: Any, end: Any) -> TemporalFormat:
    first = start if start is not None else end
    if input_dispatch.temporal_kind(first) == input_dispatch.DATE:
        return TemporalFormat.ISO8601_DATE_ONLY
    return TemporalFormat.ISO8601_DATE_TIME_WITH_MILLIS


def convert_between(start: Any, end: Any, fmt: Optional[TemporalFormat] = None) -> Converter[Interval]:
    """
    Start a conversion of two bounds to an interval.

    Args:
        start: Start bound as text, date, datetime, struct_time or XmlCalendar
        end: End bound of the same kind
        fmt: Format of the bounds when they are text

    Raises:
        MissingFormatError: If the bounds are text and ``fmt`` is missing
    """
    if isinstance(start, str) or isinstance(end, str):
        if fmt is None:
            raise input_dispatch.MissingFormatError.for_target("an interval")
        text = f"{str(start or '').strip()}{SEPARATOR}{str(end or '').strip()}"
        return convert(text, fmt, SEPARATOR)
    bounds_format = _bounds_format(start, end)
    text = _bound_text(start, bounds_format) + SEPARATOR + _bound_text(end, bounds_format)
    return convert(text, bounds_format, SEPARATOR)


def between(start: Any, end: Any, fmt: Optional[TemporalFormat] = None) -> Optional[Interval]:
    """Interval from ``start`` to ``end``; ``None`` when either bound is missing or invalid."""
    return convert_between(start, end, fmt).with_none_as_default()


__all__ = [
    "INVALID_FORMAT",
    "SEPARATOR",
    "between",
    "convert",
    "convert_between",
    "convert_for_year",
    "for_year",
    "from_value",
    "invalid_interval_string",
    "string_to_interval",
]
