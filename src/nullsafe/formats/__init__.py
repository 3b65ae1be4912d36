"""Date, time and number formats plus the calendar and interval value types."""

from .interval import Interval, InvalidIntervalError
from .number_format import NumberFormat, NumberFormatError
from .temporal_format import DateTimeAwareness, TemporalFormat, TemporalFormatError
from .xml_calendar import XmlCalendar, XmlCalendarError, is_date_only, is_date_time

__all__ = [
    "DateTimeAwareness",
    "Interval",
    "InvalidIntervalError",
    "NumberFormat",
    "NumberFormatError",
    "TemporalFormat",
    "TemporalFormatError",
    "XmlCalendar",
    "XmlCalendarError",
    "is_date_only",
    "is_date_time",
]
