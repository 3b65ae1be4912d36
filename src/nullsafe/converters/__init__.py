"""Null-safe converters, one module per target type."""

from . import to_calendar, to_date, to_datetime, to_interval, to_number, to_value, to_xml_calendar

__all__ = [
    "to_calendar",
    "to_date",
    "to_datetime",
    "to_interval",
    "to_number",
    "to_value",
    "to_xml_calendar",
]
