"""Timezone and calendar tuple helpers."""

from .timezone import (
    fixed_offset,
    format_offset,
    from_struct_time,
    get_default_timezone,
    localize,
    localize_strict,
    start_of_day,
    to_default_zone,
    to_struct_time,
)

__all__ = [
    "fixed_offset",
    "format_offset",
    "from_struct_time",
    "get_default_timezone",
    "localize",
    "localize_strict",
    "start_of_day",
    "to_default_zone",
    "to_struct_time",
]
