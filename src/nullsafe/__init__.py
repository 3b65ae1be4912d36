"""Null-safe value conversion with configurable defaults and labeled errors."""

from .conversion_request import (
    ConversionOptions,
    ConversionRequest,
    Failed,
    OnFailure,
    RaiseError,
    UseDefault,
)
from .converter import Converter, Transform, convert, transform
from .exceptions import ApplicationError, ConversionError
from .formats import Interval, NumberFormat, TemporalFormat, XmlCalendar

__all__ = [
    "ApplicationError",
    "ConversionError",
    "ConversionOptions",
    "ConversionRequest",
    "Converter",
    "Failed",
    "Interval",
    "NumberFormat",
    "OnFailure",
    "RaiseError",
    "TemporalFormat",
    "Transform",
    "UseDefault",
    "XmlCalendar",
    "convert",
    "transform",
]
