"""Selecting a transform by the runtime type of the input value."""

from __future__ import annotations

import time
from datetime import date, datetime
from typing import Any, Callable, Mapping, Optional

from ..conversion_request import ConversionRequest, Failed
from ..formats import TemporalFormat, XmlCalendar

Transform = Callable[[ConversionRequest], Any]

STRING = "string"
DATETIME = "datetime"
DATE = "date"
CALENDAR = "calendar"
XML_CALENDAR = "xml_calendar"

class MissingFormatError(TypeError):
    """Raised when text is converted without a temporal format."""

    @classmethod
    def for_target(cls, target: str) -> "MissingFormatError":
        return cls(f"A TemporalFormat is required to convert text to {target}")

def temporal_kind(value: Any) -> Optional[str]:
    """Classify a temporal input; ``datetime`` is checked before its ``date`` base class."""
    if isinstance(value, str):
        return STRING
    if isinstance(value, datetime):
        return DATETIME
    if isinstance(value, date):
        return DATE
    if isinstance(value, time.struct_time):
        return CALENDAR
    if isinstance(value, XmlCalendar):
        return XML_CALENDAR
    return None

def unsupported_input(request: ConversionRequest) -> Failed:
    return request.fail(f"Unsupported input type {type(request.value).__name__}")

def select_transform(
    value: Any,
    fmt: Optional[TemporalFormat],
    transforms: Mapping[str, Transform],
    string_transform: Callable[[TemporalFormat], Transform],
    target: str,
) -> Transform:
    """
    Pick the transform for ``value``.

    ``None`` input gets any transform since the pipeline never invokes it.

    Raises:
        MissingFormatError: If ``value`` is text and no format was given
    """
    kind = temporal_kind(value)
    if kind == STRING:
        if fmt is None:
            raise MissingFormatError.for_target(target)
        return string_transform(fmt)
    if kind is None:
        return unsupported_input
    return transforms.get(kind, unsupported_input)

__all__ = [
    "CALENDAR",
    "DATE",
    "DATETIME",
    "MissingFormatError",
    "STRING",
    "XML_CALENDAR",
    "select_transform",
    "temporal_kind",
    "unsupported_input",
]
