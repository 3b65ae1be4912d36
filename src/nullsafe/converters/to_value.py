"""Unwrap boxed XML-binding elements into their payload."""

from __future__ import annotations

from typing import Any, Optional, Protocol, TypeVar

from ..conversion_request import ConversionRequest
from ..converter import Converter, transform

T = TypeVar("T")


class BoxedValue(Protocol[T]):
    """Element wrapper exposing its payload as ``value`` (e.g. a SOAP/XML-binding element)."""

    value: Optional[T]


def element_to_value(request: ConversionRequest) -> Any:
    return request.value.value


def convert_element(element: Optional[BoxedValue[T]]) -> Converter[T]:
    return transform(element, element_to_value)


def from_element(element: Optional[BoxedValue[T]]) -> Optional[T]:
    """Return the payload of ``element``, or ``None`` when the element is missing."""
    return convert_element(element).with_none_as_default()


__all__ = ["BoxedValue", "convert_element", "element_to_value", "from_element"]
