"""
Null-safe numeric conversions.

Each target accepts numbers (including numpy-like scalars exposing ``item()``)
and numeric text. Integer targets truncate fractions toward zero and reject
values outside their range instead of wrapping around.
"""

from __future__ import annotations

import logging
import math
import re
from decimal import Decimal
from numbers import Integral, Real
from typing import Any, Optional

from ..conversion_request import ConversionRequest
from ..converter import Converter, Transform, transform
from ..formats.number_format import to_decimal
from . import to_value

logger = logging.getLogger(__name__)

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
UINT32_MAX = 2**32 - 1

_INTEGER_TEXT = re.compile(r"[+-]?\d+")
_UNSIGNED_TEXT = re.compile(r"\+?\d+")


class NumberConversionError(ValueError):
    """Raised by numeric transforms for values they cannot represent."""

    @classmethod
    def out_of_range(cls, value: object, target: str, lower: int, upper: int) -> "NumberConversionError":
        return cls(f"{value!r} is outside the {target} range [{lower}, {upper}]")

    @classmethod
    def invalid_text(cls, text: str, target: str) -> "NumberConversionError":
        return cls(f"For input string: {text!r} is not a valid {target}")

    @classmethod
    def not_finite(cls, value: object) -> "NumberConversionError":
        return cls(f"{value!r} is not a finite number")

    @classmethod
    def not_a_number(cls, value: object) -> "NumberConversionError":
        return cls(f"Unsupported type for numeric conversion: {type(value).__name__}")


def _plain_number(value: Any) -> Any:
    """Unwrap numpy-like scalars and reject values that are not numbers."""
    if isinstance(value, bool):
        raise NumberConversionError.not_a_number(value)
    if isinstance(value, (Integral, Real, Decimal)):
        return value
    if hasattr(value, "item"):
        return _plain_number(value.item())
    raise NumberConversionError.not_a_number(value)


def _truncate(value: Any, target: str) -> int:
    number = _plain_number(value)
    if isinstance(number, Integral):
        return int(number)
    if not math.isfinite(number):
        raise NumberConversionError.not_finite(value)
    truncated = int(number)
    if truncated != number:
        logger.warning("Truncating %r to %s %d loses its fractional part", value, target, truncated)
    return truncated


def _check_range(value: int, target: str, lower: int, upper: int) -> int:
    if not lower <= value <= upper:
        raise NumberConversionError.out_of_range(value, target, lower, upper)
    return value


def _parse_integer(text: str, pattern: "re.Pattern[str]", target: str) -> int:
    if not pattern.fullmatch(text):
        raise NumberConversionError.invalid_text(text, target)
    return int(text)


def _finite_decimal(number: Decimal, source: object) -> Decimal:
    if not number.is_finite():
        raise NumberConversionError.not_finite(source)
    return number


def number_as_integer(request: ConversionRequest) -> int:
    return _check_range(_truncate(request.value, "integer"), "integer", INT32_MIN, INT32_MAX)


def string_as_integer(request: ConversionRequest) -> int:
    return _check_range(_parse_integer(request.value, _INTEGER_TEXT, "integer"), "integer", INT32_MIN, INT32_MAX)


def number_as_long(request: ConversionRequest) -> int:
    return _check_range(_truncate(request.value, "long"), "long", INT64_MIN, INT64_MAX)


def string_as_long(request: ConversionRequest) -> int:
    return _check_range(_parse_integer(request.value, _INTEGER_TEXT, "long"), "long", INT64_MIN, INT64_MAX)


def number_as_float(request: ConversionRequest) -> float:
    return float(_plain_number(request.value))


def string_as_float(request: ConversionRequest) -> float:
    return float(request.value)


def number_as_decimal(request: ConversionRequest) -> Decimal:
    return _finite_decimal(to_decimal(_plain_number(request.value)), request.value)


def string_as_decimal(request: ConversionRequest) -> Decimal:
    return _finite_decimal(to_decimal(float(request.value)), request.value)


def number_as_big_integer(request: ConversionRequest) -> int:
    return _check_range(_truncate(request.value, "unsigned integer"), "unsigned integer", 0, UINT32_MAX)


def string_as_big_integer(request: ConversionRequest) -> int:
    parsed = _parse_integer(request.value, _UNSIGNED_TEXT, "unsigned integer")
    return _check_range(parsed, "unsigned integer", 0, UINT32_MAX)


def _select(value: Any, from_number: Transform, from_string: Transform) -> Transform:
    return from_string if isinstance(value, str) else from_number


def convert_as_integer(value: Any) -> Converter[int]:
    """Signed 32-bit integer; fractions are truncated with a logged warning."""
    return transform(value, _select(value, number_as_integer, string_as_integer))


def as_integer(value: Any) -> Optional[int]:
    return convert_as_integer(value).with_none_as_default()


def element_as_integer(element: Any) -> Optional[int]:
    return as_integer(to_value.from_element(element))


def convert_as_long(value: Any) -> Converter[int]:
    """Signed 64-bit integer."""
    return transform(value, _select(value, number_as_long, string_as_long))


def as_long(value: Any) -> Optional[int]:
    return convert_as_long(value).with_none_as_default()


def element_as_long(element: Any) -> Optional[int]:
    return as_long(to_value.from_element(element))


def convert_as_float(value: Any) -> Converter[float]:
    return transform(value, _select(value, number_as_float, string_as_float))


def as_float(value: Any) -> Optional[float]:
    return convert_as_float(value).with_none_as_default()


def element_as_float(element: Any) -> Optional[float]:
    return as_float(to_value.from_element(element))


def convert_as_decimal(value: Any) -> Converter[Decimal]:
    """
    Finite ``Decimal``.

    Binary floats and numeric text go through their shortest float
    representation, so ``0.1`` becomes ``Decimal("0.1")``.
    """
    return transform(value, _select(value, number_as_decimal, string_as_decimal))


def as_decimal(value: Any) -> Optional[Decimal]:
    return convert_as_decimal(value).with_none_as_default()


def element_as_decimal(element: Any) -> Optional[Decimal]:
    return as_decimal(to_value.from_element(element))


def convert_as_big_integer(value: Any) -> Converter[int]:
    """Integer in the unsigned 32-bit range ``[0, 2**32)``."""
    return transform(value, _select(value, number_as_big_integer, string_as_big_integer))


def as_big_integer(value: Any) -> Optional[int]:
    return convert_as_big_integer(value).with_none_as_default()


def element_as_big_integer(element: Any) -> Optional[int]:
    return as_big_integer(to_value.from_element(element))


__all__ = [
    "INT32_MAX",
    "INT32_MIN",
    "INT64_MAX",
    "INT64_MIN",
    "NumberConversionError",
    "UINT32_MAX",
    "as_big_integer",
    "as_decimal",
    "as_float",
    "as_integer",
    "as_long",
    "convert_as_big_integer",
    "convert_as_decimal",
    "convert_as_float",
    "convert_as_integer",
    "convert_as_long",
    "element_as_big_integer",
    "element_as_decimal",
    "element_as_float",
    "element_as_integer",
    "element_as_long",
    "number_as_big_integer",
    "number_as_decimal",
    "number_as_float",
    "number_as_integer",
    "number_as_long",
    "string_as_big_integer",
    "string_as_decimal",
    "string_as_float",
    "string_as_integer",
    "string_as_long",
]
