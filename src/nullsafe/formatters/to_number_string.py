"""Null-safe printing of numbers with a ``NumberFormat``."""

from __future__ import annotations

from typing import Any, Optional

from ..conversion_request import ConversionRequest
from ..converter import Converter, Transform, transform
from ..formats import NumberFormat


def printer(fmt: NumberFormat) -> Transform:
    def _print(request: ConversionRequest) -> str:
        return fmt.format(request.value)

    return _print


def format_number(number: Any, fmt: NumberFormat) -> Converter[str]:
    return transform(number, printer(fmt))


def from_number(number: Any, fmt: NumberFormat) -> Optional[str]:
    """
    Print ``number`` rounded half-up to the decimals of ``fmt``.

    Returns:
        The text, or ``None`` for a missing, non-finite or non-numeric value
    """
    return format_number(number, fmt).with_none_as_default()


__all__ = ["format_number", "from_number", "printer"]
