"""Fixed-decimal number formats.

Examples for 10000.295:
    NO_DECIMALS  -> 10000
    N_DOT_D      -> 10000.3
    N_COMMA_DD   -> 10000,30
    N_DOT_DDDD   -> 10000.2950

Rounding is half-up applied to the shortest decimal text of the number, so
``10000.295`` rounds like the literal reads rather than like its binary float
approximation. No grouping separators are printed.
"""

from __future__ import annotations

import enum
from decimal import ROUND_HALF_UP, Decimal, localcontext
from numbers import Integral, Real


class NumberFormatError(ValueError):
    """Raised when a value cannot be printed as a fixed-decimal number."""

    @classmethod
    def not_finite(cls, value: object) -> "NumberFormatError":
        return cls(f"Cannot format non-finite number: {value!r}")

    @classmethod
    def unsupported_type(cls, value: object) -> "NumberFormatError":
        return cls(f"Unsupported type for number formatting: {type(value).__name__}")


def to_decimal(value: object) -> Decimal:
    """Convert a number to ``Decimal`` via its shortest text representation."""
    if isinstance(value, bool):
        raise NumberFormatError.unsupported_type(value)
    if isinstance(value, Decimal):
        return value
    if isinstance(value, Integral):
        return Decimal(int(value))
    if isinstance(value, Real):
        return Decimal(repr(float(value)))
    if hasattr(value, "item"):
        return to_decimal(value.item())
    raise NumberFormatError.unsupported_type(value)


class NumberFormat(enum.Enum):
    NO_DECIMALS = ("0", ".")
    N_COMMA_D = ("0.0", ",")
    N_DOT_D = ("0.0", ".")
    N_COMMA_DD = ("0.00", ",")
    N_DOT_DD = ("0.00", ".")
    N_COMMA_DDD = ("0.000", ",")
    N_DOT_DDD = ("0.000", ".")
    N_COMMA_DDDD = ("0.0000", ",")
    N_DOT_DDDD = ("0.0000", ".")

    def __init__(self, pattern: str, decimal_separator: str) -> None:
        self.pattern = pattern
        self.decimal_separator = decimal_separator

    @property
    def decimal_places(self) -> int:
        _, _, fraction = self.pattern.partition(".")
        return len(fraction)

    def format(self, value: object) -> str:
        """
        Print ``value`` with this format's decimal places and separator.

        Raises:
            NumberFormatError: If the value is not a finite number
        """
        number = to_decimal(value)
        if not number.is_finite():
            raise NumberFormatError.not_finite(value)
        quantum = Decimal(1).scaleb(-self.decimal_places)
        with localcontext() as context:
            context.prec = max(28, number.adjusted() + self.decimal_places + 2)
            rounded = number.quantize(quantum, rounding=ROUND_HALF_UP)
        text = format(rounded, "f")
        return text.replace(".", self.decimal_separator)


__all__ = ["NumberFormat", "NumberFormatError", "to_decimal"]
