"""Pre-transform input guards."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..conversion_request import ConversionOptions

NULL_NOT_ALLOWED = "Null is not allowed"
EMPTY_NOT_ALLOWED = "Empty strings not allowed"


@dataclass(frozen=True)
class GuardOutcome:
    """Result of guarding an input: the effective value or a rejection reason."""

    value: Any
    rejection: Optional[str] = None

    @property
    def rejected(self) -> bool:
        return self.rejection is not None


def guard_input(value: Any, options: ConversionOptions) -> GuardOutcome:
    """
    Apply the missing, trim and empty checks in order.

    Trimming happens before the emptiness check, so whitespace-only text with
    ``trim_input`` set is rejected as empty unless empty input is allowed.
    """
    if value is None:
        return GuardOutcome(value=None, rejection=NULL_NOT_ALLOWED)

    if isinstance(value, str):
        if options.trim_input:
            value = value.strip()
        if not value and not options.allow_empty_input:
            return GuardOutcome(value=value, rejection=EMPTY_NOT_ALLOWED)

    return GuardOutcome(value=value)


__all__ = ["EMPTY_NOT_ALLOWED", "GuardOutcome", "NULL_NOT_ALLOWED", "guard_input"]
