"""Exception classes for the conversion library.

All library exceptions inherit from ``ApplicationError`` so callers can catch
everything raised by ``nullsafe`` with a single handler.

Exception classes support two patterns:
1. No-argument raise: raise ConversionError()
2. Contextual attributes: err = ConversionError("...", label="birthDate"); raise err
"""

from __future__ import annotations

from typing import Any, Optional


class ApplicationError(Exception):
    """Base exception for all library errors.

    Supports keyword arguments that are stored as attributes for debugging.
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "Application error occurred"
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class ConversionError(ApplicationError, ValueError):
    """Conversion of a value failed."""

    def __init__(
        self,
        message: str = "",
        *,
        label: Optional[str] = None,
        cause: Optional[BaseException] = None,
        **kwargs: Any,
    ) -> None:
        if not message:
            message = "Conversion of a value failed"
        super().__init__(message, **kwargs)
        self.label = label
        self.cause = cause

    @classmethod
    def for_failure(
        cls, message: str, label: Optional[str], cause: Optional[BaseException] = None
    ) -> "ConversionError":
        """Create error for a resolved pipeline failure."""
        return cls(message, label=label, cause=cause)


__all__ = ["ApplicationError", "ConversionError"]
