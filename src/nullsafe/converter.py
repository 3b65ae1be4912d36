"""
Null-safe conversion pipeline.

A conversion drives one input value through guard checks and a caller
supplied transform, producing either the converted value, a configured
default, or a raised ``ConversionError``.

The transform is guaranteed to receive a request whose value is not ``None``
(and, for text, optionally trimmed and non-empty), so it never needs its own
null checks. It may return ``request.fail(...)`` to reject a value it parsed
but does not accept.

Usage:
    from nullsafe.converter import transform

    def to_local_date(request):
        return date.fromisoformat(request.value)

    transform("2007-02-23", to_local_date).with_none_as_default()
    transform(" 2007-02-23 ", to_local_date).trim_input().or_raise("birthDate")

A word of warning: one request object is created per conversion. This is fine
for most situations, but converting very large collections this way pays that
cost per element.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Generic, Optional, TypeVar, Union

from .conversion_request import (
    ConversionOptions,
    ConversionRequest,
    Failed,
    OnFailure,
    RaiseError,
    UseDefault,
)
from .converter_helpers import guard_input, resolve_failure
from .exceptions import ConversionError

T = TypeVar("T")

Transform = Callable[[ConversionRequest], Union[T, Failed]]


def convert(value: Any, function: Transform, options: Optional[ConversionOptions] = None) -> Any:
    """
    Run a single conversion.

    Args:
        value: Raw input of any type
        function: Transform receiving the guarded request
        options: Guard flags and failure policy; defaults to ``UseDefault(None)``

    Returns:
        The transform result, or the configured default on failure

    Raises:
        ConversionError: On failure when the options select raise mode, or when
            the transform itself raised one
    """
    options = options or ConversionOptions()

    outcome = guard_input(value, options)
    if outcome.rejected:
        return resolve_failure(value, options, description=outcome.rejection)

    request = ConversionRequest(value=outcome.value, options=options)
    try:
        result = function(request)
    except ConversionError:
        # Raised by a nested conversion in raise mode; already carries its message and label
        raise
    except Exception as exc:
        return resolve_failure(value, options, cause=exc)

    if isinstance(result, Failed):
        return resolve_failure(value, options, description=result.description, cause=result.cause)
    return result


@dataclass(frozen=True)
class Converter(Generic[T]):
    """
    Immutable builder for a conversion of one value.

    ``allow_empty_input`` and ``trim_input`` return configured copies. The
    terminal methods ``with_default``, ``with_none_as_default`` and
    ``or_raise`` select the failure policy and run the conversion.
    """

    value: Any
    function: Transform
    options: ConversionOptions = field(default_factory=ConversionOptions)

    def allow_empty_input(self) -> "Converter[T]":
        """Pass empty text on to the transform instead of treating it as missing."""
        return replace(self, options=replace(self.options, allow_empty_input=True))

    def trim_input(self) -> "Converter[T]":
        """Strip leading and trailing whitespace from text before it is checked and transformed."""
        return replace(self, options=replace(self.options, trim_input=True))

    def with_default(self, default: Optional[T]) -> Optional[T]:
        """Return ``default`` on invalid input or a failing transform."""
        return self._run(UseDefault(default))

    def with_none_as_default(self) -> Optional[T]:
        return self.with_default(None)

    def or_raise(self, label: Optional[str] = None, message: Optional[str] = None) -> T:
        """
        Raise ``ConversionError`` on invalid input or a failing transform.

        Args:
            label: Field name or similar identifying this conversion when several
                conversions share one ``except`` block
            message: Extra text placed after the message header
        """
        return self._run(RaiseError(message=message, label=label))

    def apply(self, value: Any, on_failure: Optional[OnFailure] = None) -> Optional[T]:
        """Run the same transform and guard flags on another input value."""
        options = self.options if on_failure is None else replace(self.options, on_failure=on_failure)
        return convert(value, self.function, options)

    def _run(self, on_failure: OnFailure) -> Any:
        return convert(self.value, self.function, replace(self.options, on_failure=on_failure))


def transform(value: Any, function: Transform) -> Converter:
    """Start a conversion of ``value`` with ``function``."""
    return Converter(value=value, function=function)


__all__ = ["Converter", "Transform", "convert", "transform"]
