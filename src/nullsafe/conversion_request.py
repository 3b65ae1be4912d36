"""Value types describing a single conversion attempt.

A ``ConversionRequest`` is what a transform function receives: the guarded
input value and the options in force. Options are immutable; the only thing a
transform can do besides returning a result is to return ``request.fail(...)``
which the pipeline resolves to the configured default or a raised error.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class UseDefault(Generic[T]):
    """Failure policy returning a fixed fallback value."""

    value: Optional[T] = None


@dataclass(frozen=True)
class RaiseError:
    """Failure policy raising a labeled ``ConversionError``."""

    message: Optional[str] = None
    label: Optional[str] = None


OnFailure = Union[UseDefault, RaiseError]


@dataclass(frozen=True)
class ConversionOptions:
    allow_empty_input: bool = False
    trim_input: bool = False
    on_failure: OnFailure = field(default_factory=UseDefault)

    @property
    def raises_on_failure(self) -> bool:
        return isinstance(self.on_failure, RaiseError)


@dataclass(frozen=True)
class Failed:
    """Explicit failure returned by a transform instead of a result."""

    description: Optional[str] = None
    cause: Optional[BaseException] = None


@dataclass(frozen=True)
class ConversionRequest:
    value: Any
    options: ConversionOptions = field(default_factory=ConversionOptions)

    def fail(self, description: Optional[str] = None, cause: Optional[BaseException] = None) -> Failed:
        """
        Cancel the conversion.

        Args:
            description: Appended to the error message in raise mode
            cause: Underlying exception; its message is appended and it becomes
                the error's cause in raise mode

        Returns:
            Failed marker to be returned from the transform
        """
        return Failed(description=description, cause=cause)


__all__ = [
    "ConversionOptions",
    "ConversionRequest",
    "Failed",
    "OnFailure",
    "RaiseError",
    "UseDefault",
]
