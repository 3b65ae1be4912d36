"""Error message composition for failed conversions."""

from __future__ import annotations

from typing import Any, Optional

MESSAGE_SEPARATOR = ". "
LABEL_SEPARATOR = " - "
MISSING_VALUE_TEXT = "null"


def describe_input(value: Any) -> str:
    """Render the raw input the way it appears in error messages."""
    if value is None:
        return MISSING_VALUE_TEXT
    return str(value)


def build_header(value: Any, label: Optional[str]) -> str:
    prefix = f"{label}{LABEL_SEPARATOR}" if label else ""
    return f"{prefix}Error converting from '{describe_input(value)}'"


def join_message_parts(*parts: Optional[str]) -> str:
    """Join the non-empty parts with the message separator."""
    return MESSAGE_SEPARATOR.join(part for part in parts if part)


def build_error_message(
    value: Any,
    *,
    label: Optional[str],
    configured_message: Optional[str],
    description: Optional[str] = None,
    cause: Optional[BaseException] = None,
) -> str:
    """
    Compose the message of a raised conversion error.

    Parts are joined in a fixed order and empty parts are skipped:
    header (label and input), configured message, resolution description,
    message of the underlying cause.

    Example:
        >>> build_error_message(None, label="birthDate", configured_message="Custom error message",
        ...                     description="Null is not allowed")
        "birthDate - Error converting from 'null'. Custom error message. Null is not allowed"
    """
    cause_message = str(cause) if cause is not None else None
    return join_message_parts(
        build_header(value, label),
        configured_message,
        description,
        cause_message,
    )


__all__ = ["build_error_message", "build_header", "describe_input", "join_message_parts"]
