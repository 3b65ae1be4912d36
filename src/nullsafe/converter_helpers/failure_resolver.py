"""Resolve a failed conversion to its default value or a raised error."""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..config import get_default_resolution_level
from ..conversion_request import ConversionOptions, RaiseError
from ..exceptions import ConversionError
from .message_builder import build_error_message, describe_input

logger = logging.getLogger(__name__)


def resolve_failure(
    raw_value: Any,
    options: ConversionOptions,
    *,
    description: Optional[str] = None,
    cause: Optional[BaseException] = None,
) -> Any:
    """
    Return the configured default or raise ``ConversionError``.

    Args:
        raw_value: Input exactly as the caller supplied it (used in the message)
        options: Options of the failing conversion
        description: Reason supplied by a guard or by the transform
        cause: Exception caught while running the transform

    Raises:
        ConversionError: When the options select raise mode
    """
    policy = options.on_failure
    if isinstance(policy, RaiseError):
        message = build_error_message(
            raw_value,
            label=policy.label,
            configured_message=policy.message,
            description=description,
            cause=cause,
        )
        raise ConversionError.for_failure(message, policy.label, cause) from cause

    logger.log(
        get_default_resolution_level(),
        "Conversion from '%s' resolved to default %r: %s",
        describe_input(raw_value),
        policy.value,
        description or cause or "no description",
    )
    return policy.value


__all__ = ["resolve_failure"]
