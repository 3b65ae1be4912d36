"""Helper modules for the conversion pipeline."""

from .failure_resolver import resolve_failure
from .guards import EMPTY_NOT_ALLOWED, NULL_NOT_ALLOWED, GuardOutcome, guard_input
from .message_builder import build_error_message

__all__ = [
    "EMPTY_NOT_ALLOWED",
    "NULL_NOT_ALLOWED",
    "GuardOutcome",
    "build_error_message",
    "guard_input",
    "resolve_failure",
]
