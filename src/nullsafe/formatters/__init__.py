"""Null-safe formatters producing text."""

from . import to_date_string, to_number_string

__all__ = ["to_date_string", "to_number_string"]
