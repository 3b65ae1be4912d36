"""
Common date and time formats.

Patterns use the Joda/``SimpleDateFormat`` letter convention (``dd.MM.yyyy``)
because that is how the formats are written in the XML and configuration
payloads this library reads. Each pattern is compiled once into a
``strptime`` directive string for parsing and a list of printers for
formatting.

Parsed values are aware datetimes in the default zone (``NULLSAFE_TIMEZONE``).
Text carrying an explicit offset is converted to the default zone.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Dict, List, Tuple

import pytz

from ..time_helpers import format_offset, get_default_timezone, localize, localize_strict, to_default_zone


class TemporalFormatError(ValueError):
    """Raised when text does not match a temporal format."""

    @classmethod
    def invalid_text(cls, text: str) -> "TemporalFormatError":
        return cls(f'Invalid format: "{text}"')

    @classmethod
    def illegal_instant(cls, text: str, zone: object) -> "TemporalFormatError":
        return cls(f'Cannot parse "{text}": Illegal instant due to time zone offset transition ({zone})')

    @classmethod
    def unsupported_token(cls, token: str, pattern: str) -> "TemporalFormatError":
        return cls(f"Unsupported pattern token '{token}' in '{pattern}'")

    @classmethod
    def unsupported_value(cls, value: object) -> "TemporalFormatError":
        return cls(f"Cannot format value of type {type(value).__name__}")


class DateTimeAwareness(enum.Enum):
    DATE_ONLY = "date_only"
    DATE_AND_TIME = "date_and_time"
    TIME_ONLY = "time_only"


@dataclass(frozen=True)
class _FieldSpec:
    directive: str
    printer: Callable[[datetime], str]


def _print_offset(moment: datetime) -> str:
    # Plain dates carry no zone; the offset prints as nothing
    if moment.tzinfo is None:
        return ""
    return format_offset(moment)


_FIELD_LETTERS = "yMdHmsSZ"

_FIELDS: Dict[str, _FieldSpec] = {
    "yyyy": _FieldSpec("%Y", lambda m: f"{m.year:04d}"),
    "yy": _FieldSpec("%y", lambda m: f"{m.year % 100:02d}"),
    "MM": _FieldSpec("%m", lambda m: f"{m.month:02d}"),
    "dd": _FieldSpec("%d", lambda m: f"{m.day:02d}"),
    "HH": _FieldSpec("%H", lambda m: f"{m.hour:02d}"),
    "mm": _FieldSpec("%M", lambda m: f"{m.minute:02d}"),
    "ss": _FieldSpec("%S", lambda m: f"{m.second:02d}"),
    "SSS": _FieldSpec("%f", lambda m: f"{m.microsecond // 1000:03d}"),
    "ZZ": _FieldSpec("%z", _print_offset),
}


def _tokenize(pattern: str) -> List[Tuple[bool, str]]:
    """Split a pattern into ``(is_field, text)`` tokens."""
    tokens: List[Tuple[bool, str]] = []
    index = 0
    while index < len(pattern):
        char = pattern[index]
        if char == "'":
            end = pattern.index("'", index + 1)
            tokens.append((False, pattern[index + 1 : end]))
            index = end + 1
            continue
        if char in _FIELD_LETTERS:
            end = index
            while end < len(pattern) and pattern[end] == char:
                end += 1
            tokens.append((True, pattern[index:end]))
            index = end
            continue
        tokens.append((False, char))
        index += 1
    return tokens


def _compile(pattern: str) -> Tuple[str, List[Callable[[datetime], str]]]:
    directives: List[str] = []
    printers: List[Callable[[datetime], str]] = []
    for is_field, text in _tokenize(pattern):
        if is_field:
            field_spec = _FIELDS.get(text)
            if field_spec is None:
                raise TemporalFormatError.unsupported_token(text, pattern)
            directives.append(field_spec.directive)
            printers.append(field_spec.printer)
        else:
            directives.append(text.replace("%", "%%"))
            printers.append(lambda _moment, literal=text: literal)
    return "".join(directives), printers


# Reference moment used to build example strings and derive format lengths
_REFERENCE_FIELDS = (2007, 2, 23, 21, 11, 13, 37_000)


class TemporalFormat(enum.Enum):
    # dd.MM.yyyy, like 23.02.2007
    DD_MM_YYYY = ("dd.MM.yyyy", DateTimeAwareness.DATE_ONLY)
    # dd.MM.yy, like 23.02.07
    DD_MM_YY = ("dd.MM.yy", DateTimeAwareness.DATE_ONLY)
    # dd.MM.yyyy HH:mm, like 23.02.2007 13:37
    DD_MM_YYYY_HH_MM = ("dd.MM.yyyy HH:mm", DateTimeAwareness.DATE_AND_TIME)
    DD_MM_YYYY_HH_MM_SS = ("dd.MM.yyyy HH:mm:ss", DateTimeAwareness.DATE_AND_TIME)
    DD_MM_YYYY_HH_MM_SS_SSS = ("dd.MM.yyyy HH:mm:ss.SSS", DateTimeAwareness.DATE_AND_TIME)
    # yyyyMMdd, like 20070223
    YYYYMMDD = ("yyyyMMdd", DateTimeAwareness.DATE_ONLY)
    YYYYMMDDHHMM = ("yyyyMMddHHmm", DateTimeAwareness.DATE_AND_TIME)
    YYYYMMDDHHMMSS = ("yyyyMMddHHmmss", DateTimeAwareness.DATE_AND_TIME)
    # yyyy.MM.dd, like 2007.02.23
    YYYY_MM_DD = ("yyyy.MM.dd", DateTimeAwareness.DATE_ONLY)
    YYYY_MM_DD_HH_MM = ("yyyy.MM.dd HH:mm", DateTimeAwareness.DATE_AND_TIME)
    YYYY_MM_DD_HH_MM_SS = ("yyyy.MM.dd HH:mm:ss", DateTimeAwareness.DATE_AND_TIME)
    YYYY_MM_DD_HH_MM_SS_SSS = ("yyyy.MM.dd HH:mm:ss.SSS", DateTimeAwareness.DATE_AND_TIME)
    # yyyy-MM-dd, like 2007-02-23
    ISO8601_DATE_ONLY = ("yyyy-MM-dd", DateTimeAwareness.DATE_ONLY)
    # like 2007-02-23T21:11:13.037+01:00
    ISO8601_DATE_TIME_WITH_MILLIS = ("yyyy-MM-dd'T'HH:mm:ss.SSSZZ", DateTimeAwareness.DATE_AND_TIME)
    # like 2007-02-23T21:11:13+01:00
    ISO8601_DATE_TIME = ("yyyy-MM-dd'T'HH:mm:ssZZ", DateTimeAwareness.DATE_AND_TIME)

    def __init__(self, pattern: str, awareness: DateTimeAwareness) -> None:
        self.pattern = pattern
        self.awareness = awareness
        self._directives, self._printers = _compile(pattern)

    @property
    def is_date_aware(self) -> bool:
        return self.awareness in (DateTimeAwareness.DATE_AND_TIME, DateTimeAwareness.DATE_ONLY)

    @property
    def is_time_aware(self) -> bool:
        return self.awareness in (DateTimeAwareness.DATE_AND_TIME, DateTimeAwareness.TIME_ONLY)

    @property
    def is_date_and_time_aware(self) -> bool:
        return self.awareness is DateTimeAwareness.DATE_AND_TIME

    @property
    def strptime_pattern(self) -> str:
        return self._directives

    def example_string(self) -> str:
        """Return the reference moment 2007-02-23 21:11:13.037 printed in this format."""
        return self.format(localize(datetime(*_REFERENCE_FIELDS)))

    @property
    def length(self) -> int:
        """Length of any text printed in this format."""
        return len(self.example_string())

    def parse(self, text: str) -> datetime:
        """
        Parse text into an aware datetime in the default zone.

        Raises:
            TemporalFormatError: If the text does not match the pattern or names
                a wall-clock time skipped by a DST transition
        """
        try:
            parsed = datetime.strptime(text, self._directives)
        except ValueError as exc:
            raise TemporalFormatError.invalid_text(text) from exc
        if parsed.tzinfo is not None:
            return to_default_zone(parsed)
        try:
            return localize_strict(parsed)
        except pytz.NonExistentTimeError as exc:
            raise TemporalFormatError.illegal_instant(text, get_default_timezone()) from exc

    def format(self, value: date) -> str:
        """
        Print a date or datetime in this format.

        Naive datetimes are read as default-zone wall time; aware datetimes print
        in their own zone. Plain dates print time fields as zeros and no offset.
        """
        if isinstance(value, datetime):
            moment = value if value.tzinfo is not None else localize(value)
        elif isinstance(value, date):
            moment = datetime(value.year, value.month, value.day)
        else:
            raise TemporalFormatError.unsupported_value(value)
        return "".join(printer(moment) for printer in self._printers)


__all__ = ["DateTimeAwareness", "TemporalFormat", "TemporalFormatError"]
