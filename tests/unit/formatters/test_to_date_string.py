import time
from datetime import date, datetime, timezone

import pytest

from nullsafe.exceptions import ConversionError
from nullsafe.formats import TemporalFormat, XmlCalendar
from nullsafe.formatters import to_date_string


@pytest.mark.parametrize(
    ("value", "fmt", "expected"),
    [
        (date(2007, 2, 23), TemporalFormat.DD_MM_YYYY, "23.02.2007"),
        (datetime(2007, 2, 23, 21, 11, 13, 37_000), TemporalFormat.ISO8601_DATE_TIME_WITH_MILLIS, "2007-02-23T21:11:13.037+01:00"),
        (datetime(2007, 2, 23, 20, 11, 13, tzinfo=timezone.utc), TemporalFormat.ISO8601_DATE_TIME, "2007-02-23T20:11:13+00:00"),
        (
            time.struct_time((2007, 2, 23, 20, 11, 13, 4, 54, 0, "UTC", 0)),
            TemporalFormat.DD_MM_YYYY_HH_MM_SS,
            "23.02.2007 21:11:13",
        ),
        (XmlCalendar.date_only(2008, 9, 18), TemporalFormat.ISO8601_DATE_TIME, "2008-09-18T00:00:00+02:00"),
        (XmlCalendar(2008, 9, 18, 8, 7, 37, 120, 120), TemporalFormat.YYYY_MM_DD_HH_MM_SS_SSS, "2008.09.18 08:07:37.120"),
    ],
)
def test_from_value(value, fmt, expected):
    assert to_date_string.from_value(value, fmt) == expected


def test_missing_or_unprintable_values_give_none():
    assert to_date_string.from_value(None, TemporalFormat.DD_MM_YYYY) is None
    assert to_date_string.from_value("23.02.2007", TemporalFormat.DD_MM_YYYY) is None
    assert to_date_string.from_value(42, TemporalFormat.DD_MM_YYYY) is None


def test_format_value_raise_mode():
    with pytest.raises(ConversionError, match="^printed - Error converting from 'null'. Null is not allowed$"):
        to_date_string.format_value(None, TemporalFormat.DD_MM_YYYY).or_raise("printed")


def test_format_value_with_default():
    assert to_date_string.format_value(None, TemporalFormat.DD_MM_YYYY).with_default("-") == "-"
