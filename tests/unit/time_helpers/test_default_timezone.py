import time
from datetime import date, datetime, timedelta, timezone

import pytz

from nullsafe.time_helpers import (
    fixed_offset,
    format_offset,
    from_struct_time,
    get_default_timezone,
    localize,
    start_of_day,
    to_default_zone,
    to_struct_time,
)

OSLO = pytz.timezone("Europe/Oslo")


def test_default_timezone_comes_from_settings():
    assert get_default_timezone().zone == "Europe/Oslo"


def test_localize_applies_dst_offset():
    assert localize(datetime(2007, 2, 23)).utcoffset() == timedelta(hours=1)
    assert localize(datetime(2008, 9, 18)).utcoffset() == timedelta(hours=2)


def test_to_default_zone_converts_aware_values():
    moment = to_default_zone(datetime(2008, 9, 18, 6, tzinfo=timezone.utc))
    assert moment.hour == 8
    assert moment.tzinfo.zone == "Europe/Oslo"


def test_to_default_zone_localizes_naive_values():
    assert to_default_zone(datetime(2008, 9, 18, 6)) == OSLO.localize(datetime(2008, 9, 18, 6))


def test_start_of_day():
    assert start_of_day(date(2007, 2, 23)) == OSLO.localize(datetime(2007, 2, 23))


def test_fixed_offset_and_format_offset():
    moment = datetime(2007, 2, 23, tzinfo=fixed_offset(-330))
    assert format_offset(moment) == "-05:30"
    assert format_offset(localize(datetime(2008, 9, 18))) == "+02:00"


def test_struct_time_round_trip_keeps_zone_information():
    moment = OSLO.localize(datetime(2008, 9, 18, 8, 7, 37, 500_000))
    calendar = to_struct_time(moment)

    assert calendar.tm_gmtoff == 7200
    assert calendar.tm_zone == "CEST"
    assert tuple(calendar[:6]) == (2008, 9, 18, 8, 7, 37)
    # Calendar tuples carry whole seconds only
    assert from_struct_time(calendar) == moment.replace(microsecond=0)


def test_from_struct_time_honors_foreign_offset():
    calendar = time.struct_time((2008, 9, 18, 6, 7, 37, 3, 262, 0, "UTC", 0))
    assert from_struct_time(calendar) == datetime(2008, 9, 18, 6, 7, 37, tzinfo=timezone.utc)


def test_from_struct_time_without_offset_uses_default_zone():
    calendar = time.struct_time((2008, 9, 18, 8, 7, 37, 3, 262, -1))
    assert from_struct_time(calendar) == OSLO.localize(datetime(2008, 9, 18, 8, 7, 37))
