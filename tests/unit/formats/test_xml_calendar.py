"""Tests for XmlCalendar."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest
import pytz

from nullsafe.formats import XmlCalendar, XmlCalendarError, is_date_only, is_date_time

OSLO = pytz.timezone("Europe/Oslo")


class TestPredicates:
    def test_date_only_calendar(self) -> None:
        calendar = XmlCalendar.date_only(2007, 2, 23)
        assert is_date_only(calendar) is True
        assert is_date_time(calendar) is False

    def test_date_time_calendar(self) -> None:
        calendar = XmlCalendar(2007, 2, 23, 21, 11, 13)
        assert is_date_time(calendar) is True
        assert is_date_only(calendar) is False

    def test_missing_calendar_is_neither(self) -> None:
        assert is_date_time(None) is False
        assert is_date_only(None) is False

    @pytest.mark.parametrize(
        "fields",
        [
            {"hour": 24, "minute": 0, "second": 0},
            {"hour": 12, "minute": 60, "second": 0},
            {"hour": 12, "minute": 0, "second": 60},
            {"hour": 12, "minute": None, "second": 0},
            {"hour": -1, "minute": 0, "second": 0},
        ],
    )
    def test_out_of_range_time_fields_are_not_date_time(self, fields) -> None:
        calendar = XmlCalendar(2007, 2, 23, **fields)
        assert is_date_time(calendar) is False
        assert is_date_only(calendar) is True


class TestParse:
    def test_date(self) -> None:
        assert XmlCalendar.parse("2007-02-23") == XmlCalendar.date_only(2007, 2, 23)

    def test_date_with_offset(self) -> None:
        assert XmlCalendar.parse("2007-02-23+01:00").timezone == 60
        assert XmlCalendar.parse("2007-02-23Z").timezone == 0

    def test_date_time(self) -> None:
        calendar = XmlCalendar.parse("2007-02-23T21:11:13.037-05:30")
        assert calendar == XmlCalendar(2007, 2, 23, 21, 11, 13, 37, -330)

    def test_date_time_without_offset(self) -> None:
        calendar = XmlCalendar.parse(" 2007-02-23T21:11:13 ")
        assert calendar.timezone is None
        assert calendar.millisecond is None

    @pytest.mark.parametrize(
        "text",
        ["2007-02-23T21:11:13", "2007-02-23T21:11:13+01:00", "2007-02-23T21:11:13.037Z"],
    )
    def test_lexical_form_round_trips(self, text) -> None:
        assert XmlCalendar.parse(text).to_xml_format() == text

    def test_zero_fraction_is_kept(self) -> None:
        assert XmlCalendar.parse("2007-02-23T21:11:13.000").millisecond == 0

    @pytest.mark.parametrize("text", ["", "23.02.2007", "2007-02-23T25:00:00", "tomorrow"])
    def test_invalid_text_raises(self, text) -> None:
        with pytest.raises(XmlCalendarError):
            XmlCalendar.parse(text)


class TestConversions:
    def test_to_date(self) -> None:
        assert XmlCalendar(2007, 2, 23, 21, 11, 13).to_date() == date(2007, 2, 23)

    def test_date_only_to_datetime_is_midnight_in_default_zone(self) -> None:
        assert XmlCalendar.date_only(2007, 2, 23).to_datetime() == OSLO.localize(datetime(2007, 2, 23))

    def test_zone_less_date_time_is_read_in_default_zone(self) -> None:
        moment = XmlCalendar(2007, 2, 23, 21, 11, 13, 37).to_datetime()
        assert moment == OSLO.localize(datetime(2007, 2, 23, 21, 11, 13, 37_000))

    def test_offset_is_honored(self) -> None:
        moment = XmlCalendar(2007, 2, 23, 20, 11, 13, timezone=0).to_datetime()
        assert moment == datetime(2007, 2, 23, 20, 11, 13, tzinfo=timezone.utc)
        assert moment.utcoffset() == timedelta(hours=1)

    def test_from_datetime_keeps_offset(self) -> None:
        moment = OSLO.localize(datetime(2008, 9, 18, 8, 7, 37, 123_456))
        assert XmlCalendar.from_datetime(moment) == XmlCalendar(2008, 9, 18, 8, 7, 37, 123, 120)

    def test_xml_format(self) -> None:
        assert str(XmlCalendar.date_only(2007, 2, 23)) == "2007-02-23"
        assert XmlCalendar(2007, 2, 23, 21, 11, 13, 37, 60).to_xml_format() == "2007-02-23T21:11:13.037+01:00"
        assert XmlCalendar(2007, 2, 23, 21, 11, 13, timezone=0).to_xml_format() == "2007-02-23T21:11:13Z"
