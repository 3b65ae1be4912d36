from datetime import datetime, timedelta, timezone

import pytest

from nullsafe.formats import Interval, InvalidIntervalError

START = datetime(2007, 2, 23, tzinfo=timezone.utc)
END = datetime(2008, 9, 18, tzinfo=timezone.utc)


def test_interval_bounds_and_duration():
    interval = Interval(START, END)

    assert interval.duration == END - START
    assert interval.contains(START)
    assert not interval.contains(END)
    assert str(interval) == "2007-02-23T00:00:00+00:00/2008-09-18T00:00:00+00:00"


def test_empty_interval_is_allowed():
    interval = Interval(START, START)
    assert interval.duration == timedelta(0)
    assert not interval.contains(START)


def test_end_before_start_raises():
    with pytest.raises(InvalidIntervalError, match="greater than or equal to the start"):
        Interval(END, START)


def test_naive_bound_raises():
    with pytest.raises(InvalidIntervalError, match="timezone-aware"):
        Interval(datetime(2007, 2, 23), END)
