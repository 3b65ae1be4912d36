"""Tests for numeric conversion."""

from __future__ import annotations

import logging
from decimal import Decimal

import numpy as np
import pytest

from nullsafe.converters import to_number
from nullsafe.exceptions import ConversionError


class TestInteger:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (42, 42),
            ("42", 42),
            ("-17", -17),
            ("+5", 5),
            (7.9, 7),
            (-7.9, -7),
            (Decimal("3.5"), 3),
            (np.int64(12), 12),
            (np.float32(2.0), 2),
            (np.array(9), 9),
            (2**31 - 1, 2**31 - 1),
            ("-2147483648", -(2**31)),
        ],
    )
    def test_as_integer(self, value, expected) -> None:
        assert to_number.as_integer(value) == expected

    @pytest.mark.parametrize(
        "value",
        [None, "", " 42", "4.2", "1_000", "abc", 2**31, "-2147483649", float("nan"), float("inf"), True, "42L"],
    )
    def test_invalid_integer_gives_none(self, value) -> None:
        assert to_number.as_integer(value) is None

    def test_truncation_logs_warning(self, caplog) -> None:
        caplog.set_level(logging.WARNING, logger="nullsafe.converters.to_number")

        assert to_number.as_integer(7.9) == 7
        assert "Truncating 7.9 to integer 7" in caplog.text

    def test_whole_floats_do_not_warn(self, caplog) -> None:
        caplog.set_level(logging.WARNING, logger="nullsafe.converters.to_number")

        assert to_number.as_integer(8.0) == 8
        assert caplog.records == []

    def test_out_of_range_message(self) -> None:
        with pytest.raises(ConversionError) as exc_info:
            to_number.convert_as_integer(2**31).or_raise("count")

        assert str(exc_info.value) == (
            "count - Error converting from '2147483648'. 2147483648 is outside the integer range "
            "[-2147483648, 2147483647]"
        )


class TestLong:
    def test_long_range(self) -> None:
        assert to_number.as_long(2**31) == 2**31
        assert to_number.as_long(str(2**63 - 1)) == 2**63 - 1
        assert to_number.as_long(2**63) is None
        assert to_number.as_long(str(-(2**63) - 1)) is None

    def test_long_truncates(self) -> None:
        assert to_number.as_long(-1e10 - 0.5) == -10_000_000_000


class TestFloat:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(1, 1.0), ("2.5", 2.5), ("1e3", 1000.0), (Decimal("0.1"), 0.1), (np.float64(0.25), 0.25)],
    )
    def test_as_float(self, value, expected) -> None:
        assert to_number.as_float(value) == expected

    def test_invalid_float_gives_none(self) -> None:
        assert to_number.as_float("abc") is None
        assert to_number.as_float(None) is None
        assert to_number.as_float(False) is None


class TestDecimal:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0.1, Decimal("0.1")),
            ("0.1", Decimal("0.1")),
            (10, Decimal(10)),
            (Decimal("1.23"), Decimal("1.23")),
            (np.float64(10000.295), Decimal("10000.295")),
        ],
    )
    def test_as_decimal(self, value, expected) -> None:
        assert to_number.as_decimal(value) == expected

    @pytest.mark.parametrize("value", ["NaN", "inf", float("nan"), Decimal("Infinity"), "x"])
    def test_non_finite_or_invalid_gives_none(self, value) -> None:
        assert to_number.as_decimal(value) is None


class TestBigInteger:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(0, 0), ("4294967295", 2**32 - 1), (12.7, 12), ("+7", 7)],
    )
    def test_as_big_integer(self, value, expected) -> None:
        assert to_number.as_big_integer(value) == expected

    @pytest.mark.parametrize("value", [-1, "-1", 2**32, "4294967296", "1.5"])
    def test_out_of_unsigned_range_gives_none(self, value) -> None:
        assert to_number.as_big_integer(value) is None


def test_element_variants(element) -> None:
    assert to_number.element_as_integer(element(5)) == 5
    assert to_number.element_as_long(element("6")) == 6
    assert to_number.element_as_float(element(1.5)) == 1.5
    assert to_number.element_as_decimal(element("2.5")) == Decimal("2.5")
    assert to_number.element_as_big_integer(element(None)) is None
    assert to_number.element_as_integer(None) is None


def test_with_default_on_bad_text() -> None:
    assert to_number.convert_as_integer("abc").with_default(-1) == -1
