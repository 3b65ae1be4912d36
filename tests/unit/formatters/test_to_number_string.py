from decimal import Decimal

import numpy as np
import pytest

from nullsafe.exceptions import ConversionError
from nullsafe.formats import NumberFormat
from nullsafe.formatters import to_number_string


@pytest.mark.parametrize(
    ("number", "fmt", "expected"),
    [
        (10000.295, NumberFormat.N_DOT_D, "10000.3"),
        (10000.295, NumberFormat.N_COMMA_DD, "10000,30"),
        (-10000.295, NumberFormat.N_COMMA_D, "-10000,3"),
        (0.029, NumberFormat.N_COMMA_D, "0,0"),
        (0.099, NumberFormat.N_DOT_D, "0.1"),
        (0.295, NumberFormat.N_DOT_D, "0.3"),
        (1234, NumberFormat.NO_DECIMALS, "1234"),
        (Decimal("2.675"), NumberFormat.N_DOT_DD, "2.68"),
        (np.float64(3.14159), NumberFormat.N_DOT_DDDD, "3.1416"),
        (10**30, NumberFormat.NO_DECIMALS, "1000000000000000000000000000000"),
        (1e30, NumberFormat.N_DOT_DDDD, "1000000000000000000000000000000.0000"),
    ],
)
def test_from_number(number, fmt, expected):
    assert to_number_string.from_number(number, fmt) == expected


@pytest.mark.parametrize("number", [None, float("nan"), float("inf"), "12"])
def test_missing_or_invalid_numbers_give_none(number):
    assert to_number_string.from_number(number, NumberFormat.N_DOT_D) is None


def test_format_number_raise_mode_chains_cause():
    with pytest.raises(ConversionError) as exc_info:
        to_number_string.format_number(float("nan"), NumberFormat.N_DOT_D).or_raise("price")

    assert str(exc_info.value) == "price - Error converting from 'nan'. Cannot format non-finite number: nan"
