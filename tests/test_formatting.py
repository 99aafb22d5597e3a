# Display formatters for the metric cards and tables.
# Covers the fixed dashboard figures, the magnitude bands and the degrade-to-zero policy.

from __future__ import annotations

import math
import re
from decimal import Decimal

import numpy as np
import pytest

from bombo_dashboard.ui.components.formatting import (
    format_compact,
    format_currency,
    format_currency_exact,
    format_minutes,
    format_number,
    format_percentage,
    format_ratio,
)


@pytest.mark.parametrize(
    ("formatter", "value", "expected"),
    [
        (format_currency, 70045672, "$70.0M"),
        (format_currency, 9352983, "$9.4M"),
        (format_number, 801492, "801K"),
        (format_number, 316369, "316K"),
        (format_percentage, 56.93, "56.9%"),
    ],
)
def test_dashboard_headline_figures(formatter, value, expected) -> None:
    assert formatter(value) == expected


@pytest.mark.parametrize("value", [1_000_000, 1_250_000, 51_000_000, 250_000_000, 9_999_999])
def test_currency_millions_band(value) -> None:
    assert re.fullmatch(r"\$\d+(\.\d)?M", format_currency(value))


@pytest.mark.parametrize("value", [1_000, 1_500, 60_600, 220_908, 999_499])
def test_currency_thousands_band(value) -> None:
    assert re.fullmatch(r"\$\d+K", format_currency(value))


@pytest.mark.parametrize("value", [0, 0.28, 7.08, 42.5, 999])
def test_currency_below_thousand(value) -> None:
    assert re.fullmatch(r"\$\d+\.\d{2}", format_currency(value))


def test_currency_band_boundaries() -> None:
    assert format_currency(999) == "$999.00"
    assert format_currency(1000) == "$1K"
    assert format_currency(1_000_000) == "$1.0M"
    assert format_currency(0.28) == "$0.28"


def test_rounding_is_half_up_on_fixed_decimals() -> None:
    assert format_currency(1500) == "$2K"
    assert format_number(2500) == "3K"
    assert format_number(1_277_498) == "1.3M"


def test_number_below_thousand_keeps_plain_digits() -> None:
    assert format_number(750) == "750"
    assert format_number(500.5) == "500.5"
    assert format_number(2.41) == "2.41"


@pytest.mark.parametrize("missing", [None, float("nan"), math.inf, -math.inf, "abc", [], {}])
def test_missing_input_degrades_to_zero(missing) -> None:
    assert format_currency(missing) == "$0.00"
    assert format_number(missing) == "0"
    assert format_percentage(missing) == "0.0%"


def test_zero_renderings() -> None:
    assert format_number(0) == "0"
    assert format_currency(0) == "$0.00"
    assert format_percentage(0) == "0.0%"


def test_numeric_strings_are_coerced() -> None:
    assert format_number("801492") == "801K"
    assert format_currency("70045672") == "$70.0M"
    assert format_percentage("25.3") == "25.3%"


def test_booleans_are_not_numbers() -> None:
    assert format_number(True) == "0"
    assert format_number(np.True_) == "0"
    assert format_currency(np.False_) == "$0.00"


def test_numpy_scalars_format_like_python_numbers() -> None:
    assert format_number(np.int64(801492)) == "801K"
    assert format_percentage(np.float64(56.93)) == "56.9%"


@pytest.mark.parametrize(
    "formatter", [format_currency, format_number, format_percentage, format_currency_exact]
)
@pytest.mark.parametrize("value", [1e30, 1e300, -1e300, 10**400])
def test_huge_values_never_raise(formatter, value) -> None:
    assert isinstance(formatter(value), str)


def test_huge_values_keep_every_digit() -> None:
    assert format_percentage(1e30) == f"{Decimal(1e30):f}.0%"
    assert format_currency(1e300).endswith("M")
    assert format_currency_exact(1e30) == f"${Decimal(1e30):,f}"


def test_ints_beyond_float_range_degrade_to_zero() -> None:
    assert format_currency(10**400) == "$0.00"
    assert format_number(-(10**400)) == "0"


def test_negative_values_keep_sign_ahead_of_symbol() -> None:
    assert format_currency(-2_500_000) == "-$2.5M"
    assert format_currency(-4_000) == "-$4K"
    assert format_currency(-12.5) == "-$12.50"
    assert format_number(-4_000) == "-4K"
    assert format_percentage(-5.3) == "-5.3%"


def test_values_rounding_to_zero_print_unsigned() -> None:
    assert format_currency(-0.001) == "$0.00"
    assert format_percentage(-0.01) == "0.0%"


def test_formatters_are_repeatable() -> None:
    assert format_percentage(25.3) == "25.3%"
    assert format_percentage(25.3) == format_percentage(25.3)
    assert format_currency(70045672) == format_currency(70045672)


def test_ratio() -> None:
    assert format_ratio(25.3) == "25.3x"
    assert format_ratio(3) == "3x"
    assert format_ratio(None) == "0x"


def test_currency_exact_groups_thousands() -> None:
    assert format_currency_exact(220908) == "$220,908"
    assert format_currency_exact(70045672) == "$70,045,672"
    assert format_currency_exact(7.08, decimals=2) == "$7.08"
    assert format_currency_exact(None) == "$0"


def test_compact_keeps_one_decimal_on_thousands() -> None:
    assert format_compact(1500) == "1.5K"
    assert format_compact(113000) == "113K"
    assert format_compact(9600) == "9.6K"
    assert format_compact(12_900_000) == "12.9M"
    assert format_compact(500) == "500"
    assert format_compact(None) == "0"


def test_minutes() -> None:
    assert format_minutes(12.4) == "12.4m"
    assert format_minutes(5.19) == "5.2m"
    assert format_minutes(None) == "0.0m"
