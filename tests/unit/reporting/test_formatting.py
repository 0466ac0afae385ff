# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest

from tesoro.reporting import format_compact_currency, format_value


@pytest.mark.parametrize(
    "value, expected",
    [
        (1_234_000_000, "LKR 1.2Bn"),
        (45_000_000, "LKR 45.0M"),
        (25_000, "LKR 25.0K"),
        (789, "LKR 789"),
        (-2_500_000, "LKR -2.5M"),
        (None, "LKR 0"),
        ("abc", "LKR 0"),
        (float("nan"), "LKR 0"),
    ],
)
def test_format_compact_currency(value, expected):
    assert format_compact_currency(value) == expected


def test_format_compact_currency_other_currency():
    assert format_compact_currency(1_500, currency="USD") == "USD 1.5K"


class TestFormatValue:
    def test_number(self):
        assert format_value(1234.5) == "1,234.5"
        assert format_value("1234.567", decimal_places=2) == "1,234.57"

    def test_percentage_auto_adjusts_fractions(self):
        assert format_value(0.0525, kind="percentage", decimal_places=2) == "5.25%"
        assert format_value(8.5, kind="percentage") == "8.5%"
        assert format_value(0.5, kind="percentage", auto_adjust_percentage=False) == "0.5%"

    def test_currency(self):
        assert format_value(-12.5, kind="currency") == "-$12.5"
        assert format_value(1000, kind="currency", currency="LKR", decimal_places=0) == "LKR 1,000"

    def test_non_numeric_values_pass_through(self):
        assert format_value(None) == "None"
        assert format_value("n/a") == "n/a"
