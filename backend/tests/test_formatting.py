"""
Tests for currency and duration helpers.
"""

import pytest

from worktracker.utils.formatting import calculate_earnings, currency_symbol, format_duration


@pytest.mark.parametrize("code,symbol", [
    ("GBP", "£"),
    ("USD", "$"),
    ("AUD", "A$"),
    ("ZAR", "R"),
    ("CHF", "CHF "),
])
def test_currency_symbol(code, symbol):
    assert currency_symbol(code) == symbol


def test_format_duration_pads_fields():
    assert format_duration(0) == "00:00:00"
    assert format_duration(3725) == "01:02:05"
    assert format_duration(100 * 3600) == "100:00:00"


def test_calculate_earnings_is_pro_rata():
    assert calculate_earnings(5400, 10) == pytest.approx(15.0)
    assert calculate_earnings(0, 50) == 0
