"""Unit tests for display formatting"""

import pytest
from datetime import date
from statement_gateway.utils.formatting import amount_in_words, format_display_date, format_money


@pytest.mark.parametrize(
    "paisa, expected",
    [
        (0, "0.00"),
        (5, "0.05"),
        (100_000, "1,000.00"),
        (231_984_090, "2,319,840.90"),
        (-1_250_050, "-12,500.50"),
    ],
)
def test_format_money(paisa, expected):
    assert format_money(paisa) == expected


def test_format_display_date():
    assert format_display_date(date(2024, 7, 28)) == "28-Jul-2024"
    assert format_display_date(date(2025, 1, 5)) == "05-Jan-2025"


@pytest.mark.parametrize(
    "paisa, expected",
    [
        (0, "Zero"),
        (100, "One"),
        (1_500, "Fifteen"),
        (4_200, "Forty Two"),
        (10_000, "One Hundred"),
        (10_500, "One Hundred And Five"),
        (123_456_789, "Twelve Lakh Thirty Four Thousand Five Hundred And Sixty Seven And Eighty Nine Paisa"),
        (360_000_000, "Thirty Six Lakh"),
        (1_000_000_000, "One Crore"),
        (50, "And Fifty Paisa"),
    ],
)
def test_amount_in_words(paisa, expected):
    assert amount_in_words(paisa) == expected


def test_amount_in_words_negative_is_blank():
    assert amount_in_words(-100) == ""
