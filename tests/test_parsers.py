"""Tests for date, month and amount parsing."""

from datetime import date, timedelta
from decimal import Decimal

import pytest
from dateutil.relativedelta import relativedelta

from expensetrack.utils.amount_parser import parse_amount
from expensetrack.utils.date_parser import parse_date, parse_month


def test_parse_iso_date():
    """Test parsing the ISO dates the API sends."""
    assert parse_date("2023-11-15") == date(2023, 11, 15)


def test_parse_today():
    assert parse_date("today") == date.today()
    assert parse_date("  Today ") == date.today()


def test_parse_yesterday():
    assert parse_date("yesterday") == date.today() - timedelta(days=1)


def test_parse_written_date():
    """Test parsing dates dateutil understands."""
    assert parse_date("November 15, 2023") == date(2023, 11, 15)


@pytest.mark.parametrize("value", ["", "   ", "not a date", None])
def test_parse_invalid_date(value):
    with pytest.raises(ValueError):
        parse_date(value)


def test_parse_month_key():
    assert parse_month("2023-11") == "2023-11"


def test_parse_month_relative():
    today = date.today()
    assert parse_month("this month") == today.strftime("%Y-%m")
    assert parse_month("last month") == (today - relativedelta(months=1)).strftime("%Y-%m")


def test_parse_month_from_date():
    assert parse_month("2023-11-15") == "2023-11"


def test_parse_month_invalid():
    with pytest.raises(ValueError):
        parse_month("2023-13")


@pytest.mark.parametrize(
    "value,expected",
    [
        ("25.50", Decimal("25.50")),
        ("$1,234.56", Decimal("1234.56")),
        (" 40 ", Decimal("40")),
        (25.5, Decimal("25.5")),
        (40, Decimal("40")),
        ("-3", Decimal("-3")),
    ],
)
def test_parse_amount(value, expected):
    assert parse_amount(value) == expected


@pytest.mark.parametrize("value", ["", "abc", "NaN", "Infinity", True, None, [1]])
def test_parse_invalid_amount(value):
    with pytest.raises(ValueError):
        parse_amount(value)
