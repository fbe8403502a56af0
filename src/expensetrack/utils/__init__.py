"""Utility functions for expensetrack."""

from expensetrack.utils.date_parser import parse_date, parse_month
from expensetrack.utils.amount_parser import parse_amount

__all__ = ["parse_date", "parse_month", "parse_amount"]
