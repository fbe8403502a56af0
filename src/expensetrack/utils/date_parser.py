"""Date parsing utilities."""

from datetime import date, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def parse_date(date_str: str) -> date:
    """Parse an expense date.

    Supports:
    - ISO dates: "2024-01-15" (the format the API sends)
    - Other absolute dates understood by dateutil: "January 15, 2024"
    - Relative dates: "today", "yesterday"

    Args:
        date_str: Date string

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    if not isinstance(date_str, str) or not date_str.strip():
        raise ValueError("Empty date string")

    date_str = date_str.strip().lower()
    today = date.today()

    if date_str == "today":
        return today
    if date_str == "yesterday":
        return today - timedelta(days=1)

    try:
        return date.fromisoformat(date_str)
    except ValueError:
        pass

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_month(month_str: str) -> str:
    """Parse a month into its "YYYY-MM" key.

    Accepts "2024-01", "this month", "last month" or any date parse_date
    understands.

    Raises:
        ValueError: If the month cannot be parsed
    """
    month_str = (month_str or "").strip().lower()
    today = date.today()

    if month_str == "this month":
        return today.strftime("%Y-%m")
    if month_str == "last month":
        return (today - relativedelta(months=1)).strftime("%Y-%m")

    if len(month_str) == 7 and month_str[4] == "-":
        try:
            return date.fromisoformat(f"{month_str}-01").strftime("%Y-%m")
        except ValueError as e:
            raise ValueError(f"Could not parse month '{month_str}': {e}")

    return parse_date(month_str).strftime("%Y-%m")
