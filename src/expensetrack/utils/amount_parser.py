"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re


def parse_amount(amount_str) -> Decimal:
    """Parse an expense amount into a Decimal.

    Handles strings such as "123.45", "$123.45" and "1,234.56" as well as
    JSON numbers. Floats go through ``str`` so 25.5 becomes Decimal("25.5").

    Args:
        amount_str: Amount string or number

    Returns:
        Decimal amount

    Raises:
        ValueError: If the amount cannot be parsed or is not finite
    """
    if isinstance(amount_str, bool):
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if isinstance(amount_str, (int, float, Decimal)):
        amount_str = str(amount_str)
    if not isinstance(amount_str, str) or not amount_str.strip():
        raise ValueError("Empty amount string")

    cleaned = re.sub(r"[$€£¥,\s]", "", amount_str)

    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")

    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    return amount
