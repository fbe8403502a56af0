"""Request body parsing shared by the JSON routes."""

from typing import Any, Optional

from flask import request

from expensetrack.domain.errors import ValidationError
from expensetrack.utils.amount_parser import parse_amount
from expensetrack.utils.date_parser import parse_date


def json_body() -> dict[str, Any]:
    """Return the request's JSON object, or an empty dict for no body."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def parse_id(value: Any, field: str) -> int:
    """Accept a JSON integer or a string of digits; anything else is rejected."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    raise ValidationError(f"Invalid {field}")


def expense_fields(data: dict[str, Any], partial: bool) -> dict[str, Any]:
    """Convert an expense body into ExpenseService keyword arguments.

    With ``partial`` set only the keys present in the body are returned;
    otherwise amount, date and categoryId are required.
    """
    if not partial:
        missing = [key for key in ("amount", "date", "categoryId") if data.get(key) is None]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

    fields: dict[str, Any] = {}
    try:
        if data.get("amount") is not None:
            fields["amount"] = parse_amount(data["amount"])
        if data.get("date") is not None:
            fields["date"] = parse_date(data["date"])
    except ValueError as e:
        raise ValidationError(str(e))
    if data.get("categoryId") is not None:
        fields["category_id"] = parse_id(data["categoryId"], "categoryId")
    if data.get("description") is not None:
        fields["description"] = str(data["description"])
    return fields


def optional_str(data: dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    return None if value is None else str(value)
