"""Derived spending views computed from an expense list.

Every function here is a pure reduction over a caller-supplied collection
that is already scoped to a single owner. Nothing is cached: results are
recomputed from the list on every call.
"""

from collections import defaultdict
from datetime import date, datetime
from decimal import Decimal
from typing import Iterable, Optional, Sequence, Union

from dateutil.relativedelta import relativedelta

from expensetrack.domain.entities import Category, CategoryTotal, Expense, MonthlyTotal


ZERO = Decimal("0")


def month_key(value: Union[date, str]) -> str:
    """Return the "YYYY-MM" prefix of a date or ISO date string."""
    if isinstance(value, date):
        return value.isoformat()[:7]
    return str(value)[:7]


def previous_month(month: str) -> str:
    """Return the month before a "YYYY-MM" month."""
    first_day = datetime.strptime(month, "%Y-%m").date()
    return (first_day - relativedelta(months=1)).strftime("%Y-%m")


def to_decimal(value: Union[Decimal, float, int, str]) -> Decimal:
    """Convert an amount to Decimal without float representation noise."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _sum(expenses: Iterable[Expense]) -> Decimal:
    return sum((to_decimal(exp.amount) for exp in expenses), ZERO)


def total_all(expenses: Iterable[Expense]) -> Decimal:
    """Sum of all expense amounts."""
    return _sum(expenses)


def expenses_by_month(expenses: Iterable[Expense], month: str) -> list[Expense]:
    """Expenses whose date falls in the given "YYYY-MM" month."""
    return [exp for exp in expenses if month_key(exp.date) == month]


def expenses_by_category(expenses: Iterable[Expense], category_id: int) -> list[Expense]:
    """Expenses referencing the given category."""
    return [exp for exp in expenses if exp.category_id == category_id]


def total_by_month(expenses: Iterable[Expense], month: str) -> Decimal:
    """Sum of amounts for expenses in the given "YYYY-MM" month."""
    return _sum(expenses_by_month(expenses, month))


def monthly_totals(expenses: Iterable[Expense]) -> list[MonthlyTotal]:
    """Group expenses by year-month and sum each group.

    Output is sorted ascending by month string, which is chronological for
    "YYYY-MM" keys.
    """
    totals: dict[str, Decimal] = defaultdict(lambda: ZERO)
    for exp in expenses:
        totals[month_key(exp.date)] += to_decimal(exp.amount)

    return [MonthlyTotal(month=month, amount=totals[month]) for month in sorted(totals)]


def monthly_totals_by_category(
    category_id: int, expenses: Iterable[Expense]
) -> list[MonthlyTotal]:
    """Monthly totals restricted to one category."""
    return monthly_totals(expenses_by_category(expenses, category_id))


def category_totals(expenses: Iterable[Expense]) -> list[CategoryTotal]:
    """Per-category sums, in the order each category is first seen."""
    totals: dict[int, Decimal] = {}
    for exp in expenses:
        totals[exp.category_id] = totals.get(exp.category_id, ZERO) + to_decimal(exp.amount)

    return [
        CategoryTotal(category_id=category_id, amount=amount)
        for category_id, amount in totals.items()
    ]


def month_over_month_change(
    current: Union[Decimal, float, int], previous: Union[Decimal, float, int]
) -> float:
    """Percent change from ``previous`` to ``current``.

    Returns 0 when ``previous`` is zero, including when ``current`` is not.
    """
    current = to_decimal(current)
    previous = to_decimal(previous)
    if previous == 0:
        return 0.0
    return float((current - previous) / previous * 100)


def largest_category(expenses: Iterable[Expense]) -> Optional[CategoryTotal]:
    """Category with the highest total spend.

    Categories are compared in first-seen order of the input list and a later
    category must strictly exceed the current leader, so ties go to whichever
    was seen first. Only positive totals qualify.
    """
    leader: Optional[CategoryTotal] = None
    highest = ZERO
    for total in category_totals(expenses):
        if total.amount > highest:
            highest = total.amount
            leader = total
    return leader


def format_amount(amount: Union[Decimal, float, int]) -> str:
    """Render an amount without trailing fractional zeros ("25.50" -> "25.5")."""
    text = f"{to_decimal(amount):f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def search(
    expenses: Sequence[Expense],
    query: Optional[str],
    categories: Iterable[Category] = (),
) -> Sequence[Expense]:
    """Filter expenses by a case-insensitive substring query.

    Matches against the description, the resolved category name, the
    amount as text and the ISO date. An empty query returns ``expenses``
    unchanged.
    """
    if not query:
        return expenses

    needle = query.lower()
    names = {cat.id: cat.name.lower() for cat in categories}

    def matches(exp: Expense) -> bool:
        return (
            needle in (exp.description or "").lower()
            or needle in names.get(exp.category_id, "")
            or needle in format_amount(exp.amount)
            or needle in str(exp.date)
        )

    return [exp for exp in expenses if matches(exp)]
