"""JSON renderings of domain entities."""

from decimal import Decimal
from typing import Any, Optional

from expensetrack.domain.entities import (
    Category,
    CategoryTotal,
    DashboardSummary,
    Expense,
    MonthlyTotal,
    User,
)


def amount_to_json(amount: Decimal) -> float:
    return float(amount)


def user_to_json(user: User) -> dict[str, Any]:
    return {"id": user.id, "username": user.username, "email": user.email}


def category_to_json(category: Category) -> dict[str, Any]:
    return {
        "id": category.id,
        "name": category.name,
        "color": category.color,
        "ownerId": category.owner_id,
    }


def expense_to_json(expense: Expense) -> dict[str, Any]:
    return {
        "id": expense.id,
        "amount": amount_to_json(expense.amount),
        "description": expense.description,
        "date": expense.date.isoformat(),
        "categoryId": expense.category_id,
        "ownerId": expense.owner_id,
    }


def monthly_total_to_json(total: MonthlyTotal) -> dict[str, Any]:
    return {"month": total.month, "amount": amount_to_json(total.amount)}


def category_total_to_json(
    total: CategoryTotal, category: Optional[Category] = None
) -> dict[str, Any]:
    """Render a category total, with name and color when the category is known."""
    return {
        "categoryId": total.category_id,
        "name": category.name if category else None,
        "color": category.color if category else None,
        "amount": amount_to_json(total.amount),
    }


def dashboard_to_json(
    summary: DashboardSummary, categories: dict[int, Category]
) -> dict[str, Any]:
    largest = None
    if summary.largest_category is not None:
        largest = category_total_to_json(
            summary.largest_category,
            categories.get(summary.largest_category.category_id),
        )
    return {
        "total": amount_to_json(summary.total),
        "currentMonth": summary.current_month,
        "currentMonthTotal": amount_to_json(summary.current_month_total),
        "previousMonth": summary.previous_month,
        "previousMonthTotal": amount_to_json(summary.previous_month_total),
        "monthOverMonthChange": summary.month_over_month_change,
        "largestCategory": largest,
    }
