"""Analytics domain service."""

from datetime import date
from typing import Optional

from expensetrack.database.base import Database
from expensetrack.domain import aggregation
from expensetrack.domain.entities import (
    CategoryTotal,
    DashboardSummary,
    Expense,
    MonthlyTotal,
)
from expensetrack.domain.errors import NotFoundError, category_not_found


class AnalyticsService:
    """Service that feeds a user's expenses through the aggregation functions."""

    def __init__(self, db: Database):
        """Initialize analytics service.

        Args:
            db: Database instance
        """
        self.db = db

    def _expenses(self, owner_id: int) -> list[Expense]:
        return self.db.list_expenses(owner_id)

    def monthly_totals(self, owner_id: int) -> list[MonthlyTotal]:
        """Monthly totals across all of the owner's expenses."""
        return aggregation.monthly_totals(self._expenses(owner_id))

    def monthly_totals_by_category(self, owner_id: int, category_id: int) -> list[MonthlyTotal]:
        """Monthly totals for one of the owner's categories.

        Raises:
            NotFoundError: If the category is not the owner's
        """
        if self.db.get_category(owner_id, category_id) is None:
            raise NotFoundError(category_not_found(category_id))
        return aggregation.monthly_totals_by_category(category_id, self._expenses(owner_id))

    def category_totals(self, owner_id: int) -> list[CategoryTotal]:
        """Per-category totals in first-seen order."""
        return aggregation.category_totals(self._expenses(owner_id))

    def dashboard(self, owner_id: int, today: Optional[date] = None) -> DashboardSummary:
        """Build the dashboard figures for the month containing ``today``."""
        if today is None:
            today = date.today()

        expenses = self._expenses(owner_id)
        current_month = aggregation.month_key(today)
        previous_month = aggregation.previous_month(current_month)
        current_total = aggregation.total_by_month(expenses, current_month)
        previous_total = aggregation.total_by_month(expenses, previous_month)

        return DashboardSummary(
            total=aggregation.total_all(expenses),
            current_month=current_month,
            current_month_total=current_total,
            previous_month=previous_month,
            previous_month_total=previous_total,
            month_over_month_change=aggregation.month_over_month_change(
                current_total, previous_total
            ),
            largest_category=aggregation.largest_category(expenses),
        )
