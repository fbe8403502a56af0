"""Explicit client-side cache with invalidate-on-mutation.

The cache holds one user's expense and category lists. Reads are served from
the cached copy once it is loaded; each mutation made through the cache
drops the collection it touched so the next read reloads it. When the source
cannot be reached the cache serves the last copy it had, or the sample data
if it never loaded anything, and marks itself stale.
"""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional, Protocol

from sqlalchemy.exc import OperationalError

from expensetrack.database.base import Database
from expensetrack.domain import aggregation
from expensetrack.domain.category import CategoryService, DEFAULT_CATEGORIES
from expensetrack.domain.entities import (
    Category,
    CategoryTotal,
    Expense,
    MonthlyTotal,
)
from expensetrack.domain.expense import ExpenseService

logger = logging.getLogger(__name__)

CONNECTION_ERRORS = (ConnectionError, OperationalError)

SAMPLE_CATEGORIES = [
    Category(id=index, name=name, color=color, owner_id=0)
    for index, (name, color) in enumerate(DEFAULT_CATEGORIES, start=1)
]

SAMPLE_EXPENSES = [
    Expense(id=1, amount=Decimal("25.5"), description="Groceries", date=date(2023, 11, 15), category_id=1, owner_id=0),
    Expense(id=2, amount=Decimal("40"), description="Gas", date=date(2023, 11, 10), category_id=2, owner_id=0),
    Expense(id=3, amount=Decimal("120"), description="New shoes", date=date(2023, 11, 5), category_id=3, owner_id=0),
    Expense(id=4, amount=Decimal("60"), description="Movie night", date=date(2023, 11, 20), category_id=4, owner_id=0),
    Expense(id=5, amount=Decimal("100"), description="Electricity bill", date=date(2023, 11, 1), category_id=5, owner_id=0),
    Expense(id=6, amount=Decimal("30"), description="Book", date=date(2023, 10, 25), category_id=3, owner_id=0),
    Expense(id=7, amount=Decimal("15"), description="Coffee", date=date(2023, 10, 20), category_id=1, owner_id=0),
    Expense(id=8, amount=Decimal("50"), description="Internet bill", date=date(2023, 10, 5), category_id=5, owner_id=0),
]


class ExpenseSource(Protocol):
    """Anything the cache can load from and write through to."""

    def list_expenses(self) -> list[Expense]: ...

    def list_categories(self) -> list[Category]: ...

    def create_expense(self, **fields) -> Expense: ...

    def update_expense(self, expense_id: int, **fields) -> Expense: ...

    def delete_expense(self, expense_id: int) -> None: ...

    def create_category(self, name: str, color: Optional[str] = None) -> Category: ...

    def update_category(self, category_id: int, **fields) -> Category: ...

    def delete_category(self, category_id: int) -> None: ...


class LocalSource:
    """ExpenseSource bound to one user of a local database."""

    def __init__(self, db: Database, owner_id: int):
        self.owner_id = owner_id
        self.expenses = ExpenseService(db)
        self.categories = CategoryService(db)

    def list_expenses(self) -> list[Expense]:
        return self.expenses.list_expenses(self.owner_id)

    def list_categories(self) -> list[Category]:
        return self.categories.list_categories(self.owner_id)

    def create_expense(self, **fields) -> Expense:
        return self.expenses.create_expense(self.owner_id, **fields)

    def update_expense(self, expense_id: int, **fields) -> Expense:
        return self.expenses.update_expense(self.owner_id, expense_id, **fields)

    def delete_expense(self, expense_id: int) -> None:
        self.expenses.delete_expense(self.owner_id, expense_id)

    def create_category(self, name: str, color: Optional[str] = None) -> Category:
        return self.categories.create_category(self.owner_id, name=name, color=color)

    def update_category(self, category_id: int, **fields) -> Category:
        return self.categories.update_category(self.owner_id, category_id, **fields)

    def delete_category(self, category_id: int) -> None:
        self.categories.delete_category(self.owner_id, category_id)


class ExpenseCache:
    """Cached view of one user's expenses and categories."""

    def __init__(self, source: ExpenseSource):
        self.source = source
        self._expenses: Optional[list[Expense]] = None
        self._categories: Optional[list[Category]] = None
        self._last_expenses: Optional[list[Expense]] = None
        self._last_categories: Optional[list[Category]] = None
        self.is_stale = False

    # Loading
    def expenses(self) -> list[Expense]:
        """Return the cached expenses, loading them if needed."""
        if self._expenses is None:
            try:
                self._expenses = self.source.list_expenses()
            except CONNECTION_ERRORS:
                logger.warning("Could not load expenses; serving cached copy", exc_info=True)
                self.is_stale = True
                return list(self._last_expenses if self._last_expenses is not None else SAMPLE_EXPENSES)
            self._last_expenses = self._expenses
            self.is_stale = False
        return list(self._expenses)

    def categories(self) -> list[Category]:
        """Return the cached categories, loading them if needed."""
        if self._categories is None:
            try:
                self._categories = self.source.list_categories()
            except CONNECTION_ERRORS:
                logger.warning("Could not load categories; serving cached copy", exc_info=True)
                self.is_stale = True
                return list(self._last_categories if self._last_categories is not None else SAMPLE_CATEGORIES)
            self._last_categories = self._categories
            self.is_stale = False
        return list(self._categories)

    def invalidate_expenses(self) -> None:
        self._expenses = None

    def invalidate_categories(self) -> None:
        self._categories = None

    def refresh(self) -> None:
        """Drop both collections; the next read reloads them."""
        self.invalidate_expenses()
        self.invalidate_categories()
        self.is_stale = False

    # Mutations
    def add_expense(self, **fields) -> Expense:
        expense = self.source.create_expense(**fields)
        self.invalidate_expenses()
        return expense

    def update_expense(self, expense_id: int, **fields) -> Expense:
        expense = self.source.update_expense(expense_id, **fields)
        self.invalidate_expenses()
        return expense

    def delete_expense(self, expense_id: int) -> None:
        self.source.delete_expense(expense_id)
        self.invalidate_expenses()

    def add_category(self, name: str, color: Optional[str] = None) -> Category:
        category = self.source.create_category(name=name, color=color)
        self.invalidate_categories()
        return category

    def update_category(self, category_id: int, **fields) -> Category:
        category = self.source.update_category(category_id, **fields)
        self.invalidate_categories()
        return category

    def delete_category(self, category_id: int) -> None:
        self.source.delete_category(category_id)
        self.invalidate_categories()

    # Derived views
    def get_category(self, category_id: int) -> Optional[Category]:
        for category in self.categories():
            if category.id == category_id:
                return category
        return None

    def search(self, query: Optional[str]) -> list[Expense]:
        return list(aggregation.search(self.expenses(), query, self.categories()))

    def total_by_month(self, month: str) -> Decimal:
        return aggregation.total_by_month(self.expenses(), month)

    def monthly_totals(self) -> list[MonthlyTotal]:
        return aggregation.monthly_totals(self.expenses())

    def monthly_totals_by_category(self, category_id: int) -> list[MonthlyTotal]:
        return aggregation.monthly_totals_by_category(category_id, self.expenses())

    def largest_category(self) -> Optional[CategoryTotal]:
        return aggregation.largest_category(self.expenses())
