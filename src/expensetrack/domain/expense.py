"""Expense domain service."""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional

from expensetrack.database.base import Database
from expensetrack.domain import aggregation
from expensetrack.domain.entities import Expense as ExpenseEntity
from expensetrack.domain.errors import (
    ForbiddenError,
    NotFoundError,
    ValidationError,
    category_not_found,
    expense_forbidden,
    expense_not_found,
)

# Amounts are stored with two decimal places
CENT = Decimal("0.01")


class ExpenseService:
    """Service for managing a user's expenses."""

    def __init__(self, db: Database):
        """Initialize expense service.

        Args:
            db: Database instance
        """
        self.db = db

    def _clean_amount(self, amount: Decimal) -> Decimal:
        """Round an amount to cents, rejecting negative values."""
        try:
            amount = Decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)
        except InvalidOperation:
            raise ValidationError(f"Invalid amount '{amount}'")
        if amount < 0:
            raise ValidationError("Amount must not be negative")
        return amount

    def _validate_category(self, owner_id: int, category_id: int) -> None:
        # Only the caller's own categories may be referenced
        if self.db.get_category(owner_id, category_id) is None:
            raise ValidationError(category_not_found(category_id))

    def _require_owned(self, owner_id: int, expense_id: int) -> None:
        """Raise NotFoundError or ForbiddenError unless the owner holds the expense."""
        actual_owner = self.db.get_expense_owner_id(expense_id)
        if actual_owner is None:
            raise NotFoundError(expense_not_found(expense_id))
        if actual_owner != owner_id:
            raise ForbiddenError(expense_forbidden(expense_id))

    def create_expense(
        self,
        owner_id: int,
        amount: Decimal,
        date: date,
        category_id: int,
        description: Optional[str] = None,
    ) -> ExpenseEntity:
        """Create an expense.

        Args:
            owner_id: Owning user ID
            amount: Non-negative amount
            date: Expense date
            category_id: One of the owner's categories
            description: Optional description

        Returns:
            Created expense

        Raises:
            ValidationError: If amount is negative or category is not the owner's
        """
        amount = self._clean_amount(amount)
        self._validate_category(owner_id, category_id)

        return self.db.create_expense(
            owner_id=owner_id,
            amount=amount,
            description=description or "",
            date=date,
            category_id=category_id,
        )

    def get_expense(self, owner_id: int, expense_id: int) -> ExpenseEntity:
        """Get one of the owner's expenses.

        Raises:
            NotFoundError: If the expense is missing or belongs to someone else
        """
        expense = self.db.get_expense(owner_id, expense_id)
        if expense is None:
            raise NotFoundError(expense_not_found(expense_id))
        return expense

    def list_expenses(
        self, owner_id: int, category_id: Optional[int] = None
    ) -> list[ExpenseEntity]:
        """List the owner's expenses, newest first."""
        return self.db.list_expenses(owner_id, category_id=category_id)

    def search_expenses(
        self, owner_id: int, query: Optional[str], category_id: Optional[int] = None
    ) -> list[ExpenseEntity]:
        """Search the owner's expenses by description, category name, amount or date."""
        expenses = self.db.list_expenses(owner_id, category_id=category_id)
        if not query:
            return expenses
        categories = self.db.list_categories(owner_id)
        return list(aggregation.search(expenses, query, categories))

    def update_expense(
        self,
        owner_id: int,
        expense_id: int,
        amount: Optional[Decimal] = None,
        description: Optional[str] = None,
        date: Optional[date] = None,
        category_id: Optional[int] = None,
    ) -> ExpenseEntity:
        """Merge the given fields into an expense; omitted fields keep their value.

        Raises:
            NotFoundError: If expense does not exist
            ForbiddenError: If expense belongs to another user
            ValidationError: If amount is negative or category is not the owner's
        """
        self._require_owned(owner_id, expense_id)
        if amount is not None:
            amount = self._clean_amount(amount)
        if category_id is not None:
            self._validate_category(owner_id, category_id)

        expense = self.db.update_expense(
            owner_id,
            expense_id,
            amount=amount,
            description=description,
            date=date,
            category_id=category_id,
        )
        if expense is None:
            raise NotFoundError(expense_not_found(expense_id))
        return expense

    def delete_expense(self, owner_id: int, expense_id: int) -> None:
        """Delete an expense.

        Raises:
            NotFoundError: If expense does not exist
            ForbiddenError: If expense belongs to another user
        """
        self._require_owned(owner_id, expense_id)
        if not self.db.delete_expense(owner_id, expense_id):
            raise NotFoundError(expense_not_found(expense_id))
