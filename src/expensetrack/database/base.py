"""Abstract owner-scoped database interface."""

from abc import ABC, abstractmethod
from typing import Optional, Iterable
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from expensetrack.domain.entities import User, Category, Expense


class Database(ABC):
    """Abstract database interface for expensetrack.

    Every category and expense operation takes the caller's ``owner_id`` and
    only ever sees rows belonging to that owner. A row owned by someone else
    behaves exactly like a missing row.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def rollback(self) -> None:
        """Discard any pending changes in the current session."""
        pass

    # User operations
    @abstractmethod
    def create_user(self, username: str, email: str, password_hash: str) -> User:
        """Create a user."""
        pass

    @abstractmethod
    def get_user(self, user_id: int) -> Optional[User]:
        """Get user by ID."""
        pass

    @abstractmethod
    def get_user_by_email(self, email: str) -> Optional[User]:
        """Get user by email."""
        pass

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""
        pass

    # Category operations
    @abstractmethod
    def create_category(self, owner_id: int, name: str, color: str) -> Category:
        """Create a category for an owner."""
        pass

    @abstractmethod
    def create_categories(
        self, owner_id: int, categories: Iterable[tuple[str, str]]
    ) -> list[Category]:
        """Bulk-create ``(name, color)`` categories for an owner in one commit."""
        pass

    @abstractmethod
    def get_category(self, owner_id: int, category_id: int) -> Optional[Category]:
        """Get one of the owner's categories by ID."""
        pass

    @abstractmethod
    def get_category_owner_id(self, category_id: int) -> Optional[int]:
        """Return the owner of a category, or None if it does not exist."""
        pass

    @abstractmethod
    def list_categories(self, owner_id: int) -> list[Category]:
        """List the owner's categories ordered by name."""
        pass

    @abstractmethod
    def update_category(
        self,
        owner_id: int,
        category_id: int,
        name: Optional[str] = None,
        color: Optional[str] = None,
    ) -> Optional[Category]:
        """Update name and/or color. Returns None if not found."""
        pass

    @abstractmethod
    def delete_category(self, owner_id: int, category_id: int) -> bool:
        """Delete a category. Returns False if not found."""
        pass

    @abstractmethod
    def count_category_expenses(self, owner_id: int, category_id: int) -> int:
        """Count the owner's expenses referencing a category."""
        pass

    # Expense operations
    @abstractmethod
    def create_expense(
        self,
        owner_id: int,
        amount: Decimal,
        description: str,
        date: date,
        category_id: int,
    ) -> Expense:
        """Create an expense for an owner."""
        pass

    @abstractmethod
    def get_expense(self, owner_id: int, expense_id: int) -> Optional[Expense]:
        """Get one of the owner's expenses by ID."""
        pass

    @abstractmethod
    def get_expense_owner_id(self, expense_id: int) -> Optional[int]:
        """Return the owner of an expense, or None if it does not exist."""
        pass

    @abstractmethod
    def list_expenses(
        self, owner_id: int, category_id: Optional[int] = None
    ) -> list[Expense]:
        """List the owner's expenses, newest date first.

        Args:
            owner_id: Owner to scope by
            category_id: Optional category ID filter
        """
        pass

    @abstractmethod
    def update_expense(
        self,
        owner_id: int,
        expense_id: int,
        amount: Optional[Decimal] = None,
        description: Optional[str] = None,
        date: Optional[date] = None,
        category_id: Optional[int] = None,
    ) -> Optional[Expense]:
        """Merge the given fields into an expense. Returns None if not found."""
        pass

    @abstractmethod
    def delete_expense(self, owner_id: int, expense_id: int) -> bool:
        """Delete an expense. Returns False if not found."""
        pass
