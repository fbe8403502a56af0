"""Domain model entities for expensetrack.

These are pure data classes representing business concepts, independent of
database schema. Services and the aggregation layer only ever see these,
never the ORM rows.
"""

from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class User:
    """Registered user domain entity."""

    id: int
    username: str
    email: str
    password_hash: str
    created_at: datetime


@dataclass(frozen=True)
class Category:
    """Owner-scoped expense category."""

    id: int
    name: str
    color: str
    owner_id: int
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class Expense:
    """Owner-scoped expense entry."""

    id: int
    amount: Decimal
    description: str
    date: date
    category_id: int
    owner_id: int
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class MonthlyTotal:
    """Sum of expense amounts for one "YYYY-MM" month."""

    month: str
    amount: Decimal


@dataclass(frozen=True)
class CategoryTotal:
    """Sum of expense amounts for one category."""

    category_id: int
    amount: Decimal


@dataclass(frozen=True)
class DashboardSummary:
    """Derived dashboard figures for a user."""

    total: Decimal
    current_month: str
    current_month_total: Decimal
    previous_month: str
    previous_month_total: Decimal
    month_over_month_change: float
    largest_category: Optional[CategoryTotal]
