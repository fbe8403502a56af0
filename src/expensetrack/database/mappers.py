"""Mapper functions to convert SQLAlchemy models into domain entities."""

from expensetrack.domain import entities as domain
from expensetrack.database.models import (
    User as ORMUser,
    Category as ORMCategory,
    Expense as ORMExpense,
)


def user_to_domain(orm_user: ORMUser) -> domain.User:
    """Convert SQLAlchemy User model to domain User entity."""
    return domain.User(
        id=orm_user.id,
        username=orm_user.username,
        email=orm_user.email,
        password_hash=orm_user.password_hash,
        created_at=orm_user.created_at,
    )


def category_to_domain(orm_category: ORMCategory) -> domain.Category:
    """Convert SQLAlchemy Category model to domain Category entity."""
    return domain.Category(
        id=orm_category.id,
        name=orm_category.name,
        color=orm_category.color,
        owner_id=orm_category.owner_id,
        created_at=orm_category.created_at,
    )


def expense_to_domain(orm_expense: ORMExpense) -> domain.Expense:
    """Convert SQLAlchemy Expense model to domain Expense entity."""
    return domain.Expense(
        id=orm_expense.id,
        amount=orm_expense.amount,
        description=orm_expense.description,
        date=orm_expense.date,
        category_id=orm_expense.category_id,
        owner_id=orm_expense.owner_id,
        created_at=orm_expense.created_at,
    )
