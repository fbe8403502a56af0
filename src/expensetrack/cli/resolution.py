"""CLI helpers for resolving users and categories from command arguments."""

from __future__ import annotations

import click

from expensetrack.database.base import Database
from expensetrack.domain.category import CategoryService
from expensetrack.domain.entities import Category, User


def resolve_user_or_exit(ctx: click.Context, db: Database, user: str) -> User:
    """Resolve an email or username, or exit with a CLI error."""
    found = db.get_user_by_email(user) or db.get_user_by_username(user)
    if found is None:
        click.echo(f"Error: User '{user}' not found", err=True)
        ctx.exit(1)
    return found


def resolve_category(db: Database, owner_id: int, category: str | int) -> Category:
    """Resolve a category name (case-insensitive) or ID within one user's categories.

    Raises:
        ValueError: If the user has no such category
    """
    categories = CategoryService(db).list_categories(owner_id)

    try:
        category_id = int(category)
    except (ValueError, TypeError):
        category_id = None

    for cat in categories:
        if category_id is not None and cat.id == category_id:
            return cat
    for cat in categories:
        if cat.name.lower() == str(category).strip().lower():
            return cat

    raise ValueError(f"Category '{category}' not found")


def resolve_category_or_exit(
    ctx: click.Context, db: Database, owner_id: int, category: str | int
) -> Category:
    """Resolve a category, or exit with a CLI error."""
    try:
        return resolve_category(db, owner_id, category)
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(1)
