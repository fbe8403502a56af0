"""Database layer for expensetrack application."""

from expensetrack.database.base import Database
from expensetrack.database.factories import create_database, create_sqlite_database

__all__ = ["Database", "create_database", "create_sqlite_database"]
