"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from expensetrack.database.sqlalchemy_db import SQLAlchemyDatabase


def default_database_path() -> str:
    """Return the database file path used when none is configured.

    Checks the EXPENSETRACK_DB_PATH environment variable, then falls back to
    ~/.expensetrack/expensetrack.db
    """
    database_path = os.environ.get("EXPENSETRACK_DB_PATH")
    if database_path is None:
        home = Path.home()
        db_dir = home / ".expensetrack"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "expensetrack.db")
    return database_path


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, uses
            default_database_path()

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        database_path = default_database_path()

    return SQLAlchemyDatabase(f"sqlite:///{database_path}")


def create_database(database_url: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a database instance from a SQLAlchemy URL.

    Falls back to the default SQLite file when no URL is given.
    """
    if not database_url:
        return create_sqlite_database()
    return SQLAlchemyDatabase(database_url)
