"""Database factory functions for creating database instances."""

from typing import Optional

from expenses.config import default_database_path
from expenses.database.sqlalchemy_db import SQLAlchemyDatabase


def create_database(database_url: str) -> SQLAlchemyDatabase:
    """Create a database instance for any SQLAlchemy URL."""
    return SQLAlchemyDatabase(database_url)


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks EXPENSES_DB_PATH
            environment variable, then defaults to ~/.expenses/expenses.db

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        database_path = default_database_path()

    return create_database(f"sqlite:///{database_path}")
