"""Database layer for the expenses registry."""

from expenses.database.base import Database
from expenses.database.factories import create_database, create_sqlite_database
from expenses.database.models import TABLES

__all__ = ["Database", "TABLES", "create_database", "create_sqlite_database"]
