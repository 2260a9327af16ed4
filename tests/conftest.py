"""Shared pytest fixtures for expenses tests."""

import tempfile
import os
from datetime import date
import pytest

from expenses.database.factories import create_sqlite_database
from expenses.domain.entities import Detail, Transaction
from expenses.domain.registry import RegistryService


@pytest.fixture
def temp_db():
    """Create a temporary database with the registry tables installed."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.install()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def registry(temp_db):
    """Create a RegistryService with a temporary database."""
    return RegistryService(temp_db)


@pytest.fixture
def sample_transaction():
    """A grocery transaction broken down into two details."""
    return Transaction(
        date=date(2021, 4, 22),
        amount=-3000,
        label="Groceries",
        sender="Alexandru",
        receiver="Market",
        details=[
            Detail(label="Bread", amount=1000),
            Detail(label="Cake", amount=2000),
        ],
    )


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
