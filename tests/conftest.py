"""Shared pytest fixtures for famledger tests."""

import tempfile
import os
import pytest

from famledger.database.factories import create_sqlite_database
from famledger.domain.transaction import TransactionService
from famledger.domain.balance import BalanceService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def balance_service(temp_db):
    """Create a BalanceService with a temporary database."""
    return BalanceService(temp_db)


@pytest.fixture
def household(transaction_service):
    """Record a small household history and return the stored transactions."""
    return [
        transaction_service.record_transaction("WORLD", "Alice", "earn", "1000", "Salary"),
        transaction_service.record_transaction("Alice", "WORLD", "spend", "120.50", "Food"),
        transaction_service.record_transaction("HDFC", "Bob", "borrow", "500", "HDFC"),
        transaction_service.record_transaction("Alice", "Bob", "transfer", "200", "Household"),
        transaction_service.record_transaction("Bob", "WORLD", "spend", "80", "Electricity bill"),
        transaction_service.record_transaction("WORLD", "Bob", "earn", "300", "Gift"),
    ]


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
