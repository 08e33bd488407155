"""Shared pytest fixtures for cashbook tests."""

import tempfile
import os
import pytest

from cashbook.database.factories import create_sqlite_database
from cashbook.domain.adjustment import CashAdjustmentService
from cashbook.domain.cashbook import CashBookService
from cashbook.domain.expense import ExpenseService
from cashbook.domain.token import TokenService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    db.session_factory.kw["bind"].dispose()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def token_service(temp_db):
    """Create a TokenService with a temporary database."""
    return TokenService(temp_db)


@pytest.fixture
def expense_service(temp_db):
    """Create an ExpenseService with a temporary database."""
    return ExpenseService(temp_db)


@pytest.fixture
def adjustment_service(temp_db):
    """Create a CashAdjustmentService with a temporary database."""
    return CashAdjustmentService(temp_db)


@pytest.fixture
def cashbook_service(temp_db):
    """Create a CashBookService with a temporary database."""
    return CashBookService(temp_db)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
