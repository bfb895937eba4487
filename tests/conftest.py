"""Shared pytest fixtures for all tests."""

import sqlite3
import pytest
from pathlib import Path

from config import Config, get_migrations_dir
from services.base import Services
from tests.helpers import run_migrations


@pytest.fixture
def test_db():
    """Create an in-memory SQLite database for testing.

    Yields:
        sqlite3.Connection: Connection to in-memory database.
    """
    conn = sqlite3.connect(":memory:")
    yield conn
    conn.close()


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration rooted in a temporary directory.

    Returns:
        Config: Test configuration object.
    """
    return Config(
        base_dir=tmp_path / "spendlog",
        db_data_dir=tmp_path / "spendlog" / "db",
        db_filename="test.db",
        log_level="DEBUG",
        log_dir=tmp_path / "spendlog" / "logs",
        storage_key="test_expenses",
    )


@pytest.fixture
def db_manager_with_schema(test_db):
    """Create a DatabaseManager backed by the in-memory database.

    All migrations are applied before it is returned.

    Returns:
        A DatabaseManager stand-in sharing the test connection.
    """
    run_migrations(test_db, get_migrations_dir())

    class TestDatabaseManager:
        """Test database manager that uses in-memory connection."""

        def __init__(self, conn):
            self.conn = conn

        def connect(self):
            return _TestConnectionContext(self.conn)

        def get_db_path(self):
            return Path(":memory:")

        def get_migrations_dir(self):
            return get_migrations_dir()

    class _TestConnectionContext:
        """Context manager that leaves the shared connection open."""

        def __init__(self, conn):
            self.conn = conn

        def __enter__(self):
            return self.conn

        def __exit__(self, exc_type, exc_val, exc_tb):
            pass

    return TestDatabaseManager(test_db)


@pytest.fixture
def services(test_config, db_manager_with_schema):
    """Create a Services container with test database.

    Returns:
        Services: Services container for testing.
    """
    return Services(test_config, db_manager=db_manager_with_schema)
