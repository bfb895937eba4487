"""SQLite connection handling for Spendlog."""

import sqlite3
from contextlib import contextmanager
from config import Config, get_migrations_dir


class DatabaseManager:
    """Opens connections to the configured SQLite file.

    Args:
        config: Application configuration object.
    """

    def __init__(self, config: Config):
        self.config = config

    @contextmanager
    def connect(self):
        """Get a database connection, closed on exit.

        Yields:
            sqlite3.Connection: Database connection.
        """
        db_path = self.config.db_path
        db_path.parent.mkdir(parents=True, exist_ok=True)

        conn = sqlite3.connect(db_path)
        try:
            yield conn
        finally:
            conn.close()

    def get_db_path(self):
        """Return the path of the database file."""
        return self.config.db_path

    def get_migrations_dir(self):
        """Return the directory holding the .sql migrations."""
        return get_migrations_dir()

    def is_initialized(self) -> bool:
        """Check whether the kv_store table exists.

        Returns:
            True once migrations have been applied to the database.
        """
        with self.connect() as conn:
            cursor = conn.execute(
                "SELECT name FROM sqlite_master WHERE type = 'table' AND name = 'kv_store'"
            )
            return cursor.fetchone() is not None
