"""Helper utilities for tests."""

from datetime import date, datetime, timezone
from decimal import Decimal
from pathlib import Path
import sqlite3

from models.expense import Expense


def run_migrations(conn: sqlite3.Connection, migrations_dir: Path) -> None:
    """Run all SQL migrations in order.

    Args:
        conn: SQLite connection to run migrations against.
        migrations_dir: Path to directory containing .sql migration files.
    """
    for migration_file in sorted(migrations_dir.glob("*.sql")):
        conn.executescript(migration_file.read_text())
    conn.commit()


def make_expense(
    amount,
    category: str,
    expense_date: date,
    *,
    expense_id: str = None,
    created_at: datetime = None,
    description: str = None,
) -> Expense:
    """Build an in-memory Expense without going through the repository."""
    return Expense(
        id=expense_id or f"{category}-{expense_date.isoformat()}-{amount}",
        amount=Decimal(str(amount)),
        category=category,
        expense_date=expense_date,
        created_at=created_at or datetime(2024, 1, 1, tzinfo=timezone.utc),
        description=description,
    )
