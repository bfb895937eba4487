"""Expense repository backed by a single JSON blob in the kv_store table."""

import json
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from logger import get_logger
from models.expense import Expense, validate_expense_fields

logger = get_logger()

_SORT_ORDERS = ("-date", "date")


class ExpenseService:
    """Service for listing, creating and deleting expenses.

    The whole collection lives under one storage key and is always read and
    written in full.
    """

    def __init__(self, db_manager, storage_key: str):
        """Initialize the expense service.

        Args:
            db_manager: Database manager instance for database operations.
            storage_key: kv_store key holding the collection.
        """
        self.db_manager = db_manager
        self.storage_key = storage_key

    def list(self, sort: str = "-date") -> List[Expense]:
        """Get all expenses.

        Args:
            sort: '-date' for newest first, 'date' for oldest first. Expenses
                on the same day keep their stored order.

        Returns:
            List of Expense objects.

        Raises:
            ValueError: If sort is not a supported order.
        """
        if sort not in _SORT_ORDERS:
            raise ValueError(f"Unsupported sort order: {sort}")

        expenses = self._read()
        return sorted(
            expenses, key=lambda e: e.expense_date, reverse=sort.startswith("-")
        )

    def find(self, expense_id: str) -> Optional[Expense]:
        """Get a single expense by ID.

        Returns:
            Expense object if found, None otherwise.
        """
        for expense in self._read():
            if expense.id == expense_id:
                return expense
        return None

    def create(self, fields: dict) -> Expense:
        """Validate user fields and store a new expense.

        Args:
            fields: amount, category, date, and optionally description and
                payment_method.

        Returns:
            The stored Expense with its id and created_at assigned.

        Raises:
            ExpenseValidationError: If a required field is missing or invalid.
        """
        clean = validate_expense_fields(fields)
        expense = Expense(
            id=uuid.uuid4().hex,
            amount=clean["amount"],
            category=clean["category"],
            expense_date=clean["date"],
            created_at=datetime.now(timezone.utc),
            description=clean["description"],
            payment_method=clean["payment_method"],
        )

        # New expenses go to the front of the stored list
        self._write([expense] + self._read())
        logger.debug(f"Created expense {expense.id} ({expense.amount} {expense.category})")
        return expense

    def delete(self, expense_id: str) -> bool:
        """Delete an expense by ID.

        Returns:
            True if the expense was deleted, False if not found.
        """
        expenses = self._read()
        remaining = [e for e in expenses if e.id != expense_id]
        if len(remaining) == len(expenses):
            return False

        self._write(remaining)
        logger.debug(f"Deleted expense {expense_id}")
        return True

    def clear(self) -> None:
        """Remove every expense."""
        self._write([])

    def _read(self) -> List[Expense]:
        """Load the stored collection.

        A missing or unparseable blob is treated as an empty collection.
        Individual malformed entries are logged and skipped so the rest
        survive the next write.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "SELECT value FROM kv_store WHERE key = ?", (self.storage_key,)
            )
            row = cursor.fetchone()

        if not row or not row[0]:
            return []

        try:
            data = json.loads(row[0])
        except ValueError as e:
            logger.error(f"Failed to parse stored expenses under '{self.storage_key}': {e}")
            return []
        if not isinstance(data, list):
            logger.error(
                f"Stored expenses under '{self.storage_key}' are not a list "
                f"({type(data).__name__})"
            )
            return []

        expenses = []
        for position, item in enumerate(data):
            try:
                expenses.append(Expense.from_dict(item))
            except (ValueError, KeyError, TypeError, AttributeError) as e:
                logger.error(f"Skipping malformed stored expense #{position}: {e}")
        return expenses

    def _write(self, expenses: List[Expense]) -> None:
        payload = json.dumps([e.to_dict() for e in expenses])
        with self.db_manager.connect() as conn:
            conn.execute(
                """
                INSERT INTO kv_store (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
                """,
                (self.storage_key, payload),
            )
            conn.commit()
