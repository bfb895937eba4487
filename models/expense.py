"""Expense model and its enumerations."""

from dataclasses import dataclass
from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Optional

# Largest accepted amount; keeps sums and percentages within Decimal precision
MAX_AMOUNT = Decimal("999999999999.99")
_CENTS = Decimal("0.01")


class Category(str, Enum):
    """Closed set of expense categories."""

    FOOD = "food"
    TRANSPORT = "transport"
    SHOPPING = "shopping"
    BILLS = "bills"
    ENTERTAINMENT = "entertainment"
    HEALTH = "health"
    EDUCATION = "education"
    TRAVEL = "travel"
    GROCERIES = "groceries"
    SUBSCRIPTIONS = "subscriptions"
    OTHER = "other"

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]

    @classmethod
    def label_for(cls, value: str) -> str:
        """Display label for a raw category key; unknown keys show as-is."""
        try:
            return cls(value).label
        except ValueError:
            return value


_CATEGORY_LABELS = {
    Category.FOOD: "Food & Dining",
    Category.TRANSPORT: "Transport",
    Category.SHOPPING: "Shopping",
    Category.BILLS: "Bills & Utilities",
    Category.ENTERTAINMENT: "Entertainment",
    Category.HEALTH: "Health",
    Category.EDUCATION: "Education",
    Category.TRAVEL: "Travel",
    Category.GROCERIES: "Groceries",
    Category.SUBSCRIPTIONS: "Subscriptions",
    Category.OTHER: "Other",
}


class PaymentMethod(str, Enum):
    """Closed set of payment methods. Carried on expenses, never aggregated."""

    CASH = "cash"
    CREDIT_CARD = "credit_card"
    DEBIT_CARD = "debit_card"
    BANK_TRANSFER = "bank_transfer"
    OTHER = "other"

    @property
    def label(self) -> str:
        return _PAYMENT_METHOD_LABELS[self]

    @classmethod
    def label_for(cls, value: Optional[str]) -> str:
        """Display label for a raw payment method key; unknown keys show as Other."""
        try:
            return cls(value).label
        except ValueError:
            return cls.OTHER.label


_PAYMENT_METHOD_LABELS = {
    PaymentMethod.CASH: "Cash",
    PaymentMethod.CREDIT_CARD: "Credit Card",
    PaymentMethod.DEBIT_CARD: "Debit Card",
    PaymentMethod.BANK_TRANSFER: "Bank Transfer",
    PaymentMethod.OTHER: "Other",
}


class ExpenseValidationError(ValueError):
    """Raised when user-entered expense fields are missing or malformed."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field


@dataclass
class Expense:
    id: str  # uuid4 hex, assigned by ExpenseService.create
    amount: Decimal  # never negative
    category: str  # raw key; unknown keys are kept as-is
    expense_date: date
    created_at: datetime
    description: Optional[str] = None
    payment_method: str = PaymentMethod.CASH.value

    @property
    def category_label(self) -> str:
        return Category.label_for(self.category)

    @property
    def payment_method_label(self) -> str:
        return PaymentMethod.label_for(self.payment_method)

    def to_dict(self) -> dict:
        """Convert expense to a JSON-serializable dictionary for storage."""
        return {
            "id": self.id,
            "amount": str(self.amount),  # string keeps Decimal precision
            "category": self.category,
            "description": self.description,
            "date": self.expense_date.isoformat(),
            "payment_method": self.payment_method,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Expense":
        """Build an Expense from its stored dictionary.

        Older blobs used camelCase keys for some fields, so both spellings
        are accepted.

        Raises:
            KeyError: If a required key is missing.
            ValueError: If the amount or a date does not parse.
        """
        created_at = data.get("created_at", data.get("createdAt"))
        try:
            amount = Decimal(str(data["amount"]))
        except InvalidOperation as e:
            raise ValueError(f"Invalid amount: {data['amount']!r}") from e
        if not amount.is_finite() or not 0 <= amount <= MAX_AMOUNT:
            raise ValueError(f"Amount out of range: {data['amount']!r}")

        return cls(
            id=str(data["id"]),
            amount=amount,
            category=data["category"],
            expense_date=date.fromisoformat(data["date"]),
            created_at=parse_timestamp(created_at),
            description=data.get("description") or None,
            payment_method=data.get(
                "payment_method", data.get("paymentMethod", PaymentMethod.CASH.value)
            ),
        )


def parse_timestamp(value: Optional[str]) -> datetime:
    """Parse a stored creation timestamp into an aware UTC datetime.

    Naive values are taken as UTC; a missing value sorts before everything.
    """
    if not value:
        return datetime.min.replace(tzinfo=timezone.utc)
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def validate_expense_fields(fields: dict) -> dict:
    """Apply the required-field policy to user-entered expense data.

    Args:
        fields: Raw values keyed by amount, category, date, description and
            payment_method. Values may be strings or already-typed objects.

    Returns:
        Normalized dictionary with a Decimal amount, a date, the category and
        payment method as raw keys, and description (None when blank).

    Raises:
        ExpenseValidationError: Naming the first field that fails.
    """
    raw_amount = fields.get("amount")
    if raw_amount is None or str(raw_amount).strip() == "":
        raise ExpenseValidationError("amount", "is required")
    try:
        amount = Decimal(str(raw_amount).strip())
    except InvalidOperation:
        raise ExpenseValidationError("amount", f"'{raw_amount}' is not a number")
    if not amount.is_finite() or amount < 0:
        raise ExpenseValidationError("amount", "must be a non-negative number")
    if amount > MAX_AMOUNT:
        raise ExpenseValidationError("amount", f"must not exceed {MAX_AMOUNT}")
    if amount != amount.quantize(_CENTS):
        raise ExpenseValidationError("amount", "must have at most two decimal places")

    raw_category = fields.get("category")
    if not raw_category:
        raise ExpenseValidationError("category", "is required")
    try:
        category = Category(raw_category)
    except ValueError:
        raise ExpenseValidationError("category", f"unknown category '{raw_category}'")

    raw_date = fields.get("date")
    if not raw_date:
        raise ExpenseValidationError("date", "is required")
    if isinstance(raw_date, date):
        expense_date = raw_date
    else:
        try:
            expense_date = date.fromisoformat(str(raw_date).strip())
        except ValueError:
            raise ExpenseValidationError("date", f"'{raw_date}' is not a YYYY-MM-DD date")

    raw_method = fields.get("payment_method") or PaymentMethod.CASH.value
    try:
        payment_method = PaymentMethod(raw_method)
    except ValueError:
        raise ExpenseValidationError(
            "payment_method", f"unknown payment method '{raw_method}'"
        )

    description = fields.get("description")
    if description is not None:
        description = str(description).strip() or None

    return {
        "amount": amount,
        "category": category.value,
        "date": expense_date,
        "description": description,
        "payment_method": payment_method.value,
    }
