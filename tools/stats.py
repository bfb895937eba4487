"""Filtering and summary statistics over expense collections."""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Optional

from models.expense import Category, Expense
from models.period import Window

ZERO = Decimal("0")
_ONE_PLACE = Decimal("0.1")


@dataclass
class Summary:
    """Headline numbers for one window."""

    total: Decimal
    count: int
    average: Decimal
    daily_average: Decimal


@dataclass
class CategoryShare:
    category: str
    label: str
    amount: Decimal
    percentage: Decimal  # 0-100, one decimal place


def percentage_of(part: Decimal, whole: Decimal) -> Decimal:
    """100 * part / whole rounded to one decimal; 0 when whole is 0."""
    if whole == 0:
        return ZERO
    return (Decimal(100) * part / whole).quantize(_ONE_PLACE, rounding=ROUND_HALF_UP)


def filter_by_window(expenses: Iterable[Expense], window: Window) -> List[Expense]:
    """Keep expenses dated inside the half-open window."""
    return [e for e in expenses if window.contains(e.expense_date)]


def total_amount(expenses: Iterable[Expense]) -> Decimal:
    return sum((e.amount for e in expenses), ZERO)


def summarize(
    expenses: List[Expense], window: Window, daily_divisor: Optional[int] = None
) -> Summary:
    """Compute total, count, average and daily average.

    Args:
        expenses: Expenses already filtered to the window.
        window: The window the expenses belong to.
        daily_divisor: Day count for the daily average. Defaults to the
            window's real length in days.

    Returns:
        Summary for the window. Averages are 0 when there is nothing to
        divide by.
    """
    total = total_amount(expenses)
    count = len(expenses)
    days = daily_divisor if daily_divisor is not None else window.days

    return Summary(
        total=total,
        count=count,
        average=total / count if count else ZERO,
        daily_average=total / days if days else ZERO,
    )


def totals_by_category(expenses: Iterable[Expense]) -> Dict[str, Decimal]:
    """Sum amounts per raw category key, in first-seen order."""
    totals: Dict[str, Decimal] = {}
    for expense in expenses:
        totals[expense.category] = totals.get(expense.category, ZERO) + expense.amount
    return totals


def category_breakdown(expenses: Iterable[Expense]) -> List[CategoryShare]:
    """Per-category totals and their share of the overall total.

    Sorted by amount descending, then category key for equal amounts.
    """
    totals = totals_by_category(expenses)
    overall = sum(totals.values(), ZERO)

    shares = [
        CategoryShare(
            category=category,
            label=Category.label_for(category),
            amount=amount,
            percentage=percentage_of(amount, overall),
        )
        for category, amount in totals.items()
    ]
    shares.sort(key=lambda s: (-s.amount, s.category))
    return shares


def top_categories(breakdown: List[CategoryShare], limit: int = 5) -> List[CategoryShare]:
    return breakdown[:limit]


def recent_expenses(expenses: Iterable[Expense], limit: int = 10) -> List[Expense]:
    """Newest expenses first; created_at breaks ties within a day."""
    ordered = sorted(
        expenses, key=lambda e: (e.expense_date, e.created_at), reverse=True
    )
    return ordered[:limit]
