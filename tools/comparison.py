"""Period-over-period comparisons."""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Iterable, List

from models.expense import Category, Expense
from tools.stats import ZERO, totals_by_category

_ONE_PLACE = Decimal("0.1")


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    FLAT = "flat"


@dataclass
class Comparison:
    current: Decimal
    previous: Decimal
    change: Decimal  # percent, one decimal place
    direction: Direction


@dataclass
class CategoryComparison(Comparison):
    category: str = ""
    label: str = ""


def percent_change(current: Decimal, previous: Decimal) -> Decimal:
    """Signed percent change from previous to current.

    A previous value of 0 reports +100% when current is positive and 0%
    when both are 0.
    """
    if previous > 0:
        change = Decimal(100) * (current - previous) / previous
    elif current > 0:
        change = Decimal(100)
    else:
        change = ZERO
    return change.quantize(_ONE_PLACE, rounding=ROUND_HALF_UP)


def direction(delta: Decimal) -> Direction:
    """Classify a signed difference; pass the raw delta, not a rounded percent."""
    if delta > 0:
        return Direction.UP
    if delta < 0:
        return Direction.DOWN
    return Direction.FLAT


def compare(current: Decimal, previous: Decimal) -> Comparison:
    change = percent_change(current, previous)
    return Comparison(
        current=current,
        previous=previous,
        change=change,
        direction=direction(current - previous),
    )


def compare_categories(
    current_expenses: Iterable[Expense], previous_expenses: Iterable[Expense]
) -> List[CategoryComparison]:
    """Compare spending per category between two windows.

    Categories seen in either window are included, with 0 for the side
    where they are absent.

    Returns:
        List of CategoryComparison sorted by current amount, highest first.
    """
    current_totals = totals_by_category(current_expenses)
    previous_totals = totals_by_category(previous_expenses)

    categories = list(current_totals)
    categories += [c for c in previous_totals if c not in current_totals]

    rows = []
    for category in categories:
        base = compare(
            current_totals.get(category, ZERO), previous_totals.get(category, ZERO)
        )
        rows.append(
            CategoryComparison(
                current=base.current,
                previous=base.previous,
                change=base.change,
                direction=base.direction,
                category=category,
                label=Category.label_for(category),
            )
        )

    rows.sort(key=lambda r: r.current, reverse=True)
    return rows
