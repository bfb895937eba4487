"""Time-bucketed spending series for the trend chart and the reports view."""

import calendar
from dataclasses import dataclass, field
from datetime import date, timedelta
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Tuple
from dateutil.relativedelta import relativedelta

from models.expense import Expense
from models.period import Period
from tools.windows import period_start

ZERO = Decimal("0")

# Number of buckets shown per period on the reports view
REPORT_BUCKETS = {Period.WEEK: 8, Period.MONTH: 6, Period.YEAR: 12}


@dataclass
class Bucket:
    """One chart point covering [start, end).

    Attributes:
        key: Unambiguous identity: (y, m, d) for days, (y, m) for months,
            (iso_year, iso_week) for weeks.
        label: Display text; not unique across years.
        start: First day in the bucket.
        end: Day after the last day in the bucket.
        total: Sum of amounts in the bucket.
        by_category: Amount per category key.
    """

    key: Tuple[int, ...]
    label: str
    start: date
    end: date
    total: Decimal = ZERO
    by_category: Dict[str, Decimal] = field(default_factory=dict)


def _month_label(day: date, year_format: Optional[str] = None) -> str:
    abbr = calendar.month_abbr[day.month]
    if year_format == "full":
        return f"{abbr} {day.year:04d}"
    if year_format == "short":
        return f"{abbr} {day.year % 100:02d}"
    return abbr


def _day_label(day: date) -> str:
    return f"{calendar.month_abbr[day.month]} {day.day}"


def _month_starts(last_month: date, count: int) -> List[date]:
    """First days of `count` consecutive months ending with last_month's month."""
    first = last_month.replace(day=1) - relativedelta(months=count - 1)
    return [first + relativedelta(months=i) for i in range(count)]


def active_categories(expenses: Iterable[Expense]) -> List[str]:
    """Distinct category keys in the order they first appear."""
    seen: Dict[str, None] = {}
    for expense in expenses:
        seen.setdefault(expense.category, None)
    return list(seen)


def fill_buckets(
    expenses: Iterable[Expense],
    buckets: List[Bucket],
    categories: Optional[List[str]] = None,
) -> List[Bucket]:
    """Add each expense to the bucket whose range holds its date.

    Args:
        expenses: Expenses to distribute; ones outside every bucket are ignored.
        buckets: Non-overlapping buckets in ascending order.
        categories: Category keys to pre-seed with zero in every bucket.

    Returns:
        The same bucket list, filled in.
    """
    for bucket in buckets:
        bucket.by_category = {category: ZERO for category in categories or []}

    if not buckets:
        return buckets
    first_day, last_end = buckets[0].start, buckets[-1].end

    for expense in expenses:
        day = expense.expense_date
        if not first_day <= day < last_end:
            continue
        for bucket in buckets:
            if bucket.start <= day < bucket.end:
                bucket.total += expense.amount
                bucket.by_category[expense.category] = (
                    bucket.by_category.get(expense.category, ZERO) + expense.amount
                )
                break

    return buckets


def spending_trend(
    expenses: Iterable[Expense], period: Period, today: date
) -> List[Bucket]:
    """Dashboard trend series ending today.

    Week and month give one bucket per day for the trailing 7 or 30 days.
    Year gives the 12 calendar months ending with the current month, keyed
    by (year, month), the last one stopping at today.
    """
    tomorrow = today + timedelta(days=1)

    if period == Period.YEAR:
        buckets = []
        for start in _month_starts(today, 12):
            end = min(start + relativedelta(months=1), tomorrow)
            buckets.append(
                Bucket(
                    key=(start.year, start.month),
                    label=_month_label(start),
                    start=start,
                    end=end,
                )
            )
    else:
        days = period.nominal_days
        first = today - timedelta(days=days - 1)
        buckets = [
            Bucket(
                key=(day.year, day.month, day.day),
                label=_day_label(day),
                start=day,
                end=day + timedelta(days=1),
            )
            for day in (first + timedelta(days=i) for i in range(days))
        ]

    return fill_buckets(expenses, buckets)


def report_series(
    expenses: List[Expense], period: Period, today: date
) -> List[Bucket]:
    """Reports view series with a per-category split in every bucket.

    Week gives the last 8 Monday-based weeks, month the last 6 calendar
    months, year the last 12 calendar months; each ends with the unit
    containing today. Every category present anywhere in `expenses` is
    listed in every bucket.
    """
    count = REPORT_BUCKETS[period]

    if period == Period.WEEK:
        current = period_start(Period.WEEK, today)
        buckets = []
        for i in range(count - 1, -1, -1):
            start = current - timedelta(weeks=i)
            iso = start.isocalendar()
            buckets.append(
                Bucket(
                    key=(iso[0], iso[1]),
                    label=_day_label(start),
                    start=start,
                    end=start + timedelta(weeks=1),
                )
            )
    else:
        year_format = "full" if period == Period.MONTH else "short"
        buckets = [
            Bucket(
                key=(start.year, start.month),
                label=_month_label(start, year_format),
                start=start,
                end=start + relativedelta(months=1),
            )
            for start in _month_starts(today, count)
        ]

    return fill_buckets(expenses, buckets, active_categories(expenses))
