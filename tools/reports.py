"""Reports view model and CSV export."""

import csv
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import List, TextIO

from models.expense import Category, Expense
from models.period import Period, Window
from tools.comparison import CategoryComparison, compare_categories
from tools.series import Bucket, active_categories, report_series
from tools.stats import filter_by_window
from tools.windows import resolve_windows

_CENTS = Decimal("0.01")


@dataclass
class Report:
    period: Period
    current_window: Window
    previous_window: Window
    series: List[Bucket]
    active_categories: List[str]
    comparison: List[CategoryComparison]


def build_report(expenses: List[Expense], period: Period, today: date) -> Report:
    """Build the period series and the category comparison.

    The comparison always uses calendar-aligned windows: this week against
    last week, this month against last month, this year against last year.
    """
    current, previous = resolve_windows(period, today)

    return Report(
        period=period,
        current_window=current,
        previous_window=previous,
        series=report_series(expenses, period, today),
        active_categories=active_categories(expenses),
        comparison=compare_categories(
            filter_by_window(expenses, current), filter_by_window(expenses, previous)
        ),
    )


def write_report_csv(report: Report, fh: TextIO) -> int:
    """Write the report series as CSV.

    Columns are period, one column per active category (display label as
    header), then total. Amounts have two decimals.

    Args:
        report: Report to export.
        fh: Text file opened with newline=''.

    Returns:
        Number of data rows written.
    """
    writer = csv.writer(fh)
    writer.writerow(
        ["period"]
        + [Category.label_for(c) for c in report.active_categories]
        + ["total"]
    )

    for bucket in report.series:
        writer.writerow(
            [bucket.label]
            + [
                str(bucket.by_category.get(c, Decimal("0")).quantize(_CENTS))
                for c in report.active_categories
            ]
            + [str(bucket.total.quantize(_CENTS))]
        )

    return len(report.series)
