"""Dashboard view model: stats cards, category chart, trend and recent list."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import List

from config import Config
from models.expense import Expense
from models.period import Period, Window
from tools.comparison import Comparison, compare
from tools.series import Bucket, spending_trend
from tools.stats import (
    CategoryShare,
    Summary,
    category_breakdown,
    filter_by_window,
    recent_expenses,
    summarize,
    top_categories,
    total_amount,
)
from tools.windows import FIXED, resolve_windows


@dataclass
class Dashboard:
    period: Period
    current_window: Window
    previous_window: Window
    summary: Summary
    previous_total: Decimal
    comparison: Comparison
    categories: List[CategoryShare]
    top_categories: List[CategoryShare]
    trend: List[Bucket]
    recent: List[Expense]


def build_dashboard(
    expenses: List[Expense], period: Period, today: date, config: Config
) -> Dashboard:
    """Compute everything the dashboard shows for one period.

    Args:
        expenses: Full expense collection.
        period: Selected granularity.
        today: Reference day.
        config: Supplies the comparison and daily average modes and list sizes.

    Returns:
        Dashboard with stats for the current window, the comparison against
        the previous window, and the trend over the full collection.
    """
    current, previous = resolve_windows(period, today, config.previous_period)

    in_period = filter_by_window(expenses, current)
    daily_divisor = period.nominal_days if config.daily_average == FIXED else None
    summary = summarize(in_period, current, daily_divisor)

    previous_total = total_amount(filter_by_window(expenses, previous))
    categories = category_breakdown(in_period)

    return Dashboard(
        period=period,
        current_window=current,
        previous_window=previous,
        summary=summary,
        previous_total=previous_total,
        comparison=compare(summary.total, previous_total),
        categories=categories,
        top_categories=top_categories(categories, config.top_categories),
        trend=spending_trend(expenses, period, today),
        recent=recent_expenses(in_period, config.recent_limit),
    )
