"""Resolve current and previous reporting windows for a period."""

from datetime import date, timedelta
from typing import Tuple
from dateutil.relativedelta import relativedelta

from models.period import Period, Window

CALENDAR = "calendar"
FIXED = "fixed"


def period_start(period: Period, day: date) -> date:
    """First day of the period containing `day` (weeks start on Monday)."""
    if period == Period.WEEK:
        return day - timedelta(days=day.weekday())
    if period == Period.MONTH:
        return day.replace(day=1)
    return day.replace(month=1, day=1)


def period_step(period: Period) -> relativedelta:
    """One calendar unit of the period."""
    if period == Period.WEEK:
        return relativedelta(weeks=1)
    if period == Period.MONTH:
        return relativedelta(months=1)
    return relativedelta(years=1)


def current_window(period: Period, today: date) -> Window:
    """The calendar week, month or year containing today."""
    start = period_start(period, today)
    return Window(start, start + period_step(period))


def previous_window(period: Period, today: date) -> Window:
    """The calendar unit immediately before the current window."""
    current = current_window(period, today)
    return Window(current.start - period_step(period), current.start)


def fixed_previous_window(period: Period, today: date) -> Window:
    """Previous window as a fixed 7/30/365-day span before the current start.

    Does not follow calendar lengths, so for months and leap years it can
    overlap or miss days of the previous calendar unit.
    """
    current = current_window(period, today)
    return Window(current.start - timedelta(days=period.nominal_days), current.start)


def resolve_windows(
    period: Period, today: date, mode: str = CALENDAR
) -> Tuple[Window, Window]:
    """Get the (current, previous) window pair.

    Args:
        period: Selected granularity.
        today: Reference day.
        mode: 'calendar' for calendar-aligned shifting, 'fixed' for
            fixed day offsets.

    Returns:
        Tuple of current and previous Window.

    Raises:
        ValueError: If mode is not recognized.
    """
    if mode == CALENDAR:
        previous = previous_window(period, today)
    elif mode == FIXED:
        previous = fixed_previous_window(period, today)
    else:
        raise ValueError(f"Unknown window mode: {mode}")
    return current_window(period, today), previous
