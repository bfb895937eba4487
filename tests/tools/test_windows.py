"""Tests for window resolution."""

import pytest
from datetime import date

from models.period import Period, Window
from tools.windows import (
    current_window,
    fixed_previous_window,
    previous_window,
    resolve_windows,
)


class TestCurrentWindow:
    def test_week_starts_monday(self):
        # 2024-01-10 is a Wednesday
        window = current_window(Period.WEEK, date(2024, 1, 10))

        assert window == Window(date(2024, 1, 8), date(2024, 1, 15))

    def test_week_on_sunday_belongs_to_previous_monday(self):
        window = current_window(Period.WEEK, date(2024, 1, 14))

        assert window.start == date(2024, 1, 8)

    def test_month(self):
        window = current_window(Period.MONTH, date(2024, 2, 17))

        assert window == Window(date(2024, 2, 1), date(2024, 3, 1))
        assert window.days == 29

    def test_year(self):
        window = current_window(Period.YEAR, date(2024, 6, 30))

        assert window == Window(date(2024, 1, 1), date(2025, 1, 1))


class TestPreviousWindow:
    def test_week(self):
        window = previous_window(Period.WEEK, date(2024, 1, 3))

        assert window == Window(date(2023, 12, 25), date(2024, 1, 1))

    def test_month_is_calendar_aligned(self):
        window = previous_window(Period.MONTH, date(2024, 3, 15))

        assert window == Window(date(2024, 2, 1), date(2024, 3, 1))

    def test_month_across_year_boundary(self):
        window = previous_window(Period.MONTH, date(2024, 1, 20))

        assert window == Window(date(2023, 12, 1), date(2024, 1, 1))

    def test_year(self):
        window = previous_window(Period.YEAR, date(2024, 6, 1))

        assert window == Window(date(2023, 1, 1), date(2024, 1, 1))

    def test_previous_ends_where_current_starts(self):
        today = date(2024, 5, 9)
        for period in Period:
            assert previous_window(period, today).end == current_window(period, today).start


class TestFixedPreviousWindow:
    def test_month_uses_thirty_days(self):
        # March starts 2024-03-01; 30 days earlier is 2024-01-31
        window = fixed_previous_window(Period.MONTH, date(2024, 3, 15))

        assert window == Window(date(2024, 1, 31), date(2024, 3, 1))

    def test_year_uses_365_days_in_leap_year(self):
        window = fixed_previous_window(Period.YEAR, date(2025, 4, 1))

        assert window == Window(date(2024, 1, 2), date(2025, 1, 1))


class TestResolveWindows:
    def test_calendar_mode(self):
        current, previous = resolve_windows(Period.MONTH, date(2024, 3, 15))

        assert current == Window(date(2024, 3, 1), date(2024, 4, 1))
        assert previous == Window(date(2024, 2, 1), date(2024, 3, 1))

    def test_fixed_mode(self):
        _, previous = resolve_windows(Period.MONTH, date(2024, 3, 15), "fixed")

        assert previous.start == date(2024, 1, 31)

    def test_unknown_mode_raises(self):
        with pytest.raises(ValueError, match="Unknown window mode"):
            resolve_windows(Period.MONTH, date(2024, 3, 15), "rolling")
