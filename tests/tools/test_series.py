"""Tests for time-bucketed series."""

from datetime import date, timedelta
from decimal import Decimal
from dateutil.relativedelta import relativedelta

from models.period import Period
from tests.helpers import make_expense
from tools.series import active_categories, report_series, spending_trend


class TestSpendingTrend:
    def test_week_has_seven_daily_buckets_ending_today(self):
        today = date(2024, 1, 10)

        trend = spending_trend([], Period.WEEK, today)

        assert len(trend) == 7
        assert trend[0].start == date(2024, 1, 4)
        assert trend[-1].start == today
        assert trend[-1].label == "Jan 10"
        assert trend[-1].key == (2024, 1, 10)

    def test_month_has_thirty_daily_buckets(self):
        today = date(2024, 3, 1)

        trend = spending_trend([], Period.MONTH, today)

        assert len(trend) == 30
        assert trend[0].start == today - timedelta(days=29)
        assert [b.start for b in trend] == sorted(b.start for b in trend)

    def test_daily_totals(self):
        today = date(2024, 1, 10)
        expenses = [
            make_expense(5, "food", date(2024, 1, 10)),
            make_expense(7, "transport", date(2024, 1, 10)),
            make_expense(3, "food", date(2024, 1, 8)),
            make_expense(100, "food", date(2024, 1, 3)),  # outside the 7 days
            make_expense(100, "food", date(2024, 1, 11)),  # future
        ]

        trend = spending_trend(expenses, Period.WEEK, today)
        totals = {b.start: b.total for b in trend}

        assert totals[date(2024, 1, 10)] == Decimal("12")
        assert totals[date(2024, 1, 8)] == Decimal("3")
        assert sum(totals.values()) == Decimal("15")

    def test_year_has_twelve_monthly_buckets(self):
        today = date(2024, 3, 15)

        trend = spending_trend([], Period.YEAR, today)

        assert len(trend) == 12
        assert trend[0].key == (2023, 4)
        assert trend[-1].key == (2024, 3)
        assert trend[0].label == "Apr"
        assert trend[-1].end == date(2024, 3, 16)

    def test_year_keeps_same_month_of_different_years_apart(self):
        """A month label shared by two years must not merge their totals."""
        today = date(2024, 4, 10)
        expenses = [
            make_expense(40, "food", date(2023, 4, 15)),
            make_expense(10, "food", date(2024, 4, 2)),
            make_expense(25, "bills", date(2023, 5, 20)),
        ]

        trend = spending_trend(expenses, Period.YEAR, today)

        assert trend[0].key == (2023, 5)
        assert trend[0].total == Decimal("25")
        assert trend[-1].key == (2024, 4)
        assert trend[-1].total == Decimal("10")
        assert len({b.key for b in trend}) == 12

    def test_year_buckets_are_chronological(self):
        trend = spending_trend([], Period.YEAR, date(2024, 1, 31))

        months = [b.start for b in trend]
        assert months == [date(2023, 2, 1) + relativedelta(months=i) for i in range(12)]


class TestReportSeries:
    def test_week_has_eight_monday_buckets(self):
        today = date(2024, 1, 10)

        series = report_series([], Period.WEEK, today)

        assert len(series) == 8
        assert series[0].start == date(2023, 11, 20)
        assert series[-1].start == date(2024, 1, 8)
        assert all(b.start.weekday() == 0 for b in series)
        assert series[-1].label == "Jan 8"
        assert series[-1].key == (2024, 2)

    def test_month_has_six_buckets(self):
        series = report_series([], Period.MONTH, date(2024, 3, 15))

        assert [b.label for b in series] == [
            "Oct 2023",
            "Nov 2023",
            "Dec 2023",
            "Jan 2024",
            "Feb 2024",
            "Mar 2024",
        ]

    def test_year_has_twelve_buckets(self):
        series = report_series([], Period.YEAR, date(2024, 3, 15))

        assert len(series) == 12
        assert series[0].label == "Apr 23"
        assert series[-1].label == "Mar 24"
        assert series[-1].end == date(2024, 4, 1)

    def test_buckets_carry_every_active_category(self):
        expenses = [
            make_expense(10, "food", date(2024, 3, 2)),
            make_expense(15, "food", date(2024, 3, 20)),
            make_expense(8, "transport", date(2024, 2, 11)),
            make_expense(99, "travel", date(2022, 6, 1)),  # older than the series
        ]

        series = report_series(expenses, Period.MONTH, date(2024, 3, 15))
        march, february, january = series[-1], series[-2], series[-3]

        assert march.total == Decimal("25")
        assert march.by_category == {
            "food": Decimal("25"),
            "transport": Decimal("0"),
            "travel": Decimal("0"),
        }
        assert february.by_category["transport"] == Decimal("8")
        assert january.total == 0
        assert set(january.by_category) == {"food", "transport", "travel"}

    def test_bucket_totals_match_category_split(self):
        expenses = [
            make_expense("12.40", "food", date(2024, 1, 9)),
            make_expense("3.60", "bills", date(2024, 1, 10)),
            make_expense("1.00", "food", date(2024, 1, 2)),
        ]

        for bucket in report_series(expenses, Period.WEEK, date(2024, 1, 10)):
            assert sum(bucket.by_category.values()) == bucket.total


class TestActiveCategories:
    def test_first_seen_order(self):
        expenses = [
            make_expense(1, "bills", date(2024, 1, 1)),
            make_expense(1, "food", date(2024, 1, 2)),
            make_expense(1, "bills", date(2024, 1, 3)),
        ]

        assert active_categories(expenses) == ["bills", "food"]

    def test_empty(self):
        assert active_categories([]) == []
