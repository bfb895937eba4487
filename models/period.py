"""Reporting periods and date windows."""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class Period(str, Enum):
    """Granularity selected on the dashboard and reports."""

    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @property
    def nominal_days(self) -> int:
        """Fixed day count used by the fixed-offset modes (7/30/365)."""
        return _NOMINAL_DAYS[self]

    @classmethod
    def parse(cls, value: str) -> "Period":
        """Parse a period name.

        Raises:
            ValueError: If the value is not week, month or year.
        """
        try:
            return cls(value)
        except ValueError:
            raise ValueError(
                f"Unknown period: {value} (expected week, month or year)"
            ) from None


_NOMINAL_DAYS = {Period.WEEK: 7, Period.MONTH: 30, Period.YEAR: 365}


@dataclass(frozen=True)
class Window:
    """Half-open date range [start, end)."""

    start: date
    end: date

    @property
    def days(self) -> int:
        return (self.end - self.start).days

    def contains(self, day: date) -> bool:
        return self.start <= day < self.end
