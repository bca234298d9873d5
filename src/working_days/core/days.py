"""Day enumeration for a single month - pure calendar arithmetic."""

import calendar
from dataclasses import dataclass
from datetime import date
from typing import Iterator

from .modes import Month, WorkingDayMode

WEEKEND = (6, 7)  # ISO Saturday, Sunday


def days_in_month(year: int, month: Month | int) -> int:
    """Number of days in a month, February of leap years included."""
    return calendar.monthrange(year, int(month))[1]


def is_weekend(d: date) -> bool:
    return d.isoweekday() in WEEKEND


@dataclass(frozen=True)
class MonthDays:
    """
    The dates of one month in ascending order.

    Each iteration starts again from day 1. With WORKING_DAYS, Saturdays
    and Sundays are skipped.
    """

    year: int
    month: Month
    working_day_mode: WorkingDayMode = WorkingDayMode.ALL_DAYS

    def __iter__(self) -> Iterator[date]:
        for day in range(1, days_in_month(self.year, self.month) + 1):
            d = date(self.year, self.month, day)
            if self.working_day_mode is WorkingDayMode.WORKING_DAYS and is_weekend(d):
                continue
            yield d

    def __len__(self) -> int:
        return sum(1 for _ in self)


def enumerate_days(
    year: int,
    month: Month,
    working_day_mode: WorkingDayMode = WorkingDayMode.ALL_DAYS,
) -> MonthDays:
    """Dates of the given month, filtered by working day mode."""
    return MonthDays(year=year, month=month, working_day_mode=working_day_mode)
