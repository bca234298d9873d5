"""Tests for day enumeration."""

from datetime import date

import pytest

from working_days.core.days import MonthDays, days_in_month, enumerate_days, is_weekend
from working_days.core.modes import Month, WorkingDayMode


class TestDaysInMonth:
    @pytest.mark.parametrize(
        "year,expected",
        [(2000, 29), (2023, 28), (2024, 29), (2100, 28), (2400, 29)],
    )
    def test_february_leap_years(self, year, expected):
        assert days_in_month(year, Month.FEBRUARY) == expected

    def test_thirty_and_thirty_one(self):
        assert days_in_month(2024, Month.APRIL) == 30
        assert days_in_month(2024, Month.DECEMBER) == 31

    def test_accepts_plain_int(self):
        assert days_in_month(2024, 2) == 29


class TestIsWeekend:
    def test_saturday_and_sunday(self):
        assert is_weekend(date(2024, 12, 7)) is True
        assert is_weekend(date(2024, 12, 8)) is True

    def test_weekdays(self):
        for day in range(2, 7):  # Mon 2 Dec .. Fri 6 Dec 2024
            assert is_weekend(date(2024, 12, day)) is False


class TestAllDays:
    @pytest.mark.parametrize("month", list(Month))
    def test_covers_every_day_without_gaps(self, month):
        days = list(enumerate_days(2024, month))
        assert [d.day for d in days] == list(range(1, days_in_month(2024, month) + 1))
        assert all(d.month == month and d.year == 2024 for d in days)

    def test_leap_february(self):
        days = list(enumerate_days(2024, Month.FEBRUARY))
        assert days[-1] == date(2024, 2, 29)

    def test_len(self):
        assert len(enumerate_days(2023, Month.FEBRUARY)) == 28


class TestWorkingDays:
    def test_skips_weekends(self):
        days = list(enumerate_days(2024, Month.DECEMBER, WorkingDayMode.WORKING_DAYS))
        assert len(days) == 22
        assert days[0] == date(2024, 12, 2)
        assert days[-1] == date(2024, 12, 31)
        assert all(d.isoweekday() <= 5 for d in days)

    @pytest.mark.parametrize("month", list(Month))
    def test_is_ascending_subsequence_of_all_days(self, month):
        all_days = list(enumerate_days(2025, month, WorkingDayMode.ALL_DAYS))
        working = list(enumerate_days(2025, month, WorkingDayMode.WORKING_DAYS))
        assert working == [d for d in all_days if not is_weekend(d)]
        assert working == sorted(working)
        assert len(working) < len(all_days)

    def test_february_2024_count(self):
        assert len(enumerate_days(2024, Month.FEBRUARY, WorkingDayMode.WORKING_DAYS)) == 21


class TestMonthDays:
    def test_iteration_restarts(self):
        days = MonthDays(2024, Month.MARCH)
        first = list(days)
        second = list(days)
        assert first == second
        assert first[0] == date(2024, 3, 1)

    def test_default_mode_is_all_days(self):
        assert MonthDays(2024, Month.MARCH).working_day_mode is WorkingDayMode.ALL_DAYS
