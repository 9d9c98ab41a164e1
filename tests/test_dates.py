"""Tests for puzzle date resolution."""

from __future__ import annotations

from datetime import date, datetime, timezone

from aoc.dates import current_aoc_date, resolve_requested_days


class TestCurrentAocDate:
    def test_before_midnight_est_is_previous_day(self) -> None:
        now = datetime(2023, 12, 5, 4, 59, tzinfo=timezone.utc)
        assert current_aoc_date(now) == date(2023, 12, 4)

    def test_midnight_est_unlocks_next_day(self) -> None:
        now = datetime(2023, 12, 5, 5, 0, tzinfo=timezone.utc)
        assert current_aoc_date(now) == date(2023, 12, 5)

    def test_naive_datetime_is_utc(self) -> None:
        assert current_aoc_date(datetime(2024, 1, 1, 3, 0)) == date(2023, 12, 31)


class TestResolveRequestedDays:
    TODAY = date(2024, 12, 7)

    def test_explicit_year_and_days(self) -> None:
        assert resolve_requested_days(2023, [1, 2], self.TODAY) == (2023, [1, 2])

    def test_defaults_to_today(self) -> None:
        assert resolve_requested_days(None, None, self.TODAY) == (2024, [7])

    def test_days_without_year(self) -> None:
        assert resolve_requested_days(None, [3], self.TODAY) == (2024, [3])

    def test_year_without_days(self) -> None:
        assert resolve_requested_days(2022, None, self.TODAY) == (2022, [7])
