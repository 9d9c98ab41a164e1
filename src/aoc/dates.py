"""Puzzle release dates.

Puzzles unlock at midnight EST (UTC-5), so "today" is evaluated in that
fixed offset regardless of the local timezone.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

AOC_TZ = timezone(timedelta(hours=-5), name="EST")


def current_aoc_date(now: datetime | None = None) -> date:
    """Return the current date in the puzzle publication timezone."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(AOC_TZ).date()


def resolve_requested_days(
    year: int | None,
    days: list[int] | None,
    today: date | None = None,
) -> tuple[int, list[int]]:
    """Fill in a missing year and/or day list from the current puzzle date."""
    if year is not None and days:
        return year, list(days)
    if today is None:
        today = current_aoc_date()
    return (
        year if year is not None else today.year,
        list(days) if days else [today.day],
    )
