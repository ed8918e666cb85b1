"""Prep streak calculations. Pure functions, no database access."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, timedelta

from app.utils.time import parse_iso_date

ONE_DAY = timedelta(days=1)


def compute_streak(log_dates: Iterable[date], today: date) -> int:
    """Return the run of consecutive logged days ending today or yesterday.

    A missing today is forgiven while yesterday is logged; any older most
    recent log means the streak is broken and the result is 0.
    """
    days = set(log_dates)
    if not days:
        return 0

    yesterday = today - ONE_DAY
    if max(days) not in (today, yesterday):
        return 0

    cursor = today if today in days else yesterday
    earliest = min(days)
    count = 1
    while cursor > earliest:
        cursor -= ONE_DAY
        if cursor not in days:
            break
        count += 1
    return count


def longest_streak(log_dates: Iterable[date]) -> int:
    """Return the longest run of consecutive logged days in the history."""
    ordered = sorted(set(log_dates))
    if not ordered:
        return 0

    longest = current = 1
    for previous, day in zip(ordered, ordered[1:]):
        if day - previous == ONE_DAY:
            current += 1
            longest = max(longest, current)
        else:
            current = 1
    return longest


def parse_log_dates(values: Iterable[str | None]) -> set[date]:
    """Collapse ISO date (or timestamp) strings into distinct calendar days.

    Raises:
        ValueError: if any non-empty value is not an ISO 8601 date.
    """
    return {parse_iso_date(value) for value in values if value}
