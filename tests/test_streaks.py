"""Prep streak calculation tests."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from app.services.streaks import compute_streak, longest_streak, parse_log_dates

TODAY = date(2026, 10, 19)


def days_ago(*offsets: int) -> set[date]:
    return {TODAY - timedelta(days=offset) for offset in offsets}


def test_no_logs_means_no_streak() -> None:
    """An empty history never has a streak."""
    assert compute_streak(set(), TODAY) == 0
    assert compute_streak([], date(2000, 1, 1)) == 0


def test_logged_only_today() -> None:
    assert compute_streak(days_ago(0), TODAY) == 1


def test_three_consecutive_days_ending_today() -> None:
    assert compute_streak(days_ago(0, 1, 2), TODAY) == 3


def test_two_day_gap_breaks_the_streak() -> None:
    """Most recent log two days back is stale."""
    assert compute_streak(days_ago(2), TODAY) == 0


def test_yesterday_keeps_the_streak_alive() -> None:
    """Today not logged yet; the run counts back from yesterday."""
    assert compute_streak(days_ago(1, 2, 3), TODAY) == 3


def test_walk_stops_at_first_missing_day() -> None:
    assert compute_streak(days_ago(0, 1, 3), TODAY) == 2


def test_duplicate_days_do_not_inflate_the_count() -> None:
    """Several logs on one day count once."""
    dates = [TODAY, TODAY, TODAY - timedelta(days=1), TODAY - timedelta(days=1)]
    assert compute_streak(dates, TODAY) == 2


def test_same_input_gives_same_result() -> None:
    dates = days_ago(0, 1, 2, 5, 6)
    assert compute_streak(dates, TODAY) == compute_streak(dates, TODAY) == 3


def test_single_ancient_date_terminates() -> None:
    assert compute_streak({date(1970, 1, 1)}, TODAY) == 0


def test_long_unbroken_history() -> None:
    dates = days_ago(*range(400))
    assert compute_streak(dates, TODAY) == 400


def test_future_log_is_not_today_or_yesterday() -> None:
    assert compute_streak(days_ago(0, -1), TODAY) == 0


@pytest.mark.parametrize(
    ("offsets", "expected"),
    [
        ((), 0),
        ((5,), 1),
        ((0, 1, 2, 10, 11, 12, 13), 4),
        ((0, 2, 4), 1),
    ],
)
def test_longest_streak(offsets: tuple[int, ...], expected: int) -> None:
    """The longest run is found anywhere in the history."""
    assert longest_streak(days_ago(*offsets)) == expected


def test_parse_log_dates_dedupes_and_accepts_timestamps() -> None:
    parsed = parse_log_dates(["2026-10-18", "2026-10-18T23:10:00+00:00", None, ""])
    assert parsed == {date(2026, 10, 18)}


def test_parse_log_dates_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        parse_log_dates(["yesterday"])
    with pytest.raises(ValueError):
        parse_log_dates(["2026-10-19garbage"])
