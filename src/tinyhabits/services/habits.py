"""Streak calculations over sets of checkin dates."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable

ONE_DAY = timedelta(days=1)


def current_streak(dates: Iterable[date], today: date) -> int:
    """Count consecutive checked-in days ending at ``today``.

    Walks backwards from ``today`` and stops at the first missing day, so a
    habit without a checkin for ``today`` has a streak of 0. Dates after
    ``today`` never contribute.
    """

    days = dates if isinstance(dates, (set, frozenset)) else set(dates)
    streak = 0
    cursor = today
    while cursor in days:
        streak += 1
        cursor -= ONE_DAY
    return streak


def longest_streak(dates: Iterable[date]) -> int:
    """Return the longest run of consecutive days in ``dates``."""

    longest = 0
    run = 0
    last_day: date | None = None
    for day in sorted(set(dates)):
        if last_day is not None and day == last_day + ONE_DAY:
            run += 1
        else:
            run = 1
        longest = max(longest, run)
        last_day = day
    return longest


def compute_streaks(dates: Iterable[date], *, today: date | None = None) -> tuple[int, int]:
    """Return (current_streak, longest_streak) for a collection of dates."""

    days = set(dates)
    return current_streak(days, today or date.today()), longest_streak(days)


__all__ = ["compute_streaks", "current_streak", "longest_streak"]
