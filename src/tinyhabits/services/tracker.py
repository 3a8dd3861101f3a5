"""Habit tracking service used by the transport layer.

The transport layer authenticates the caller and resolves a ``user_id``; this
service takes it from there. It turns date strings into calendar dates,
defaults omitted dates to today, and attaches streaks to habit listings.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Callable, Optional

from ..domain.repositories import HabitRepository, UserRepository
from ..errors import HABIT_NOT_FOUND, NotFound
from ..forms import format_calendar_date, parse_calendar_date
from ..models.habit import Checkin, Habit
from ..models.user import User
from . import habits as streaks

DEFAULT_LOOKBACK_DAYS = 7


@dataclass(frozen=True)
class HabitSummary:
    """A habit as listed to its owner, with its current streak."""

    id: int
    title: str
    color: Optional[str]
    is_archived: bool
    streak: int

    @classmethod
    def from_habit(cls, habit: Habit, streak: int) -> "HabitSummary":
        return cls(
            id=habit.id,
            title=habit.title,
            color=habit.color,
            is_archived=habit.is_archived,
            streak=streak,
        )


@dataclass(frozen=True)
class HabitStats:
    """Streak figures for a single habit."""

    habit_id: int
    current_streak: int
    longest_streak: int
    total_checkins: int


class HabitTracker:
    """Registration, habit and checkin operations for an authenticated caller."""

    def __init__(
        self,
        users: UserRepository,
        habits: HabitRepository,
        *,
        clock: Callable[[], date] = date.today,
        lookback_days: int = DEFAULT_LOOKBACK_DAYS,
    ):
        self.users = users
        self.habits = habits
        self._clock = clock
        self.lookback_days = lookback_days

    # Identity
    def register(self, email: str, password_hash: bytes) -> User:
        """Register a user; the hash comes from the caller's password hasher."""
        return self.users.add(email, password_hash)

    def find_user(self, email: str) -> Optional[User]:
        return self.users.find_by_email(email)

    # Habits
    def list_habits(self, user_id: int) -> list[HabitSummary]:
        """Active habits of the user with streaks as of today."""
        today = self._clock()
        return [
            HabitSummary.from_habit(habit, self.habits.current_streak(user_id, habit.id, today=today))
            for habit in self.habits.list_habits(user_id)
        ]

    def create_habit(self, user_id: int, title: str, color: Optional[str] = None) -> HabitSummary:
        habit = self.habits.add_habit(user_id, title, color)
        return HabitSummary.from_habit(habit, streak=0)

    def archive_habit(self, user_id: int, habit_id: int) -> Habit:
        return self.habits.archive_habit(user_id, habit_id)

    # Checkins
    def _require_habit(self, user_id: int, habit_id: int) -> Habit:
        habit = self.habits.find_habit(user_id, habit_id)
        if habit is None:
            raise NotFound(HABIT_NOT_FOUND)
        return habit

    def _window_start(self, today: date) -> date:
        try:
            return today - timedelta(days=self.lookback_days)
        except OverflowError:
            return date.min

    def check_in(self, user_id: int, habit_id: int, on: date | str | None = None) -> Checkin:
        """Record a checkin; ``on`` may be a date, ``YYYY-MM-DD`` or omitted for today."""
        self._require_habit(user_id, habit_id)
        day = parse_calendar_date(on, default=self._clock())
        return self.habits.add_checkin(user_id, habit_id, day)

    def checkins(
        self,
        user_id: int,
        habit_id: int,
        start: date | str | None = None,
        end: date | str | None = None,
    ) -> list[str]:
        """Checkin dates as ``YYYY-MM-DD`` strings, ascending.

        Without bounds the window covers the last ``lookback_days`` days up to
        and including today.
        """
        self._require_habit(user_id, habit_id)
        today = self._clock()
        start_day = parse_calendar_date(start, default=self._window_start(today))
        end_day = parse_calendar_date(end, default=today)
        days = self.habits.get_checkins_range(user_id, habit_id, start_day, end_day)
        return [format_calendar_date(day) for day in days]

    def habit_stats(self, user_id: int, habit_id: int) -> HabitStats:
        self._require_habit(user_id, habit_id)
        days = self.habits.get_checkins_range(user_id, habit_id, date.min, date.max)
        current, longest = streaks.compute_streaks(days, today=self._clock())
        return HabitStats(
            habit_id=habit_id,
            current_streak=current,
            longest_streak=longest,
            total_checkins=len(days),
        )


__all__ = ["DEFAULT_LOOKBACK_DAYS", "HabitStats", "HabitSummary", "HabitTracker"]
