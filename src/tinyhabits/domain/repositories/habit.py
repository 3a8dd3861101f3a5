"""Habit repository protocol."""

from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from ...models.habit import Checkin, Habit


class HabitRepository(Protocol):
    """Ledger of habits per user and checkins per habit.

    Every habit-scoped call takes the owning ``user_id``; a habit owned by a
    different user behaves exactly like a missing one.
    """

    def list_habits(self, user_id: int, *, include_archived: bool = False) -> list[Habit]:
        """List a user's habits in creation order."""
        ...

    def add_habit(self, user_id: int, title: str, color: Optional[str] = None) -> Habit:
        """Create a new habit."""
        ...

    def find_habit(self, user_id: int, habit_id: int) -> Optional[Habit]:
        """Retrieve a habit owned by the user."""
        ...

    def archive_habit(self, user_id: int, habit_id: int) -> Habit:
        """Hide a habit from default listings."""
        ...

    # Checkin operations
    def add_checkin(
        self, user_id: int, habit_id: int, occurred_on: date | str | None = None
    ) -> Checkin:
        """Record a checkin (today when omitted); raises AlreadyExists for a recorded date.

        The habit is resolved before the date is parsed, so a missing or
        foreign habit is reported as NotFound even when the date is malformed.
        """
        ...

    def get_checkins_range(
        self, user_id: int, habit_id: int, start: date, end: date
    ) -> list[date]:
        """Get checkin dates within an inclusive range, ascending."""
        ...

    def current_streak(self, user_id: int, habit_id: int, *, today: Optional[date] = None) -> int:
        """Calculate current streak for a habit."""
        ...

    def longest_streak(self, user_id: int, habit_id: int) -> int:
        """Calculate longest streak for a habit."""
        ...
