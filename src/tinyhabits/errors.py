"""Error taxonomy raised by the habit stores and services."""

from __future__ import annotations

from typing import Optional


class TinyHabitsError(Exception):
    """Base class for every error the core raises."""


class InvalidArgument(TinyHabitsError, ValueError):
    """Caller supplied a malformed title, color, email or date."""

    def __init__(self, message: str, *, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class NotFound(TinyHabitsError, LookupError):
    """Entity is absent or not owned by the caller.

    Both cases share one message so callers cannot probe other users' data.
    """


class AlreadyExists(TinyHabitsError):
    """The requested record is already stored."""


class DuplicateIdentity(AlreadyExists):
    """A user with the same normalized email is already registered."""


HABIT_NOT_FOUND = "Habit not found"

__all__ = [
    "AlreadyExists",
    "DuplicateIdentity",
    "HABIT_NOT_FOUND",
    "InvalidArgument",
    "NotFound",
    "TinyHabitsError",
]
