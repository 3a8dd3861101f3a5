"""SQLModel data structures shared by the stores and services."""

from .habit import Checkin, Habit
from .user import User

__all__ = [
    "Checkin",
    "Habit",
    "User",
]
