"""Concrete in-memory repository implementations."""

from .habit import InMemoryHabitRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryHabitRepository",
    "InMemoryUserRepository",
]
