"""Pytest configuration and shared fixtures for TinyHabits tests.

Provides a fixed clock, fresh in-memory stores per test and small factories
for users and habits.
"""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from tinyhabits.infra.repositories import InMemoryHabitRepository, InMemoryUserRepository
from tinyhabits.models import Habit, User
from tinyhabits.services.tracker import HabitTracker

TODAY = date(2024, 1, 12)


class FixedClock:
    """Callable clock whose date tests can move forward or back."""

    def __init__(self, today: date):
        self.today = today

    def __call__(self) -> date:
        return self.today

    def advance(self, days: int = 1) -> None:
        self.today += timedelta(days=days)


# =============================================================================
# Store Fixtures
# =============================================================================


@pytest.fixture
def clock() -> FixedClock:
    """Clock pinned to 2024-01-12."""
    return FixedClock(TODAY)


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def habit_repo(clock, user_repo) -> InMemoryHabitRepository:
    """Ledger wired to the registry so unknown users are rejected."""
    return InMemoryHabitRepository(clock=clock, user_exists=user_repo.get)


@pytest.fixture
def tracker(user_repo, habit_repo, clock) -> HabitTracker:
    return HabitTracker(user_repo, habit_repo, clock=clock)


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def user_factory(user_repo):
    """Factory registering users with unique emails."""

    counter = {"n": 0}

    def _create_user(email: str | None = None, password_hash: bytes = b"dummy-hash") -> User:
        if email is None:
            counter["n"] += 1
            email = f"user{counter['n']}@example.com"
        return user_repo.add(email, password_hash)

    return _create_user


@pytest.fixture
def user(user_factory) -> User:
    """Default registered user."""
    return user_factory("tester@example.com")


@pytest.fixture
def habit_factory(habit_repo, user):
    """Factory creating habits, owned by the default user unless told otherwise."""

    def _create_habit(title: str = "Exercise", color: str | None = None, owner: User | None = None) -> Habit:
        owner = owner or user
        return habit_repo.add_habit(owner.id, title, color)

    return _create_habit


@pytest.fixture
def checkin_days(habit_repo, user):
    """Helper recording checkins for a list of dates."""

    def _record(habit: Habit, days, owner: User | None = None) -> None:
        owner = owner or user
        for day in days:
            habit_repo.add_checkin(owner.id, habit.id, day)

    return _record
