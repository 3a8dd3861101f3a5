"""Application context for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from .config import BaseConfig
from .infra.repositories import InMemoryHabitRepository, InMemoryUserRepository
from .logging_config import setup_logging
from .services.tracker import HabitTracker


@dataclass
class AppContext:
    """Configuration, stores and services wired together."""

    config: BaseConfig
    user_repo: InMemoryUserRepository
    habit_repo: InMemoryHabitRepository
    tracker: HabitTracker
    clock: Callable[[], date] = date.today


def create_app_context(
    config: Optional[BaseConfig] = None,
    *,
    clock: Callable[[], date] = date.today,
    configure_logging: bool = True,
) -> AppContext:
    """Create and initialize the application context."""

    if config is None:
        config = BaseConfig()

    if configure_logging:
        setup_logging(config)

    user_repo = InMemoryUserRepository()
    habit_repo = InMemoryHabitRepository(clock=clock, user_exists=user_repo.get)
    tracker = HabitTracker(
        user_repo,
        habit_repo,
        clock=clock,
        lookback_days=config.CHECKIN_LOOKBACK_DAYS,
    )

    return AppContext(
        config=config,
        user_repo=user_repo,
        habit_repo=habit_repo,
        tracker=tracker,
        clock=clock,
    )
