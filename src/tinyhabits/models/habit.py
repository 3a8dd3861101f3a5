"""Habits tracking data structures."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional

from sqlmodel import Field, SQLModel


class Habit(SQLModel):
    """A user-defined habit tracked once per calendar day."""

    id: int = Field(ge=1)
    user_id: int
    title: str = Field(min_length=3, max_length=200)
    color: Optional[str] = Field(default=None, max_length=20)
    is_archived: bool = Field(default=False)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class Checkin(SQLModel):
    """Completion record for a habit on a calendar day."""

    id: int = Field(ge=1)
    habit_id: int
    occurred_on: date
