"""User model for the identity registry."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlmodel import Field, SQLModel


class User(SQLModel):
    """Registered user keyed by a normalized email."""

    id: int = Field(ge=1)
    email: str = Field(max_length=320)
    password_hash: bytes = Field(repr=False)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


def normalize_email(email: str) -> str:
    """Return the form used for uniqueness checks and lookups."""

    return (email or "").strip().lower()
