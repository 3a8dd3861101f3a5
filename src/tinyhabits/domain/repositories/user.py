"""User repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.user import User


class UserRepository(Protocol):
    """Registry mapping normalized emails to users."""

    def exists(self, email: str) -> bool:
        """Return True when the email is registered (case-insensitive)."""
        ...

    def find_by_email(self, email: str) -> Optional[User]:
        """Retrieve a user by email, or None."""
        ...

    def get(self, user_id: int) -> Optional[User]:
        """Retrieve a user by ID, or None."""
        ...

    def add(self, email: str, password_hash: bytes) -> User:
        """Register a new user; raises DuplicateIdentity for a taken email."""
        ...
