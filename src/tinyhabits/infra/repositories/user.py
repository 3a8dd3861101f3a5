"""In-memory identity registry."""

from __future__ import annotations

import threading
from typing import Optional

from ...errors import DuplicateIdentity
from ...forms import EmailForm
from ...logging_config import get_logger
from ...models.user import User, normalize_email
from ..concurrency import IdSequence

logger = get_logger(__name__)


class InMemoryUserRepository:
    """Memory-resident user registry keyed by normalized email."""

    def __init__(self) -> None:
        self._by_email: dict[str, User] = {}
        self._by_id: dict[int, User] = {}
        self._lock = threading.Lock()
        self._ids = IdSequence()

    def exists(self, email: str) -> bool:
        return normalize_email(email) in self._by_email

    def find_by_email(self, email: str) -> Optional[User]:
        user = self._by_email.get(normalize_email(email))
        return user.model_copy() if user else None

    def get(self, user_id: int) -> Optional[User]:
        user = self._by_id.get(user_id)
        return user.model_copy() if user else None

    def add(self, email: str, password_hash: bytes) -> User:
        """Register a user, rejecting an email that is already taken.

        The duplicate check and the insert happen under one lock so two
        concurrent registrations of the same address cannot both succeed.
        """

        normalized = EmailForm.parse(email).email
        with self._lock:
            if normalized in self._by_email:
                logger.warning("Duplicate registration rejected", extra={"email": normalized})
                raise DuplicateIdentity("Email already registered")
            user = User(id=self._ids.next(), email=normalized, password_hash=password_hash)
            self._by_email[normalized] = user
            self._by_id[user.id] = user
        logger.info(f"User registered: {user.id}")
        return user.model_copy()

    def count(self) -> int:
        return len(self._by_id)
