"""Identity sequences and per-key locks shared by the in-memory stores."""

from __future__ import annotations

import itertools
import threading
from collections.abc import Hashable


class IdSequence:
    """Thread-safe monotonic integer generator; values are never reused."""

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            return next(self._counter)


class KeyedLocks:
    """Lazily created lock per key so unrelated keys never contend.

    Only lock creation is serialized; holding the lock for one key never
    blocks callers working on another key.
    """

    def __init__(self) -> None:
        self._locks: dict[Hashable, threading.Lock] = {}
        self._guard = threading.Lock()

    def __call__(self, key: Hashable) -> threading.Lock:
        lock = self._locks.get(key)
        if lock is not None:
            return lock
        with self._guard:
            return self._locks.setdefault(key, threading.Lock())

    def __len__(self) -> int:
        return len(self._locks)
