"""
Per-user conversation handles.

Callbacks for different users, or repeated callbacks for the same user, may
arrive concurrently; lookup-or-create runs under a lock so a user never gets
two handles.
"""

from __future__ import annotations

import threading
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class SessionStore(Generic[T]):
    def __init__(self, factory: Callable[[str], T]):
        self._factory = factory
        self._sessions: dict[str, T] = {}
        self._lock = threading.Lock()

    def get(self, user_id: str) -> Optional[T]:
        with self._lock:
            return self._sessions.get(user_id)

    def get_or_create(self, user_id: str) -> T:
        """Return the user's handle, creating it with the factory on a miss.

        Factory errors propagate and nothing is stored.
        """
        with self._lock:
            session = self._sessions.get(user_id)
            if session is None:
                session = self._factory(user_id)
                self._sessions[user_id] = session
            return session

    def reset(self, user_id: str) -> T:
        """Replace the user's handle with a fresh one."""
        with self._lock:
            session = self._factory(user_id)
            self._sessions[user_id] = session
            return session

    def discard(self, user_id: str) -> None:
        with self._lock:
            self._sessions.pop(user_id, None)

    def __contains__(self, user_id: object) -> bool:
        with self._lock:
            return user_id in self._sessions

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
