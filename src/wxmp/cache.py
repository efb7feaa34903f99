"""
Access-token caches.

A cache returns None for an empty or expired value. Each client owns its
own cache instance; pass a shared implementation to reuse a token across
processes.
"""

import threading
import time
from typing import Optional, Protocol


class TokenCache(Protocol):
    def get(self) -> Optional[str]: ...

    def set(self, value: str, ttl: int) -> None: ...

    def clear(self) -> None: ...


class SimpleCache:
    """In-memory TTL cache for a single value."""

    def __init__(self) -> None:
        self._value: Optional[str] = None
        self._expire = 0.0
        self._lock = threading.Lock()

    def get(self) -> Optional[str]:
        with self._lock:
            if self._value is None or self._expire < time.time():
                return None
            return self._value

    def set(self, value: str, ttl: int) -> None:
        with self._lock:
            self._value = value
            self._expire = time.time() + ttl

    def clear(self) -> None:
        with self._lock:
            self._value = None
            self._expire = 0.0
