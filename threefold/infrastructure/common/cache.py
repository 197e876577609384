"""In-process cache of premium flags."""

import threading
import time
from collections.abc import Callable


class PremiumStatusCache:
    """
    Premium flag per user id, expiring after ``ttl_seconds``.

    Entries live in process memory, so every worker keeps its own copy and
    an ``invalidate`` only reaches the worker that handles it.
    """

    def __init__(
        self, ttl_seconds: float, monotonic: Callable[[], float] = time.monotonic
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self._monotonic = monotonic
        self._entries: dict[int, tuple[bool, float]] = {}
        self._lock = threading.Lock()

    def get(self, user_id: int) -> bool | None:
        with self._lock:
            entry = self._entries.get(user_id)
            if entry is None:
                return None
            is_premium, expires_at = entry
            if self._monotonic() >= expires_at:
                del self._entries[user_id]
                return None
            return is_premium

    def set(self, user_id: int, is_premium: bool) -> None:
        with self._lock:
            self._entries[user_id] = (is_premium, self._monotonic() + self.ttl_seconds)

    def invalidate(self, user_id: int) -> None:
        with self._lock:
            self._entries.pop(user_id, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
