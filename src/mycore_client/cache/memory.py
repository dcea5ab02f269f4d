"""In-memory cache implementation."""

from __future__ import annotations

import logging
from typing import Generic, TypeVar

from mycore_client.cache._clock import Clock, now_ms
from mycore_client.models.cache import CacheEntry, compute_expires_at

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MemoryCache(Generic[T]):
    """Process-local cache with optional TTL expiration.

    Entries live only as long as the instance.  Expired entries are
    cleaned up lazily on ``get_item``; ``get_all_items`` filters them out
    without removing them, so ``size()`` may over-count until the next
    read of an expired key.

    Implements the ``Cache`` protocol.

    Parameters:
        clock: Callable returning the current time in epoch milliseconds.
            Defaults to the system wall clock.
    """

    __slots__ = ("_clock", "_entries")

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock: Clock = clock or now_ms
        self._entries: dict[str, CacheEntry[T]] = {}

    def set_item(self, key: str, value: T, ttl: int = 0) -> None:
        """Store a value, replacing any existing entry.

        Parameters:
            key: The cache key.
            value: The value to cache.
            ttl: Time-to-live in seconds. ``0`` means the entry never expires.
        """
        expires_at = compute_expires_at(self._clock(), ttl)
        self._entries[key] = CacheEntry(value=value, expires_at=expires_at)

    def get_item(self, key: str) -> T | None:
        """Return the live value for ``key``, or None if absent or expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.is_expired(self._clock()):
            logger.debug("Purging expired cache entry %r", key)
            del self._entries[key]
            return None
        return entry.value

    def get_all_items(self) -> dict[str, T]:
        """Return a snapshot of all live entries."""
        now = self._clock()
        return {
            key: entry.value
            for key, entry in self._entries.items()
            if not entry.is_expired(now)
        }

    def has_item(self, key: str) -> bool:
        return self.get_item(key) is not None

    def delete_item(self, key: str) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()

    def size(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(entries={len(self._entries)})"
