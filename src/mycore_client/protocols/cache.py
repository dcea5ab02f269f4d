"""Protocol definitions for expiring caches and their storage media."""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Cache(Protocol[T]):
    """Key/value cache with optional per-entry time-to-live.

    Expiration is lazy: an expired entry stays physically stored until a
    read notices it and purges it.  ``size()`` therefore counts stored
    entries, which may include expired ones that no read has touched yet.
    """

    def set_item(self, key: str, value: T, ttl: int = 0) -> None:
        """Store a value, replacing any existing entry.

        Parameters:
            key: The cache key.
            value: The value to cache.
            ttl: Time-to-live in seconds. ``0`` means the entry never expires.
        """
        ...

    def get_item(self, key: str) -> T | None:
        """Return the live value for ``key``, or None if absent or expired.

        An expired entry is removed as a side effect.
        """
        ...

    def get_all_items(self) -> dict[str, T]:
        """Return a snapshot of all live entries."""
        ...

    def has_item(self, key: str) -> bool:
        """Return True if ``key`` holds a live entry."""
        ...

    def delete_item(self, key: str) -> None:
        """Remove ``key``. Missing keys are ignored."""
        ...

    def clear(self) -> None:
        """Remove all entries."""
        ...

    def size(self) -> int:
        """Return the number of physically stored entries."""
        ...


@runtime_checkable
class KeyValueStorage(Protocol):
    """String key/value medium backing a durable cache.

    Mirrors the browser Storage API.  The medium may be shared with other
    consumers, so callers must not assume every key belongs to them.
    """

    def get_item(self, key: str) -> str | None:
        """Return the raw string stored under ``key``, or None."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``."""
        ...

    def remove_item(self, key: str) -> None:
        """Remove ``key`` if present."""
        ...

    def clear(self) -> None:
        """Remove every key from the medium."""
        ...

    def keys(self) -> list[str]:
        """Return a snapshot of every key currently in the medium."""
        ...

    def __len__(self) -> int: ...
