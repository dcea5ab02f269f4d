"""Durable cache implementation on top of a key/value storage medium."""

from __future__ import annotations

import logging
from typing import Any, Generic, TypeVar

from pydantic import ValidationError

from mycore_client.cache._clock import Clock, now_ms
from mycore_client.exceptions import DeserializationError
from mycore_client.models.cache import CacheEntry, compute_expires_at
from mycore_client.protocols.cache import KeyValueStorage

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StorageCache(Generic[T]):
    """Cache whose entries are serialized into a ``KeyValueStorage`` medium.

    Each entry is stored as a JSON document ``{"value": ..., "expiresAt": ...}``
    under its own key.  The medium may outlive the process and may be shared
    with other consumers, so:

    * ``get_all_items`` scans every key of the medium, evicts entries it
      finds expired, and skips keys that do not hold a cache entry.
    * ``clear`` and ``size`` act on the whole medium.

    A key whose stored document cannot be parsed is treated as absent:
    ``get_item`` removes it and returns None.

    Implements the ``Cache`` protocol.

    Parameters:
        storage: The medium holding the serialized entries.
        clock: Callable returning the current time in epoch milliseconds.
            Defaults to the system wall clock.
    """

    __slots__ = ("_clock", "_storage")

    def __init__(self, storage: KeyValueStorage, clock: Clock | None = None) -> None:
        self._storage = storage
        self._clock: Clock = clock or now_ms

    @property
    def storage(self) -> KeyValueStorage:
        return self._storage

    def set_item(self, key: str, value: T, ttl: int = 0) -> None:
        """Serialize and store a value, replacing any existing entry.

        Parameters:
            key: The cache key.
            value: A JSON-serializable value.
            ttl: Time-to-live in seconds. ``0`` means the entry never expires.
        """
        entry = CacheEntry(value=value, expires_at=compute_expires_at(self._clock(), ttl))
        self._storage.set_item(key, entry.model_dump_json(by_alias=True))

    def get_item(self, key: str) -> T | None:
        """Return the live value for ``key``, or None if absent, expired or unreadable."""
        raw = self._storage.get_item(key)
        if raw is None:
            return None
        try:
            entry = self._deserialize(key, raw)
        except DeserializationError:
            logger.warning("Dropping unreadable cache entry %r", key, exc_info=True)
            self._storage.remove_item(key)
            return None
        if entry.is_expired(self._clock()):
            logger.debug("Purging expired cache entry %r", key)
            self._storage.remove_item(key)
            return None
        return entry.value

    def get_all_items(self) -> dict[str, T]:
        """Scan the whole medium and return every live entry.

        Expired entries are removed from the medium during the scan.  Keys
        that do not hold a cache entry belong to someone else and are left
        untouched.
        """
        result: dict[str, T] = {}
        now = self._clock()
        for key in self._storage.keys():
            raw = self._storage.get_item(key)
            if raw is None:
                continue
            try:
                entry = self._deserialize(key, raw)
            except DeserializationError:
                logger.debug("Skipping foreign storage key %r", key)
                continue
            if entry.is_expired(now):
                self._storage.remove_item(key)
            else:
                result[key] = entry.value
        return result

    def has_item(self, key: str) -> bool:
        return self.get_item(key) is not None

    def delete_item(self, key: str) -> None:
        self._storage.remove_item(key)

    def clear(self) -> None:
        self._storage.clear()

    def size(self) -> int:
        return len(self._storage)

    @staticmethod
    def _deserialize(key: str, raw: str) -> CacheEntry[Any]:
        """Parse a stored document back into a :class:`CacheEntry`.

        Raises:
            DeserializationError: If ``raw`` is not a serialized cache entry.
        """
        try:
            return CacheEntry.model_validate_json(raw)
        except ValidationError as e:
            msg = f"Stored value for {key!r} is not a cache entry"
            raise DeserializationError(msg) from e

    def __repr__(self) -> str:
        return f"{type(self).__name__}(storage={self._storage!r})"
