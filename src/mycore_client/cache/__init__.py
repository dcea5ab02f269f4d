"""Expiring caches and the storage media they run on."""

from .media import InMemoryStorage, JsonFileStorage
from .memory import MemoryCache
from .storage import StorageCache

__all__ = [
    "InMemoryStorage",
    "JsonFileStorage",
    "MemoryCache",
    "StorageCache",
]
