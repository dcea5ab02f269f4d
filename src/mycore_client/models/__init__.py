"""Data models for mycore-client."""

from .cache import CacheEntry, compute_expires_at

__all__ = [
    "CacheEntry",
    "compute_expires_at",
]
