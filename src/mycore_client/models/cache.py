"""Cache entry model shared by all cache stores."""

from __future__ import annotations

import math
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class CacheEntry(BaseModel, Generic[T]):
    """A cached value together with its expiry timestamp.

    ``expires_at`` is a wall-clock timestamp in epoch milliseconds.
    ``None`` means the entry never expires.  Serialized under the
    ``expiresAt`` alias so durable media stay readable by other clients
    of the same backend.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    value: T
    expires_at: int | None = Field(alias="expiresAt")

    def is_expired(self, now: float) -> bool:
        """Return True if the entry expired strictly before ``now`` (ms)."""
        return self.expires_at is not None and self.expires_at < now


def compute_expires_at(now: float, ttl: int) -> int | None:
    """Translate a ttl in seconds into an absolute expiry in milliseconds.

    A ttl of ``0`` means the entry never expires.
    """
    if ttl == 0:
        return None
    return math.ceil(now + ttl * 1000)
