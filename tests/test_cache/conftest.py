"""Shared fixtures for cache tests.

Provides a parametrized ``cache`` fixture that yields both
:class:`MemoryCache` and :class:`StorageCache` so that behavioural tests of
the cache contract run against both implementations.
"""

from __future__ import annotations

from typing import Any

import pytest

from mycore_client.cache.media import InMemoryStorage
from mycore_client.cache.memory import MemoryCache
from mycore_client.cache.storage import StorageCache
from tests.conftest import FakeClock


@pytest.fixture(params=["memory", "storage"])
def cache(request: pytest.FixtureRequest, clock: FakeClock) -> Any:
    """Return a cache driven by ``clock`` -- parametrized across both stores."""
    if request.param == "memory":
        return MemoryCache(clock=clock)
    return StorageCache(InMemoryStorage(), clock=clock)
