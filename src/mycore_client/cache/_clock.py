"""Wall-clock helper shared by the cache stores."""

from __future__ import annotations

import time
from collections.abc import Callable

Clock = Callable[[], float]


def now_ms() -> float:
    """Return the current wall-clock time in epoch milliseconds."""
    return time.time() * 1000
