"""Wall-clock readings and a sleep that can be cut short."""

from __future__ import annotations

import time
from enum import Enum
from typing import Callable, Optional

BUSY_WAIT_THRESHOLD_US = 1000


class TimeUnit(Enum):
    """Unit in which get_time reports the current time."""

    MICRO = 1_000
    MILLI = 1_000_000
    SECONDS = 1_000_000_000


def get_time(unit: TimeUnit) -> int:
    """Return the wall-clock time since the epoch, truncated to ``unit``."""
    return time.time_ns() // unit.value


def precise_sleep(usec: int, stop: Optional[Callable[[], bool]] = None) -> None:
    """Sleep for ``usec`` microseconds, returning early once ``stop()`` is true.

    Long waits are halved repeatedly; the final millisecond is spun out.
    """
    start = get_time(TimeUnit.MICRO)
    while get_time(TimeUnit.MICRO) - start < usec:
        if stop is not None and stop():
            break
        remainder = usec - (get_time(TimeUnit.MICRO) - start)
        if remainder > BUSY_WAIT_THRESHOLD_US:
            time.sleep(remainder / 2 / 1_000_000)
        else:
            while get_time(TimeUnit.MICRO) - start < usec:
                pass