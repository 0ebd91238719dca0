from __future__ import annotations

import time

from ports.time import ClockPort


class SystemClockPort(ClockPort):
    """Wall-clock using perf_counter for monotonic timing."""

    def now(self) -> float:
        return time.perf_counter()
