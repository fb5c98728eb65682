from __future__ import annotations

import time
from dataclasses import dataclass


class TimeSource:
    """Monotonic time source so loops can run in real time or simulated time."""

    def now_ns(self) -> int:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class MonotonicTimeSource(TimeSource):
    def now_ns(self) -> int:
        return time.monotonic_ns()
