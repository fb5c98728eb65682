from __future__ import annotations

import time

import structlog

from pyticker.logging_config import configure_structlog
from pyticker.timing import RateLimiter, duration_to_seconds

TICKS_PER_SECOND = 20
ITERATIONS = 40
LOG_LEVEL = "DEBUG"

logger = structlog.get_logger()


def main() -> None:
    configure_structlog(level=LOG_LEVEL, json_logs=False)
    limiter = RateLimiter.from_frequency(
        lockstep_enabled=False, catchup_enabled=True, per_second=TICKS_PER_SECOND, speed=1.0
    )
    sim_time = 0.0
    for i in range(ITERATIONS):
        sim_time += limiter.begin()
        # every tenth tick overruns its budget
        time.sleep(0.08 if i % 10 == 9 else 0.01)
        wait = limiter.next()
        logger.info(
            "tick", i=i, sim_time=round(sim_time, 4), wait_ns=wait.nanos, lag_ns=limiter.lag.nanos
        )
        time.sleep(duration_to_seconds(wait))


if __name__ == "__main__":
    main()
