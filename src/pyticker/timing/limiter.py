from __future__ import annotations

import structlog

from pyticker.domain.errors import InvalidConfiguration
from pyticker.domain.types import Duration
from pyticker.infra import TimeSource
from pyticker.timing.clock import Clock
from pyticker.timing.convert import (
    duration_to_seconds,
    frequency_to_duration,
    frequency_to_seconds,
    is_finite,
    seconds_to_duration,
)

logger = structlog.get_logger()


def _interval_from_seconds(seconds: float) -> Duration:
    if not is_finite(seconds):
        raise InvalidConfiguration(f"interval must be finite, got {seconds!r}")
    return seconds_to_duration(seconds)


class RateLimiter:
    """Controls the rate at which a loop runs.

    Call ``begin()`` when an iteration starts to get the delta time to advance
    the simulation by, do the work, then call ``next()`` to get how long to
    sleep before the next iteration. The caller does the sleeping.
    """

    def __init__(
        self,
        lockstep_enabled: bool,
        catchup_enabled: bool,
        interval_seconds: float,
        speed: float,
        source: TimeSource | None = None,
    ) -> None:
        # each iteration advances by the same interval despite jitter
        self.lockstep_enabled = lockstep_enabled
        # try to catch up after incurring lag
        self.catchup_enabled = catchup_enabled
        self.interval: Duration = _interval_from_seconds(interval_seconds)
        self.clock = Clock(source) if source is not None else Clock()
        # how far behind real elapsed time the loop is
        self.lag = Duration.zero()
        # ratio of simulated time to real time
        self.speed = speed
        logger.info(
            "rate_limiter_initialized",
            interval_ns=self.interval.nanos,
            speed=speed,
            lockstep=lockstep_enabled,
            catchup=catchup_enabled,
        )

    @classmethod
    def from_frequency(
        cls,
        lockstep_enabled: bool,
        catchup_enabled: bool,
        per_second: float,
        speed: float,
        source: TimeSource | None = None,
    ) -> RateLimiter:
        return cls(
            lockstep_enabled,
            catchup_enabled,
            frequency_to_seconds(per_second),
            speed,
            source=source,
        )

    def get_delta(self, elapsed: Duration) -> float:
        if self.lockstep_enabled:
            return duration_to_seconds(self.interval) * self.speed
        return duration_to_seconds(elapsed) * self.speed

    @staticmethod
    def calculate_wait(elapsed: Duration, interval: Duration, lag: Duration) -> Duration:
        if elapsed >= interval:
            return Duration.zero()
        slack = interval - elapsed
        if lag > slack:
            return Duration.zero()
        return slack - lag

    def get_wait(self, elapsed: Duration) -> Duration:
        return self.calculate_wait(elapsed, self.interval, self.lag)

    @staticmethod
    def calculate_lag(
        wait: Duration,
        interval: Duration,
        lag: Duration,
        catchup_enabled: bool,
        elapsed: Duration | None = None,
    ) -> Duration:
        """Lag remaining once an iteration that worked ``elapsed`` and waited ``wait`` is over.

        The cycle is ``elapsed + wait``; anything past ``interval`` adds to the lag,
        anything short of it pays the lag back. Without catchup, lag is always zero.

        Leaving out ``elapsed`` gives the plain wait-only rule, which treats every
        iteration as if its work took no time. ``next()`` always passes the measured
        work, so it repays less per iteration than that rule would: 200ms of lag
        and 30ms of work leave 130ms, not 100ms.
        """
        if not catchup_enabled:
            return Duration.zero()
        cycle = wait if elapsed is None else elapsed + wait
        if cycle >= interval:
            lost_time = cycle - interval
            return lag + lost_time
        gained_time = interval - cycle
        if lag > gained_time:
            return lag - gained_time
        return Duration.zero()

    def update_lag(self, wait: Duration, elapsed: Duration | None = None) -> None:
        self.lag = self.calculate_lag(
            wait, self.interval, self.lag, self.catchup_enabled, elapsed
        )

    def begin(self) -> float:
        delta = self.get_delta(self.clock.elapsed())
        self.clock.reset()
        return delta

    def next(self) -> Duration:
        elapsed = self.clock.elapsed()
        wait = self.get_wait(elapsed)
        self.clock.reset()
        if elapsed > self.interval:
            logger.debug(
                "iteration_overrun",
                elapsed_ns=elapsed.nanos,
                interval_ns=self.interval.nanos,
            )
        previous = self.lag
        self.update_lag(wait, elapsed)
        if self.lag != previous:
            logger.debug("lag_updated", lag_ns=self.lag.nanos, previous_ns=previous.nanos)
        return wait

    def set_interval(self, seconds: float) -> None:
        self.interval = _interval_from_seconds(seconds)
        logger.info("interval_changed", interval_ns=self.interval.nanos)

    def set_frequency(self, per_second: float) -> None:
        self.interval = frequency_to_duration(per_second)
        logger.info("interval_changed", interval_ns=self.interval.nanos)
