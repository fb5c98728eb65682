from dataclasses import dataclass

from pyticker.domain.types import Duration
from pyticker.infra.timesource import TimeSource
from pyticker.timing.limiter import RateLimiter


@dataclass(slots=True)
class SteppedTimeSource(TimeSource):
    t: int = 1_000

    def now_ns(self) -> int:
        return self.t

    def advance(self, duration: Duration) -> None:
        self.t += duration.nanos


def ms(n: int) -> Duration:
    return Duration.from_millis(n)


def limiter_with_source(
    lockstep: bool, catchup: bool, interval_seconds: float, speed: float = 1.0
) -> tuple[RateLimiter, SteppedTimeSource]:
    source = SteppedTimeSource()
    limiter = RateLimiter(lockstep, catchup, interval_seconds, speed, source=source)
    return limiter, source
