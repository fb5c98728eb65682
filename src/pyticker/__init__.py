from pyticker.domain import Duration, InvalidConfiguration
from pyticker.timing import (
    Clock,
    RateLimiter,
    duration_to_seconds,
    seconds_to_duration,
)

__all__ = [
    "Clock",
    "Duration",
    "InvalidConfiguration",
    "RateLimiter",
    "duration_to_seconds",
    "seconds_to_duration",
]
