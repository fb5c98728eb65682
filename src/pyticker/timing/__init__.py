from pyticker.timing.clock import Clock
from pyticker.timing.convert import (
    duration_to_seconds,
    frequency_to_duration,
    seconds_to_duration,
)
from pyticker.timing.limiter import RateLimiter

__all__ = [
    "Clock",
    "RateLimiter",
    "duration_to_seconds",
    "frequency_to_duration",
    "seconds_to_duration",
]
