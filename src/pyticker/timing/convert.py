from __future__ import annotations

import math

from pyticker.domain.errors import InvalidConfiguration
from pyticker.domain.types import MAX_NANOS, NANOS_PER_SEC, Duration


def is_finite(value: float) -> bool:
    try:
        return math.isfinite(value)
    except OverflowError:
        # an int too large for a float is still finite
        return True


def duration_to_seconds(duration: Duration) -> float:
    return duration.whole_seconds + duration.subsec_nanos * 1e-9


def seconds_to_duration(seconds: float) -> Duration:
    """Truncate a number of seconds to whole nanoseconds.

    Saturates instead of raising: NaN and negative input give a zero duration,
    anything past the representable range (including ``inf``) gives the maximum.
    """
    if not seconds > 0:
        return Duration.zero()
    nanos = seconds * NANOS_PER_SEC
    if nanos >= MAX_NANOS:
        return Duration(MAX_NANOS)
    return Duration(int(nanos))


def frequency_to_seconds(per_second: float) -> float:
    if not is_finite(per_second) or per_second <= 0:
        raise InvalidConfiguration(f"frequency must be > 0, got {per_second!r}")
    return 1 / per_second


def frequency_to_duration(per_second: float) -> Duration:
    return seconds_to_duration(frequency_to_seconds(per_second))
