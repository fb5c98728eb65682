from __future__ import annotations

from dataclasses import dataclass

NANOS_PER_SEC = 1_000_000_000
MAX_NANOS = 2**64 - 1


@dataclass(frozen=True, slots=True, order=True)
class Duration:
    """Non-negative span of time in integer nanoseconds."""

    nanos: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.nanos <= MAX_NANOS:
            raise ValueError(f"duration out of range: {self.nanos} ns")

    @classmethod
    def zero(cls) -> Duration:
        return cls(0)

    @classmethod
    def from_nanos(cls, nanos: int) -> Duration:
        return cls(min(max(nanos, 0), MAX_NANOS))

    @classmethod
    def from_micros(cls, micros: int) -> Duration:
        return cls.from_nanos(micros * 1_000)

    @classmethod
    def from_millis(cls, millis: int) -> Duration:
        return cls.from_nanos(millis * 1_000_000)

    @classmethod
    def from_secs(cls, secs: int) -> Duration:
        return cls.from_nanos(secs * NANOS_PER_SEC)

    @property
    def whole_seconds(self) -> int:
        return self.nanos // NANOS_PER_SEC

    @property
    def subsec_nanos(self) -> int:
        return self.nanos % NANOS_PER_SEC

    def saturating_sub(self, other: Duration) -> Duration:
        return Duration.from_nanos(self.nanos - other.nanos)

    def __add__(self, other: Duration) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration.from_nanos(self.nanos + other.nanos)

    def __sub__(self, other: Duration) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.saturating_sub(other)

    def __bool__(self) -> bool:
        return self.nanos != 0
