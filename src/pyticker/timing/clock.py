from __future__ import annotations

from dataclasses import dataclass, field

from pyticker.domain.types import Duration
from pyticker.infra import MonotonicTimeSource, TimeSource
from pyticker.timing.convert import duration_to_seconds


@dataclass(slots=True)
class Clock:
    """Measures time passed since the last reset."""

    source: TimeSource = field(default_factory=MonotonicTimeSource)
    reset_time: int = field(init=False)

    def __post_init__(self) -> None:
        self.reset_time = self.source.now_ns()

    def reset(self) -> None:
        self.reset_time = self.source.now_ns()

    def elapsed(self) -> Duration:
        # clamped, in case the source steps backwards
        return Duration.from_nanos(self.source.now_ns() - self.reset_time)

    def elapsed_seconds(self) -> float:
        return duration_to_seconds(self.elapsed())

    def elapsed_milliseconds(self) -> int:
        return self.elapsed().nanos // 1_000_000

    def elapsed_microseconds(self) -> int:
        return self.elapsed().nanos // 1_000

    def elapsed_nanoseconds(self) -> int:
        return self.elapsed().nanos
