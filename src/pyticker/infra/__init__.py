from pyticker.infra.timesource import MonotonicTimeSource, TimeSource

__all__ = ["MonotonicTimeSource", "TimeSource"]
