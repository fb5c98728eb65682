from __future__ import annotations


class InvalidConfiguration(ValueError):
    """Raised when a rate limiter is given an interval or frequency it cannot run at."""
