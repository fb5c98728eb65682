from __future__ import annotations

import math

import pytest

from pyticker.domain.errors import InvalidConfiguration
from pyticker.domain.types import MAX_NANOS, Duration
from pyticker.timing.convert import (
    duration_to_seconds,
    frequency_to_duration,
    seconds_to_duration,
)


@pytest.mark.parametrize("seconds", [0.0, 1e-9, 0.1, 0.016, 1.5, 2.25, 12.5])
def test_seconds_round_trip_within_a_nanosecond(seconds: float) -> None:
    assert duration_to_seconds(seconds_to_duration(seconds)) == pytest.approx(
        seconds, abs=1e-9
    )


def test_duration_to_seconds_combines_whole_and_fractional_parts():
    assert duration_to_seconds(Duration.from_nanos(2_500_000_000)) == pytest.approx(2.5)
    assert duration_to_seconds(Duration.zero()) == 0.0


def test_seconds_to_duration_truncates():
    assert seconds_to_duration(1.9e-9) == Duration(1)
    assert seconds_to_duration(0.25) == Duration.from_millis(250)


@pytest.mark.parametrize("seconds", [-0.5, -1e-12, -math.inf, math.nan])
def test_negative_and_nan_seconds_clamp_to_zero(seconds: float) -> None:
    assert seconds_to_duration(seconds) == Duration.zero()


def test_huge_seconds_saturate():
    assert seconds_to_duration(math.inf) == Duration(MAX_NANOS)
    assert seconds_to_duration(1e30) == Duration(MAX_NANOS)


def test_frequency_to_duration():
    assert frequency_to_duration(4) == Duration.from_millis(250)
    assert frequency_to_duration(60) == Duration(16_666_666)


@pytest.mark.parametrize("per_second", [0, -10, math.nan, math.inf])
def test_invalid_frequency_is_rejected(per_second: float) -> None:
    with pytest.raises(InvalidConfiguration):
        frequency_to_duration(per_second)


def test_ints_beyond_float_range_saturate_instead_of_raising():
    assert seconds_to_duration(10**400) == Duration(MAX_NANOS)
    assert seconds_to_duration(-(10**400)) == Duration.zero()


def test_huge_int_frequency_gives_zero_interval():
    assert frequency_to_duration(10**400) == Duration.zero()
