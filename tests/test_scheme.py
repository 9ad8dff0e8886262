from __future__ import annotations

import math

import pytest

from aggregate_stats.config import AggregateConfig
from aggregate_stats.errors import InternalInvariantViolation, InvalidConfiguration
from aggregate_stats.scheme import LinearScheme, LogScheme, build_scheme


def test_log_scheme_defaults() -> None:
    scheme = LogScheme.anchored()
    assert scheme.low == 1.0
    assert scheme.high == 128.0
    assert scheme.bucket_count == 8
    assert not scheme.linear


def test_log_scheme_boundaries() -> None:
    scheme = LogScheme.anchored(1)
    assert scheme.to_index(1.0) == 0
    assert scheme.to_index(1.99) == 0
    assert scheme.to_index(2.0) == 1
    assert scheme.to_index(64.0) == 6
    assert scheme.to_index(0.5) == 0
    assert scheme.is_outlier(0.5)
    assert scheme.is_outlier(128.0)
    assert not scheme.is_outlier(127.9)


def test_log_scheme_snaps_anchor_down_to_power_of_two() -> None:
    scheme = LogScheme.anchored(5, log_buckets=4)
    assert scheme.low == 4.0
    assert scheme.high == 32.0
    assert [scheme.to_bucket(i) for i in range(4)] == [4.0, 8.0, 16.0, 32.0]
    assert scheme.to_index(9.0) == 1


def test_log_scheme_clamps_sub_unit_anchor() -> None:
    assert LogScheme.anchored(0.3).low == 1.0
    assert LogScheme.anchored(-4).low == 1.0


def test_log_scheme_rejects_bad_bucket_count() -> None:
    with pytest.raises(InvalidConfiguration):
        LogScheme.anchored(1, log_buckets=0)
    with pytest.raises(InvalidConfiguration):
        LogScheme.anchored(1, log_buckets=2.5)


def test_linear_scheme_boundaries() -> None:
    scheme = LinearScheme(low=0, high=100, width=10)
    assert scheme.bucket_count == 10
    assert scheme.linear
    assert scheme.to_index(55) == 5
    assert scheme.to_bucket(5) == 50
    assert scheme.to_index(0) == 0
    assert scheme.to_index(99.999) == 9
    assert scheme.is_outlier(100)
    assert scheme.is_outlier(-1)


def test_linear_scheme_fractional_width() -> None:
    scheme = LinearScheme(low=0.0, high=1.0, width=0.25)
    assert scheme.bucket_count == 4
    assert scheme.to_index(0.25) == 1
    assert scheme.to_index(0.75) == 3


def test_linear_scheme_negative_range() -> None:
    scheme = LinearScheme(low=-50, high=50, width=25)
    assert scheme.to_index(-50) == 0
    assert scheme.to_index(-0.5) == 1
    assert scheme.to_index(0) == 2


@pytest.mark.parametrize(
    "low, high, width",
    [
        (10, 10, 1),
        (10, 5, 1),
        (0, 100, 7),
        (0, 5, 10),
        (0, 100, 0),
        (0, 100, -10),
    ],
)
def test_linear_scheme_rejects_invalid_configuration(
    low: float, high: float, width: float
) -> None:
    with pytest.raises(InvalidConfiguration):
        LinearScheme(low=low, high=high, width=width)


def test_linear_lookup_outside_range_is_an_invariant_violation() -> None:
    scheme = LinearScheme(low=0, high=100, width=10)
    with pytest.raises(InternalInvariantViolation):
        scheme.to_index(150)
    with pytest.raises(InternalInvariantViolation):
        scheme.to_index(math.nan)


def test_build_scheme_selects_by_config() -> None:
    assert isinstance(build_scheme(AggregateConfig()), LogScheme)
    assert isinstance(build_scheme(AggregateConfig(low=0, high=10)), LogScheme)
    linear = build_scheme(AggregateConfig(low=0, high=10, width=2))
    assert isinstance(linear, LinearScheme)
    assert linear.bucket_count == 5


def test_nan_has_no_bucket_in_either_scheme() -> None:
    with pytest.raises(InternalInvariantViolation):
        LogScheme.anchored().to_index(math.nan)
    with pytest.raises(InternalInvariantViolation):
        LinearScheme(low=0, high=10, width=5).to_index(math.nan)
