"""Bucket schemes mapping sample values to histogram bucket indices."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .config import DEFAULT_LOG_BUCKETS, AggregateConfig
from .errors import InternalInvariantViolation, InvalidConfiguration


@dataclass(frozen=True)
class LogScheme:
    """Binary logarithmic buckets: bucket ``i`` starts at ``low * 2**i``."""

    low: float
    high: float
    log_buckets: int = DEFAULT_LOG_BUCKETS

    linear = False
    width = None

    @classmethod
    def anchored(
        cls, low: Optional[float] = None, log_buckets: int = DEFAULT_LOG_BUCKETS
    ) -> "LogScheme":
        """Snap ``low`` down to a power of two and derive the upper bound.

        Anchors are measured against 1, so anything below 1 snaps to 1.
        """
        if isinstance(log_buckets, bool) or not isinstance(log_buckets, int):
            raise InvalidConfiguration("log_buckets must be an integer")
        if log_buckets < 1:
            raise InvalidConfiguration("log_buckets must be >= 1")
        anchor = 1 if low is None else low
        unit = cls(low=1.0, high=2.0 ** log_buckets, log_buckets=log_buckets)
        snapped = unit.to_bucket(unit.to_index(anchor))
        scheme = cls(low=snapped, high=snapped, log_buckets=log_buckets)
        high = scheme.to_bucket(scheme.to_index(snapped) + log_buckets - 1)
        return cls(low=snapped, high=high, log_buckets=log_buckets)

    @property
    def bucket_count(self) -> int:
        return self.log_buckets

    def to_index(self, value: float) -> int:
        if math.isnan(value):
            raise InternalInvariantViolation(
                f"No bucket in [{self.low}, {self.high}) covers {value!r}"
            )
        return int(math.floor(math.log2(max(1.0, value / self.low))))

    def to_bucket(self, index: int) -> float:
        return self.low * 2.0 ** index

    def is_outlier(self, value: float) -> bool:
        return value < self.low or value >= self.high

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": "log",
            "low": self.low,
            "high": self.high,
            "log_buckets": self.log_buckets,
        }


@dataclass(frozen=True)
class LinearScheme:
    """Uniform buckets of ``width`` covering ``[low, high)``."""

    low: float
    high: float
    width: float

    linear = True

    def __post_init__(self) -> None:
        if self.high <= self.low:
            raise InvalidConfiguration("High bucket must be > Low bucket")
        if self.width <= 0:
            raise InvalidConfiguration("Histogram width must be > 0")
        if self.high - self.low < self.width:
            raise InvalidConfiguration(
                "Histogram width must be <= histogram range"
            )
        if (self.high - self.low) % self.width != 0:
            raise InvalidConfiguration(
                "Histogram range (high - low) must be a multiple of width"
            )

    @property
    def bucket_count(self) -> int:
        return int((self.high - self.low) // self.width)

    def _covers(self, index: int, value: float) -> bool:
        bucket = self.to_bucket(index)
        return bucket <= value < bucket + self.width

    def to_index(self, value: float) -> int:
        """Return the bucket whose half-open range contains ``value``."""
        if math.isfinite(value):
            guess = int((value - self.low) // self.width)
            # Float division can land one bucket off near a boundary.
            for index in (guess, guess - 1, guess + 1):
                if 0 <= index < self.bucket_count and self._covers(index, value):
                    return index
        raise InternalInvariantViolation(
            f"No bucket in [{self.low}, {self.high}) covers {value!r}"
        )

    def to_bucket(self, index: int) -> float:
        return self.low + index * self.width

    def is_outlier(self, value: float) -> bool:
        return value < self.low or value >= self.high

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": "linear",
            "low": self.low,
            "high": self.high,
            "width": self.width,
        }


def build_scheme(config: AggregateConfig) -> LogScheme | LinearScheme:
    """Create the bucket scheme selected by ``config``."""
    if config.linear:
        return LinearScheme(low=config.low, high=config.high, width=config.width)
    return LogScheme.anchored(config.low, config.log_buckets)
