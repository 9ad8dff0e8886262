"""Running moments for a stream of samples."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Optional

NAN = float("nan")


@dataclass
class Moments:
    """Track count, sum, sum of squares and min/max in one pass.

    Removing a sample invalidates ``min_value`` and ``max_value`` (both become
    NaN) because the remaining extremes cannot be recovered without the
    samples themselves. They stay NaN until the count drops back to zero.
    """

    count: int = 0
    sum: float = 0.0
    sum2: float = 0.0
    min_value: Optional[float] = None
    max_value: Optional[float] = None

    def add(self, value: float) -> None:
        if self.count == 0:
            self.min_value = value
            self.max_value = value
        elif not math.isnan(self.max_value):
            self.max_value = max(value, self.max_value)
            self.min_value = min(value, self.min_value)

        self.count += 1
        self.sum += value
        self.sum2 += value * value

    def remove(self, value: float) -> None:
        self.min_value = NAN
        self.max_value = NAN
        self.count -= 1
        self.sum -= value
        self.sum2 -= value * value

    def mean(self) -> float:
        if self.count == 0:
            # 0/0 and x/0 follow IEEE semantics instead of raising.
            return math.copysign(math.inf, self.sum) if self.sum else NAN
        return self.sum / self.count

    def std_dev(self) -> float:
        """Unbiased sample standard deviation, NaN for fewer than two samples."""
        if self.count <= 1:
            return NAN
        variance = (self.sum2 - (self.sum * self.sum) / self.count) / (
            self.count - 1
        )
        # Cancellation can push an all-equal stream slightly below zero.
        return math.sqrt(max(variance, 0.0))

    def to_dict(self) -> Dict[str, Optional[float]]:
        return {
            "count": self.count,
            "sum": self.sum,
            "mean": _finite_or_none(self.mean()),
            "std_dev": _finite_or_none(self.std_dev()),
            "min": _finite_or_none(self.min_value),
            "max": _finite_or_none(self.max_value),
        }


def _finite_or_none(value: Optional[float]) -> Optional[float]:
    """Map NaN and infinities to None so summaries stay valid JSON."""
    if value is None or not math.isfinite(value):
        return None
    return value
