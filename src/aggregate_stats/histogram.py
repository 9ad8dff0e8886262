"""Per-bucket counters and outlier tallies driven by a bucket scheme."""
from __future__ import annotations

from typing import Iterator, List, Tuple

from .scheme import LinearScheme, LogScheme


class HistogramStore:
    """Fixed-size histogram with low/high outlier counters."""

    def __init__(self, scheme: LogScheme | LinearScheme) -> None:
        self.scheme = scheme
        self.buckets: List[int] = [0] * scheme.bucket_count
        self.outliers_low = 0
        self.outliers_high = 0

    def outlier(self, value: float, removing: bool = False) -> bool:
        """Tally ``value`` as an outlier if it falls outside the range.

        Updates the matching outlier counter as a side effect, so call it
        exactly once per added or removed sample.
        """
        if not self.scheme.is_outlier(value):
            return False
        delta = -1 if removing else 1
        if value < self.scheme.low:
            self.outliers_low += delta
        else:
            self.outliers_high += delta
        return True

    def increment(self, index: int) -> None:
        self.buckets[index] += 1

    def decrement(self, index: int) -> None:
        self.buckets[index] -= 1

    def record(self, value: float, removing: bool = False) -> None:
        """Classify ``value`` and update its outlier or bucket counter."""
        if self.outlier(value, removing):
            return
        index = self.scheme.to_index(value)
        if removing:
            self.decrement(index)
        else:
            self.increment(index)

    @property
    def total(self) -> int:
        return sum(self.buckets)

    def each(self) -> Iterator[Tuple[float, int]]:
        """Yield ``(lower_bound, count)`` for every bucket in order."""
        for index, count in enumerate(self.buckets):
            yield self.scheme.to_bucket(index), count

    def each_nonzero(self) -> Iterator[Tuple[float, int]]:
        """Yield ``(lower_bound, count)`` for buckets holding samples."""
        for bound, count in self.each():
            if count != 0:
                yield bound, count
