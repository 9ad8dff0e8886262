"""Aggregate statistics with a configurable histogram."""
from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, Optional, Tuple

from .config import DEFAULT_LOG_BUCKETS, AggregateConfig
from .histogram import HistogramStore
from .render import MIN_COLUMNS, render_histogram
from .scheme import LinearScheme, LogScheme, build_scheme
from .stats import Moments


class Aggregate:
    """Accumulate moments and a histogram over a stream of samples.

    By default samples are bucketed into a binary logarithmic histogram
    anchored at ``low`` (default 1). Passing ``low``, ``high`` and ``width``
    together maintains a linear histogram with ``(high - low) / width``
    buckets instead. Samples outside the histogram range are counted as
    outliers but still contribute to the moments.
    """

    def __init__(
        self,
        low: Optional[float] = None,
        high: Optional[float] = None,
        width: Optional[float] = None,
        log_buckets: int = DEFAULT_LOG_BUCKETS,
    ) -> None:
        config = AggregateConfig(
            low=low, high=high, width=width, log_buckets=log_buckets
        )
        self._log_buckets = log_buckets
        self._scheme = build_scheme(config)
        self._moments = Moments()
        self._histogram = HistogramStore(self._scheme)

    @classmethod
    def from_config(cls, config: AggregateConfig) -> "Aggregate":
        return cls(
            low=config.low,
            high=config.high,
            width=config.width,
            log_buckets=config.log_buckets,
        )

    def add(self, value: float) -> None:
        """Include a sample in the aggregate."""
        self._moments.add(value)
        self._histogram.record(value)

    def remove(self, value: float) -> None:
        """Take a previously added sample back out of the aggregate.

        Min and max become NaN afterwards. Removing a value that was never
        added leaves the counters inconsistent; callers must avoid it.
        """
        self._moments.remove(value)
        self._histogram.record(value, removing=True)

    def extend(self, values: Iterable[float]) -> None:
        for value in values:
            self.add(value)

    @property
    def count(self) -> int:
        return self._moments.count

    @property
    def sum(self) -> float:
        return self._moments.sum

    @property
    def sum2(self) -> float:
        return self._moments.sum2

    @property
    def min(self) -> Optional[float]:
        return self._moments.min_value

    @property
    def max(self) -> Optional[float]:
        return self._moments.max_value

    @property
    def outliers_low(self) -> int:
        return self._histogram.outliers_low

    @property
    def outliers_high(self) -> int:
        return self._histogram.outliers_high

    @property
    def log_buckets(self) -> int:
        return self._log_buckets

    @property
    def scheme(self) -> LogScheme | LinearScheme:
        return self._scheme

    @property
    def low(self) -> float:
        return self._scheme.low

    @property
    def high(self) -> float:
        return self._scheme.high

    @property
    def width(self) -> Optional[float]:
        return self._scheme.width

    @property
    def bucket_count(self) -> int:
        return self._scheme.bucket_count

    def mean(self) -> float:
        return self._moments.mean()

    def std_dev(self) -> float:
        return self._moments.std_dev()

    def each(self) -> Iterator[Tuple[float, int]]:
        """Iterate over every bucket as ``(lower_bound, count)``."""
        return self._histogram.each()

    def each_nonzero(self) -> Iterator[Tuple[float, int]]:
        """Iterate over buckets that currently hold samples."""
        return self._histogram.each_nonzero()

    def render(self, columns: int = MIN_COLUMNS) -> str:
        """Return an ASCII bar chart of the histogram."""
        return render_histogram(self._histogram, columns)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize moments, outliers and buckets to a dictionary."""
        return {
            **self._moments.to_dict(),
            "outliers_low": self.outliers_low,
            "outliers_high": self.outliers_high,
            "scheme": self._scheme.to_dict(),
            "buckets": [
                {"value": bound, "count": count} for bound, count in self.each()
            ],
        }

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(count={self.count}, "
            f"scheme={self._scheme!r})"
        )
