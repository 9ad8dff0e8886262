"""Configuration model for aggregate histograms."""
from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

from .errors import InvalidConfiguration

DEFAULT_LOG_BUCKETS = 8


@dataclass
class AggregateConfig:
    """Histogram options for an Aggregate.

    Supplying ``low``, ``high`` and ``width`` together selects a linear
    histogram with ``(high - low) / width`` buckets. Anything else selects a
    binary logarithmic histogram anchored at ``low`` (default 1).
    """

    low: Optional[float] = None
    high: Optional[float] = None
    width: Optional[float] = None
    log_buckets: int = DEFAULT_LOG_BUCKETS

    @property
    def linear(self) -> bool:
        return (
            self.low is not None
            and self.high is not None
            and self.width is not None
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "AggregateConfig":
        """Build a config from a mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(raw) - known)
        if unknown:
            raise InvalidConfiguration(
                f"Unknown configuration keys: {', '.join(unknown)}"
            )
        values = {k: v for k, v in raw.items() if v is not None}
        return cls(**values)


def load_config(path: str | Path) -> AggregateConfig:
    """Load an AggregateConfig from a JSON file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        raw = json.load(handle)
    if not isinstance(raw, dict):
        raise InvalidConfiguration(f"Config must be a JSON object: {path}")
    return AggregateConfig.from_dict(raw)
