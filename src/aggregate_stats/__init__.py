"""Streaming aggregate statistics with a compact histogram."""

from .aggregate import Aggregate
from .config import AggregateConfig, load_config
from .errors import (
    AggregateError,
    InternalInvariantViolation,
    InvalidArgument,
    InvalidConfiguration,
)

__all__ = [
    "Aggregate",
    "AggregateConfig",
    "AggregateError",
    "InternalInvariantViolation",
    "InvalidArgument",
    "InvalidConfiguration",
    "load_config",
]
__version__ = "0.1.0"
