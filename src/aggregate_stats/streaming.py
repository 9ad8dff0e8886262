"""Streaming IO helpers for large sample files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import ijson


def iter_samples(path: str | Path, prefix: str = "item") -> Iterable[float]:
    """Yield numeric samples found under ``prefix`` in a JSON file.

    The default prefix reads a top-level array. Use e.g. ``"latencies.item"``
    for an array nested under a key.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Samples not found: {path}")
    with path.open("rb") as handle:
        for item in ijson.items(handle, prefix, use_float=True):
            if isinstance(item, bool) or not isinstance(item, (int, float)):
                raise ValueError(f"Non-numeric sample in {path}: {item!r}")
            yield float(item)
