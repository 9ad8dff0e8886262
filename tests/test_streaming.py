from __future__ import annotations

import json
from pathlib import Path

import pytest

from aggregate_stats.streaming import iter_samples


def test_iter_samples_top_level_array(tmp_path: Path) -> None:
    path = tmp_path / "samples.json"
    path.write_text(json.dumps([1, 2.5, -3]), encoding="utf-8")
    samples = list(iter_samples(path))
    assert samples == [1.0, 2.5, -3.0]
    assert all(isinstance(value, float) for value in samples)


def test_iter_samples_nested_prefix(tmp_path: Path) -> None:
    path = tmp_path / "samples.json"
    path.write_text(
        json.dumps({"latencies": [0.5, 12.25], "host": "a"}), encoding="utf-8"
    )
    assert list(iter_samples(path, "latencies.item")) == [0.5, 12.25]


def test_iter_samples_rejects_non_numeric(tmp_path: Path) -> None:
    path = tmp_path / "samples.json"
    path.write_text(json.dumps([1, "two"]), encoding="utf-8")
    with pytest.raises(ValueError):
        list(iter_samples(path))


def test_iter_samples_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        list(iter_samples(tmp_path / "missing.json"))
