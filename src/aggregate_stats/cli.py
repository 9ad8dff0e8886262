"""Command-line entrypoints for aggregating sample streams."""
from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Dict

from tqdm import tqdm

from .aggregate import Aggregate
from .config import AggregateConfig, load_config
from .render import MIN_COLUMNS
from .streaming import iter_samples


def _write_json(path: Path, payload: Dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2)


def _build_config(args: argparse.Namespace) -> AggregateConfig:
    """Merge an optional JSON config with command-line overrides."""
    config = load_config(args.config) if args.config else AggregateConfig()
    overrides = {
        "low": args.low,
        "high": args.high,
        "width": args.width,
        "log_buckets": args.log_buckets,
    }
    merged = config.to_dict()
    merged.update({k: v for k, v in overrides.items() if v is not None})
    return AggregateConfig.from_dict(merged)


def _aggregate_input(args: argparse.Namespace) -> Aggregate:
    """Stream samples from the input file (and optional removals)."""
    input_path = Path(args.input)
    if not input_path.exists():
        raise FileNotFoundError(f"Samples not found: {input_path}")

    aggregate = Aggregate.from_config(_build_config(args))
    for value in tqdm(
        iter_samples(input_path, args.prefix), desc="Adding samples", unit="sample"
    ):
        aggregate.add(value)

    if args.remove:
        for value in tqdm(
            iter_samples(args.remove, args.prefix),
            desc="Removing samples",
            unit="sample",
        ):
            aggregate.remove(value)
    return aggregate


def cmd_render(args: argparse.Namespace) -> None:
    aggregate = _aggregate_input(args)
    print(aggregate.render(args.columns))


def cmd_summarize(args: argparse.Namespace) -> None:
    aggregate = _aggregate_input(args)
    output_path = Path(args.output)
    _write_json(output_path, aggregate.to_dict())
    print(f"Wrote summary of {aggregate.count} samples to {output_path}")


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--input", required=True, help="Path to samples JSON")
    parser.add_argument(
        "--prefix", default="item", help="ijson prefix of the sample array"
    )
    parser.add_argument("--remove", help="Path to samples JSON to un-add")
    parser.add_argument("--config", help="Path to histogram config JSON")
    parser.add_argument("--low", type=float)
    parser.add_argument("--high", type=float)
    parser.add_argument("--width", type=float)
    parser.add_argument("--log-buckets", type=int)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Aggregate statistics and histograms")
    subparsers = parser.add_subparsers(dest="command", required=True)

    render = subparsers.add_parser("render", help="Print an ASCII histogram")
    _add_common_arguments(render)
    render.add_argument("--columns", type=int, default=MIN_COLUMNS)
    render.set_defaults(func=cmd_render)

    summarize = subparsers.add_parser("summarize", help="Write a JSON summary")
    _add_common_arguments(summarize)
    summarize.add_argument("--output", required=True, help="Output JSON path")
    summarize.set_defaults(func=cmd_summarize)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
