"""ASCII bar-chart rendering for histogram stores."""
from __future__ import annotations

import math
from typing import List, Tuple

from .errors import InvalidArgument
from .histogram import HistogramStore

MIN_COLUMNS = 80
BAR_CHAR = "@"
VALUE_LABEL = "value"
COUNT_LABEL = "count"
TOTAL_LABEL = "Total"
EMPTY_TEXT = "Empty histogram"


def _skip_row(value_width: int) -> str:
    """Marker row standing in for a run of empty buckets."""
    return f"{' ':>{value_width}} ~\n"


def render_histogram(store: HistogramStore, columns: int = MIN_COLUMNS) -> str:
    """Render the nonzero buckets of ``store`` as a fixed-width bar chart.

    Runs of empty buckets between (or after) displayed rows collapse into a
    single ``~`` row. Outliers are not drawn and not counted in the total.
    """
    if columns < MIN_COLUMNS:
        raise InvalidArgument(
            f"columns must be >= {MIN_COLUMNS}, got {columns}"
        )

    rows: List[Tuple[int, float, int]] = []
    max_count = 0
    for index, count in enumerate(store.buckets):
        if count == 0:
            continue
        max_count = max(max_count, count)
        rows.append((index, store.scheme.to_bucket(index), count))

    if not rows:
        return EMPTY_TEXT

    value_width = max(
        len(str(int(rows[-1][1]))), len(VALUE_LABEL), len(TOTAL_LABEL)
    )
    total = store.total
    count_width = max(len(str(total)), len(COUNT_LABEL))
    # Very wide labels can leave no room for bars; rows then carry no bar.
    max_bar_width = max(
        columns - (value_width + len(" |") + len("| ") + count_width), 0
    )
    weight = max(max_count / max_bar_width, 1.0) if max_bar_width else math.inf
    rule = "-" * max_bar_width

    lines = [f"{VALUE_LABEL:>{value_width}} |{rule}| {COUNT_LABEL:>{count_width}}\n"]
    prev_index = rows[0][0] - 1
    for index, bound, count in rows:
        if prev_index != index - 1:
            lines.append(_skip_row(value_width))
        prev_index = index

        bar = (BAR_CHAR * int(count / weight)).ljust(max_bar_width)
        lines.append(
            f"{int(bound):>{value_width}d} |{bar}| "
            f"{count:>{count_width}d}\n"
        )

    if rows[-1][0] != len(store.buckets) - 1:
        lines.append(_skip_row(value_width))
    lines.append(f"{TOTAL_LABEL:>{value_width}} |{rule}| {total:>{count_width}d}\n")
    return "".join(lines)
