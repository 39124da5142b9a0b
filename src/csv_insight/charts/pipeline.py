from __future__ import annotations

import logging
from typing import Any, Optional

import pandas as pd

from ..config import default_chart_limit
from ..models import Aggregation, ChartSpec, ColumnDescriptor, Dataset, SortOrder
from ..utils import parse_number, round_half_up

logger = logging.getLogger(__name__)

COUNT_KEY = "count"

ChartRow = dict[str, Any]

_REDUCERS = {
    Aggregation.SUM: "sum",
    Aggregation.AVG: "mean",
    Aggregation.MIN: "min",
    Aggregation.MAX: "max",
}


def _aggregate(
    dataset: Dataset,
    x_col: ColumnDescriptor,
    y_col: Optional[ColumnDescriptor],
    y_key: str,
    aggregation: Aggregation,
) -> list[ChartRow]:
    """
    Group rows by trimmed x-value and reduce each group to one y-value.

    A group exists as soon as its x-value is seen, even when none of its y
    cells parse as numbers; such a group reports 0 for sum/avg/min/max.
    """
    count_mode = aggregation == Aggregation.COUNT
    if not count_mode and y_col is None:
        return []

    tmp = pd.DataFrame({"g": pd.Series(dataset.column_values(x_col), dtype=object).str.strip()})
    if not count_mode:
        tmp["m"] = pd.Series(
            [parse_number(v) for v in dataset.column_values(y_col)], dtype="float64"
        )
    tmp = tmp[tmp["g"] != ""]
    if tmp.empty:
        return []

    # sort=False keeps groups in first-seen order.
    grouped = tmp.groupby("g", sort=False)
    if count_mode:
        return [{x_col.name: key, y_key: int(n)} for key, n in grouped.size().items()]

    reduced = grouped["m"].agg(_REDUCERS[aggregation]).fillna(0.0)
    return [{x_col.name: key, y_key: round_half_up(float(v), 2)} for key, v in reduced.items()]


def _raw_rows(
    dataset: Dataset,
    x_col: ColumnDescriptor,
    y_col: Optional[ColumnDescriptor],
    limit: int,
) -> list[ChartRow]:
    if y_col is None:
        return []
    # Take twice the limit so rows dropped for unparsable y still leave enough.
    window = dataset.rows[: min(2 * limit, len(dataset.rows))]
    out: list[ChartRow] = []
    for row in window:
        y = parse_number(row[y_col.index])
        if y is None:
            continue
        out.append({x_col.name: row[x_col.index], y_col.name: y})
    return out


def sort_rows(rows: list[ChartRow], y_key: str, sort_order: SortOrder) -> list[ChartRow]:
    """Stable sort on the numeric y-value only."""
    if sort_order == SortOrder.NONE or not rows:
        return rows
    order = pd.Series([r[y_key] for r in rows]).sort_values(
        ascending=sort_order == SortOrder.ASC, kind="stable"
    )
    return [rows[i] for i in order.index]


def process_chart_data(
    dataset: Dataset,
    chart: ChartSpec,
    sort_order: SortOrder = SortOrder.NONE,
    limit: Optional[int] = None,
) -> list[ChartRow]:
    """
    Project a dataset into plotting rows for one chart.

    Returns a list of {x_column_name: x, y_key: y} dicts, where y_key is the
    resolved y column name or "count" when counting without a y column.

    Never raises for data problems: an unresolvable x column, a missing y
    column outside count mode, or an empty dataset all yield [].
    """
    limit = default_chart_limit() if limit is None else limit
    if limit <= 0:
        return []

    x_col = dataset.find_column(chart.x_axis)
    if x_col is None:
        logger.debug("x column %r not found; nothing to chart", chart.x_axis)
        return []
    y_col = dataset.find_column(chart.y_axis)
    y_key = y_col.name if y_col is not None else COUNT_KEY

    aggregation = Aggregation(chart.aggregation)
    if aggregation != Aggregation.NONE:
        rows = _aggregate(dataset, x_col, y_col, y_key, aggregation)
    else:
        rows = _raw_rows(dataset, x_col, y_col, limit)

    rows = sort_rows(rows, y_key, SortOrder(sort_order))
    return rows[:limit]
