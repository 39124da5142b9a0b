from __future__ import annotations

from typing import Any, Optional

import pandas as pd

from ..config import SummaryConfig
from ..models import ColumnDescriptor, ColumnType, Dataset
from ..utils import parse_number, round_half_up

PROFILE_SCHEMA = "csv_insight.data_profile.v1"

_TYPE_LABELS: dict[ColumnType, str] = {
    ColumnType.NUMBER: "number",
    ColumnType.STRING: "text",
    ColumnType.DATE: "date",
    ColumnType.BOOLEAN: "boolean",
}


def profile_dataset(dataset: Dataset, config: Optional[SummaryConfig] = None) -> dict[str, Any]:
    """Deterministic machine-readable digest of a dataset.

    Same dataset in, same payload out: columns keep dataset order, example
    values keep first-seen order and every float is rounded to 2 decimals.
    """
    cfg = config or SummaryConfig()

    columns = [_column_stats(dataset, col, cfg) for col in dataset.columns]
    sample_rows = [
        [{"column": col.name, "value": _cell(row, col)} for col in dataset.columns]
        for row in dataset.rows[: cfg.sample_rows]
    ]

    return {
        "_schema": PROFILE_SCHEMA,
        "rows": int(dataset.row_count),
        "cols": len(dataset.columns),
        "columns": columns,
        "sample_row_limit": cfg.sample_rows,
        "sample_rows": sample_rows,
    }


def _cell(row: list[str], col: ColumnDescriptor) -> str:
    return row[col.index] if col.index < len(row) else "N/A"


def _column_stats(dataset: Dataset, col: ColumnDescriptor, cfg: SummaryConfig) -> dict[str, Any]:
    non_empty = pd.Series(
        [v for v in dataset.column_values(col) if str(v).strip() != ""], dtype=object
    )

    info: dict[str, Any] = {
        "name": col.name,
        "type": col.type.value,
        "non_empty_count": int(non_empty.shape[0]),
    }

    if col.type == ColumnType.NUMBER:
        info.update(_numeric_stats(non_empty))
    elif col.type == ColumnType.STRING:
        # pd.unique keeps first-seen order.
        distinct = [str(v) for v in pd.unique(non_empty)]
        info["unique_count"] = len(distinct)
        info["examples"] = distinct[: cfg.max_examples]

    return info


def _numeric_stats(series: pd.Series) -> dict[str, Any]:
    nums = pd.Series([parse_number(v) for v in series], dtype="float64").dropna()
    if nums.empty:
        return {"valid_count": 0, "min": None, "max": None, "mean": None}
    return {
        "valid_count": int(nums.shape[0]),
        "min": round_half_up(float(nums.min()), 2),
        "max": round_half_up(float(nums.max()), 2),
        "mean": round_half_up(float(nums.mean()), 2),
    }


def _column_line(info: dict[str, Any]) -> str:
    col_type = ColumnType(info["type"])
    head = f"- {info['name']} ({_TYPE_LABELS[col_type]})"

    if col_type == ColumnType.NUMBER:
        if not info["valid_count"]:
            return f"{head}: no valid values"
        return (
            f"{head}: min={info['min']:.2f}, max={info['max']:.2f}, "
            f"avg={info['mean']:.2f}, {info['valid_count']} values"
        )
    if col_type == ColumnType.STRING:
        examples = ", ".join(info["examples"])
        return f"{head}: {info['unique_count']} unique values, examples: {examples}"
    return f"{head}: {info['non_empty_count']} values"


def render_summary_text(profile: dict[str, Any]) -> str:
    lines: list[str] = [f"Dataset with {profile['rows']} rows and {profile['cols']} columns."]

    lines.append("\nColumns:")
    for info in profile["columns"]:
        lines.append(_column_line(info))

    lines.append(f"\nFirst {profile['sample_row_limit']} rows sample:")
    for i, row in enumerate(profile["sample_rows"]):
        pairs = ", ".join(f"{c['column']}: {c['value']}" for c in row)
        lines.append(f"Row {i + 1}: {pairs}")

    return "\n".join(lines)


def generate_data_summary(dataset: Dataset, config: Optional[SummaryConfig] = None) -> str:
    """Plain-text statistical digest for the text-generation collaborator."""
    return render_summary_text(profile_dataset(dataset, config))
