from __future__ import annotations

import csv
import re
from typing import Any, Sequence

import pandas as pd

from ..models import Dataset


def rows_to_csv(rows: Sequence[dict[str, Any]], delimiter: str = ",") -> str:
    """
    Serialize chart rows as delimited text with every value quoted.

    Column order comes from the first row's keys. Returns "" for no rows.
    """
    if not rows:
        return ""
    columns = list(rows[0].keys())
    df = pd.DataFrame(list(rows), columns=columns)
    return df.to_csv(
        index=False,
        sep=delimiter,
        quoting=csv.QUOTE_ALL,
        lineterminator="\n",
    )


def export_filename(title: str) -> str:
    stem = re.sub(r"\s+", "_", title.strip()) or "chart"
    return f"{stem}.csv"


def dataset_to_csv(dataset: Dataset, delimiter: str = ",") -> str:
    """Write a dataset's headers and raw cells back out as delimited text."""
    if not dataset.headers:
        return ""
    return dataset.to_frame().to_csv(index=False, sep=delimiter, lineterminator="\n")
