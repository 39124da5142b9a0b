from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..config import delimiter_sample_chars
from ..models import ColumnDescriptor, Dataset, ParseSettings
from ..utils import fit_row
from .delimiter import detect_delimiter
from .infer import infer_column_type
from .reader import read_rows

logger = logging.getLogger(__name__)


def placeholder_name(index: int) -> str:
    return f"Column {index + 1}"


def _dedupe_headers(headers: Sequence[str]) -> list[str]:
    """
    Make header names unique the way pandas does for duplicate CSV columns:
    the second "Sales" becomes "Sales.1", the third "Sales.2", and so on.
    """
    seen: set[str] = set()
    counts: dict[str, int] = {}
    out: list[str] = []
    for name in headers:
        candidate = name
        while candidate in seen:
            counts[name] = counts.get(name, 0) + 1
            candidate = f"{name}.{counts[name]}"
        seen.add(candidate)
        out.append(candidate)
    return out


def build_dataset(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> Dataset:
    """
    Assemble a Dataset from column names and raw rows.

    Rows are padded with "" or truncated to the header width, names are made
    unique, and each column's type is inferred over all of its values.
    """
    names = _dedupe_headers(list(headers))
    width = len(names)
    data = [fit_row(r, width) for r in rows]

    columns = [
        ColumnDescriptor(
            name=name,
            type=infer_column_type(row[i] for row in data),
            index=i,
        )
        for i, name in enumerate(names)
    ]
    return Dataset(headers=names, rows=data, columns=columns, row_count=len(data))


def parse_csv(text: str, settings: Optional[ParseSettings] = None) -> Dataset:
    """
    Parse raw delimited text into a typed Dataset.

    Never raises on content: empty or unparsable input yields an empty dataset.
    """
    cfg = settings or ParseSettings()
    delimiter = cfg.delimiter or detect_delimiter(text[: delimiter_sample_chars()])

    all_rows = read_rows(text, delimiter, skip_empty_lines=cfg.skip_empty_lines)
    if not all_rows:
        logger.debug("No rows parsed (delimiter=%r); returning empty dataset", delimiter)
        return Dataset.empty()

    first = all_rows[0]
    if cfg.has_header:
        headers = [h.strip() or placeholder_name(i) for i, h in enumerate(first)]
        data_rows = all_rows[1:]
    else:
        headers = [placeholder_name(i) for i in range(len(first))]
        data_rows = all_rows

    dataset = build_dataset(headers, data_rows)
    logger.debug(
        "Parsed %d rows x %d columns (delimiter=%r, header=%s)",
        dataset.row_count,
        len(dataset.columns),
        delimiter,
        cfg.has_header,
    )
    return dataset
