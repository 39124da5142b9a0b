from __future__ import annotations

import re
from typing import Iterable

from ..config import INFERENCE_SAMPLE_SIZE
from ..models import ColumnType
from ..utils import parse_number

# Includes 0/1, so a numeric column holding only 0 and 1 infers as boolean.
BOOLEAN_VALUES: frozenset[str] = frozenset(
    {"true", "false", "yes", "no", "1", "0", "oui", "non"}
)

DATE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^\d{4}-\d{2}-\d{2}$"),
    re.compile(r"^\d{2}/\d{2}/\d{4}$"),
    re.compile(r"^\d{2}-\d{2}-\d{4}$"),
    re.compile(r"^\d{4}/\d{2}/\d{2}$"),
)


def sample_values(values: Iterable[str], size: int = INFERENCE_SAMPLE_SIZE) -> list[str]:
    """First `size` values that are non-empty after trimming."""
    out: list[str] = []
    for v in values:
        if len(out) >= size:
            break
        if v is not None and str(v).strip() != "":
            out.append(str(v))
    return out


def _is_boolean(v: str) -> bool:
    return v.strip().lower() in BOOLEAN_VALUES


def _is_number(v: str) -> bool:
    return parse_number(v) is not None


def _is_date(v: str) -> bool:
    s = v.strip()
    return any(p.match(s) for p in DATE_PATTERNS)


_RULES = (
    (ColumnType.BOOLEAN, _is_boolean),
    (ColumnType.NUMBER, _is_number),
    (ColumnType.DATE, _is_date),
)


def infer_column_type(values: Iterable[str]) -> ColumnType:
    """
    Infer one semantic type for a column.

    Empty cells are excluded, then the first 100 remaining values must all
    satisfy a rule for it to apply. Rules are tried as boolean, number, date;
    a column with no values, or matching none of them, is a string column.
    """
    sample = sample_values(values)
    if not sample:
        return ColumnType.STRING

    for col_type, check in _RULES:
        if all(check(v) for v in sample):
            return col_type
    return ColumnType.STRING
