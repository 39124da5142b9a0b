from __future__ import annotations

import math
import re
from pathlib import Path
from typing import Any, Optional, Sequence

_WS_RE = re.compile(r"\s+")
_DECIMAL_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_THOUSANDS_TAIL_RE = re.compile(r"^\d{3}$")


def normalize_key(name: str) -> str:
    """
    Lookup key for column names: lowercase + trim.

    Every case-insensitive header match goes through this so that all
    lookup boundaries agree.
    """
    return str(name).strip().lower()


def _normalize_separators(s: str) -> str:
    has_comma = "," in s
    has_dot = "." in s
    if has_comma and has_dot:
        # The later mark is the decimal separator.
        if s.rfind(",") > s.rfind("."):
            return s.replace(".", "").replace(",", ".")
        return s.replace(",", "")
    if has_comma:
        head, _, tail = s.rpartition(",")
        if s.count(",") == 1 and not _THOUSANDS_TAIL_RE.match(tail):
            return f"{head}.{tail}"
        return s.replace(",", "")
    return s


def parse_number(value: Any) -> Optional[float]:
    """
    Parse a cell as a finite float, or return None.

    Whitespace is removed and thousands separators / a decimal comma are
    normalized first, so "1 234,5", "1,234.5" and "1234.5" all parse to 1234.5.
    A single comma followed by exactly three digits ("1,234") is read as a
    thousands separator.
    """
    if value is None:
        return None
    s = _WS_RE.sub("", str(value))
    if not s:
        return None
    s = _normalize_separators(s)
    if not _DECIMAL_RE.match(s):
        return None
    try:
        out = float(s)
    except ValueError:
        return None
    return out if math.isfinite(out) else None


def round_half_up(x: float, ndigits: int = 2) -> float:
    """Round to `ndigits` decimals with ties going toward +infinity."""
    factor = 10 ** ndigits
    return math.floor(x * factor + 0.5) / factor


def fit_row(row: Sequence[Any], width: int) -> list[str]:
    """Pad a row with "" or truncate it so it holds exactly `width` string cells."""
    cells = ["" if c is None else str(c) for c in row[:width]]
    if len(cells) < width:
        cells.extend([""] * (width - len(cells)))
    return cells


def read_text(path: Path, encoding: str = "utf-8") -> str:
    """
    Read raw delimited text from disk.

    This is the only fatal boundary of the engine: a missing file raises
    FileNotFoundError. A leading BOM is dropped.
    """
    if not path.exists():
        raise FileNotFoundError(f"CSV not found: {path}")
    text = path.read_text(encoding=encoding or "utf-8", errors="replace")
    return text.lstrip("\ufeff")
