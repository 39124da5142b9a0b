from __future__ import annotations

import csv
import io


def _ensure_field_size(text: str) -> None:
    # A single field can span the whole input (one huge cell or an unterminated quote).
    needed = len(text) + 1
    if csv.field_size_limit() < needed:
        csv.field_size_limit(needed)


def read_rows(text: str, delimiter: str, skip_empty_lines: bool = True) -> list[list[str]]:
    """
    Split delimited text into rows of string fields.

    Quoted fields may contain the delimiter, newlines and doubled quotes.
    The reader runs non-strict, so malformed quoting never raises and an
    unterminated quote swallows the rest of the input into one field.
    Lines with no content are dropped when `skip_empty_lines` is set and
    come back as [""] otherwise.
    """
    if not text:
        return []

    _ensure_field_size(text)
    reader = csv.reader(
        io.StringIO(text, newline=""),
        delimiter=delimiter,
        quotechar='"',
        doublequote=True,
        skipinitialspace=False,
        strict=False,
    )

    rows: list[list[str]] = []
    for fields in reader:
        if not fields:
            if skip_empty_lines:
                continue
            fields = [""]
        rows.append(fields)
    return rows
