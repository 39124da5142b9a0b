from __future__ import annotations

from enum import Enum
from typing import Optional

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from .utils import fit_row, normalize_key


class ColumnType(str, Enum):
    """
    Semantic column types, listed in inference precedence order.

    Inference tries BOOLEAN, then NUMBER, then DATE, and falls back to STRING.
    """
    BOOLEAN = "boolean"
    NUMBER = "number"
    DATE = "date"
    STRING = "string"


class Aggregation(str, Enum):
    """
    How rows sharing an x-value collapse into one plotted value.

    - NONE: raw rows, no grouping
    - SUM / AVG / MIN / MAX: numeric reduction of the y column per group
    - COUNT: number of rows per group (no y column needed)
    """
    NONE = "none"
    SUM = "sum"
    AVG = "avg"
    COUNT = "count"
    MIN = "min"
    MAX = "max"


class SortOrder(str, Enum):
    NONE = "none"
    ASC = "asc"
    DESC = "desc"


class ChartType(str, Enum):
    BAR = "bar"
    LINE = "line"
    PIE = "pie"
    SCATTER = "scatter"
    AREA = "area"


class _CamelModel(BaseModel):
    """Serializes with the camelCase keys used by the UI and AI collaborators."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ColumnDescriptor(_CamelModel):
    """
    Per-column metadata, created once when a dataset is built.

    name: user-facing label, unique within the dataset
    type: inferred semantic type
    index: position of the column's cell in every row
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    name: str
    type: ColumnType
    index: int


class Dataset(_CamelModel):
    """
    In-memory typed table produced from parsed delimited text.

    Every row holds exactly len(headers) raw string cells (ragged rows are
    padded or truncated on construction), row_count == len(rows) and
    columns[i].index == i.
    Instances are built by `csv_insight.ingest.build_dataset` and only read afterwards.
    """
    headers: list[str] = Field(default_factory=list)
    rows: list[list[str]] = Field(default_factory=list)
    columns: list[ColumnDescriptor] = Field(default_factory=list)
    row_count: int = 0

    @model_validator(mode="after")
    def _fit_rows(self) -> "Dataset":
        width = len(self.headers)
        if any(len(row) != width for row in self.rows):
            self.rows = [fit_row(row, width) for row in self.rows]
        self.row_count = len(self.rows)
        return self

    @classmethod
    def empty(cls) -> "Dataset":
        return cls(headers=[], rows=[], columns=[], row_count=0)

    def find_column(self, name: Optional[str]) -> Optional[ColumnDescriptor]:
        """Case- and whitespace-insensitive header lookup. First match wins."""
        if name is None:
            return None
        wanted = normalize_key(name)
        for col in self.columns:
            if normalize_key(col.name) == wanted:
                return col
        return None

    def column_values(self, column: ColumnDescriptor) -> list[str]:
        return [row[column.index] for row in self.rows]

    def to_frame(self) -> pd.DataFrame:
        """Raw string cells as a DataFrame (no dtype coercion)."""
        return pd.DataFrame(self.rows, columns=self.headers, dtype=object)


class ParseSettings(_CamelModel):
    """
    Parsing configuration supplied alongside raw text.

    delimiter: single character, or "" to auto-detect
    has_header: first parsed row supplies column names
    skip_empty_lines: drop lines with no content
    encoding: advisory only; the engine never transcodes text
    """
    delimiter: str = ""
    has_header: bool = True
    skip_empty_lines: bool = True
    encoding: str = "UTF-8"

    @field_validator("delimiter")
    @classmethod
    def _single_char_delimiter(cls, v: str) -> str:
        if len(v) > 1:
            raise ValueError(f"delimiter must be a single character or empty (got {v!r})")
        return v


class ChartSpec(_CamelModel):
    """
    Which columns to project and how to aggregate them.

    Column names are resolved against the live dataset at aggregation time,
    so a spec may reference columns that no longer exist.
    """
    x_axis: str
    y_axis: Optional[str] = None
    aggregation: Aggregation = Aggregation.NONE

    @field_validator("aggregation", mode="before")
    @classmethod
    def _default_aggregation(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            return Aggregation.NONE
        if isinstance(v, str):
            return v.strip().lower()
        return v


class ChartSuggestion(ChartSpec):
    """A chart spec plus the presentation metadata proposed by the AI collaborator."""

    id: str
    type: ChartType = ChartType.BAR
    title: str = ""
    description: str = ""
    reasoning: str = ""
