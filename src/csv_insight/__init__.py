"""Delimited-text ingestion, column type inference, chart aggregation and dataset digests."""

from .charts import process_chart_data
from .ingest import build_dataset, detect_delimiter, infer_column_type, parse_csv, read_rows
from .models import (
    Aggregation,
    ChartSpec,
    ChartSuggestion,
    ChartType,
    ColumnDescriptor,
    ColumnType,
    Dataset,
    ParseSettings,
    SortOrder,
)
from .profile import generate_data_summary, profile_dataset

__version__ = "0.1.0"

__all__ = [
    "Aggregation",
    "ChartSpec",
    "ChartSuggestion",
    "ChartType",
    "ColumnDescriptor",
    "ColumnType",
    "Dataset",
    "ParseSettings",
    "SortOrder",
    "build_dataset",
    "detect_delimiter",
    "generate_data_summary",
    "infer_column_type",
    "parse_csv",
    "process_chart_data",
    "profile_dataset",
    "read_rows",
]
