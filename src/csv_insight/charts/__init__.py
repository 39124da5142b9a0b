"""Chart stage: aggregation pipeline, export and suggestion validation."""

from .export import dataset_to_csv, export_filename, rows_to_csv
from .pipeline import COUNT_KEY, process_chart_data, sort_rows
from .schema import ChartSuggestionError, load_suggestions, validate_suggestions_obj

__all__ = [
    "COUNT_KEY",
    "ChartSuggestionError",
    "dataset_to_csv",
    "export_filename",
    "load_suggestions",
    "process_chart_data",
    "rows_to_csv",
    "sort_rows",
    "validate_suggestions_obj",
]
