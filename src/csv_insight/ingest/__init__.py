"""Ingest stage: raw delimited text to a typed Dataset."""

from .builder import build_dataset, parse_csv
from .delimiter import CANDIDATE_DELIMITERS, detect_delimiter
from .infer import infer_column_type
from .reader import read_rows

__all__ = [
    "CANDIDATE_DELIMITERS",
    "build_dataset",
    "detect_delimiter",
    "infer_column_type",
    "parse_csv",
    "read_rows",
]
