from __future__ import annotations

import os
import sys
from dataclasses import dataclass

CHART_LIMIT_DEFAULT = 20
DELIMITER_SAMPLE_CHARS = 2000
INFERENCE_SAMPLE_SIZE = 100
SUMMARY_MAX_EXAMPLES = 5
SUMMARY_SAMPLE_ROWS = 5

# Pass as `limit` to keep every aggregated row.
NO_LIMIT = sys.maxsize


@dataclass(frozen=True)
class SummaryConfig:
    """Bounds for the dataset digest handed to the text-generation collaborator."""

    max_examples: int = SUMMARY_MAX_EXAMPLES
    sample_rows: int = SUMMARY_SAMPLE_ROWS


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        v = int(raw)
        return v if v > 0 else default
    except ValueError:
        return default


def default_chart_limit() -> int:
    return _env_int("CSV_INSIGHT_CHART_LIMIT", CHART_LIMIT_DEFAULT)


def delimiter_sample_chars() -> int:
    return _env_int("CSV_INSIGHT_SAMPLE_CHARS", DELIMITER_SAMPLE_CHARS)
