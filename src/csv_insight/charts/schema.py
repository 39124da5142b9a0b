from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from pydantic import ValidationError

from ..models import ChartSuggestion

# Keys the AI collaborator uses, mapped onto ChartSpec field names.
_KEY_ALIASES: dict[str, str] = {
    "xColumn": "x_axis",
    "xAxis": "x_axis",
    "x_axis": "x_axis",
    "yColumn": "y_axis",
    "yAxis": "y_axis",
    "y_axis": "y_axis",
}


class ChartSuggestionError(ValueError):
    """Raised when a chart suggestion payload violates the contract."""


def _entries(obj: Any) -> list[Any]:
    if obj is None or obj == {} or obj == []:
        return []
    if isinstance(obj, list):
        return obj
    if not isinstance(obj, Mapping):
        raise ChartSuggestionError("chart suggestions must be a JSON object or list.")
    if "charts" in obj:
        charts = obj.get("charts")
        if charts is None:
            return []
        if not isinstance(charts, list):
            raise ChartSuggestionError("'charts' must be a list.")
        return charts
    if "chart" in obj:
        return [obj.get("chart")]
    raise ChartSuggestionError("expected a 'charts' list or a single 'chart' object.")


def _normalize_entry(i: int, entry: Any) -> dict[str, Any]:
    if not isinstance(entry, Mapping):
        raise ChartSuggestionError(f"chart[{i}] must be an object.")

    norm: dict[str, Any] = {}
    for k, v in entry.items():
        if k in _KEY_ALIASES:
            field = _KEY_ALIASES[k]
            # First alias wins; "xColumn" and "xAxis" may both be present.
            norm.setdefault(field, v)
        elif k == "dataConfig" or k == "groupColumn":
            continue
        else:
            norm[k] = v

    x = norm.get("x_axis")
    if not isinstance(x, str) or not x.strip():
        raise ChartSuggestionError(f"chart[{i}] missing required field 'xColumn'.")
    y = norm.get("y_axis")
    if y is not None and not isinstance(y, str):
        raise ChartSuggestionError(f"chart[{i}].yColumn must be a string.")

    if not norm.get("id"):
        norm["id"] = f"chart-{i + 1}"
    return norm


def validate_suggestions_obj(obj: Any) -> list[ChartSuggestion]:
    """Validate and normalize chart suggestions from the AI collaborator.

    Accepts {"charts": [...]}, {"chart": {...}} or a bare list. Empty input is
    accepted and yields []. Column names are not checked here; they are
    resolved against the dataset when the chart is aggregated.
    """
    out: list[ChartSuggestion] = []
    for i, entry in enumerate(_entries(obj)):
        norm = _normalize_entry(i, entry)
        try:
            out.append(ChartSuggestion.model_validate(norm))
        except ValidationError as e:
            raise ChartSuggestionError(f"chart[{i}] is invalid: {e}") from e
    return out


def load_suggestions(path: Path) -> list[ChartSuggestion]:
    """Load chart suggestions JSON from disk and validate."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return []
    except json.JSONDecodeError as e:
        raise ChartSuggestionError(f"chart suggestions are not valid JSON: {e}") from e

    return validate_suggestions_obj(raw)
