from __future__ import annotations

import json

from csv_insight.config import SummaryConfig
from csv_insight.ingest import build_dataset
from csv_insight.models import ColumnDescriptor, ColumnType, Dataset
from csv_insight.profile import generate_data_summary, profile_dataset


def _small() -> Dataset:
    return build_dataset(
        ["Region", "Sales", "Date", "Active"],
        [
            ["North", "10", "2024-01-01", "yes"],
            ["South", "20.5", "2024-01-02", "no"],
            ["North", "", "2024-01-03", "yes"],
        ],
    )


def test_summary_text_matches_expected_layout() -> None:
    expected = "\n".join(
        [
            "Dataset with 3 rows and 4 columns.",
            "",
            "Columns:",
            "- Region (text): 2 unique values, examples: North, South",
            "- Sales (number): min=10.00, max=20.50, avg=15.25, 2 values",
            "- Date (date): 3 values",
            "- Active (boolean): 3 values",
            "",
            "First 5 rows sample:",
            "Row 1: Region: North, Sales: 10, Date: 2024-01-01, Active: yes",
            "Row 2: Region: South, Sales: 20.5, Date: 2024-01-02, Active: no",
            "Row 3: Region: North, Sales: , Date: 2024-01-03, Active: yes",
        ]
    )
    assert generate_data_summary(_small()) == expected


def test_summary_is_stable() -> None:
    ds = _small()
    assert generate_data_summary(ds) == generate_data_summary(ds.model_copy(deep=True))


def test_summary_is_bounded() -> None:
    rows = [[f"name{i}", str(i)] for i in range(20)]
    text = generate_data_summary(build_dataset(["Name", "N"], rows))
    assert "- Name (text): 20 unique values, examples: name0, name1, name2, name3, name4" in text
    assert "Row 5:" in text
    assert "Row 6:" not in text


def test_summary_bounds_are_configurable() -> None:
    rows = [[f"name{i}"] for i in range(10)]
    text = generate_data_summary(build_dataset(["Name"], rows), SummaryConfig(max_examples=2, sample_rows=1))
    assert "examples: name0, name1\n" in text
    assert "First 1 rows sample:" in text
    assert "Row 2:" not in text


def test_numeric_column_without_valid_values() -> None:
    ds = Dataset(
        headers=["X"],
        rows=[["abc"], [""]],
        columns=[ColumnDescriptor(name="X", type=ColumnType.NUMBER, index=0)],
        row_count=2,
    )
    assert "- X (number): no valid values" in generate_data_summary(ds)


def test_empty_dataset_summary() -> None:
    assert generate_data_summary(Dataset.empty()) == (
        "Dataset with 0 rows and 0 columns.\n\nColumns:\n\nFirst 5 rows sample:"
    )


def test_profile_payload_is_json_serializable() -> None:
    payload = profile_dataset(_small())
    assert payload["_schema"] == "csv_insight.data_profile.v1"
    assert payload["rows"] == 3
    assert payload["cols"] == 4

    sales = payload["columns"][1]
    assert sales == {
        "name": "Sales",
        "type": "number",
        "non_empty_count": 2,
        "valid_count": 2,
        "min": 10.0,
        "max": 20.5,
        "mean": 15.25,
    }
    region = payload["columns"][0]
    assert region["unique_count"] == 2
    assert region["examples"] == ["North", "South"]

    json.dumps(payload, sort_keys=True)
