from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest
from pydantic import ValidationError

from csv_insight.ingest import build_dataset, parse_csv, read_rows
from csv_insight.models import ColumnDescriptor, ColumnType, Dataset, ParseSettings

FIXTURE = Path(__file__).parent / "fixtures" / "sales_small.csv"


def test_parses_header_rows_and_types() -> None:
    ds = parse_csv("Region,Sales\nNorth,10\nSouth,5\n")
    assert ds.headers == ["Region", "Sales"]
    assert ds.rows == [["North", "10"], ["South", "5"]]
    assert ds.row_count == 2
    assert [c.type for c in ds.columns] == [ColumnType.STRING, ColumnType.NUMBER]
    assert [c.index for c in ds.columns] == [0, 1]


def test_fixture_auto_detects_semicolon_and_quoting() -> None:
    ds = parse_csv(FIXTURE.read_text(encoding="utf-8"))
    assert ds.headers == ["Date", "Region", "Product", "Units", "Revenue", "Returned"]
    assert ds.row_count == 6
    assert ds.rows[3][2] == 'Monitor; 27"'
    types = {c.name: c.type for c in ds.columns}
    assert types == {
        "Date": ColumnType.DATE,
        "Region": ColumnType.STRING,
        "Product": ColumnType.STRING,
        "Units": ColumnType.NUMBER,
        # "n/a" keeps the whole column from being numeric.
        "Revenue": ColumnType.STRING,
        "Returned": ColumnType.BOOLEAN,
    }


def test_blank_header_names_get_placeholders() -> None:
    ds = parse_csv("Name, ,\nA,1,x\n")
    assert ds.headers == ["Name", "Column 2", "Column 3"]


def test_header_names_are_trimmed() -> None:
    ds = parse_csv("  Name ,Age\nA,1\n")
    assert ds.headers == ["Name", "Age"]


def test_without_header_first_row_is_data() -> None:
    ds = parse_csv("a,1\nb,2\n", ParseSettings(has_header=False))
    assert ds.headers == ["Column 1", "Column 2"]
    assert ds.row_count == 2
    assert ds.rows[0] == ["a", "1"]


def test_empty_input_yields_empty_dataset() -> None:
    for text in ("", "\n\n\n"):
        ds = parse_csv(text)
        assert ds == Dataset.empty()
        assert ds.row_count == 0


def test_rows_are_padded_and_truncated_to_header_width() -> None:
    ds = parse_csv("a,b,c\n1\n1,2,3,4\n")
    assert ds.rows == [["1", "", ""], ["1", "2", "3"]]
    assert all(len(r) == len(ds.headers) for r in ds.rows)


def test_duplicate_headers_are_made_unique() -> None:
    ds = parse_csv("x,x,X,x\n1,2,3,4\n")
    assert ds.headers == ["x", "x.1", "X", "x.2"]
    assert [c.name for c in ds.columns] == ds.headers


def test_explicit_delimiter_overrides_detection() -> None:
    ds = parse_csv("a;b,c\n1;2,3\n", ParseSettings(delimiter=","))
    assert ds.headers == ["a;b", "c"]


def test_kept_empty_lines_become_rows() -> None:
    ds = parse_csv("a,b\n\n1,2\n", ParseSettings(skip_empty_lines=False))
    assert ds.rows == [["", ""], ["1", "2"]]


@pytest.mark.parametrize("has_header", [True, False])
def test_row_count_matches_parsed_rows(has_header: bool) -> None:
    text = FIXTURE.read_text(encoding="utf-8")
    parsed = read_rows(text, ";")
    ds = parse_csv(text, ParseSettings(delimiter=";", has_header=has_header))
    assert len(parsed) == ds.row_count + (1 if has_header else 0)


def test_settings_reject_multi_character_delimiter() -> None:
    with pytest.raises(ValidationError):
        ParseSettings(delimiter="::")


def test_settings_accept_collaborator_keys() -> None:
    s = ParseSettings.model_validate({"delimiter": "|", "hasHeader": False, "skipEmptyLines": False})
    assert s.has_header is False
    assert s.skip_empty_lines is False
    assert s.encoding == "UTF-8"


def test_find_column_is_case_and_whitespace_insensitive() -> None:
    ds = build_dataset(["Region", "Sales"], [["North", "1"]])
    assert ds.find_column("  region ").name == "Region"
    assert ds.find_column("SALES").index == 1
    assert ds.find_column("profit") is None
    assert ds.find_column(None) is None


def test_column_descriptors_are_immutable() -> None:
    ds = build_dataset(["a"], [["1"]])
    with pytest.raises(ValidationError):
        ds.columns[0].name = "b"


def test_dataset_serializes_with_camel_case_keys() -> None:
    ds = build_dataset(["a"], [["1"]])
    dumped = ds.model_dump(by_alias=True, mode="json")
    assert dumped["rowCount"] == 1
    assert dumped["columns"] == [{"name": "a", "type": "boolean", "index": 0}]


def test_to_frame_keeps_raw_strings() -> None:
    ds = build_dataset(["a", "b"], [["1", "x"], ["2", ""]])
    df = ds.to_frame()
    assert list(df.columns) == ["a", "b"]
    assert df.shape == (2, 2)
    assert df.loc[0, "a"] == "1"
    assert isinstance(Dataset.empty().to_frame(), pd.DataFrame)


def test_large_cell_does_not_drop_rows() -> None:
    big = "z" * 200_000
    ds = parse_csv(f'id,note\n1,"{big}"\n2,a\n3,b\n')
    assert ds.row_count == 3
    assert ds.rows[0][1] == big


def test_dataset_fits_ragged_rows_and_recounts() -> None:
    ds = Dataset(
        headers=["Cat", "Val"],
        rows=[["A", "1"], ["B"], ["C", "3", "extra"]],
        columns=[
            ColumnDescriptor(name="Cat", type=ColumnType.STRING, index=0),
            ColumnDescriptor(name="Val", type=ColumnType.NUMBER, index=1),
        ],
        row_count=7,
    )
    assert ds.rows == [["A", "1"], ["B", ""], ["C", "3"]]
    assert ds.row_count == 3
