from __future__ import annotations

from csv_insight.charts import dataset_to_csv, export_filename, process_chart_data, rows_to_csv
from csv_insight.config import NO_LIMIT
from csv_insight.ingest import build_dataset, parse_csv
from csv_insight.models import ChartSpec, ParseSettings, SortOrder


def _pairs(rows: list[dict], x: str, y: str) -> set[tuple[str, float]]:
    return {(str(r[x]), float(r[y])) for r in rows}


def test_rows_are_written_fully_quoted() -> None:
    rows = [{"Cat": "A", "Val": 13.0}, {"Cat": "B", "Val": 5.0}]
    assert rows_to_csv(rows) == '"Cat","Val"\n"A","13.0"\n"B","5.0"\n'


def test_empty_rows_export_as_empty_text() -> None:
    assert rows_to_csv([]) == ""


def test_aggregated_export_round_trips() -> None:
    ds = build_dataset(
        ["Region", "Revenue"],
        [["North", "10"], ["South", "5,5"], ["North", "3"], ["East, Coast", "7"]],
    )
    chart = ChartSpec(x_axis="region", y_axis="revenue", aggregation="sum")
    rows = process_chart_data(ds, chart, sort_order=SortOrder.DESC)

    for delimiter in (",", ";"):
        text = rows_to_csv(rows, delimiter=delimiter)
        reparsed = parse_csv(text, ParseSettings(delimiter=delimiter))
        back = process_chart_data(
            reparsed,
            ChartSpec(x_axis="Region", y_axis="Revenue"),
            limit=NO_LIMIT,
        )
        assert _pairs(back, "Region", "Revenue") == _pairs(rows, "Region", "Revenue")


def test_count_export_round_trips() -> None:
    ds = build_dataset(["Dept"], [["HR"], ["Ops"], ["HR"]])
    rows = process_chart_data(ds, ChartSpec(x_axis="dept", aggregation="count"))
    reparsed = parse_csv(rows_to_csv(rows), ParseSettings(delimiter=","))
    assert reparsed.headers == ["Dept", "count"]
    assert reparsed.rows == [["HR", "2"], ["Ops", "1"]]


def test_export_filename_replaces_whitespace() -> None:
    assert export_filename("Revenue by  Region") == "Revenue_by_Region.csv"
    assert export_filename("   ") == "chart.csv"


def test_dataset_to_csv_reparses_to_same_dataset() -> None:
    ds = build_dataset(["Name", "Note"], [["Ada", 'said "hi", twice'], ["Bob", ""]])
    again = parse_csv(dataset_to_csv(ds), ParseSettings(delimiter=","))
    assert again.headers == ds.headers
    assert again.rows == ds.rows
