from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer

from .charts import (
    dataset_to_csv,
    load_suggestions,
    process_chart_data,
    rows_to_csv,
)
from .config import default_chart_limit
from .ingest import parse_csv
from .models import Aggregation, ChartSpec, Dataset, ParseSettings, SortOrder
from .profile import generate_data_summary, profile_dataset
from .samples import SAMPLE_DATASETS, generate_dataset_by_id
from .utils import read_text

app = typer.Typer(add_completion=False, help="csv-insight: parse, profile and chart delimited text")

_DELIMITER_HELP = "Field delimiter (default: auto-detect from the first 2000 characters)"


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _load_dataset(
    data: Path,
    delimiter: str,
    no_header: bool,
    keep_empty_lines: bool,
    encoding: str,
) -> Dataset:
    settings = ParseSettings(
        delimiter=delimiter.replace("\\t", "\t"),
        has_header=not no_header,
        skip_empty_lines=not keep_empty_lines,
        encoding=encoding,
    )
    text = read_text(data, encoding=settings.encoding)
    return parse_csv(text, settings)


@app.command()
def inspect(
    data: Path = typer.Argument(..., help="Path to a delimited text file"),
    delimiter: str = typer.Option("", "--delimiter", "-d", help=_DELIMITER_HELP),
    no_header: bool = typer.Option(False, "--no-header", help="Treat the first row as data"),
    keep_empty_lines: bool = typer.Option(False, "--keep-empty-lines", help="Keep blank lines as rows"),
    encoding: str = typer.Option("UTF-8", "--encoding", help="Text encoding of the file"),
    as_json: bool = typer.Option(False, "--json", help="Print the full dataset as JSON"),
):
    """
    Parse a file and print its columns with their inferred types.
    """
    try:
        dataset = _load_dataset(data, delimiter, no_header, keep_empty_lines, encoding)
        if as_json:
            typer.echo(dataset.model_dump_json(by_alias=True, indent=2))
            return
        typer.echo(f"Rows: {dataset.row_count}")
        typer.echo(f"Columns: {len(dataset.columns)}")
        for col in dataset.columns:
            typer.echo(f"  [{col.index}] {col.name}: {col.type.value}")
    except FileNotFoundError as e:
        typer.echo(f"ERROR: {e}")
        raise typer.Exit(code=2)
    except Exception as e:
        typer.echo(f"ERROR: {e}")
        raise typer.Exit(code=1)


@app.command()
def summary(
    data: Path = typer.Argument(..., help="Path to a delimited text file"),
    delimiter: str = typer.Option("", "--delimiter", "-d", help=_DELIMITER_HELP),
    no_header: bool = typer.Option(False, "--no-header", help="Treat the first row as data"),
    keep_empty_lines: bool = typer.Option(False, "--keep-empty-lines", help="Keep blank lines as rows"),
    encoding: str = typer.Option("UTF-8", "--encoding", help="Text encoding of the file"),
    as_json: bool = typer.Option(False, "--json", help="Print the machine-readable profile instead"),
):
    """
    Print the statistical digest handed to the text-generation collaborator.
    """
    try:
        dataset = _load_dataset(data, delimiter, no_header, keep_empty_lines, encoding)
        if as_json:
            typer.echo(json.dumps(profile_dataset(dataset), indent=2, sort_keys=True))
        else:
            typer.echo(generate_data_summary(dataset))
    except FileNotFoundError as e:
        typer.echo(f"ERROR: {e}")
        raise typer.Exit(code=2)
    except Exception as e:
        typer.echo(f"ERROR: {e}")
        raise typer.Exit(code=1)


@app.command()
def chart(
    data: Path = typer.Argument(..., help="Path to a delimited text file"),
    x: Optional[str] = typer.Option(None, "--x", help="X-axis column (case-insensitive)"),
    y: Optional[str] = typer.Option(None, "--y", help="Y-axis column (case-insensitive)"),
    agg: Aggregation = typer.Option(Aggregation.NONE, "--agg", help="Aggregation kind", case_sensitive=False),
    sort: SortOrder = typer.Option(SortOrder.NONE, "--sort", help="Sort by y-value", case_sensitive=False),
    limit: Optional[int] = typer.Option(None, "--limit", help="Maximum rows (default: 20)"),
    suggestions: Optional[Path] = typer.Option(
        None, "--suggestions", help="JSON file of AI chart suggestions to evaluate instead of --x/--y"
    ),
    export: Optional[Path] = typer.Option(None, "--export", help="Write the rows as CSV to this path"),
    delimiter: str = typer.Option("", "--delimiter", "-d", help=_DELIMITER_HELP),
    no_header: bool = typer.Option(False, "--no-header", help="Treat the first row as data"),
    keep_empty_lines: bool = typer.Option(False, "--keep-empty-lines", help="Keep blank lines as rows"),
    encoding: str = typer.Option("UTF-8", "--encoding", help="Text encoding of the file"),
):
    """
    Aggregate a file into plotting rows and print them as JSON.

    An empty list means the chart cannot be rendered (unknown x column,
    nothing numeric to plot, or an empty file).
    """
    try:
        dataset = _load_dataset(data, delimiter, no_header, keep_empty_lines, encoding)
        row_limit = default_chart_limit() if limit is None else limit

        if suggestions is not None:
            out = {
                s.id: process_chart_data(dataset, s, sort_order=sort, limit=row_limit)
                for s in load_suggestions(suggestions)
            }
            typer.echo(json.dumps(out, indent=2))
            return

        if not x:
            typer.echo("ERROR: --x is required unless --suggestions is given", err=True)
            raise typer.Exit(code=1)

        spec = ChartSpec(x_axis=x, y_axis=y, aggregation=agg)
        rows = process_chart_data(dataset, spec, sort_order=sort, limit=row_limit)

        if export is not None:
            export.parent.mkdir(parents=True, exist_ok=True)
            export.write_text(rows_to_csv(rows), encoding="utf-8")
            typer.echo(f"Wrote {len(rows)} rows to {export}")
        else:
            typer.echo(json.dumps(rows, indent=2))
    except typer.Exit:
        raise
    except FileNotFoundError as e:
        typer.echo(f"ERROR: {e}")
        raise typer.Exit(code=2)
    except Exception as e:
        typer.echo(f"ERROR: {e}")
        raise typer.Exit(code=1)


@app.command()
def sample(
    name: str = typer.Argument(..., help="Sample dataset id (sales, employees, traffic)"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for reproducible output"),
    out: Optional[Path] = typer.Option(None, "--out", help="Write CSV here instead of stdout"),
):
    """
    Generate one of the built-in demo datasets as CSV.
    """
    dataset = generate_dataset_by_id(name, seed=seed)
    if dataset is None:
        known = ", ".join(s.id for s in SAMPLE_DATASETS)
        typer.echo(f"Unknown sample dataset '{name}'. Available: {known}", err=True)
        raise typer.Exit(code=1)

    text = dataset_to_csv(dataset)
    if out is None:
        typer.echo(text, nl=False)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text, encoding="utf-8")
    typer.echo(f"Wrote {dataset.row_count} rows to {out}")
