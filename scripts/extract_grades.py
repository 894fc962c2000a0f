#!/usr/bin/env python3
"""
Extract full performance level grades from a CSV of position descriptions.

Input is a headerless CSV with two columns: integer id and free-form text.

Usage:
    python scripts/extract_grades.py data/positions.csv                  # CSV: id,grade,text
    python scripts/extract_grades.py data/positions.csv --unique         # grade|text per distinct text
    python scripts/extract_grades.py data/positions.csv --unique --html -o outs/fpl.html
"""

import os
import sys
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from fplex.contexts.extraction import extract_grades
from fplex.contexts.extraction.logger import (
    _log_error,
    _log_info,
    setup_extraction_logger,
)
from fplex.contexts.intake import RecordIngestionError, read_records
from fplex.contexts.rendering import (
    HtmlReportRenderer,
    load_report_settings,
    write_grade_csv,
    write_grade_lines,
)
from fplex.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    help="Extract full performance level (FPL) grades from position descriptions",
    add_completion=False,
)


@app.command()
def main(
    input_path: Annotated[
        Path,
        typer.Argument(help="Headerless CSV file with id,text rows"),
    ],
    html: Annotated[
        bool,
        typer.Option("--html", help="Render an HTML report with highlighted grades"),
    ] = False,
    unique: Annotated[
        bool,
        typer.Option("--unique", help="Deduplicate by normalized text before extraction"),
    ] = False,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write to this file instead of stdout"),
    ] = None,
    settings_path: Annotated[
        Optional[Path],
        typer.Option("--settings", help="Report settings YAML (HTML only)"),
    ] = None,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Log directory (default: LOGS_PATH/extract_<timestamp>)"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show per-record debug output"),
    ] = False,
):
    """
    Extract grades and write them as CSV, "grade|text" lines, or HTML.

    Examples:\n

        $ python scripts/extract_grades.py positions.csv > grades.csv

        $ python scripts/extract_grades.py positions.csv --unique

        $ python scripts/extract_grades.py positions.csv --html -o report.html
    """
    if log_dir is None:
        log_dir = LOGS_PATH / f"extract_{now()}"
    setup_extraction_logger(log_dir, input_path, verbose=verbose)

    try:
        records = read_records(input_path)
    except RecordIngestionError as e:
        _log_error(f"Ingestion failed: {e.message}")
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    renderer = None
    if html:
        try:
            renderer = HtmlReportRenderer(settings=load_report_settings(settings_path))
        except (FileNotFoundError, ValueError) as e:
            _log_error(str(e))
            typer.echo(f"ERROR: {e}", err=True)
            raise typer.Exit(1)

    results = extract_grades(records, unique=unique)

    try:
        stream = output.open("w", newline="", encoding="utf-8") if output else sys.stdout
    except OSError as e:
        _log_error(f"Cannot write output: {e}")
        typer.echo(f"ERROR: Cannot write output: {e}", err=True)
        raise typer.Exit(1)

    try:
        if renderer is not None:
            stream.write(renderer.render(results, unique=unique))
        elif unique:
            write_grade_lines(results, stream)
        else:
            write_grade_csv(results, stream)
    finally:
        if output:
            stream.close()

    if output:
        _log_info(f"Output written to: {output}")


if __name__ == "__main__":
    app()
