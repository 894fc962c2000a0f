"""
CSV ingestion for the Intake context.

Source files are headerless two-column CSV: an integer id and the free-form
text. Text fields may span multiple lines when quoted.
"""

import csv
from pathlib import Path
from typing import Iterator

from fplex.contexts.intake.exceptions import RecordIngestionError
from fplex.contexts.intake.record_data_structure import Record


def iter_records(path: Path) -> Iterator[Record]:
    """
    Lazily read records from a headerless (id, text) CSV file.

    Blank lines are skipped.

    Args:
        path: Path to the CSV file

    Yields:
        Record for each row, in file order

    Raises:
        RecordIngestionError: If the file is missing/unreadable or a row is malformed
    """
    path = Path(path)

    try:
        with path.open(newline="", encoding="utf-8") as f:
            reader = csv.reader(f)
            for row in reader:
                if not row:
                    continue
                try:
                    yield Record.from_row(row)
                except ValueError as e:
                    raise RecordIngestionError(
                        str(e), path=path, line_number=reader.line_num, row=row
                    ) from e
    except OSError as e:
        raise RecordIngestionError(f"Cannot read records: {e.strerror or e}", path=path) from e
    except (csv.Error, UnicodeDecodeError) as e:
        raise RecordIngestionError(f"Malformed CSV: {e}", path=path) from e


def read_records(path: Path) -> list[Record]:
    """
    Read all records from a headerless (id, text) CSV file.

    Args:
        path: Path to the CSV file

    Returns:
        Records in file order

    Raises:
        RecordIngestionError: If the file is missing/unreadable or a row is malformed
    """
    return list(iter_records(path))
