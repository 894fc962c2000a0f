"""Custom exceptions for the intake context with source references."""

from pathlib import Path
from typing import Optional


class RecordIngestionError(Exception):
    """
    Exception raised when source records cannot be read or are malformed.

    This is an I/O boundary failure. It is never used to signal that a record
    simply has no grade in it.

    Attributes:
        message: Error description
        path: Path to the source file
        line_number: 1-based line number of the offending row (if known)
        row: The raw row that failed to parse (if known)
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        line_number: Optional[int] = None,
        row: Optional[list[str]] = None,
    ):
        self.message = message
        self.path = path
        self.line_number = line_number
        self.row = row

        parts = [message]

        if path is not None:
            location = f"{path}:{line_number}" if line_number is not None else str(path)
            parts.append(f"Source: {location}")

        if row is not None:
            snippet = repr(row)
            snippet = snippet[:200] + "..." if len(snippet) > 200 else snippet
            parts.append(f"Row: {snippet}")

        super().__init__("\n".join(parts))
