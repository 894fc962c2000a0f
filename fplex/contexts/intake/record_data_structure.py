"""
Record data structure for the Intake context.

A Record is the unit of work for extraction: an integer identifier and the
free-form position description text it refers to.
"""

from dataclasses import dataclass, replace
from typing import Sequence

from fplex.contexts.intake.normalizer import normalize_text


@dataclass(frozen=True)
class Record:
    """
    One input row: identifier plus free-form classification text.

    The identifier is echoed to the output untouched; only the text is
    inspected by the extraction context.
    """

    id: int
    text: str

    @classmethod
    def from_row(cls, row: Sequence[str]) -> "Record":
        """
        Build a Record from a two-column row (id, text).

        Raises:
            ValueError: If the row does not have exactly two columns or the
                identifier is not an integer
        """
        if len(row) != 2:
            raise ValueError(f"Expected 2 columns (id, text), got {len(row)}")

        raw_id, text = row
        try:
            record_id = int(raw_id.strip())
        except ValueError:
            raise ValueError(f"Record id is not an integer: {raw_id!r}") from None

        return cls(id=record_id, text=text)

    @property
    def normalized_text(self) -> str:
        """Whitespace-collapsed, lowercased text."""
        return normalize_text(self.text)

    def normalized(self) -> "Record":
        """Copy of this record with its text replaced by the normalized form."""
        return replace(self, text=self.normalized_text)
