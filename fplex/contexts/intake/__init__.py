"""
Intake Context

Responsibilities:
- Reads (id, text) records from headerless CSV sources
- Normalizes record text (whitespace collapsing + lowercasing)
- Deduplicates records by normalized text

Owns: Record model, ingestion errors, text normalization
Never: Decides what grade a record carries
"""

from fplex.contexts.intake.exceptions import RecordIngestionError
from fplex.contexts.intake.normalizer import deduplicate_records, normalize_text
from fplex.contexts.intake.record_data_structure import Record
from fplex.contexts.intake.record_reader import iter_records, read_records

__all__ = [
    "Record",
    "RecordIngestionError",
    "deduplicate_records",
    "iter_records",
    "normalize_text",
    "read_records",
]
