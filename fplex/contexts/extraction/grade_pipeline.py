"""
Batch grade extraction over records.

Orchestrates intake (normalization, deduplication) and the pure extractor,
and logs a per-batch summary through the extraction logger.
"""

import time
from dataclasses import dataclass
from typing import Iterable, Optional

from fplex.contexts.extraction.grade_extractor import (
    GradeMatch,
    MatchSpan,
    find_grade_match,
    match_span,
)
from fplex.contexts.extraction.logger import (
    _log_debug,
    log_extraction_result,
    log_extraction_start,
)
from fplex.contexts.intake.normalizer import deduplicate_records, normalize_text
from fplex.contexts.intake.record_data_structure import Record


@dataclass
class GradeResult:
    """
    Extraction outcome for one record.

    Attributes:
        record_id: Identifier echoed from the input record
        text: Text to present (original text, or normalized text in unique mode)
        normalized_text: Text the matcher ran on; match offsets refer to it
        match: GradeMatch, or None when no grade was found
    """

    record_id: int
    text: str
    normalized_text: str
    match: Optional[GradeMatch] = None

    @property
    def grade(self) -> Optional[str]:
        return self.match.value if self.match is not None else None

    @property
    def grade_or_empty(self) -> str:
        return self.grade or ""

    def span(self) -> Optional[MatchSpan]:
        """Highlighting decomposition of normalized_text, if a grade was found."""
        if self.match is None:
            return None
        return match_span(self.normalized_text, self.match)


def extract_record(record: Record) -> GradeResult:
    """Run extraction on a single record's normalized text."""
    normalized = normalize_text(record.text)
    return GradeResult(
        record_id=record.id,
        text=record.text,
        normalized_text=normalized,
        match=find_grade_match(normalized),
    )


def extract_grades(records: Iterable[Record], unique: bool = False) -> list[GradeResult]:
    """
    Extract grades for a batch of records.

    Args:
        records: Records in input order
        unique: Deduplicate by normalized text first; results are then sorted by
            that text and carry it in place of the original

    Returns:
        One GradeResult per record (per distinct text in unique mode)
    """
    records = list(records)
    if unique:
        records = deduplicate_records(records)

    log_extraction_start(len(records), unique)
    start_time = time.time()

    results = []
    for record in records:
        result = extract_record(record)
        if result.match is not None:
            _log_debug(
                f"Record {result.record_id}: grade {result.grade} "
                f"({result.match.family} phrase '{result.match.phrase.phrase.strip()}')"
            )
        results.append(result)

    log_extraction_result(results, time.time() - start_time)

    return results
