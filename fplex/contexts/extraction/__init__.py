"""
Extraction Context

Responsibilities:
- Recognizes "full performance level" and "target grade" phrases in noisy text
- Skips connective clauses ("is at the", "of this position is", ...)
- Parses grade tokens and grade chains ("gs-0510-09", "gs-11/12/13")
- Runs extraction over record batches

Owns: The grade-extraction pattern engine
Never: Reads files or formats output
"""

from fplex.contexts.extraction.exceptions import NoGradeToken
from fplex.contexts.extraction.grade_extractor import (
    GradeMatch,
    MatchSpan,
    extract_grade,
    find_grade_match,
    match_span,
)
from fplex.contexts.extraction.grade_parser import (
    GradeToken,
    max_grade,
    parse_grade_token,
    resolve_grade_chain,
)
from fplex.contexts.extraction.grade_pipeline import GradeResult, extract_grades
from fplex.contexts.extraction.phrase_matcher import (
    PhraseMatch,
    match_fpl_phrase,
    match_target_phrase,
)

__all__ = [
    # Single-text extraction
    "extract_grade",
    "find_grade_match",
    "match_span",
    "GradeMatch",
    "MatchSpan",
    # Building blocks
    "match_fpl_phrase",
    "match_target_phrase",
    "parse_grade_token",
    "resolve_grade_chain",
    "max_grade",
    "PhraseMatch",
    "GradeToken",
    "NoGradeToken",
    # Batch extraction
    "extract_grades",
    "GradeResult",
]
