"""
Text normalizer for the Intake context.

Extraction assumes its input has been normalized: whitespace runs collapsed
to single spaces, leading/trailing whitespace removed, and everything lowercased.

Design principle: Normalize BEFORE matching, so the matchers only ever need to
handle single spaces between words.
"""

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from fplex.contexts.intake.record_data_structure import Record


def normalize_text(text: str) -> str:
    """
    Collapse whitespace and lowercase text.

    Idempotent: normalize_text(normalize_text(s)) == normalize_text(s).

    Args:
        text: Raw record text

    Returns:
        Normalized text

    Example:
        >>> normalize_text("\\n\\nabc   \\t  DEF 1\\n2\\t3\\n  ")
        'abc def 1 2 3'
    """
    return " ".join(text.split()).lower()


def deduplicate_records(records: Iterable["Record"]) -> list["Record"]:
    """
    Reduce records to one representative per distinct normalized text.

    The representative is the first record (in input order) with that text,
    and its text is replaced by the normalized form. The result is sorted by
    normalized text.

    Args:
        records: Records in input order

    Returns:
        Deduplicated records, sorted by normalized text
    """
    representatives: dict[str, "Record"] = {}

    for record in records:
        normalized = record.normalized()
        # First occurrence wins
        representatives.setdefault(normalized.text, normalized)

    return [representatives[text] for text in sorted(representatives)]
