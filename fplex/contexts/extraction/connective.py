"""Connective clause skipping between a phrase and its grade."""

from typing import Optional

from fplex.contexts.extraction.grade_patterns import ConnectivePatterns
from fplex.contexts.extraction.text_cursor import match_first, skip_spaces


def match_connective(text: str, pos: int) -> tuple[Optional[str], int]:
    """
    Consume spaces, at most one connective clause, then spaces again.

    Never fails: when no clause is present only the spaces are consumed.

    Args:
        text: Text being scanned
        pos: Cursor immediately after a phrase

    Returns:
        (clause or None, cursor after the consumed text)

    Example:
        >>> match_connective("fpl is at the gs-9", 3)
        ('is at the', 14)
    """
    cursor = skip_spaces(text, pos)

    clause = None
    matched = match_first(text, cursor, ConnectivePatterns.CLAUSES)
    if matched is not None:
        clause, cursor = matched

    return clause, skip_spaces(text, cursor)


def skip_connective(text: str, pos: int) -> int:
    """Cursor after the optional connective clause at pos."""
    _, cursor = match_connective(text, pos)
    return cursor
