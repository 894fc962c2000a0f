"""
Grade token parsing and grade-chain resolution.

A grade token is either a bare 1-2 digit number ("9", "12") or a two-letter
pay-plan prefix followed by a grade, optionally with a series code between
them:

    gs 11        -> 11
    gs-13        -> 13
    gs-0510-09   -> 09     (series 0510, grade 09)
    gs.0343.18   -> 18
    wg 7         -> 7

A digit run is always read to its end before its length is checked, which is
what separates a series code from a grade: "gs-123" is a series code with no
grade and is rejected rather than read as grade "12".

A grade chain is a sequence of tokens separated by "/" or "," ("gs-11/12/13",
"gs-5 / gs-6 / gs-7"). Chains describe ladders, so the last grade wins.
"""

from dataclasses import dataclass
from typing import Optional

from fplex.contexts.extraction.exceptions import NoGradeToken
from fplex.contexts.extraction.grade_patterns import GradeTokenPatterns
from fplex.contexts.extraction.text_cursor import (
    match_literal,
    match_one_of,
    skip_spaces,
    take_digits,
    take_letters,
)


@dataclass(frozen=True)
class GradeToken:
    """
    A parsed grade.

    Attributes:
        value: Grade digits exactly as written ("09", "7")
        start: Offset of the first grade digit
        end: Offset immediately after the grade (where parsing resumes)
    """

    value: str
    start: int
    end: int


def parse_grade_token(text: str, pos: int = 0) -> GradeToken:
    """
    Parse one grade token at pos.

    Args:
        text: Text being scanned (case is ignored)
        pos: Cursor at which the token must start

    Returns:
        GradeToken for the grade digits

    Raises:
        NoGradeToken: If the text at pos is not grade-shaped
    """
    patterns = GradeTokenPatterns()

    # Bare grade: "9", "12"
    end = take_digits(text, pos, patterns.MAX_GRADE_DIGITS)
    if end is not None:
        return GradeToken(text[pos:end], pos, end)

    cursor = take_letters(text, pos, patterns.PAY_PLAN_LENGTH)
    if cursor is None:
        raise NoGradeToken("Expected a grade or a two-letter pay plan", text, pos)

    separator = None
    matched = match_one_of(text, cursor, patterns.PAY_PLAN_SEPARATORS)
    if matched is not None:
        separator, cursor = matched
        extra_space = match_literal(text, cursor, " ")
        if extra_space is not None:
            cursor = extra_space

    if separator is not None and separator in patterns.SERIES_SEPARATORS:
        return _parse_series_grade(text, cursor, separator)

    end = take_digits(text, cursor, patterns.MAX_GRADE_DIGITS)
    if end is None:
        raise NoGradeToken("Expected a 1-2 digit grade after pay plan", text, cursor)
    return GradeToken(text[cursor:end], cursor, end)


def _parse_series_grade(text: str, pos: int, separator: str) -> GradeToken:
    """Parse "SERIES<sep>GRADE" or a bare grade after a "-" or "." separator."""
    patterns = GradeTokenPatterns()

    series_end = take_digits(text, pos, patterns.MAX_SERIES_DIGITS)
    if series_end is None:
        raise NoGradeToken("Expected a series code or grade", text, pos)

    grade_start = match_literal(text, series_end, separator)
    if grade_start is not None:
        grade_end = take_digits(text, grade_start, patterns.MAX_GRADE_DIGITS)
        if grade_end is not None:
            return GradeToken(text[grade_start:grade_end], grade_start, grade_end)

    if series_end - pos <= patterns.MAX_GRADE_DIGITS:
        return GradeToken(text[pos:series_end], pos, series_end)

    raise NoGradeToken("Series code without a grade", text, pos)


def resolve_grade_chain(text: str, pos: int = 0) -> GradeToken:
    """
    Parse a grade token and any alternatives chained after it.

    After the first token, repeatedly skips spaces, an optional "," or "/",
    and spaces again, then tries another token. Each success replaces the
    previous one. Text after the last good token is left unconsumed.

    Args:
        text: Text being scanned
        pos: Cursor at which the first token must start

    Returns:
        The last GradeToken in the chain

    Raises:
        NoGradeToken: If not even the first token parses

    Example:
        >>> resolve_grade_chain("gs-11/12/13 series").value
        '13'
    """
    separators = GradeTokenPatterns.CHAIN_SEPARATORS
    best = parse_grade_token(text, pos)

    while True:
        cursor = skip_spaces(text, best.end)
        matched = match_one_of(text, cursor, separators)
        if matched is not None:
            cursor = skip_spaces(text, matched[1])

        try:
            best = parse_grade_token(text, cursor)
        except NoGradeToken:
            return best


def max_grade(text: str) -> Optional[str]:
    """
    Value of the grade chain at the start of text, or None if there is none.

    Example:
        >>> max_grade("gs-5 / gs-6 / gs-7")
        '7'
    """
    try:
        return resolve_grade_chain(text).value
    except NoGradeToken:
        return None
