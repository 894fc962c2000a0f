"""
Top-level grade extraction.

Scans text for the earliest offset where a phrase, an optional connective and
a grade chain all parse. The "full performance level" family is scanned first
across the whole text; only if it never succeeds is the "target" family
scanned.

Everything here is pure: no I/O, no logging, no configuration. Input is
expected to be normalized (see intake.normalizer), although matching itself
ignores case.
"""

from dataclasses import dataclass
from typing import Optional

from fplex.contexts.extraction.connective import skip_connective
from fplex.contexts.extraction.exceptions import NoGradeToken
from fplex.contexts.extraction.grade_parser import GradeToken, resolve_grade_chain
from fplex.contexts.extraction.grade_patterns import FPL_FAMILY, TARGET_FAMILY
from fplex.contexts.extraction.phrase_matcher import PHRASE_MATCHERS, PhraseMatch, find_phrase

# Families are scanned in this order, each over the whole text
SCAN_ORDER = (FPL_FAMILY, TARGET_FAMILY)


@dataclass(frozen=True)
class GradeMatch:
    """
    A complete phrase + connective + grade parse.

    Attributes:
        phrase: The phrase that introduced the grade
        grade: The winning (last) token of the grade chain
    """

    phrase: PhraseMatch
    grade: GradeToken

    @property
    def value(self) -> str:
        return self.grade.value

    @property
    def family(self) -> str:
        return self.phrase.family

    @property
    def start(self) -> int:
        """Offset where the whole match starts (the phrase)."""
        return self.phrase.start

    @property
    def end(self) -> int:
        """Offset immediately after the winning grade."""
        return self.grade.end


@dataclass(frozen=True)
class MatchSpan:
    """
    Decomposition of a text around its extracted grade, for highlighting.

    Invariant: prefix + matched + suffix == the text it was built from.
    """

    prefix: str
    matched: str
    suffix: str

    @property
    def text(self) -> str:
        return f"{self.prefix}{self.matched}{self.suffix}"


def match_grade_at(text: str, pos: int, family: str = FPL_FAMILY) -> Optional[GradeMatch]:
    """
    Try a full phrase + connective + grade-chain parse anchored at pos.

    Args:
        text: Text to scan
        pos: Offset the phrase must start at
        family: Phrase family to try

    Returns:
        GradeMatch, or None if any step fails at this offset
    """
    phrase = PHRASE_MATCHERS[family](text, pos)
    if phrase is None:
        return None
    return _match_grade_after(text, phrase)


def _match_grade_after(text: str, phrase: PhraseMatch) -> Optional[GradeMatch]:
    """Connective + grade chain following an already matched phrase."""
    cursor = skip_connective(text, phrase.end)
    try:
        grade = resolve_grade_chain(text, cursor)
    except NoGradeToken:
        return None

    return GradeMatch(phrase=phrase, grade=grade)


def scan_for_grade(text: str, family: str = FPL_FAMILY) -> Optional[GradeMatch]:
    """
    Earliest offset at which a family fully parses.

    Jumps from phrase to phrase; when no grade follows a phrase the search
    resumes one character after where that phrase started.
    """
    pos = 0
    while True:
        phrase = find_phrase(text, family, pos)
        if phrase is None:
            return None

        match = _match_grade_after(text, phrase)
        if match is not None:
            return match
        pos = phrase.start + 1


def find_grade_match(text: str) -> Optional[GradeMatch]:
    """
    Find the grade match for a text, trying each phrase family in turn.

    Args:
        text: Normalized record text

    Returns:
        GradeMatch with phrase and grade offsets, or None if no grade is found
    """
    for family in SCAN_ORDER:
        match = scan_for_grade(text, family)
        if match is not None:
            return match
    return None


def extract_grade(text: str) -> Optional[str]:
    """
    Extract the full performance level grade from text.

    Args:
        text: Normalized record text

    Returns:
        Grade digits (e.g. "09", "13"), or None if absent

    Examples:
        >>> extract_grade("fpl: gs-13")
        '13'
        >>> extract_grade("full performance level is at GS-0510-09")
        '09'
        >>> extract_grade("this is unrelated text") is None
        True
    """
    match = find_grade_match(text)
    return match.value if match is not None else None


def match_span(text: str, match: GradeMatch) -> MatchSpan:
    """
    Split text around the grade digits of a match.

    Args:
        text: The exact text the match was found in
        match: Result of find_grade_match(text)

    Returns:
        MatchSpan whose parts concatenate back to text
    """
    start, end = match.grade.start, match.grade.end
    return MatchSpan(prefix=text[:start], matched=text[start:end], suffix=text[end:])
