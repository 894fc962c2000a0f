"""
Phrase matching for grade extraction.

Recognizes the phrases that introduce a full performance level grade:
- "fpl", "full performance level", "full-perf.", "poll promotion level", ...
- "target", "targeted to", "target position posted as at a", ...

Matchers are anchored: they only look at the given offset. find_phrase locates
the next phrase of a family; grade_extractor decides whether a grade follows
it and resumes the search one character later when it does not.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from fplex.contexts.extraction.grade_patterns import (
    FPL_FAMILY,
    TARGET_FAMILY,
    FplPhrasePatterns,
    TargetPhrasePatterns,
)
from fplex.contexts.extraction.text_cursor import (
    match_first,
    match_literal,
    match_one_of,
    skip_spaces,
)


@dataclass(frozen=True)
class PhraseMatch:
    """
    A phrase found at a specific offset.

    Attributes:
        phrase: Exact source text of the phrase (original casing)
        start: Offset of the first phrase character
        end: Offset immediately after the phrase (where parsing resumes)
        family: FPL_FAMILY or TARGET_FAMILY
    """

    phrase: str
    start: int
    end: int
    family: str


def match_fpl_phrase(text: str, pos: int = 0) -> Optional[PhraseMatch]:
    """
    Match a "full performance level" phrase at pos.

    Args:
        text: Text to match against (case is ignored)
        pos: Offset to anchor the match at

    Returns:
        PhraseMatch, or None if no variant starts at pos

    Example:
        >>> match_fpl_phrase("full-performance level gs-12").phrase
        'full-performance level'
    """
    patterns = FplPhrasePatterns()

    end = match_literal(text, pos, patterns.ABBREVIATION)
    if end is not None:
        return PhraseMatch(text[pos:end], pos, end, FPL_FAMILY)

    lead = match_first(text, pos, patterns.LEAD_WORDS)
    if lead is None:
        return None
    _, cursor = lead

    separator = match_one_of(text, cursor, patterns.LEAD_SEPARATORS)
    if separator is not None:
        _, cursor = separator

    head = match_first(text, cursor, patterns.HEAD_WORDS)
    if head is None:
        return None
    _, cursor = head

    cursor = skip_spaces(text, cursor)
    level_end = match_literal(text, cursor, patterns.LEVEL)
    if level_end is not None:
        cursor = level_end

    return PhraseMatch(text[pos:cursor], pos, cursor, FPL_FAMILY)


def match_target_phrase(text: str, pos: int = 0) -> Optional[PhraseMatch]:
    """
    Match a "target(ed)" phrase at pos, with its optional suffix.

    Example:
        >>> match_target_phrase("targeted to gs-7").phrase
        'targeted to'
    """
    patterns = TargetPhrasePatterns()

    lead = match_first(text, pos, patterns.LEAD_WORDS)
    if lead is None:
        return None
    _, cursor = lead

    cursor = skip_spaces(text, cursor)
    suffix = match_first(text, cursor, patterns.SUFFIXES)
    if suffix is not None:
        _, cursor = suffix

    return PhraseMatch(text[pos:cursor], pos, cursor, TARGET_FAMILY)


PHRASE_MATCHERS: dict[str, Callable[[str, int], Optional[PhraseMatch]]] = {
    FPL_FAMILY: match_fpl_phrase,
    TARGET_FAMILY: match_target_phrase,
}


def find_phrase(text: str, family: str = FPL_FAMILY, start: int = 0) -> Optional[PhraseMatch]:
    """
    Find the earliest phrase of a family at or after start.

    This only locates the phrase; it does not check that a grade follows.

    Raises:
        KeyError: If family is not a known phrase family
    """
    matcher = PHRASE_MATCHERS[family]
    for pos in range(start, len(text)):
        match = matcher(text, pos)
        if match is not None:
            return match
    return None
