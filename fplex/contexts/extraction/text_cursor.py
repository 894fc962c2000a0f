"""
Low-level scanning primitives for the extraction context.

Every function works on an immutable string plus an integer cursor and returns
the cursor after whatever it consumed, or None when it does not match. Nothing
here raises on a mismatch; callers decide whether to backtrack or give up.

Literal matching is case-insensitive. Digit and letter classes are ASCII only.
"""

from typing import Callable, Iterable, Optional

from fplex.contexts.extraction.grade_patterns import SPACE_CHARS


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_alpha(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z")


def match_literal(text: str, pos: int, literal: str) -> Optional[int]:
    """Match a lowercase literal at pos, ignoring case in text."""
    end = pos + len(literal)
    if text[pos:end].lower() == literal:
        return end
    return None


def match_first(text: str, pos: int, literals: Iterable[str]) -> Optional[tuple[str, int]]:
    """
    Match the first literal (in iteration order) that occurs at pos.

    Returns:
        (literal, end) for the winning alternative, or None
    """
    for literal in literals:
        end = match_literal(text, pos, literal)
        if end is not None:
            return literal, end
    return None


def match_one_of(text: str, pos: int, chars: str) -> Optional[tuple[str, int]]:
    """Match a single character from chars at pos."""
    if pos < len(text) and text[pos] in chars:
        return text[pos], pos + 1
    return None


def skip_spaces(text: str, pos: int) -> int:
    """Skip spaces and tabs; always succeeds."""
    while pos < len(text) and text[pos] in SPACE_CHARS:
        pos += 1
    return pos


def _take_run(text: str, pos: int, predicate: Callable[[str], bool]) -> int:
    end = pos
    while end < len(text) and predicate(text[end]):
        end += 1
    return end


def take_digits(text: str, pos: int, max_len: int) -> Optional[int]:
    """
    Take the full digit run at pos if it is 1..max_len digits long.

    The run is always read to its end before checking the length, so "123"
    does not match with max_len=2 (rather than matching "12").
    """
    end = _take_run(text, pos, _is_digit)
    if 0 < end - pos <= max_len:
        return end
    return None


def take_letters(text: str, pos: int, length: int) -> Optional[int]:
    """Take the full letter run at pos if it is exactly length letters long."""
    end = _take_run(text, pos, _is_alpha)
    if end - pos == length:
        return end
    return None
