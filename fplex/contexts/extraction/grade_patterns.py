"""
Phrase and token constants for grade extraction.

Alternatives are tried in the order listed, so where two variants overlap the
more specific one must come first (e.g. "is at the" before "is at" before "is").

Pattern classes are frozen dataclasses holding class-level constants; the
matcher modules iterate over them in order.
"""

from dataclasses import dataclass

# =============================================================================
# PHRASE FAMILIES
# =============================================================================

FPL_FAMILY = "fpl"
TARGET_FAMILY = "target"


@dataclass(frozen=True)
class FplPhrasePatterns:
    """
    Variants of "full performance level" as they appear in position descriptions.

    Supports:
    - The bare abbreviation "fpl"
    - "full"/"poll" + optional space or hyphen + a head word + optional "level"
    """

    ABBREVIATION: str = "fpl"

    # "poll" is a recurring OCR/typing error for "full"
    LEAD_WORDS: tuple[str, ...] = ("full", "poll")

    LEAD_SEPARATORS: str = " -"

    HEAD_WORDS: tuple[str, ...] = (
        "career ladder grade",
        "grade",
        "peformance",
        "perf.",
        "perfformance",
        "performance",
        "performane",
        "perfromance",
        "perormance",
        "promotion",
    )

    LEVEL: str = "level"


@dataclass(frozen=True)
class TargetPhrasePatterns:
    """
    Variants of "target grade" / "targeted to".
    """

    # Longest first so "targeted" is not cut short at "target"
    LEAD_WORDS: tuple[str, ...] = ("targeted", "target")

    SUFFIXES: tuple[str, ...] = (
        "to",
        "grade",
        "position ,",
        "position posted as at a",
    )


# =============================================================================
# CONNECTIVES
# =============================================================================


@dataclass(frozen=True)
class ConnectivePatterns:
    """
    Short clauses that sit between a phrase and its grade.

    At most one is consumed, first match wins.
    """

    CLAUSES: tuple[str, ...] = (
        "-",
        ",",
        ":",
        "(fpl)",
        "(",
        "=",
        "at grade level",
        "at",
        "for this pd is",
        "for this position is",
        "is at the",
        "is at",
        "is level :",
        "is level:",
        "is the",
        "management analyst",
        "is",
        "of a career ladder position",
        "of a",
        "of position is",
        "of position :",
        "of position:",
        "of the position is",
        "of this pd is",
        "of this position is",
    )


# =============================================================================
# GRADE TOKENS
# =============================================================================


@dataclass(frozen=True)
class GradeTokenPatterns:
    """
    Shape constraints for grade tokens such as "gs-0510-09", "wg 7" or "12".
    """

    # Pay-plan prefix length ("gs", "wg", "wl", "ws", ...)
    PAY_PLAN_LENGTH: int = 2

    # Separators allowed after a pay-plan prefix
    PAY_PLAN_SEPARATORS: str = " -."

    # Separators that introduce a series code ("gs-0510-09", "gs.0343.18")
    SERIES_SEPARATORS: str = "-."

    MAX_GRADE_DIGITS: int = 2
    MAX_SERIES_DIGITS: int = 4

    # Separators between alternative grades ("gs-11/12/13", "gs-5, gs-6")
    CHAIN_SEPARATORS: str = ",/"


# Characters skipped as "space" between tokens
SPACE_CHARS = " \t"
