"""
Unit tests for grade token parsing and grade-chain resolution.

Tests fplex.contexts.extraction.grade_parser.
"""

import pytest

from fplex.contexts.extraction.exceptions import NoGradeToken
from fplex.contexts.extraction.grade_parser import (
    max_grade,
    parse_grade_token,
    resolve_grade_chain,
)


class TestParseGradeToken:
    """Tests for parse_grade_token function."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1", "1"),
            ("12", "12"),
            ("gs 11", "11"),
            ("gs-0510-09", "09"),
            ("gs-0998-6", "6"),
            ("gs-13", "13"),
            ("gs-201-13", "13"),
            ("gs-7", "7"),
            ("gs15", "15"),
            ("gs7", "7"),
            ("wg 7", "7"),
            ("wg-08", "08"),
            ("wl-08", "08"),
            ("ws-7", "7"),
            ("gs.0343.18", "18"),
        ],
    )
    def test_grade_shapes(self, text, expected):
        """Test every supported grade shape consumes the whole token."""
        token = parse_grade_token(text)

        assert token.value == expected
        assert token.end == len(text)

    @pytest.mark.parametrize(
        "text",
        [
            "123",
            "gs 123",
            "gs-123",
            "gs-1234-",
            "gs-1234-123",
            "gs-12345-12",
            "gs123",
        ],
    )
    def test_rejected_shapes(self, text):
        """Test over-long digit runs and series codes without a grade are rejected."""
        with pytest.raises(NoGradeToken):
            parse_grade_token(text)

    def test_trailing_text_left_unconsumed(self):
        """Test the cursor stops right after the grade digits."""
        text = "gs-13.xxx"
        token = parse_grade_token(text)

        assert token.value == "13"
        assert text[token.end :] == ".xxx"

    def test_trailing_separator_left_unconsumed(self):
        """Test a dangling series separator is not consumed."""
        text = "gs-13-"
        token = parse_grade_token(text)

        assert token.value == "13"
        assert text[token.end :] == "-"

    def test_grade_offsets_point_at_digits(self):
        """Test start/end bound the grade digits, not the pay plan."""
        text = "gs-0510-09"
        token = parse_grade_token(text)

        assert text[token.start : token.end] == "09"
        assert token.start == 8

    def test_uppercase_pay_plan(self):
        """Test pay-plan prefixes are accepted in any case."""
        assert parse_grade_token("GS-0510-09").value == "09"

    def test_extra_space_after_separator(self):
        """Test one space is tolerated after the pay-plan separator."""
        assert parse_grade_token("gs- 13").value == "13"

    def test_parse_at_offset(self):
        """Test parsing starts at the given cursor."""
        token = parse_grade_token("fpl gs-9", 4)

        assert token.value == "9"
        assert token.start == 7

    def test_three_letter_prefix_rejected(self):
        """Test only two-letter pay plans are accepted."""
        with pytest.raises(NoGradeToken):
            parse_grade_token("gsa-12")

    def test_error_carries_position(self):
        """Test NoGradeToken records where parsing gave up."""
        with pytest.raises(NoGradeToken) as exc_info:
            parse_grade_token("fpl unknown", 4)

        assert exc_info.value.pos == 4
        assert "unknown" in str(exc_info.value)


class TestResolveGradeChain:
    """Tests for resolve_grade_chain and max_grade."""

    def test_single_grade(self):
        """Test a chain of one token returns that token."""
        assert resolve_grade_chain("gs-12").value == "12"

    def test_slash_chain_last_wins(self):
        """Test the last grade of an ascending ladder wins."""
        assert max_grade("gs-11/12/13") == "13"

    def test_spaced_prefixed_chain(self):
        """Test chains re-enter pay-plan parsing for each alternative."""
        assert max_grade("gs-5 / gs-6 / gs-7") == "7"

    def test_comma_chain(self):
        """Test comma-separated alternatives."""
        assert max_grade("gs-9, 11") == "11"

    def test_space_only_chain(self):
        """Test the separator between alternatives is optional."""
        assert max_grade("11 12") == "12"

    def test_bare_digit_chain(self):
        """Test chains of bare grades."""
        assert max_grade("11/12/13") == "13"

    def test_chain_stops_at_non_grade(self):
        """Test text after the last good token is not consumed."""
        text = "gs-12 series 0343"
        token = resolve_grade_chain(text)

        assert token.value == "12"
        assert text[token.end :] == " series 0343"

    def test_chain_stops_at_rejected_token(self):
        """Test an invalid alternative ends the chain without failing it."""
        assert max_grade("gs-12/123") == "12"

    def test_chain_offsets_point_at_last_grade(self):
        """Test the returned offsets belong to the winning token."""
        text = "gs-5 / gs-6 / gs-7"
        token = resolve_grade_chain(text)

        assert token.start == len(text) - 1
        assert token.end == len(text)

    def test_no_first_token_raises(self):
        """Test resolve_grade_chain propagates a failed first token."""
        with pytest.raises(NoGradeToken):
            resolve_grade_chain("grade unknown")

    def test_max_grade_absent(self):
        """Test max_grade returns None instead of raising."""
        assert max_grade("no grade here") is None
