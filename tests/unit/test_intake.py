"""
Unit tests for the intake context: normalization, deduplication, records and CSV ingestion.
"""

import pytest

from fplex.contexts.intake import (
    Record,
    RecordIngestionError,
    deduplicate_records,
    normalize_text,
    read_records,
)


class TestNormalizeText:
    """Tests for normalize_text function."""

    def test_empty(self):
        assert normalize_text("") == ""

    def test_collapses_whitespace_and_lowercases(self):
        assert normalize_text("\n\nabc   \t  DEF 1\n2\t3\n  ") == "abc def 1 2 3"

    @pytest.mark.parametrize(
        "text",
        ["", "   ", "Full  Performance\tLevel", "FPL:\r\nGS-13", "already normalized"],
    )
    def test_idempotent(self, text):
        once = normalize_text(text)

        assert normalize_text(once) == once


class TestRecord:
    """Tests for Record construction."""

    def test_from_row(self):
        assert Record.from_row(["7", "FPL GS-9"]) == Record(id=7, text="FPL GS-9")

    def test_from_row_strips_id(self):
        assert Record.from_row([" 42 ", "text"]).id == 42

    def test_from_row_rejects_non_integer_id(self):
        with pytest.raises(ValueError, match="not an integer"):
            Record.from_row(["abc", "text"])

    @pytest.mark.parametrize("row", [["1"], ["1", "text", "extra"]])
    def test_from_row_rejects_wrong_column_count(self, row):
        with pytest.raises(ValueError, match="Expected 2 columns"):
            Record.from_row(row)

    def test_normalized_copy(self):
        record = Record(id=1, text="  FPL  GS-9 ")

        assert record.normalized() == Record(id=1, text="fpl gs-9")
        assert record.text == "  FPL  GS-9 "


class TestDeduplicateRecords:
    """Tests for deduplicate_records function."""

    def test_one_representative_per_normalized_text(self):
        records = [Record(1, "A"), Record(2, "a  "), Record(3, "B")]

        assert deduplicate_records(records) == [Record(1, "a"), Record(3, "b")]

    def test_sorted_by_normalized_text(self):
        records = [Record(1, "zeta"), Record(2, "Alpha"), Record(3, "mid")]

        assert [r.id for r in deduplicate_records(records)] == [2, 3, 1]

    def test_first_occurrence_is_representative(self):
        records = [Record(5, "FPL GS-9"), Record(1, "fpl   gs-9")]

        assert deduplicate_records(records) == [Record(5, "fpl gs-9")]

    def test_empty(self):
        assert deduplicate_records([]) == []


class TestReadRecords:
    """Tests for read_records function."""

    def test_reads_rows_in_order(self, tmp_path):
        path = tmp_path / "records.csv"
        path.write_text(
            '1,"Full Performance Level: GS-12"\n'
            "2,plain text\n"
            "\n"
            '3,"multi\nline, with comma"\n',
            encoding="utf-8",
        )

        records = read_records(path)

        assert records == [
            Record(1, "Full Performance Level: GS-12"),
            Record(2, "plain text"),
            Record(3, "multi\nline, with comma"),
        ]

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("", encoding="utf-8")

        assert read_records(path) == []

    def test_bad_id_reports_line(self, tmp_path):
        path = tmp_path / "records.csv"
        path.write_text("1,ok\nabc,bad\n", encoding="utf-8")

        with pytest.raises(RecordIngestionError) as exc_info:
            read_records(path)

        error = exc_info.value
        assert error.line_number == 2
        assert error.row == ["abc", "bad"]
        assert error.path == path
        assert "not an integer" in str(error)

    def test_wrong_column_count(self, tmp_path):
        path = tmp_path / "records.csv"
        path.write_text("1,text,extra\n", encoding="utf-8")

        with pytest.raises(RecordIngestionError, match="Expected 2 columns"):
            read_records(path)

    def test_missing_file(self, tmp_path):
        path = tmp_path / "missing.csv"

        with pytest.raises(RecordIngestionError) as exc_info:
            read_records(path)

        assert exc_info.value.path == path
        assert exc_info.value.line_number is None

    def test_ingestion_error_is_not_a_value_error(self):
        """Ingestion failures must stay distinct from parse failures."""
        assert not issubclass(RecordIngestionError, ValueError)
