"""Unit tests for logger setup."""

import pytest
from loguru import logger

from fplex.contexts.extraction.logger import _log_debug, setup_extraction_logger
from fplex.utils.logger import setup_logger


@pytest.mark.unit
def test_setup_logger_writes_provenance(tmp_path):
    """Test the log file is created with a provenance header."""
    log_file = setup_logger(
        context_name="extract",
        log_dir=tmp_path / "session",
        extra_provenance={"Input": "records.csv"},
    )

    assert log_file == tmp_path / "session" / "extract.log"
    log_text = log_file.read_text(encoding="utf-8")
    assert "Python:" in log_text
    assert "Input: records.csv" in log_text


@pytest.mark.unit
def test_console_level_filters_stderr(tmp_path, capsys):
    """Test DEBUG reaches the console only when the console level allows it."""
    setup_extraction_logger(tmp_path, tmp_path / "records.csv")
    _log_debug("quiet detail")

    setup_extraction_logger(tmp_path, tmp_path / "records.csv", verbose=True)
    _log_debug("loud detail")
    logger.complete()

    err = capsys.readouterr().err
    assert "quiet detail" not in err
    assert "[extract] loud detail" in err


@pytest.mark.unit
def test_file_always_records_debug(tmp_path):
    log_file = setup_extraction_logger(tmp_path, tmp_path / "records.csv")
    _log_debug("file detail")

    assert "[extract] file detail" in log_file.read_text(encoding="utf-8")
