"""
Extraction context logger.

Provides logging interface for extraction context with automatic [extract] prefix.
All extraction modules should import from this module, not from utils.logger directly.
The pure matchers (phrase_matcher, grade_parser, grade_extractor) never log.
"""

from collections import Counter
from pathlib import Path

from loguru import logger

from fplex.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[extract]"


def setup_extraction_logger(log_dir: Path, input_path: Path, verbose: bool = False) -> Path:
    """
    Setup logger for extraction context.

    Args:
        log_dir: Directory for this extraction session
        input_path: Source file, recorded in the provenance header
        verbose: Show DEBUG messages on the console too

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="extract",
        log_dir=log_dir,
        extra_provenance={"Input": input_path},
        console_level="DEBUG" if verbose else "INFO",
    )


# Wrapper functions with automatic [extract] prefix


def _log_info(message: str) -> None:
    """Log info message with [extract] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [extract] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [extract] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [extract] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [extract] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level extraction-specific logging helpers


def log_extraction_start(record_count: int, unique: bool) -> None:
    """Log start of a batch extraction."""
    mode = "unique normalized texts" if unique else "records"
    _log_info(f"Extracting grades from {record_count} {mode}")


def log_extraction_result(results: list, elapsed_time: float) -> None:
    """
    Log batch extraction summary.

    Args:
        results: GradeResult list from extract_grades()
        elapsed_time: Time taken
    """
    grades = Counter(result.grade for result in results if result.grade is not None)
    found = sum(grades.values())
    missing = len(results) - found

    _log_success(f"Found grades for {found}/{len(results)} records ({elapsed_time:.2f}s)")
    if missing:
        _log_warning(f"{missing} records without a recognizable grade")

    for grade, count in sorted(grades.items(), key=lambda item: (-item[1], item[0])):
        _log_debug(f"  Grade {grade}: {count}")
