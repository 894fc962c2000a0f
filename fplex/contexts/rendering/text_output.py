"""Plain-text output formats for extraction results."""

import csv
from typing import Iterable, TextIO

from fplex.contexts.extraction.grade_pipeline import GradeResult


def write_grade_csv(results: Iterable[GradeResult], stream: TextIO) -> int:
    """
    Write one CSV row per result: id, grade (empty if absent), text.

    Args:
        results: Extraction results
        stream: Open text stream (opened with newline="" when it is a file)

    Returns:
        Number of rows written
    """
    writer = csv.writer(stream, lineterminator="\n")
    count = 0
    for result in results:
        writer.writerow([result.record_id, result.grade_or_empty, result.text])
        count += 1
    return count


def write_grade_lines(results: Iterable[GradeResult], stream: TextIO) -> int:
    """
    Write one "grade|text" line per result (grade empty if absent).

    Returns:
        Number of lines written
    """
    count = 0
    for result in results:
        stream.write(f"{result.grade_or_empty}|{result.text}\n")
        count += 1
    return count
