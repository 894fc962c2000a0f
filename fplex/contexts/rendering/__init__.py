"""
Rendering Context

Responsibilities:
- Serializes extraction results as CSV rows or "grade|text" lines
- Renders an HTML report highlighting each matched grade
- Loads report presentation settings

Owns: Output formats and report settings
Never: Decides what grade a record carries
"""

from fplex.contexts.rendering.html_report import HtmlReportRenderer, render_html_report
from fplex.contexts.rendering.report_settings import ReportSettings, load_report_settings
from fplex.contexts.rendering.text_output import write_grade_csv, write_grade_lines

__all__ = [
    "HtmlReportRenderer",
    "render_html_report",
    "ReportSettings",
    "load_report_settings",
    "write_grade_csv",
    "write_grade_lines",
]
