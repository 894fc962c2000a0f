"""
HTML report rendering.

Renders extraction results as an HTML table, with the matched grade wrapped in
a highlight span. All text goes through Jinja2 autoescaping.
"""

from pathlib import Path
from typing import Iterable, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template

from fplex.contexts.extraction.grade_pipeline import GradeResult
from fplex.contexts.rendering.report_settings import ReportSettings, load_report_settings
from fplex.utils.timestamp import today

TEMPLATES_PATH = Path(__file__).parent / "templates"
REPORT_TEMPLATE = "grade_report.html.jinja"


class HtmlReportRenderer:
    """
    Renders GradeResult lists to a standalone HTML document.

    The Jinja2 environment is built once per renderer and the report template
    is cached after first use.
    """

    def __init__(
        self, settings: Optional[ReportSettings] = None, templates_path: Optional[Path] = None
    ):
        """
        Args:
            settings: Presentation settings (defaults to load_report_settings())
            templates_path: Directory holding the report template
        """
        if settings is None:
            settings = load_report_settings()
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.settings = settings
        self.templates_path = templates_path
        self._template: Optional[Template] = None

        self.env = Environment(
            loader=FileSystemLoader(str(templates_path)),
            undefined=StrictUndefined,
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    @property
    def template(self) -> Template:
        if self._template is None:
            self._template = self.env.get_template(REPORT_TEMPLATE)
        return self._template

    def render(self, results: Iterable[GradeResult], unique: bool = False) -> str:
        """
        Render results to HTML.

        Rows with a grade show the normalized text with the grade highlighted;
        rows without one show their text unchanged.

        Args:
            results: Extraction results, in display order
            unique: Results come from deduplicated input (hides the ID column)

        Returns:
            HTML document
        """
        rows = [_build_row(line, result) for line, result in enumerate(results, start=1)]

        return self.template.render(
            settings=self.settings,
            rows=rows,
            found=sum(1 for row in rows if row["grade"]),
            show_ids=self.settings.show_record_ids and not unique,
            generated=today(),
        )


def _build_row(line: int, result: GradeResult) -> dict:
    return {
        "line": line,
        "record_id": result.record_id,
        "grade": result.grade_or_empty,
        "span": result.span(),
        "text": result.text,
    }


def render_html_report(
    results: Iterable[GradeResult],
    settings: Optional[ReportSettings] = None,
    unique: bool = False,
) -> str:
    """Render results to HTML with a one-off renderer."""
    return HtmlReportRenderer(settings=settings).render(results, unique=unique)
