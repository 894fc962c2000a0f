"""
Report settings for HTML rendering.

Settings live in a small YAML file loaded with OmegaConf and validated against
the ReportSettings schema, so typos in key names fail loudly instead of being
silently ignored.

Examples:
    >>> settings = load_report_settings()
    >>> settings.highlight_class
    'fpl'

    # Override from a project file
    >>> settings = load_report_settings(Path("config/report_settings.yaml"))
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

load_dotenv()

DEFAULT_REPORT_SETTINGS_PATH = Path(__file__).parent / "report_settings.yaml"
REPORT_SETTINGS_PATH = Path(os.getenv("REPORT_SETTINGS_PATH", str(DEFAULT_REPORT_SETTINGS_PATH)))


@dataclass
class ReportSettings:
    """
    Presentation options for the HTML report.

    Attributes:
        title: Page title and heading
        highlight_class: CSS class wrapped around the matched grade
        highlight_color: CSS color for the highlight class
        show_record_ids: Include an ID column (ignored for deduplicated output)
    """

    title: str = "Full Performance Level Grades"
    highlight_class: str = "fpl"
    highlight_color: str = "red"
    show_record_ids: bool = True


def load_report_settings(config_path: Optional[Path] = None) -> ReportSettings:
    """
    Load report settings from YAML, filling unspecified keys with defaults.

    Args:
        config_path: Optional path to settings file (defaults to REPORT_SETTINGS_PATH)

    Returns:
        ReportSettings instance

    Raises:
        FileNotFoundError: If the settings file does not exist
        ValueError: If the file is not valid YAML, or has unknown keys or values
            of the wrong type
    """
    if config_path is None:
        config_path = REPORT_SETTINGS_PATH

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Report settings not found: {config_path}")

    schema = OmegaConf.structured(ReportSettings)
    try:
        merged = OmegaConf.merge(schema, OmegaConf.load(config_path))
        return OmegaConf.to_object(merged)
    except (OmegaConfBaseException, yaml.YAMLError, UnicodeDecodeError) as e:
        raise ValueError(f"Invalid report settings in {config_path}: {e}") from e
