"""
Shared utilities for FPLEX.

Common functionality used across contexts:
- Logger setup with provenance
- Timestamps for log directories and reports
"""

from fplex.utils.logger import log_provenance, setup_logger
from fplex.utils.timestamp import now, today

__all__ = ["log_provenance", "setup_logger", "now", "today"]
