"""
FPLEX - Full Performance Level EXtractor

Pulls the full performance level (FPL) pay grade out of free-form, inconsistently
worded job-classification text such as personnel position descriptions.

Architecture:
- Intake Context: Record ingestion, text normalization and deduplication
- Extraction Context: Phrase/connective/grade matching and batch extraction
- Rendering Context: CSV, pipe-delimited and HTML output
"""

__version__ = "0.1.0"
