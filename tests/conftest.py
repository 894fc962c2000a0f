"""Shared pytest fixtures."""

import sys

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_loguru():
    """Drop handlers a test installed (CLI runs add file and console sinks)."""
    yield
    logger.remove()
    logger.add(sys.stderr, level="WARNING")
