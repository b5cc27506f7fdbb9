"""
Shared test fixtures.
"""

import logging

import pytest

from backend.finitelogic.logging_utils import PACKAGE_LOGGER


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Remove handlers installed by configure_logging() after each test."""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, "_finitelogic_handler", False):
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
