"""
Logging setup.

Logging is configured once at process start. Library modules only create
loggers with `logging.getLogger(__name__)`; components that log accept an
injected logger.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from .config import EngineConfig

PACKAGE_LOGGER = "backend.finitelogic"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(
    config: Optional[EngineConfig] = None,
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Configure the package logger.

    Calling this again replaces the handler installed by an earlier call
    instead of adding a second one.

    Args:
        config: Engine settings; defaults are used when omitted.
        stream: Destination for log records (stderr by default).

    Returns:
        The configured package logger.
    """
    config = config or EngineConfig()
    logger = logging.getLogger(PACKAGE_LOGGER)
    level = config.effective_log_level
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, "_finitelogic_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.setLevel(level)
    handler._finitelogic_handler = True
    logger.addHandler(handler)
    logger.propagate = False

    logger.info("Logger initialized.")
    if config.debug_logging_enabled:
        logger.debug("Debug logging is enabled.")
    return logger


def get_logger(name: str) -> logging.Logger:
    """Child logger under the package logger."""
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")
