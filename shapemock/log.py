"""Logging for shapemock.

The package logs through the ``shapemock`` logger. Nothing is printed unless
the configuration asks for it (``[mock] verbose = true``) or the application
configures logging itself.
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "shapemock"
LOG_FORMAT = "[shapemock] %(levelname)s: %(message)s"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())

_stderr_handler: logging.Handler | None = None


def configure_logging(config) -> logging.Logger:
    """
    Apply the logging options of a ShapeMockConfig to the package logger.

    Args:
        config: ShapeMockConfig instance

    Returns:
        The configured package logger
    """
    global _stderr_handler

    if config.mock_verbose:
        logger.setLevel(logging.DEBUG)
        if _stderr_handler is None:
            _stderr_handler = logging.StreamHandler(sys.stderr)
            _stderr_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(_stderr_handler)
    else:
        logger.setLevel(config.log_level_number())
        if _stderr_handler is not None:
            logger.removeHandler(_stderr_handler)
            _stderr_handler = None
    return logger
