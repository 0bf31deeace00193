"""
rsh Logger Module

Configures diagnostic logging for the interpreter. Logs never replace the
messages the interpreter prints for the user; they are for tracing the
dispatch loop and child processes.
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

ROOT_LOGGER = "rsh"


def setup_logging(level: str = "WARNING", log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the rsh logger hierarchy.

    Replaces any handler installed by a previous call, so calling it twice
    does not duplicate output.

    Args:
        level: Log level name
        log_file: Write logs to this file instead of stderr

    Returns:
        The root rsh logger
    """
    logger = logging.getLogger(ROOT_LOGGER)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    logger.propagate = False
    return logger
