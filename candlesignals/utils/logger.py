"""
Logging utility module.

Console output goes to stderr by default so that indicator tables and JSON
written to stdout stay machine readable. A log file can be added on top.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

DEFAULT_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "[%(filename)s:%(lineno)d] - %(message)s"
)


def setup_logger(
    name: str = "candlesignals",
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configure a package logger.

    Args:
        name: Logger name
        log_level: Logging level name; unknown names fall back to INFO
        log_file: Optional path to a log file, created with its parent directory
        format_string: Optional custom format string
        stream: Console stream (default: sys.stderr at call time)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Reconfiguring replaces handlers instead of stacking them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        if isinstance(handler, logging.FileHandler):
            handler.close()

    formatter = logging.Formatter(format_string or DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = "candlesignals") -> logging.Logger:
    """
    Get a logger instance.

    Loggers below the package root ("candlesignals.api" and friends) are
    returned as-is so they propagate to whatever the root package logger is
    configured with. Any other name without handlers gets a default setup.
    """
    logger = logging.getLogger(name)
    if name.startswith("candlesignals."):
        return logger
    if not logger.handlers:
        setup_logger(name)
    return logger
