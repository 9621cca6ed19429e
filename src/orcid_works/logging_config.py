"""Logging setup for the orcid-works command line.

Library modules only create ``orcid_works.<module>`` loggers; handlers are
attached here, once, by whoever runs the program.
"""

import logging
import sys
from pathlib import Path

PACKAGE_LOGGER = "orcid_works"
DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    format_string: str | None = None
) -> logging.Logger:
    """Send orcid_works log records to stderr and, optionally, a file.

    Calling it again replaces the handlers of the previous call.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Also write records here; parent directories are created
        format_string: Record format (default: time, level, logger, message)

    Returns:
        The ``orcid_works`` package logger

    Raises:
        ValueError: if ``level`` is not a level name
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    formatter = logging.Formatter(format_string or DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logger = logging.getLogger(PACKAGE_LOGGER)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    logger.setLevel(numeric_level)
    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
