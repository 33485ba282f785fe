"""Logging configuration for spendlog.

The CLI picks a level with ``resolve_level`` and calls ``configure_logging``
when a session starts. Library modules only call ``get_logger(__name__)``.
"""

import logging
import os
import sys
from typing import IO

PACKAGE_LOGGER_NAME = "spendlog"
LOG_LEVEL_ENV_VAR = "SPENDLOG_LOG_LEVEL"
DEFAULT_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

# Silent until a session configures a real handler
logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())


def parse_level(level: int | str, default: int = logging.WARNING) -> int:
    """Convert a level name or number to a numeric logging level.

    Args:
        level: Level as int or name (e.g., "DEBUG", "15").
        default: Level used for unknown names.

    Returns:
        Numeric logging level.
    """
    if isinstance(level, int):
        return level

    name = level.strip().upper()
    if name.isdigit():
        return int(name)

    numeric = logging.getLevelName(name)
    return numeric if isinstance(numeric, int) else default


def resolve_level(cli_level: str | None, config_level: str) -> int:
    """Pick the session log level.

    The command-line option wins, then SPENDLOG_LOG_LEVEL, then the
    config file.

    Args:
        cli_level: Value of --log-level, if given.
        config_level: log_level from the config file.

    Returns:
        Numeric logging level.
    """
    return parse_level(cli_level or os.environ.get(LOG_LEVEL_ENV_VAR) or config_level)


def configure_logging(level: int, stream: IO[str] | None = None) -> logging.Logger:
    """Point the package logger at a stream.

    Calling this again replaces the previous stream handler, so each
    session logs to its own stream at its own level.

    Args:
        level: Numeric logging level.
        stream: Output stream for the handler (default: stderr).

    Returns:
        The package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, logging.StreamHandler):
            logger.removeHandler(handler)

    stream_handler = logging.StreamHandler(stream or sys.stderr)
    stream_handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT))

    logger.setLevel(level)
    logger.addHandler(stream_handler)
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the spendlog namespace."""
    return logging.getLogger(name)
