"""Logging setup for the endinero formatter.

The package only emits records through the ``endinero`` logger and its
children (``endinero.formatting`` traces every call at DEBUG level).
Importing the package attaches a ``NullHandler`` and nothing else, so a
host application keeps full control of its own logging.

Applications that want the formatter's records on the console or in a
rotating file call ``setup_logger``. Handlers are attached to the
``endinero`` logger only; the root logger is never touched.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List, Optional, TextIO

PACKAGE_LOGGER = "endinero"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_LEVELS: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def setup_logger(
    level: str = "INFO",
    log_file: Optional[str] = None,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Route formatter records to the console and an optional log file.

    Calling it again replaces the handlers installed by the previous
    call. The package logger stops propagating while configured, so a
    record is written once even when the host also logs to the console.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to a rotating log file. If None, console only.
        max_bytes: Maximum size of log file before rotation
        backup_count: Number of rotated files to keep
        stream: Console stream (default: sys.stdout at call time)

    Returns:
        The configured ``endinero`` logger

    Raises:
        ValueError: If level is invalid

    Examples:
        >>> logger = setup_logger(level="DEBUG")
        >>> logger = setup_logger(level="INFO", log_file="logs/endinero.log")
    """
    log_level = parse_log_level(level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: List[logging.Handler] = [
        logging.StreamHandler(stream if stream is not None else sys.stdout)
    ]
    if log_file:
        handlers.append(_create_file_handler(log_file, max_bytes, backup_count))

    logger = logging.getLogger(PACKAGE_LOGGER)
    _detach_handlers(logger)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(log_level)
    logger.propagate = False

    return logger


def reset_logger() -> logging.Logger:
    """Undo setup_logger and restore the library defaults.

    The package logger goes back to a single NullHandler, level NOTSET
    and propagation to the host's handlers.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    _detach_handlers(logger)
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger, or one of its children.

    Examples:
        >>> get_logger().name
        'endinero'
        >>> get_logger("formatting").name
        'endinero.formatting'
    """
    if not name:
        return logging.getLogger(PACKAGE_LOGGER)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


def parse_log_level(level: str) -> int:
    """Parse a case-insensitive level name to its logging constant.

    Raises:
        ValueError: If level is invalid
    """
    try:
        return LOG_LEVELS[level.upper()]
    except KeyError:
        raise ValueError(
            f"Invalid log level: {level}. Valid levels: {list(LOG_LEVELS)}"
        ) from None


def _create_file_handler(
    log_file: str, max_bytes: int, backup_count: int
) -> RotatingFileHandler:
    Path(log_file).parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(
        log_file,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )


def _detach_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
