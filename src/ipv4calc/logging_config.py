"""
Logging configuration for ipv4calc.

Console logging goes to stderr so it never mixes with command output.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler

LOG_FILE_MAX_BYTES = 1048576  # 1MB
LOG_FILE_BACKUPS = 3


class StructuredFormatter(logging.Formatter):
    """Pipe-separated formatter for the log file."""

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, 'module_name'):
            record.module_name = record.module
        if not hasattr(record, 'function_name'):
            record.function_name = record.funcName

        return super().format(record)


def setup_logging(level: str = "WARNING", log_file: str | None = None) -> logging.Logger:
    """
    Configure the ``ipv4calc`` logger.

    Args:
        level: Console level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: When set, also record everything down to DEBUG in this
            rotating file

    Returns:
        Configured package logger
    """
    console_level = getattr(logging, level.upper())

    logger = logging.getLogger("ipv4calc")
    logger.setLevel(logging.DEBUG if log_file else console_level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(
        fmt='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUPS,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(StructuredFormatter(
            fmt='%(asctime)s | %(levelname)-8s | %(name)-20s | %(module_name)-15s | '
                '%(function_name)-20s | %(lineno)-4d | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger


def configure_logging(debug: bool = False, log_file: str | None = None, level: str = "WARNING") -> logging.Logger:
    """Command line setup: ``debug`` forces DEBUG on the console."""
    return setup_logging(level="DEBUG" if debug else level, log_file=log_file)
