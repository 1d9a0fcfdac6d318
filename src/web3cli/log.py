"""
Logging configuration for web3-cli.

All log output goes to stderr so that stdout carries only command results.
"""

from __future__ import annotations

import logging
import sys
from typing import NoReturn, Optional

import click

LOGGER_NAME = "web3cli"


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name when the stream is a terminal."""

    LEVEL_COLORS = {
        logging.DEBUG: {"dim": True},
        logging.INFO: {"fg": "cyan"},
        logging.WARNING: {"fg": "yellow"},
        logging.ERROR: {"fg": "red"},
        logging.CRITICAL: {"fg": "red", "bold": True},
    }

    def __init__(self, fmt: Optional[str] = None, use_colors: bool = True):
        super().__init__(fmt)
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        if self.use_colors:
            style = self.LEVEL_COLORS.get(record.levelno)
            if style:
                record = logging.makeLogRecord(record.__dict__)
                record.levelname = click.style(record.levelname, **style)
        return super().format(record)


def setup_logging(verbose: bool = False, use_colors: bool = True) -> logging.Logger:
    """
    Configure the web3cli logger.

    Args:
        verbose: If True, log at DEBUG level; otherwise only warnings and up.
        use_colors: Color level names when stderr is a TTY.

    Returns:
        The configured logger
    """
    level = logging.DEBUG if verbose else logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()
    logger.propagate = False

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    supports_color = use_colors and hasattr(sys.stderr, "isatty") and sys.stderr.isatty()
    handler.setFormatter(
        ColoredFormatter(fmt="%(levelname)s: %(message)s", use_colors=supports_color)
    )
    logger.addHandler(handler)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the web3cli logger, or a child of it (e.g. 'web3cli.rpc')."""
    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logging.getLogger(LOGGER_NAME)


def fatal(message: str, exit_code: int = 1) -> NoReturn:
    """Log *message* at CRITICAL level and terminate the process."""
    logger = get_logger()
    if not logger.handlers:
        setup_logging()
    logger.critical(message)
    sys.exit(exit_code)
