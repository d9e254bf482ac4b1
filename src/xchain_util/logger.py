"""Simple logging configuration for xchain-util.

The library itself only creates module loggers; applications call
``setup_logging`` once to get console output.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .settings import XChainUtilSettings

# Define TRACE level (lower than DEBUG)
TRACE = 5
logging.addLevelName(TRACE, "TRACE")


class ColoredFormatter(logging.Formatter):
    """Colored log formatter using ANSI escape codes."""

    # ANSI color codes
    COLORS = {
        "TRACE": "\033[90m",  # Dark gray
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"
    BOLD = "\033[1m"

    def format(self, record: logging.LogRecord) -> str:
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = (
                f"{self.COLORS[levelname]}{self.BOLD}{levelname}{self.RESET}"
            )

        result = super().format(record)

        record.levelname = levelname

        return result


def resolve_log_level(log_level: str | None = None) -> int:
    """Map a level name to its numeric value.

    Falls back to the LOG_LEVEL environment variable, then INFO. Unknown
    names resolve to INFO.
    """
    name = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def setup_logging(
    log_level: str | None = None,
    settings: XChainUtilSettings | None = None,
) -> None:
    """Configure console logging for an application using xchain-util.

    The level is taken from ``log_level``, then ``settings.log_level``
    (``XCHAIN_UTIL_LOG_LEVEL`` or ``log_level`` in the config file), then
    the LOG_LEVEL environment variable.

    When the level is DEBUG, urllib3 is set to WARNING to keep Midgard
    request noise out. Use TRACE to see everything.
    """
    if log_level is None and settings is not None:
        log_level = settings.log_level
    level = resolve_log_level(log_level)

    handler = logging.StreamHandler(sys.stdout)
    formatter = ColoredFormatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)

    logging.basicConfig(
        level=level,
        handlers=[handler],
        force=True,
    )

    if level == logging.DEBUG:
        logging.getLogger("urllib3").setLevel(logging.WARNING)
    elif level == TRACE:
        logging.getLogger("urllib3").setLevel(TRACE)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Args:
        name: Usually __name__ of the calling module

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
