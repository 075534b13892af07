"""
Logging for shopcart.

The "shopcart" package logger gets one stdout handler on first import;
modules log through it with get_logger(__name__). Product names, prices
and ids typed or tapped by the user go through loggable() first.
"""

import logging
import os
import sys
from functools import cache

from shopcart.config import is_production

PACKAGE_LOGGER = "shopcart"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s - %(name)s - %(message)s"

# Control characters that would split or forge log lines
_UNSAFE_CHARS = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": None})


def _configure_package_logger() -> None:
    logger = logging.getLogger(PACKAGE_LOGGER)
    if logger.handlers:
        return

    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT_SIMPLE if is_production() else LOG_FORMAT))
    logger.addHandler(handler)


_configure_package_logger()


@cache
def get_logger(name: str) -> logging.Logger:
    """Logger for a shopcart module (name is usually __name__)."""
    return logging.getLogger(name)


def loggable(value: object, max_length: int = 50) -> str:
    """
    Render user input for a log line.

    Control characters are escaped and long text is cut at max_length,
    so a product name cannot inject or flood log lines.

    Example:
        loggable("Milk\\nERROR") -> "Milk\\\\nERROR"
        loggable("") -> "N/A"
    """
    if value is None or value == "":
        return "N/A"
    text = str(value).translate(_UNSAFE_CHARS)
    return text if len(text) <= max_length else text[:max_length] + "..."
