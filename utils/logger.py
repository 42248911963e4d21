"""
utils/logger.py
---------------
Logging setup shared by every layer.
Modules call `get_logger(__name__)`; the entry point calls
`setup_logging()` once to pick the level.
"""

import logging
import sys
from typing import Optional

from config import LOG_LEVEL

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_handler: Optional[logging.Handler] = None


def setup_logging(level: Optional[str] = None) -> None:
    """
    Attach the stderr handler to the root logger (once) and set its level.

    Args:
        level: Level name such as ``"DEBUG"``. Defaults to ``LOG_LEVEL``.
            Unknown names fall back to INFO.
    """
    global _handler
    root = logging.getLogger()
    if _handler is None:
        # stderr, so log records never mix with the printed user list
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
        root.addHandler(_handler)
    numeric = logging.getLevelName((level or LOG_LEVEL).upper())
    root.setLevel(numeric if isinstance(numeric, int) else logging.INFO)


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger instance.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        A configured logging.Logger.
    """
    if _handler is None:
        setup_logging()
    return logging.getLogger(name)
