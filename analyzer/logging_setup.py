"""
logging_setup.py
----------------
Logging for the ``analyzer`` package.

Library modules ask for a logger with ``get_logger`` and never add handlers.
The entry points (cli.py, streamlit_app.py) call ``configure_logging`` once,
which sends everything under ``analyzer.*`` to one stream.
"""

from __future__ import annotations
import logging
import os
import sys
from typing import IO, Optional, Union

PACKAGE_LOGGER = "analyzer"
LOG_LEVEL_ENV = "ANALYZER_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_configured = False


def resolve_level(level: Union[int, str, None] = None) -> int:
    """Explicit level, else $ANALYZER_LOG_LEVEL, else INFO. Unknown names mean INFO."""
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, int):
        return level

    name = level.strip().upper()
    if name.isdigit():
        return int(name)
    numeric = getattr(logging, name, None)
    return numeric if isinstance(numeric, int) else logging.INFO


def configure_logging(level: Union[int, str, None] = None, stream: Optional[IO[str]] = None) -> None:
    """Attach a single StreamHandler (stderr by default). Later calls do nothing."""
    global _configured
    if _configured:
        return

    logger = logging.getLogger(PACKAGE_LOGGER)
    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(resolve_level(level))
    logger.propagate = False

    _configured = True


def get_logger(name: str) -> logging.Logger:
    # quiet until an entry point configures logging
    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    if not _configured and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
