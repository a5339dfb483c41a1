"""
Logging configuration for the modelgen command line.

``setup_logging`` is called once by the CLI entry point. Every module does
``logger = get_logger(__name__)`` and inherits the root configuration.

Levels are resolved in precedence order:
    --log-level flag  >  MODELGEN_LOG_LEVEL env var  >  WARNING (default)
"""

from __future__ import annotations

import logging
import os
import sys

_FMT_MINIMAL = "%(message)s"

_FMT_VERBOSE = "%(asctime)s [%(name)s] %(message)s"
_DATEFMT_VERBOSE = "%H:%M:%S"

_FMT_DEBUG = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d - %(message)s"
_DATEFMT_DEBUG = "%H:%M:%S"

# Loggers that flood INFO with connection and statement chatter
_NOISY_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool")

LOG_LEVEL_ENV = "MODELGEN_LOG_LEVEL"


def get_logger(name: str) -> logging.Logger:
    """Return the module logger for ``name``."""
    return logging.getLogger(name)


def setup_logging(level: str | None = None, quiet_third_party: bool = True) -> None:
    """Configure Python logging for the whole process.

    Args:
        level: Log level name. Falls back to ``MODELGEN_LOG_LEVEL`` and then
            to WARNING.
        quiet_third_party: Keep SQLAlchemy's loggers at WARNING unless we are
            running at DEBUG.
    """
    numeric_level = _parse_level(level or os.environ.get(LOG_LEVEL_ENV))

    if numeric_level <= logging.DEBUG:
        fmt, datefmt = _FMT_DEBUG, _DATEFMT_DEBUG
    elif numeric_level <= logging.INFO:
        fmt, datefmt = _FMT_VERBOSE, _DATEFMT_VERBOSE
    else:
        fmt, datefmt = _FMT_MINIMAL, None

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(numeric_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root.setLevel(numeric_level)

    if quiet_third_party and numeric_level > logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)


def _parse_level(level: str | None) -> int:
    """Convert a level name to its numeric constant."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
