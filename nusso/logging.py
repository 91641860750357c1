"""Logging for :mod:`nusso`, with optional JSON output."""

from logging import DEBUG, Logger, StreamHandler, getLevelName
from logging import getLogger as _getLogger
from typing import Any, Optional

from pythonjsonlogger import jsonlogger

from .context import get_application_config


def getLogger(name: str) -> Logger:
    """
    Get a logger for a :mod:`nusso` module.

    The level is taken from the ``LOGLEVEL`` setting, which may be a number
    or a level name. Values that are neither are ignored. No handlers are
    added; where records go is up to the application (see
    :func:`setup_logger`).
    """
    logger = _getLogger(name)
    level = _parse_level(get_application_config().get('LOGLEVEL'))
    if level is not None:
        logger.setLevel(level)
    return logger


def _parse_level(level: Any) -> Optional[int]:
    if not level:
        return None
    if isinstance(level, int):
        return level
    level = str(level).strip()
    if level.isdigit():
        return int(level)
    # getLevelName maps known names to their number.
    number = getLevelName(level.upper())
    return number if isinstance(number, int) else None


def setup_logger(level: Optional[int] = DEBUG) -> None:
    """Send all log records to stderr as JSON."""
    handler = StreamHandler()
    formatter = jsonlogger.JsonFormatter(
        '%(asctime)s %(levelname)s %(name)s %(message)s',
        rename_fields={'levelname': 'level', 'asctime': 'timestamp'}
    )
    handler.setFormatter(formatter)
    logger = _getLogger()
    logger.addHandler(handler)
    if level is not None:
        logger.setLevel(level)
