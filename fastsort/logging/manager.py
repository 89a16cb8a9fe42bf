"""
Logger configuration for fastsort.

Loggers are configured from application settings: LOG_LEVEL picks the
level, DEBUG forces it to DEBUG, and LOG_JSON_FORMAT switches to JSON
lines. Without explicit settings, ``get_settings()`` is used, so module
level loggers follow APP_ENV and the environment.
"""

import logging
import sys
from typing import Optional

from fastsort.config import BaseAppSettings, get_settings
from fastsort.logging.formatters import JsonFormatter

Logger = logging.Logger

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(
    name: str,
    level: str = "INFO",
    debug: bool = False,
    json_format: bool = False,
) -> logging.Logger:
    """
    Configure the named logger with a single stdout handler.

    Calling it again for the same name replaces the previous handler.

    Args:
        name: Logger name (usually __name__)
        level: Logging level name, e.g. "WARNING"
        debug: If True, use DEBUG regardless of ``level``
        json_format: If True, emit JSON lines

    Returns:
        The configured logger
    """
    log_level = logging.DEBUG if debug else getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(JsonFormatter() if json_format else logging.Formatter(TEXT_FORMAT))

    logger = logging.getLogger(name)
    logger.setLevel(log_level)
    logger.handlers.clear()
    logger.addHandler(handler)
    return logger


def get_logger(
    name: str,
    settings: Optional[BaseAppSettings] = None,
    json_format: Optional[bool] = None,
) -> logging.Logger:
    """
    Get a logger configured from settings.

    Args:
        name: Logger name (usually __name__)
        settings: Settings to read; defaults to ``get_settings()``
        json_format: Overrides LOG_JSON_FORMAT when given

    Returns:
        Configured logger instance
    """
    settings = settings or get_settings()
    if json_format is None:
        json_format = settings.LOG_JSON_FORMAT

    return setup_logger(
        name, level=settings.LOG_LEVEL, debug=settings.DEBUG, json_format=json_format
    )


def ensure_logger(
    logger: Optional[logging.Logger] = None,
    name: Optional[str] = None,
    settings: Optional[BaseAppSettings] = None,
) -> logging.Logger:
    """
    Return ``logger`` if given, otherwise a logger configured from settings.

    Raises:
        ValueError: If neither a logger nor a name is given
    """
    if logger:
        return logger

    if not name:
        raise ValueError("Module name must be provided when logger is not specified")

    return get_logger(name, settings)
