# wp_cache_control/core/logging_config.py - Structured logging configuration
"""
All loggers of the service hang below the ``wp_cache_control`` package
logger, which owns the only handler. Level and format come from the
``logging`` section of config.yml; ``LOG_LEVEL`` and ``LOG_FORMAT``
override it.
"""

import logging
import os
import sys

from pythonjsonlogger import jsonlogger

from .config import get_config_value
from .exceptions import ConfigurationError

PACKAGE_LOGGER = "wp_cache_control"

SERVICE_NAME = "wp-cache-control"

LOG_FORMATS = ("json", "text")


def resolve_log_settings(log_level: str | None = None, log_format: str | None = None) -> tuple[str, str]:
    """
    Pick level and format: argument, then environment, then config.yml

    Returns:
        Tuple of (LEVEL, format)

    Raises:
        ConfigurationError: If the format is neither json nor text
    """
    level = log_level or os.getenv("LOG_LEVEL") or get_config_value("logging.level", "INFO")
    fmt = log_format or os.getenv("LOG_FORMAT") or get_config_value("logging.format", "json")

    fmt = str(fmt).lower()
    if fmt not in LOG_FORMATS:
        raise ConfigurationError(f"Unknown log format: {fmt}", {"allowed": list(LOG_FORMATS)})

    return str(level).upper(), fmt


def build_formatter(log_format: str) -> logging.Formatter:
    """Formatter for one of LOG_FORMATS"""
    if log_format == "json":
        return jsonlogger.JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={"asctime": "timestamp", "levelname": "level", "name": "logger"},
            static_fields={"service": SERVICE_NAME},
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    return logging.Formatter("%(asctime)s %(levelname)-7s [%(name)s] %(message)s")


def setup_logging(log_level: str | None = None, log_format: str | None = None) -> logging.Logger:
    """
    (Re)configure the package logger

    Calling it again replaces the handler, so the API can apply settings
    loaded from .env after modules have already created their loggers.

    Args:
        log_level: DEBUG, INFO, WARNING or ERROR
        log_format: json or text

    Returns:
        The package logger
    """
    level, fmt = resolve_log_settings(log_level, log_format)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(build_formatter(fmt))
    logger.handlers = [handler]
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Logger for a module of this package

    Args:
        name: Module name (usually __name__)
    """
    if not logging.getLogger(PACKAGE_LOGGER).handlers:
        setup_logging()
    return logging.getLogger(name)


def log_with_context(logger: logging.Logger, level: str, message: str, **context):
    """
    Log message with structured fields

    Example:
        log_with_context(logger, "info", "Cache entry invalidated", operation="clear_one")
    """
    getattr(logger, level.lower())(message, extra=context)
