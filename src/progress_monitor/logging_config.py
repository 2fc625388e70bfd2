"""
Centralized logging configuration.

This module provides a single setup_logging function that configures the
root logger consistently with:
- Console output on stdout
- Level taken from the argument, PROGRESS_MONITOR_LOG_LEVEL, or INFO
- User-friendly mode that only surfaces warnings as bare messages
"""

import logging
import sys
import threading
from typing import Optional, Union

from progress_monitor.config import ConfigurationError, env_bool, env_str

# Thread-safe lock for logging configuration
_config_lock = threading.Lock()
_MODULE_LOGGER = logging.getLogger(__name__)

LOG_LEVEL_ENV = "PROGRESS_MONITOR_LOG_LEVEL"
USER_FRIENDLY_ENV = "PROGRESS_MONITOR_USER_FRIENDLY"

_TECHNICAL_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: Union[int, str, None]) -> int:
    if isinstance(level, int):
        return level

    name = level if level is not None else env_str(LOG_LEVEL_ENV, "INFO")
    resolved = logging.getLevelName(name.upper())
    if not isinstance(resolved, int):
        raise ConfigurationError.invalid_value("log level", name, "Expected a standard logging level name")
    return resolved


def _close_handlers(logger: logging.Logger) -> None:
    """Close all handlers for a logger, logging any errors."""
    for handler in list(logger.handlers):
        try:
            handler.close()
        except OSError as e:  # Best-effort cleanup operation
            _MODULE_LOGGER.debug("Handler close failed for logger '%s': %s", logger.name, e)


def _build_console_handler(user_friendly: bool) -> logging.Handler:
    if user_friendly:
        formatter = logging.Formatter("%(message)s")
    else:
        formatter = logging.Formatter(_TECHNICAL_FORMAT, _DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)

    if user_friendly:
        console_handler.setLevel(logging.WARNING)
    else:
        console_handler.setLevel(logging.DEBUG)

    return console_handler


def setup_logging(level: Union[int, str, None] = None, user_friendly: Optional[bool] = None) -> None:
    """Configure logging for the application"""
    resolved_level = _resolve_level(level)
    if user_friendly is None:
        user_friendly = bool(env_bool(USER_FRIENDLY_ENV, or_value=False))

    with _config_lock:
        root_logger = logging.getLogger()

        _close_handlers(root_logger)
        root_logger.handlers = []

        root_logger.addHandler(_build_console_handler(user_friendly))
        root_logger.setLevel(resolved_level)


__all__ = ["LOG_LEVEL_ENV", "USER_FRIENDLY_ENV", "setup_logging"]
