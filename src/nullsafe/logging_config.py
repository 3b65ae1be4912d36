"""
Centralized logging configuration for the conversion library.

Library modules only create module-level loggers under the ``nullsafe``
namespace. Applications that want the library's log output on the console
call ``setup_logging`` once; the level defaults to ``NULLSAFE_LOG_LEVEL``.
"""

import logging
import sys
import threading
from typing import Optional

from nullsafe.config import get_conversion_settings

LIBRARY_LOGGER_NAME = "nullsafe"

# Thread-safe lock for logging configuration
_config_lock = threading.Lock()
_HANDLER_NAME = "nullsafe-console"


def _build_console_handler(user_friendly: bool) -> logging.Handler:
    if user_friendly:
        formatter = logging.Formatter("%(message)s")
    else:
        formatter = logging.Formatter(
            "%(asctime)s.%(msecs)03d - %(name)s - %(levelname)s - %(message)s",
            "%Y-%m-%d %H:%M:%S",
        )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.set_name(_HANDLER_NAME)
    return console_handler


def _remove_existing_handler(library_logger: logging.Logger) -> None:
    for handler in list(library_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            library_logger.removeHandler(handler)
            handler.close()


def setup_logging(level: Optional[str] = None, user_friendly: bool = False) -> logging.Logger:
    """Attach a console handler to the library logger and set its level."""

    with _config_lock:
        library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
        resolved_level = (level or get_conversion_settings().log_level).upper()

        _remove_existing_handler(library_logger)
        library_logger.addHandler(_build_console_handler(user_friendly))
        library_logger.setLevel(resolved_level)
        return library_logger


__all__ = ["LIBRARY_LOGGER_NAME", "setup_logging"]
