"""Library-wide conversion settings loaded from the environment."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache

import pytz

from .errors import ConfigurationError
from .runtime import env_bool, env_str, reset_default_values

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = "Europe/Oslo"
DEFAULT_LOG_LEVEL = "WARNING"

TIMEZONE_ENV = "NULLSAFE_TIMEZONE"
LOG_LEVEL_ENV = "NULLSAFE_LOG_LEVEL"
LOG_DEFAULTS_ENV = "NULLSAFE_LOG_DEFAULTS"


@dataclass(frozen=True)
class ConversionSettings:
    timezone_name: str
    log_level: str
    log_defaults: bool

    @property
    def timezone(self) -> pytz.BaseTzInfo:
        return pytz.timezone(self.timezone_name)

    @property
    def default_resolution_level(self) -> int:
        """Level used when logging a failure resolved to a default value."""
        return logging.INFO if self.log_defaults else logging.DEBUG


@lru_cache(maxsize=1)
def get_conversion_settings() -> ConversionSettings:
    timezone_name = env_str(TIMEZONE_ENV, or_value=DEFAULT_TIMEZONE)
    try:
        pytz.timezone(timezone_name)
    except pytz.UnknownTimeZoneError as exc:
        raise ConfigurationError.invalid_timezone(TIMEZONE_ENV, timezone_name) from exc

    log_level = env_str(LOG_LEVEL_ENV, or_value=DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigurationError.invalid_value(LOG_LEVEL_ENV, log_level, "Expected a logging level name")

    return ConversionSettings(
        timezone_name=timezone_name,
        log_level=log_level,
        log_defaults=bool(env_bool(LOG_DEFAULTS_ENV, or_value=False)),
    )


@lru_cache(maxsize=1)
def get_default_resolution_level() -> int:
    """
    Level used when logging a failure resolved to a default value.

    Reads only the log-defaults flag, so a bad timezone or log level never
    turns a default-mode conversion into an error. An unreadable flag falls
    back to DEBUG.
    """
    try:
        log_defaults = env_bool(LOG_DEFAULTS_ENV, or_value=False)
    except ConfigurationError as exc:
        logger.warning("Ignoring %s, logging defaults at DEBUG: %s", LOG_DEFAULTS_ENV, exc)
        return logging.DEBUG
    return logging.INFO if log_defaults else logging.DEBUG


def reset_conversion_settings() -> None:
    """Drop cached settings so the environment is read again on next access."""
    reset_default_values()
    get_conversion_settings.cache_clear()
    get_default_resolution_level.cache_clear()


__all__ = [
    "ConversionSettings",
    "DEFAULT_TIMEZONE",
    "get_conversion_settings",
    "get_default_resolution_level",
    "reset_conversion_settings",
]
