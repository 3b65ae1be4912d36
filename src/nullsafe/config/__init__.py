"""Configuration helpers and the cached conversion settings."""

from .errors import ConfigurationError
from .runtime import env_bool, env_str, load_dotenv_file
from .settings import (
    DEFAULT_TIMEZONE,
    ConversionSettings,
    get_conversion_settings,
    get_default_resolution_level,
    reset_conversion_settings,
)

__all__ = [
    "ConfigurationError",
    "ConversionSettings",
    "DEFAULT_TIMEZONE",
    "env_bool",
    "env_str",
    "get_conversion_settings",
    "get_default_resolution_level",
    "load_dotenv_file",
    "reset_conversion_settings",
]
