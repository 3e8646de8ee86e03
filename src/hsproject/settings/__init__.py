"""
Settings package for hsproject.

Configuration is stored with Qt's QSettings, either in the platform's
native store or in an INI file.

Usage:
    from hsproject.settings import AppSettings

    settings = AppSettings(settings_file="hsproject.ini")
    result = settings.validate()
"""

from .core import AppSettings
from .types import ConfigVersion, ConfigError, ValidationResult
from .logging import LoggingSettings
from .rewrite import RewriteSettings, parse_block_type_map, format_block_type_map

__all__ = [
    "AppSettings",
    "ConfigVersion",
    "ConfigError",
    "ValidationResult",
    "LoggingSettings",
    "RewriteSettings",
    "parse_block_type_map",
    "format_block_type_map",
]
