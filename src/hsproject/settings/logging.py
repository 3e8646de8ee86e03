"""
Log output options for the hsproject command line.

Console output goes to stderr at ``console_level``; the optional CSV log
file always records DEBUG and above. Keys live under ``logging/`` in the
active profile.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

DEFAULT_CONSOLE_LEVEL = "WARNING"
DEFAULT_LOG_FILE_PATH = "logs/hsproject.csv"
VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

CONSOLE_ENABLED_KEY = "logging/console_enabled"
CONSOLE_LEVEL_KEY = "logging/console_level"
CONSOLE_COLORS_KEY = "logging/console_use_colors"
FILE_ENABLED_KEY = "logging/file_enabled"
FILE_PATH_KEY = "logging/file_path"


class LoggingSettings:
    """Where resolver and flattener diagnostics are written.

    Warnings about placeholders and missing references reach the console
    at the default level; per-field fallbacks are DEBUG and need either
    ``--verbose`` or the log file to be seen.
    """

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _text(self, key: str, default: str) -> str:
        value = self.settings.value(key, default)
        return str(value) if value is not None else default

    def _flag(self, key: str, default: bool) -> bool:
        # INI stores read back as "true"/"false" text
        value = self.settings.value(key, default)
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value) if value is not None else default

    def _store(self, key: str, value: object) -> None:
        self.settings.setValue(key, value)
        self.settings.sync()

    # === CONSOLE ===

    @property
    def console_logging(self) -> bool:
        """Whether diagnostics are printed to stderr."""
        return self._flag(CONSOLE_ENABLED_KEY, True)

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self._store(CONSOLE_ENABLED_KEY, value)

    @property
    def console_log_level(self) -> str:
        """Lowest level printed to stderr, e.g. ``"WARNING"``."""
        return self._text(CONSOLE_LEVEL_KEY, DEFAULT_CONSOLE_LEVEL)

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        level = value.upper()
        if level not in VALID_LEVELS:
            logger.warning(
                f"Ignoring unknown console log level {value!r}, "
                f"keeping {self.console_log_level}"
            )
            return
        self._store(CONSOLE_LEVEL_KEY, level)

    @property
    def console_use_colors(self) -> bool:
        """Colour level names on the console."""
        return self._flag(CONSOLE_COLORS_KEY, True)

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        self._store(CONSOLE_COLORS_KEY, value)

    # === CSV LOG FILE ===

    @property
    def file_logging(self) -> bool:
        """Whether a rotating CSV log of every run is kept."""
        return self._flag(FILE_ENABLED_KEY, False)

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self._store(FILE_ENABLED_KEY, value)

    @property
    def log_file_path(self) -> str:
        """CSV log location as stored; relative paths follow the working directory."""
        return self._text(FILE_PATH_KEY, DEFAULT_LOG_FILE_PATH)

    @log_file_path.setter
    def log_file_path(self, value: str) -> None:
        self._store(FILE_PATH_KEY, str(value))

    @property
    def log_file_absolute_path(self) -> Path:
        return Path(self.log_file_path).resolve()
