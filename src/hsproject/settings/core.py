"""
Core settings management for hsproject.
"""

import logging
from pathlib import Path
from typing import Dict, Optional, Union

from PySide6.QtCore import QSettings

from .types import ConfigVersion, ValidationResult
from .validation import SettingsValidator
from .logging import LoggingSettings
from .rewrite import RewriteSettings

logger = logging.getLogger(__name__)

ORGANIZATION = "hsproject"
APPLICATION = "hsproject"


class AppSettings:
    """
    Configuration management using QSettings.

    Uses the platform's native store by default, or an INI file when
    ``settings_file`` is given. Profiles are stored as top-level groups.
    """

    def __init__(
        self,
        profile: str = "default",
        settings_file: Optional[Union[str, Path]] = None,
    ):
        """Initialize settings.

        Args:
            profile: Settings profile name (default: "default")
            settings_file: Optional INI file to use instead of the native store
        """
        if settings_file is not None:
            self.settings = QSettings(str(settings_file), QSettings.Format.IniFormat)
        else:
            self.settings = QSettings(ORGANIZATION, APPLICATION)
        self.profile = profile

        # Use profile as a group: hsproject/<profile>/...
        self.settings.beginGroup(profile)

        # Initialize subsystems
        self._validator = SettingsValidator(self)
        self._logging = LoggingSettings(self.settings)
        self._rewrite = RewriteSettings(self.settings)

        self._stamp_version()

        logger.debug(
            f"Settings initialized for profile '{profile}', stored at: {self.settings.fileName()}"
        )

    # === SUBSYSTEM ACCESS ===

    @property
    def logging(self) -> LoggingSettings:
        """Access logging settings subsystem."""
        return self._logging

    @property
    def rewrite(self) -> RewriteSettings:
        """Access rewrite settings subsystem."""
        return self._rewrite

    # === VERSION ===

    @property
    def version(self) -> str:
        """Get configuration version."""
        value = self.settings.value("app/version", "")
        return str(value) if value is not None else ""

    def _stamp_version(self) -> None:
        """Record the configuration version in a store that has none."""
        if not self.version:
            self.settings.setValue("app/version", ConfigVersion.CURRENT.value)
            self.settings.sync()
            logger.debug("New settings store, version stamped")

    # === LOGGING SHORTCUTS ===

    @property
    def console_logging(self) -> bool:
        return self._logging.console_logging

    @property
    def console_log_level(self) -> str:
        return self._logging.console_log_level

    @property
    def console_use_colors(self) -> bool:
        return self._logging.console_use_colors

    @property
    def file_logging(self) -> bool:
        return self._logging.file_logging

    @property
    def log_file_path(self) -> str:
        return self._logging.log_file_path

    # === REWRITE SHORTCUTS ===

    @property
    def block_type_map(self) -> Dict[float, float]:
        """Block type rewrites applied by the command line."""
        return self._rewrite.block_type_map

    @property
    def pretty_output(self) -> bool:
        return self._rewrite.pretty_output

    # === VALIDATION ===

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        return self._validator.validate()

    # === UTILITY METHODS ===

    def get_settings_file_path(self) -> str:
        """Get the file path where settings are stored."""
        return self.settings.fileName()

    def sync(self) -> None:
        """Force synchronization of settings to storage."""
        self.settings.sync()
