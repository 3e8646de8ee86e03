"""
Settings validation system for hsproject.
"""

import logging
from typing import List, TYPE_CHECKING

from .logging import VALID_LEVELS
from .rewrite import parse_block_type_map
from .types import ConfigError, ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Validates configuration settings."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        errors: List[str] = []
        warnings: List[str] = []

        # Validate block type map
        try:
            mapping = parse_block_type_map(self.settings.rewrite.block_type_map_text)
            if not mapping:
                warnings.append("Block type map is empty, projects are written unchanged")
        except ConfigError as e:
            errors.append(str(e))

        # Validate console level
        level = self.settings.logging.console_log_level
        if level.upper() not in VALID_LEVELS:
            errors.append(f"Invalid console log level: {level}")

        # Validate log file location
        if self.settings.logging.file_logging:
            log_dir = self.settings.logging.log_file_absolute_path.parent
            if log_dir.exists() and not log_dir.is_dir():
                errors.append(f"Log directory is not a directory: {log_dir}")

        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )
