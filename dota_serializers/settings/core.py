"""
Core settings management for dota_serializers.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from PySide6.QtCore import QSettings

from .base import SettingsSection
from .types import ConfigVersion, ValidationResult
from .validation import SettingsValidator
from .paths import PathSettings
from .logging import LoggingSettings

logger = logging.getLogger(__name__)

ORGANIZATION_NAME = "dota-serializers"
APPLICATION_NAME = "dota_serializers"


class AppSettings(SettingsSection):
    """
    Configuration management using QSettings.

    Provides type-safe access to settings with cross-platform storage
    and validation. Pass settings_file to keep everything in one INI file.
    """

    def __init__(
        self, profile: str = "default", settings_file: Optional[Union[str, Path]] = None
    ):
        """Initialize settings for a profile.

        Args:
            profile: Settings profile name (default: "default")
            settings_file: Optional INI file to use instead of the platform store
        """
        if settings_file:
            super().__init__(QSettings(str(settings_file), QSettings.Format.IniFormat))
        else:
            super().__init__(QSettings(ORGANIZATION_NAME, APPLICATION_NAME))
        self.profile = profile

        # Use profile as a group: dota-serializers/dota_serializers/default/...
        self.settings.beginGroup(profile)

        # Initialize subsystems
        self._validator = SettingsValidator(self)
        self._paths = PathSettings(self.settings)
        self._logging = LoggingSettings(self.settings)

        self._ensure_version()

        logger.debug(
            f"Settings initialized for profile '{profile}', stored at: {self.settings.fileName()}"
        )

    # === SUBSYSTEM ACCESS ===

    @property
    def paths(self) -> PathSettings:
        """Access path settings subsystem."""
        return self._paths

    @property
    def logging(self) -> LoggingSettings:
        """Access logging settings subsystem."""
        return self._logging

    # === VERSION AND FIRST RUN ===

    def _ensure_version(self) -> None:
        """Record the configuration version on first run."""
        if not self._get_str("app/version"):
            self.settings.setValue("app/version", ConfigVersion.CURRENT.value)
            self.settings.setValue("app/first_run", True)
            self.settings.sync()
            logger.info("First run detected, initializing configuration")

    @property
    def is_first_run(self) -> bool:
        """Check if this is the first run of the application."""
        return self._get_bool("app/first_run", True)

    def set_first_run_complete(self) -> None:
        """Mark first run as complete."""
        self._set("app/first_run", False)

    @property
    def version(self) -> str:
        """Get configuration version."""
        return self._get_str("app/version", ConfigVersion.CURRENT.value)

    # === PATH SETTINGS (DELEGATED) ===

    @property
    def source_dir(self) -> Optional[Path]:
        """Get root directory of the local upstream data checkout."""
        return self._paths.source_dir

    @source_dir.setter
    def source_dir(self, value: Optional[Path]) -> None:
        self._paths.source_dir = value

    @property
    def output_dir(self) -> Path:
        """Get directory serialized sources are written to."""
        return self._paths.output_dir

    @output_dir.setter
    def output_dir(self, value: Path) -> None:
        self._paths.output_dir = value

    # === LOGGING SETTINGS (DELEGATED) ===

    @property
    def console_logging(self) -> bool:
        """Check if console logging is enabled."""
        return self._logging.console_logging

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self._logging.console_logging = value

    @property
    def console_log_level(self) -> str:
        """Get console logging level."""
        return self._logging.console_log_level

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        self._logging.console_log_level = value

    @property
    def console_use_colors(self) -> bool:
        """Check if console should use colors."""
        return self._logging.console_use_colors

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        self._logging.console_use_colors = value

    @property
    def file_logging(self) -> bool:
        """Check if file logging is enabled."""
        return self._logging.file_logging

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self._logging.file_logging = value

    @property
    def log_file_path(self) -> str:
        """Get log file path (read-only)."""
        return self._logging.log_file_path

    # === VALIDATION ===

    def validate(self, source_dir: Optional[Path] = None) -> ValidationResult:
        """Validate current configuration.

        Args:
            source_dir: Source directory given for this run, checked instead of the stored one
        """
        return self._validator.validate(source_dir)

    # === UTILITY METHODS ===

    def get_settings_file_path(self) -> str:
        """Get the file path where settings are stored."""
        return self.settings.fileName()

    def sync(self) -> None:
        """Force synchronization of settings to storage."""
        self.settings.sync()
