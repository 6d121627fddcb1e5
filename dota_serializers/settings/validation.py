"""
Settings validation system for dota_serializers.
"""

import logging
from pathlib import Path
from typing import List, Optional, TYPE_CHECKING

from ..service import SerializerService
from .types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Validates configuration settings."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self, source_dir: Optional[Path] = None) -> ValidationResult:
        """Validate current configuration, optionally against an overriding source dir."""
        errors: List[str] = []
        warnings: List[str] = []

        source_dir = source_dir or self.settings.source_dir
        if source_dir:
            if not source_dir.is_dir():
                errors.append(f"Source directory does not exist: {source_dir}")
            else:
                for missing in SerializerService(source_dir).find_missing_files():
                    warnings.append(f"Source file not found: {missing}")
        else:
            warnings.append("Source directory not set")

        output_dir = self.settings.output_dir
        if output_dir.exists() and not output_dir.is_dir():
            errors.append(f"Output path is not a directory: {output_dir}")

        logger.debug(f"Validation finished: {len(errors)} errors, {len(warnings)} warnings")
        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )
