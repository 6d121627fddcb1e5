"""
Settings package for dota_serializers.

Type-safe configuration backed by Qt's QSettings for cross-platform
storage (or a single INI file).

Usage:
    from dota_serializers.settings import AppSettings

    settings = AppSettings()
    result = settings.validate()
"""

from .core import AppSettings
from .types import ConfigVersion, ConfigError, ValidationResult
from .paths import PathSettings
from .logging import LoggingSettings

__all__ = [
    "AppSettings",
    "ConfigVersion",
    "ConfigError",
    "ValidationResult",
    "PathSettings",
    "LoggingSettings",
]
