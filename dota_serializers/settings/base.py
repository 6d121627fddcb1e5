"""
Typed access to a QSettings store shared by the settings sections.
"""

from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings


class SettingsSection:
    """Base for objects reading and writing keys of one QSettings store.

    QSettings hands values back as strings when they come from an INI
    file, so every read goes through a typed getter.
    """

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_str(self, key: str, default: str = "") -> str:
        value = self.settings.value(key, default)
        return str(value) if value is not None else default

    def _get_bool(self, key: str, default: bool = False) -> bool:
        value = self.settings.value(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value) if value is not None else default

    def _set(self, key: str, value: Any) -> None:
        """Store a value and flush it to storage."""
        self.settings.setValue(key, value)
        self.settings.sync()
