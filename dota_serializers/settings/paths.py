"""
Path-related settings for dota_serializers.
"""

from pathlib import Path
from typing import Optional

from .base import SettingsSection


class PathSettings(SettingsSection):
    """Where upstream data is read from and serialized output goes."""

    @property
    def source_dir(self) -> Optional[Path]:
        """Get root directory of the local upstream data checkout."""
        path_str = self._get_str("paths/source_dir")
        return Path(path_str) if path_str else None

    @source_dir.setter
    def source_dir(self, value: Optional[Path]) -> None:
        self._set("paths/source_dir", str(value) if value else "")

    @property
    def output_dir(self) -> Path:
        """Get directory serialized sources are written to (default: ./output)."""
        return Path(self._get_str("paths/output_dir", "output"))

    @output_dir.setter
    def output_dir(self, value: Path) -> None:
        self._set("paths/output_dir", str(value))
