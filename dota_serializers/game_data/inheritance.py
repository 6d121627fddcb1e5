"""
Base-record inheritance for raw game data.

Heroes are stored as deltas on top of a designated base hero. The merge
is a shallow, field-wise overwrite: whatever the child defines wins, every
other field comes from the base verbatim.
"""

import logging
from typing import Optional

from .models import RawCollection, RawRecord


class BaseRecordMerger:
    """Merges child records over a designated base record of a collection."""

    def __init__(self, collection: RawCollection, base_key: str):
        """Initialize the merger for one collection.

        Args:
            collection: Raw collection holding both the base and child records
            base_key: Key of the base record inside the collection
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.base_key = base_key
        self._base: RawRecord = collection.get(base_key) or {}

        if not self._base:
            self.logger.warning(f"Base record '{base_key}' not found, merging over empty base")

    @property
    def base(self) -> RawRecord:
        """Return a copy of the base record."""
        return self._base.copy()

    def merge(self, child: Optional[RawRecord]) -> RawRecord:
        """Return the base record overlaid with the child's own fields.

        Args:
            child: The child record (may be None or empty)

        Returns:
            New merged dict; neither input is mutated
        """
        merged = self._base.copy()
        for key, value in (child or {}).items():
            merged[key] = value
        return merged
