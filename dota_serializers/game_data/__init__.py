"""
Raw Dota game data ingestion.

Provides decoding of upstream JSON files, the raw type aliases the
serializers consume, and base-record inheritance for hero data.
"""

from .models import (
    RawRecord,
    RawCollection,
    RawDocument,
    AttributeRecords,
    ABILITIES_COLLECTION,
    HEROES_COLLECTION,
    VERSION_KEY,
    BASE_HERO_KEY,
)
from .loaders import GameDataFileLoader
from .inheritance import BaseRecordMerger

__all__ = [
    # Type aliases
    "RawRecord",
    "RawCollection",
    "RawDocument",
    "AttributeRecords",
    # Constants
    "ABILITIES_COLLECTION",
    "HEROES_COLLECTION",
    "VERSION_KEY",
    "BASE_HERO_KEY",
    # Components
    "GameDataFileLoader",
    "BaseRecordMerger",
]
