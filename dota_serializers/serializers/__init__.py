"""
Entity serializers for Dota game data.

Each serializer turns one decoded upstream collection into an ordered
list of output records. The module-level functions are the public entry
points; the classes are exposed for advanced usage.
"""

from typing import List, Optional

from ..game_data.models import RawDocument
from ..models import Ability, Hero, Item
from .base import BaseSerializer, LocalizedSerializer, sort_by_id
from .abilities import AbilitiesSerializer, ability_type
from .heroes import HeroesSerializer
from .items import ItemsSerializer, parse_description_block, recipe_key
from .upgrades import build_upgrades, get_upgrades


def serialize_abilities(data: RawDocument, i18n: Optional[RawDocument]) -> List[Ability]:
    """Serialize DOTAAbilities with ability localization."""
    return AbilitiesSerializer(data, i18n).serialize()


def serialize_heroes(data: RawDocument) -> List[Hero]:
    """Serialize DOTAHeroes."""
    return HeroesSerializer(data).serialize()


def serialize_items(data: RawDocument, i18n: Optional[RawDocument]) -> List[Item]:
    """Serialize items (DOTAAbilities item schema), cross-referenced."""
    return ItemsSerializer(data, i18n).serialize()


__all__ = [
    # Entry points
    "serialize_abilities",
    "serialize_heroes",
    "serialize_items",
    # Serializer classes
    "BaseSerializer",
    "LocalizedSerializer",
    "AbilitiesSerializer",
    "HeroesSerializer",
    "ItemsSerializer",
    # Helpers
    "sort_by_id",
    "ability_type",
    "parse_description_block",
    "recipe_key",
    "build_upgrades",
    "get_upgrades",
]
