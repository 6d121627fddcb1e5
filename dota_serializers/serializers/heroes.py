"""
Hero serializer.

Every hero in DOTAHeroes only stores what differs from the base hero, so
records are merged over the base before their stats are read.
"""

from typing import Dict, List, Optional

from ..errors import MissingFieldError
from ..game_data.inheritance import BaseRecordMerger
from ..game_data.models import (
    BASE_HERO_KEY,
    HEROES_COLLECTION,
    VERSION_KEY,
    RawDocument,
    RawRecord,
)
from ..models import Hero
from ..text.numeric import to_number
from .base import BaseSerializer

PRIMARY_ATTRIBUTES: Dict[str, str] = {
    "DOTA_ATTRIBUTE_STRENGTH": "str",
    "DOTA_ATTRIBUTE_AGILITY": "agi",
    "DOTA_ATTRIBUTE_INTELLECT": "int",
}

ATTACK_TYPES: Dict[str, str] = {
    "DOTA_UNIT_CAP_MELEE_ATTACK": "melee",
    "DOTA_UNIT_CAP_RANGED_ATTACK": "ranged",
}


class HeroesSerializer(BaseSerializer):
    """Serializer for heroes and their base stats."""

    collection_key = HEROES_COLLECTION
    ignored_keys = (
        VERSION_KEY,
        BASE_HERO_KEY,
        "npc_dota_hero_target_dummy",
    )

    def __init__(self, data: RawDocument):
        super().__init__(data)
        self._merger: Optional[BaseRecordMerger] = None

    @property
    def merger(self) -> BaseRecordMerger:
        """Return the merger over the base hero of the collection."""
        if self._merger is None:
            self._merger = BaseRecordMerger(self.records, BASE_HERO_KEY)
        return self._merger

    def serialize_record(self, key: str, raw: RawRecord) -> Hero:
        merged = self.merger.merge(raw)

        return Hero(
            id=to_number(merged.get("HeroID")),
            key=key,
            name=merged.get("workshop_guide_name"),
            roles=self.get_roles(key, merged),
            complexity=to_number(merged.get("Complexity")),
            primary_attribute=PRIMARY_ATTRIBUTES.get(merged.get("AttributePrimary", "")),
            base_str=to_number(merged.get("AttributeBaseStrength")),
            base_agi=to_number(merged.get("AttributeBaseAgility")),
            base_int=to_number(merged.get("AttributeBaseIntelligence")),
            str_gain=to_number(merged.get("AttributeStrengthGain")),
            agi_gain=to_number(merged.get("AttributeAgilityGain")),
            int_gain=to_number(merged.get("AttributeIntelligenceGain")),
            base_health=to_number(merged.get("StatusHealth")),
            base_mana=to_number(merged.get("StatusMana")),
            base_health_regen=to_number(merged.get("StatusHealthRegen")),
            base_mana_regen=to_number(merged.get("StatusManaRegen")),
            attack_type=ATTACK_TYPES.get(merged.get("AttackCapabilities", "")),
            attack_range=to_number(merged.get("AttackRange")),
            attack_rate=to_number(merged.get("AttackRate")),
            base_attack_min=to_number(merged.get("AttackDamageMin")),
            base_attack_max=to_number(merged.get("AttackDamageMax")),
            base_armor=to_number(merged.get("ArmorPhysical")),
            base_magical_resistance=to_number(merged.get("MagicalResistance")),
            movement_speed=to_number(merged.get("MovementSpeed")),
            movement_turn_rate=to_number(merged.get("MovementTurnRate")),
        )

    @staticmethod
    def get_roles(key: str, merged: RawRecord) -> List[str]:
        """Split the comma-separated Role field into lower-cased roles."""
        roles = merged.get("Role")
        if roles is None:
            raise MissingFieldError(key, "Role")
        return [role.lower() for role in str(roles).split(",")]
