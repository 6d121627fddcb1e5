"""
Ability serializer.

Turns DOTAAbilities records into public ability records: localized name,
description with substituted values, notes, targeting metadata, per-level
numeric values and custom tooltip attributes. Talents are reduced to
their identity fields.
"""

from typing import Dict, List, Optional

from ..game_data.models import ABILITIES_COLLECTION, VERSION_KEY, AttributeRecords, RawRecord
from ..models import Ability
from ..text.attributes import format_custom_attributes, to_attribute_records
from ..text.formatting import format_description, strip_extra_whitespace
from ..text.numeric import Number, to_number, to_numeric_set
from ..text.placeholders import replace_attributes
from .base import LocalizedSerializer

TALENT = "talent"
DEFAULT_ABILITY_TYPE = "basic"

ABILITY_TYPES: Dict[str, str] = {
    "DOTA_ABILITY_TYPE_ATTRIBUTES": TALENT,
    "DOTA_ABILITY_TYPE_ULTIMATE": "ultimate",
}

TEAM_TARGETS: Dict[str, str] = {
    "DOTA_UNIT_TARGET_TEAM_BOTH": "both",
    "DOTA_UNIT_TARGET_TEAM_ENEMY": "enemy",
    "DOTA_UNIT_TARGET_TEAM_FRIENDLY": "ally",
    "DOTA_UNIT_TARGET_TEAM_ENEMY | DOTA_UNIT_TARGET_TEAM_FRIENDLY": "both",
    "DOTA_UNIT_TARGET_TEAM_FRIENDLY | DOTA_UNIT_TARGET_TEAM_ENEMY": "both",
}

DAMAGE_TYPES: Dict[str, str] = {
    "DAMAGE_TYPE_MAGICAL": "magical",
    "DAMAGE_TYPE_PHYSICAL": "physical",
    "DAMAGE_TYPE_PURE": "pure",
}

SPELL_IMMUNITY_TYPES: Dict[str, bool] = {
    "SPELL_IMMUNITY_ALLIES_NO": False,
    "SPELL_IMMUNITY_ALLIES_YES": True,
    "SPELL_IMMUNITY_ENEMIES_YES": True,
    "SPELL_IMMUNITY_ENEMIES_NO": False,
}

UNIT_TARGET_SEPARATOR = " | "


def ability_type(raw_type: Optional[str]) -> str:
    """Map a raw AbilityType to 'talent', 'ultimate' or 'basic' (the default)."""
    if raw_type in ABILITY_TYPES:
        return ABILITY_TYPES[raw_type]
    return DEFAULT_ABILITY_TYPE


class AbilitiesSerializer(LocalizedSerializer):
    """Serializer for hero abilities."""

    collection_key = ABILITIES_COLLECTION
    ignored_keys = (
        VERSION_KEY,
        "ability_base",
        "ability_deward",
        "attribute_bonus",
        "default_attack",
        "dota_base_ability",
    )

    def serialize_record(self, key: str, raw: RawRecord) -> Ability:
        ability = Ability(
            id=to_number(raw.get("ID")),
            key=key,
            name=strip_extra_whitespace(self.get_string(key)),
            type=ability_type(raw.get("AbilityType")),
        )

        if ability.type == TALENT:
            return ability

        description = self.get_string(key, "Description")
        attributes = to_attribute_records(raw.get("AbilitySpecial"))

        ability.description = (
            self.get_description(description, attributes) if description else None
        )
        ability.notes = self.get_notes(key)
        ability.lore = self.get_string(key, "Lore")
        ability.team_target = TEAM_TARGETS.get(raw.get("AbilityUnitTargetTeam", ""))
        ability.unit_targets = self.get_unit_targets(raw.get("AbilityUnitTargetType"))
        ability.damage_type = DAMAGE_TYPES.get(raw.get("AbilityUnitDamageType", ""))
        ability.pierces_spell_immunity = SPELL_IMMUNITY_TYPES.get(
            raw.get("SpellImmunityType", "")
        )
        ability.cast_range = self.get_numeric_set(raw, "AbilityCastRange", positive_only=True)
        ability.cast_point = self.get_numeric_set(raw, "AbilityCastPoint", positive_only=True)
        ability.channel_time = self.get_numeric_set(raw, "AbilityChannelTime", positive_only=True)
        ability.duration = self.get_numeric_set(raw, "AbilityDuration", positive_only=True)
        ability.damage = self.get_numeric_set(raw, "AbilityDamage", positive_only=True)
        ability.cooldown = self.get_numeric_set(raw, "AbilityCooldown")
        ability.mana_cost = self.get_numeric_set(raw, "AbilityManaCost")
        ability.has_scepter_upgrade = raw.get("HasScepterUpgrade") == "1"
        ability.is_granted_by_scepter = raw.get("IsGrantedByScepter") == "1"
        ability.custom_attributes = (
            format_custom_attributes(attributes, self.strings, key)
            if attributes is not None
            else None
        )

        return ability

    @staticmethod
    def get_description(
        description: str, attributes: Optional[AttributeRecords]
    ) -> List[str]:
        """Substitute placeholders, then split into display lines."""
        return format_description(replace_attributes(description, attributes))

    @staticmethod
    def get_unit_targets(targets: Optional[str]) -> Optional[List[str]]:
        """Map a pipe-delimited target list; unmapped entries are dropped."""
        if not targets:
            return None
        return [
            TEAM_TARGETS[target]
            for target in targets.split(UNIT_TARGET_SEPARATOR)
            if target in TEAM_TARGETS
        ]

    @staticmethod
    def get_numeric_set(
        raw: RawRecord, field_name: str, positive_only: bool = False
    ) -> Optional[List[Number]]:
        """Parse a per-level field, None when the field is absent or empty."""
        value = raw.get(field_name)
        if not value:
            return None
        return to_numeric_set(value, positive_only=positive_only)
