"""Shared fixtures: small synthetic upstream blobs and isolated settings."""

import logging
from pathlib import Path
from typing import Any, Dict, Iterator

import pytest


@pytest.fixture
def abilities_data() -> Dict[str, Any]:
    """DOTAAbilities blob with a basic ability, an ultimate, a talent and an unnamed ability."""
    return {
        "DOTAAbilities": {
            "Version": "1",
            "ability_base": {"ID": "0"},
            "nevermore_shadowraze1": {
                "ID": "5059",
                "AbilityType": "DOTA_ABILITY_TYPE_BASIC",
                "AbilityUnitTargetTeam": "DOTA_UNIT_TARGET_TEAM_ENEMY",
                "AbilityUnitTargetType": "DOTA_UNIT_TARGET_HERO | DOTA_UNIT_TARGET_BASIC",
                "AbilityUnitDamageType": "DAMAGE_TYPE_MAGICAL",
                "SpellImmunityType": "SPELL_IMMUNITY_ENEMIES_NO",
                "AbilityCastRange": "0",
                "AbilityCastPoint": "0.55",
                "AbilityCooldown": "10 10 10 10",
                "AbilityManaCost": "90",
                "AbilityDamage": "90 160 230 300",
                "HasScepterUpgrade": "0",
                "AbilitySpecial": {
                    "01": {"var_type": "FIELD_INTEGER", "shadowraze_radius": "250"},
                    "02": {"var_type": "FIELD_INTEGER", "shadowraze_range": "200"},
                    "03": {"var_type": "FIELD_FLOAT", "duration": "8"},
                },
            },
            "nevermore_requiem": {
                "ID": "5064",
                "AbilityType": "DOTA_ABILITY_TYPE_ULTIMATE",
                "HasScepterUpgrade": "1",
                "AbilitySpecial": [
                    {"var_type": "FIELD_INTEGER", "requiem_line_damage_scepter": "80"},
                ],
            },
            "special_bonus_unique_nevermore_1": {
                "ID": "6000",
                "AbilityType": "DOTA_ABILITY_TYPE_ATTRIBUTES",
                "AbilitySpecial": {"01": {"var_type": "FIELD_INTEGER", "value": "2"}},
            },
            "antimage_blink": {
                "ID": "5004",
                "AbilityUnitTargetTeam": "DOTA_UNIT_TARGET_TEAM_FRIENDLY | DOTA_UNIT_TARGET_TEAM_ENEMY",
                "IsGrantedByScepter": "1",
            },
        }
    }


@pytest.fixture
def abilities_i18n() -> Dict[str, Any]:
    """Ability localization blob mixing both tooltip key spellings."""
    return {
        "lang": {
            "Language": "English",
            "Tokens": {
                "DOTA_Tooltip_ability_nevermore_shadowraze1": "Shadowraze  ",
                "DOTA_Tooltip_Ability_nevermore_shadowraze1_Description": (
                    "Shadow Fiend razes the area, dealing %AbilityDamage% damage."
                    "\\nRadius: %shadowraze_radius%.<br>Stacks 100%% of the time."
                ),
                "DOTA_Tooltip_ability_nevermore_shadowraze1_Note0": "Raze hits in a circle.",
                "DOTA_Tooltip_ability_nevermore_shadowraze1_Note1": "Does not hit wards.",
                "DOTA_Tooltip_ability_nevermore_shadowraze1_Note3": "Unreachable note.",
                "DOTA_Tooltip_ability_nevermore_shadowraze1_Lore": "Souls fuel the raze.",
                "DOTA_Tooltip_ability_nevermore_shadowraze1_shadowraze_radius": "RADIUS:",
                "DOTA_Tooltip_ability_nevermore_shadowraze1_duration": "%<b>DURATION</b>:\\n",
                "DOTA_Tooltip_ability_nevermore_requiem": "Requiem of Souls",
                "DOTA_Tooltip_ability_nevermore_requiem_requiem_line_damage_scepter": "+$damage",
                "dota_ability_variable_damage": "<font color='#fff'>Damage</font>",
                "DOTA_Tooltip_ability_special_bonus_unique_nevermore_1": "+2 Necromastery Souls",
                "DOTA_Tooltip_ability_special_bonus_unique_nevermore_1_Description": "Unused.",
            },
        }
    }


@pytest.fixture
def heroes_data() -> Dict[str, Any]:
    """DOTAHeroes blob with a base hero, the target dummy and two heroes."""
    return {
        "DOTAHeroes": {
            "Version": "1",
            "npc_dota_hero_base": {
                "AttributeBaseStrength": "0",
                "AttributeBaseAgility": "0",
                "AttackRate": "1.700000",
                "MovementTurnRate": "0.600000",
                "StatusHealth": "200",
                "Complexity": "1",
                "ArmorPhysical": "-1",
                "MagicalResistance": "25",
                "AttackCapabilities": "DOTA_UNIT_CAP_MELEE_ATTACK",
                "Role": "",
            },
            "npc_dota_hero_target_dummy": {"HeroID": "127", "Role": "Carry"},
            "npc_dota_hero_nevermore": {
                "HeroID": "11",
                "workshop_guide_name": "Shadow Fiend",
                "Role": "Carry,Nuker",
                "Complexity": "2",
                "AttributePrimary": "DOTA_ATTRIBUTE_AGILITY",
                "AttributeBaseStrength": "19",
                "AttributeBaseAgility": "20",
                "AttackCapabilities": "DOTA_UNIT_CAP_RANGED_ATTACK",
                "AttackRange": "500",
                "MovementSpeed": "305",
            },
            "npc_dota_hero_antimage": {
                "HeroID": "1",
                "workshop_guide_name": "Anti-Mage",
                "Role": "Carry,Escape,Nuker",
                "AttributePrimary": "DOTA_ATTRIBUTE_AGILITY",
                "AttributeBaseAgility": "24",
                "AttackRate": "1.4",
                "MovementSpeed": "310",
            },
        }
    }


@pytest.fixture
def items_data() -> Dict[str, Any]:
    """Item blob (DOTAAbilities layout) with recipes, shops and leveled items."""
    return {
        "DOTAAbilities": {
            "Version": "1",
            "item_blink": {
                "ID": "1",
                "ItemCost": "2250",
                "AbilityCooldown": "15.0",
                "AbilitySpecial": {"01": {"var_type": "FIELD_INTEGER", "blink_range": "1200"}},
            },
            "item_mystic_staff": {"ID": "58", "ItemCost": "2800", "SecretShop": "1"},
            "item_recipe_arcane_blink": {
                "ID": "598",
                "ItemCost": "0",
                "ItemRequirements": {"01": "item_blink;item_mystic_staff"},
            },
            "item_arcane_blink": {
                "ID": "600",
                "ItemCost": "6800",
                "AbilityCooldown": "15",
                "AbilityManaCost": "0",
            },
            "item_boots": {"ID": "29", "ItemCost": "500", "SideShop": "1"},
            "item_recipe_travel_boots": {
                "ID": "47",
                "ItemCost": "2000",
                "ItemRequirements": ["item_boots;item_recipe_travel_boots"],
            },
            "item_travel_boots": {"ID": "48", "ItemCost": "2500", "ItemBaseLevel": "1"},
            "item_travel_boots_2": {"ID": "220", "ItemCost": "4500", "ItemBaseLevel": "2"},
        }
    }


@pytest.fixture
def items_i18n() -> Dict[str, Any]:
    """Item localization blob."""
    return {
        "lang": {
            "Language": "English",
            "Tokens": {
                "DOTA_Tooltip_Ability_item_blink": "Blink Dagger",
                "DOTA_Tooltip_ability_item_blink_Description": (
                    "<h1>Active: Blink</h1> Teleport up to %blink_range% units."
                    "\\n\\nCannot be used for %blink_damage_cooldown% seconds after taking damage."
                ),
                "DOTA_Tooltip_ability_item_blink_Lore": "The fabled dagger.",
                "DOTA_Tooltip_ability_item_blink_blink_range": "BLINK RANGE:",
                "DOTA_Tooltip_ability_item_mystic_staff": "Mystic Staff",
                "DOTA_Tooltip_ability_item_mystic_staff_Description": (
                    "<h1>Passive</h1> No colon here.\\nGrants intelligence."
                ),
                "DOTA_Tooltip_ability_item_arcane_blink": "Arcane Blink",
                "DOTA_Tooltip_ability_item_boots": "Boots of Speed",
                "DOTA_Tooltip_ability_item_boots_Note0": "Does not stack.",
                "DOTA_Tooltip_ability_item_travel_boots": "Boots of Travel",
                "DOTA_Tooltip_ability_item_travel_boots_2": "Boots of  Travel",
            },
        }
    }


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    """Path of an isolated INI settings file."""
    return tmp_path / "settings.ini"


@pytest.fixture
def restore_logging() -> Iterator[None]:
    """Restore root logger handlers replaced by setup_logging."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    try:
        yield
    finally:
        root_logger.handlers[:] = handlers
        root_logger.setLevel(level)
