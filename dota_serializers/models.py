"""
Output records produced by the serializers.

Records are plain dataclasses built field by field from raw data. A field
left as None is absent from the public JSON; see compact().
"""

from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any, Dict, List, Optional

from .game_data.models import Number


def compact(value: Any) -> Any:
    """Project records into JSON-ready structures, omitting None fields."""
    if is_dataclass(value) and not isinstance(value, type):
        result: Dict[str, Any] = {}
        for f in fields(value):
            item = getattr(value, f.name)
            if item is not None:
                result[f.name] = compact(item)
        return result
    if isinstance(value, list):
        return [compact(item) for item in value]
    return value


class RecordMixin:
    """Adds the JSON projection to record dataclasses."""

    def to_dict(self) -> Dict[str, Any]:
        """Return the record as a dict with absent optional fields omitted."""
        return compact(self)


# =============================================================================
# Shared Models
# =============================================================================

@dataclass
class CustomAttribute(RecordMixin):
    """Tooltip row derived from one attribute record and its localized header."""
    key: str
    value: Any
    scepter: bool
    header: Optional[str] = None
    prefix: Optional[str] = None
    suffix: Optional[str] = None


@dataclass
class DescriptionBlock(RecordMixin):
    """One segment of an item description ('hint', 'active', 'passive', ...)."""
    type: str
    header: Optional[str] = None
    body: List[str] = field(default_factory=list)


# =============================================================================
# Entity Models
# =============================================================================

@dataclass
class Ability(RecordMixin):
    """Serialized ability. Talents only carry id, key, name and type."""
    id: Number
    key: str
    name: Optional[str]
    type: str
    description: Optional[List[str]] = None
    notes: Optional[List[str]] = None
    lore: Optional[str] = None
    team_target: Optional[str] = None
    unit_targets: Optional[List[str]] = None
    damage_type: Optional[str] = None
    pierces_spell_immunity: Optional[bool] = None
    cast_range: Optional[List[Number]] = None
    cast_point: Optional[List[Number]] = None
    channel_time: Optional[List[Number]] = None
    duration: Optional[List[Number]] = None
    damage: Optional[List[Number]] = None
    cooldown: Optional[List[Number]] = None
    mana_cost: Optional[List[Number]] = None
    has_scepter_upgrade: Optional[bool] = None
    is_granted_by_scepter: Optional[bool] = None
    custom_attributes: Optional[List[CustomAttribute]] = None


@dataclass
class Hero(RecordMixin):
    """Serialized hero with base stats merged from the base hero."""
    id: Number
    key: str
    name: Optional[str]
    roles: List[str]
    complexity: Number
    primary_attribute: Optional[str]
    base_str: Number
    base_agi: Number
    base_int: Number
    str_gain: Number
    agi_gain: Number
    int_gain: Number
    base_health: Number
    base_mana: Number
    base_health_regen: Number
    base_mana_regen: Number
    attack_type: Optional[str]
    attack_range: Number
    attack_rate: Number
    base_attack_min: Number
    base_attack_max: Number
    base_armor: Number
    base_magical_resistance: Number
    movement_speed: Number
    movement_turn_rate: Number


@dataclass
class Item(RecordMixin):
    """Serialized item, cross-referenced through requirements and upgrades."""
    id: Number
    key: str
    name: Optional[str]
    description: Optional[List[DescriptionBlock]] = None
    notes: List[str] = field(default_factory=list)
    lore: Optional[str] = None
    recipe: bool = False
    cost: Optional[Number] = None
    home_shop: bool = True
    side_shop: bool = False
    secret_shop: bool = False
    cooldown: Optional[Number] = None
    mana_cost: Optional[Number] = None
    custom_attributes: Optional[List[CustomAttribute]] = None
    requirements: List[str] = field(default_factory=list)
    upgrades: List[str] = field(default_factory=list)
