"""
Item serializer.

Items live in the same DOTAAbilities layout as abilities but mean
something else: shop placement, cost, recipes and components. After
every item is serialized the upgrade graph is derived from the
requirement lists.
"""

import re
from typing import List, Optional, Set

from ..errors import MalformedMarkupError
from ..game_data.models import ABILITIES_COLLECTION, VERSION_KEY, AttributeRecords, RawRecord
from ..models import DescriptionBlock, Item
from ..text.attributes import format_custom_attributes, to_attribute_records, to_records
from ..text.formatting import format_description, strip_extra_whitespace
from ..text.numeric import Number, parse_int, to_number
from ..text.placeholders import replace_attributes
from .base import LocalizedSerializer
from .upgrades import build_upgrades

ITEM_PREFIX = "item_"
RECIPE_PREFIX = "item_recipe"
RECIPE_KEY_PREFIX = "item_recipe_"
FREE_COST = "0"
REQUIREMENT_SEPARATOR = ";"

HINT_BLOCK = "hint"
HEADER_TAG = "<h1>"
SEGMENT_BREAK_RE = re.compile(r"(?:\\n)+")
HEADER_BLOCK_RE = re.compile(r"<h1>\s*(.*)\s*:\s*(.*)\s*</h1>\s*([\s\S]*)", re.IGNORECASE)


def is_recipe(key: str) -> bool:
    """Check whether key names a recipe scroll."""
    return key.startswith(RECIPE_PREFIX)


def recipe_key(key: str) -> str:
    """Return the companion recipe key (item_x -> item_recipe_x); recipes map to themselves."""
    if is_recipe(key):
        return key
    return key.replace(ITEM_PREFIX, RECIPE_KEY_PREFIX, 1)


def parse_description_block(segment: str, entity_key: Optional[str] = None) -> DescriptionBlock:
    """Turn one description segment into a block.

    Plain segments are hints. Segments with an <h1> must read
    '<h1>type : header</h1>body'.

    Raises:
        MalformedMarkupError: If an <h1> segment does not match that shape
    """
    if HEADER_TAG not in segment:
        return DescriptionBlock(type=HINT_BLOCK, body=format_description(segment))

    match = HEADER_BLOCK_RE.search(segment)
    if not match:
        raise MalformedMarkupError(segment, entity_key)

    block_type, header, body = match.groups()
    return DescriptionBlock(
        type=block_type.strip().lower(),
        header=header.strip(),
        body=format_description(body),
    )


class ItemsSerializer(LocalizedSerializer):
    """Serializer for items, recipes included."""

    collection_key = ABILITIES_COLLECTION

    def get_ignored_keys(self) -> Set[str]:
        """Return free recipes plus the version row."""
        ignored = {
            key
            for key, raw in self.records.items()
            if is_recipe(key) and isinstance(raw, dict) and raw.get("ItemCost") == FREE_COST
        }
        ignored.add(VERSION_KEY)
        return ignored

    def serialize_record(self, key: str, raw: RawRecord) -> Item:
        description = self.get_string(key, "Description")
        attributes = to_attribute_records(raw.get("AbilitySpecial"))
        secret_shop = raw.get("SecretShop") == "1"
        side_shop = raw.get("SideShop") == "1" and not secret_shop

        return Item(
            id=to_number(raw.get("ID")),
            key=key,
            name=strip_extra_whitespace(self.get_name(key, raw.get("ItemBaseLevel"))),
            description=(
                self.get_description(key, description, attributes) if description else None
            ),
            notes=self.get_notes(key),
            lore=self.get_string(key, "Lore"),
            recipe=is_recipe(key),
            cost=parse_int(raw["ItemCost"]) if raw.get("ItemCost") else None,
            home_shop=not side_shop and not secret_shop,
            side_shop=side_shop,
            secret_shop=secret_shop,
            cooldown=self.get_number(raw, "AbilityCooldown"),
            mana_cost=self.get_number(raw, "AbilityManaCost"),
            custom_attributes=(
                format_custom_attributes(attributes, self.strings, key)
                if attributes is not None
                else None
            ),
            requirements=self.get_requirements(key),
        )

    def finalize(self, records: List[Item]) -> List[Item]:
        build_upgrades(records)
        return records

    def get_name(self, key: str, level: Optional[str]) -> Optional[str]:
        """Return the localized name, suffixed with the level for leveled items."""
        name = self.get_string(key)
        if name is None or not level:
            return name
        return f"{name} (level {level})"

    def get_description(
        self, key: str, description: str, attributes: Optional[AttributeRecords]
    ) -> List[DescriptionBlock]:
        """Substitute placeholders and segment the description into blocks.

        Malformed <h1> segments are logged and skipped; the rest of the
        description is kept.
        """
        blocks: List[DescriptionBlock] = []

        for segment in SEGMENT_BREAK_RE.split(replace_attributes(description, attributes)):
            if not segment.strip():
                continue
            try:
                blocks.append(parse_description_block(segment, key))
            except MalformedMarkupError as e:
                self.logger.warning(f"Skipping description segment: {e}")

        return blocks

    def get_requirements(self, key: str) -> List[str]:
        """Return the component keys consumed to build this item.

        Read from the companion recipe's first ItemRequirements entry. A
        purchasable (non-recipe, non-free) item also lists its own key, so
        e.g. item_arcane_blink appears in its own requirements. Consumers
        wanting only components should drop the item's key; upgrades never
        point an item at itself.
        """
        recipe = self.records.get(recipe_key(key))
        if not isinstance(recipe, dict):
            return []

        entries = to_records(recipe.get("ItemRequirements"))
        if not entries or not entries[0]:
            return []

        requirements = str(entries[0]).split(REQUIREMENT_SEPARATOR)

        cost = self.records[key].get("ItemCost")
        if not is_recipe(key) and cost and cost != FREE_COST:
            requirements.append(key)

        return requirements

    @staticmethod
    def get_number(raw: RawRecord, field_name: str) -> Optional[Number]:
        """Convert a single-valued numeric field, None when absent or empty."""
        value = raw.get(field_name)
        if not value:
            return None
        return to_number(value)
