"""
Attribute records and custom tooltip rows.

Abilities and items carry an ordered list of attribute records
(AbilitySpecial). Each record may have a localized header token; matching
records become CustomAttribute rows with their header decorations.
"""

import logging
from typing import Any, List, Mapping, Optional

from ..game_data.models import AttributeRecords
from ..models import CustomAttribute
from .formatting import ESCAPED_NEWLINE, strip_html_tags
from .tokens import TOOLTIP_PREFIX

logger = logging.getLogger(__name__)

VARIABLE_PREFIX = "dota_ability_variable_"


def to_records(value: Any) -> List[Any]:
    """Return a list for list-or-ordinal-mapping fields ({"01": a, "02": b} -> [a, b])."""
    if isinstance(value, list):
        return value
    if isinstance(value, dict):
        return list(value.values())
    return []


def to_attribute_records(value: Any) -> Optional[AttributeRecords]:
    """Normalize a raw AbilitySpecial field; None when the entity has none."""
    if not value:
        return None
    return [record for record in to_records(value) if isinstance(record, dict)]


def format_custom_attribute(
    record: Mapping[str, Any], strings: Mapping[str, str], entity_key: str
) -> Optional[CustomAttribute]:
    """Build the tooltip row for one attribute record, or None without a header token."""
    key = next(
        (k for k in record if f"{TOOLTIP_PREFIX}{entity_key}_{k}" in strings), None
    )
    if key is None:
        return None

    header: Optional[str] = strings[f"{TOOLTIP_PREFIX}{entity_key}_{key}"]
    prefix: Optional[str] = None
    suffix: Optional[str] = None

    if header.startswith("%"):
        header = header[1:]
        suffix = "%"

    if header.startswith("+$"):
        variable = header[2:]
        header = strings.get(f"{VARIABLE_PREFIX}{variable}")
        prefix = "+"
        if header is None:
            logger.debug(f"Unresolved variable '{variable}' for {entity_key}.{key}")

    if header is not None:
        header = strip_html_tags(header).replace(ESCAPED_NEWLINE, "")

    return CustomAttribute(
        key=key,
        value=record[key],
        scepter=key.endswith("_scepter"),
        header=header,
        prefix=prefix,
        suffix=suffix,
    )


def format_custom_attributes(
    attributes: AttributeRecords, strings: Mapping[str, str], entity_key: str
) -> List[CustomAttribute]:
    """Extract custom attribute rows in record order, dropping records without a header."""
    rows: List[CustomAttribute] = []
    for record in attributes:
        row = format_custom_attribute(record, strings, entity_key)
        if row is not None:
            rows.append(row)
    return rows
