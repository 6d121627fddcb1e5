"""
Data models for raw Dota game data.

Contains the type aliases and well-known keys of the raw ingestion layer.
Raw records stay plain string-keyed dicts so that schema drift upstream
never breaks loading; typed output records live in ``dota_serializers.models``.
"""

from typing import Any, Dict, List, TypeAlias, Union

# Type aliases for clarity
RawRecord: TypeAlias = Dict[str, Any]
"""A single raw entity (ability, hero, item) as a flat string-keyed dict."""

RawCollection: TypeAlias = Dict[str, RawRecord]
"""Maps the stable entity key (e.g. 'nevermore_shadowraze1') to its record."""

RawDocument: TypeAlias = Dict[str, Any]
"""A whole decoded upstream JSON file (data or localization blob)."""

AttributeRecords: TypeAlias = List[Dict[str, Any]]
"""Ordered list of single-purpose attribute records (AbilitySpecial)."""

Number: TypeAlias = Union[int, float]
"""A parsed numeric field; NaN marks an unparsable value."""


# Top-level collection names inside data blobs
ABILITIES_COLLECTION = "DOTAAbilities"
HEROES_COLLECTION = "DOTAHeroes"

# Pseudo-key present in every collection that is not an entity
VERSION_KEY = "Version"

# Localization blob layout: {"lang": {"Tokens": {...}}}
I18N_LANG_KEY = "lang"
I18N_TOKENS_KEY = "Tokens"

# Designated base hero every hero record inherits from
BASE_HERO_KEY = "npc_dota_hero_base"
