"""
dota_serializers: normalized public JSON for Dota game data

Turns upstream ability, hero and item definitions plus their localization
tokens into sorted, cross-referenced records.
"""

__version__ = "0.1.0"
__author__ = "dota-serializers Contributors"

# Core service imports
from .service import SerializerService, SourceDefinition, SOURCES, records_to_json
from .serializers import serialize_abilities, serialize_heroes, serialize_items
from .errors import (
    SerializerError,
    MissingFieldError,
    MalformedMarkupError,
    UnknownSourceError,
    SourceLoadError,
    ConfigError,
)

# Output data models
from .models import Ability, Hero, Item, CustomAttribute, DescriptionBlock

__all__ = [
    # Entry points
    "serialize_abilities",
    "serialize_heroes",
    "serialize_items",

    # Services
    "SerializerService",
    "SourceDefinition",
    "SOURCES",
    "records_to_json",

    # Errors
    "SerializerError",
    "MissingFieldError",
    "MalformedMarkupError",
    "UnknownSourceError",
    "SourceLoadError",
    "ConfigError",

    # Data models
    "Ability",
    "Hero",
    "Item",
    "CustomAttribute",
    "DescriptionBlock",
]
