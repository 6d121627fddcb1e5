"""
Error types raised by the serializers and their boundary.

Unresolved placeholders, localization tokens and indirect references are
deliberately absent from this module: they degrade to omitted or literal
output instead of failing.
"""

from typing import Optional


class SerializerError(Exception):
    """Base class for all serializer failures."""
    pass


class MissingFieldError(SerializerError):
    """Raised when a field the output schema treats as mandatory is absent."""

    def __init__(self, entity_key: str, field_name: str):
        self.entity_key = entity_key
        self.field_name = field_name
        super().__init__(f"'{entity_key}' is missing required field '{field_name}'")


class MalformedMarkupError(SerializerError):
    """Raised when an <h1> description segment is not '<h1>type : header</h1>body'."""

    def __init__(self, segment: str, entity_key: Optional[str] = None):
        self.segment = segment
        self.entity_key = entity_key
        where = f" in '{entity_key}'" if entity_key else ""
        super().__init__(f"Malformed description markup{where}: {segment!r}")


class UnknownSourceError(SerializerError):
    """Raised when a source type that is not registered is requested."""

    def __init__(self, source: str):
        self.source = source
        super().__init__(f"Source '{source}' does not exist")


class SourceLoadError(SerializerError):
    """Raised when an upstream file cannot be read or decoded."""

    def __init__(self, path: str, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Could not load {path}: {cause}")


class ConfigError(Exception):
    """Raised when configuration is invalid or cannot be accessed."""
    pass
