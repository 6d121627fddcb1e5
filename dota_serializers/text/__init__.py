"""
Text primitives for localization strings and stringly-typed fields.

Token lookup, markup cleanup, placeholder substitution, numeric parsing
and custom attribute extraction. Everything here is pure and stateless.
"""

from .tokens import TokenRepository, normalize_tokens
from .formatting import format_description, strip_html_tags, strip_extra_whitespace
from .placeholders import replace_attributes
from .numeric import Number, to_number, parse_int, to_numeric_set
from .attributes import (
    to_records,
    to_attribute_records,
    format_custom_attribute,
    format_custom_attributes,
)

__all__ = [
    "TokenRepository",
    "normalize_tokens",
    "format_description",
    "strip_html_tags",
    "strip_extra_whitespace",
    "replace_attributes",
    "Number",
    "to_number",
    "parse_int",
    "to_numeric_set",
    "to_records",
    "to_attribute_records",
    "format_custom_attribute",
    "format_custom_attributes",
]
