"""
Placeholder substitution for '%name%' markers in localization strings.
"""

import re
from typing import Any, Mapping, Optional, Sequence

PLACEHOLDER_RE = re.compile(r"%([^% ]*)%")


def replace_attributes(
    text: str, attributes: Optional[Sequence[Mapping[str, Any]]]
) -> str:
    """Substitute '%name%' placeholders with attribute values.

    '%%' becomes a literal '%'. The first record defining a name wins; a
    name no record defines is replaced by the bare name. When the entity
    has no attribute records at all (None) the text is returned untouched.
    """
    if attributes is None:
        return text

    def substitute(match: "re.Match[str]") -> str:
        name = match.group(1)
        if name == "":
            return "%"

        for record in attributes:
            if name in record:
                return str(record[name])
        return name

    return PLACEHOLDER_RE.sub(substitute, text)
