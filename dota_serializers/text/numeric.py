"""
Numeric conversions for stringly-typed game data fields.

Upstream encodes every number as a string, and per-level values as a
space-separated list ("600 650 700 750"). Conversions follow the
semantics the public API has always exposed: unparsable values become
NaN (serialized as null), integral values are emitted as ints.
"""

import math
import re
from typing import Any, List

from ..game_data.models import Number

_INT_PREFIX_RE = re.compile(r"\s*([+-]?\d+)")
_RADIX_RE = re.compile(r"0([xob])([0-9a-z]+)", re.IGNORECASE)
_RADIX_BASES = {"x": 16, "o": 8, "b": 2}


def _normalize(value: float) -> Number:
    """Return an int for finite integral floats, the float otherwise."""
    if math.isfinite(value) and value.is_integer():
        return int(value)
    return value


def to_number(value: Any) -> Number:
    """Convert a raw field to a number.

    Strings are trimmed; an empty string is 0. Unsigned 0x/0o/0b
    literals are read in their base. Missing or unparsable values
    (digit separators included) yield NaN.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return _normalize(float(value))
    if not isinstance(value, str):
        return math.nan

    text = value.strip()
    if not text:
        return 0
    if "_" in text:
        return math.nan

    radix = _RADIX_RE.fullmatch(text)
    if radix:
        try:
            return int(radix.group(2), _RADIX_BASES[radix.group(1).lower()])
        except ValueError:
            return math.nan

    unsigned = text.lstrip("+-")
    if unsigned.lower() in ("nan", "inf", "infinity") and unsigned != "Infinity":
        return math.nan

    try:
        return _normalize(float(text))
    except ValueError:
        return math.nan


def parse_int(value: Any) -> Number:
    """Parse the leading base-10 integer of a raw field ("1500" -> 1500, "x" -> NaN)."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return int(value) if math.isfinite(value) else math.nan
    match = _INT_PREFIX_RE.match(value) if isinstance(value, str) else None
    return int(match.group(1)) if match else math.nan


def to_numeric_set(text: str, positive_only: bool = False) -> List[Number]:
    """Parse a space-separated per-level list into distinct numbers.

    First occurrence wins and order is preserved. NaN entries are dropped.
    With positive_only, zero and negative values are dropped as well.

    >>> to_numeric_set("3 1 3 2 1")
    [3, 1, 2]
    >>> to_numeric_set("-1 0 5 5", positive_only=True)
    [5]
    """
    values: List[Number] = []

    for token in str(text).split(" "):
        number = to_number(token)
        if math.isnan(number) or number in values:
            continue
        values.append(number)

    if positive_only:
        values = [v for v in values if v > 0]

    return values
