"""
Item upgrade graph.

Requirements point from an item to its components; upgrades are the
inverse edge, stored on the component and pointing at the items built
from it.
"""

import logging
from typing import List, Sequence

from ..models import Item

logger = logging.getLogger(__name__)


def get_upgrades(items: Sequence[Item], item: Item) -> List[str]:
    """Return keys of the other non-recipe items whose requirements contain item.key."""
    return [
        candidate.key
        for candidate in items
        if not candidate.recipe
        and candidate is not item
        and item.key in candidate.requirements
    ]


def build_upgrades(items: Sequence[Item]) -> None:
    """Fill ``upgrades`` on every item in place. Quadratic over the item list."""
    edges = 0
    for item in items:
        item.upgrades = get_upgrades(items, item)
        edges += len(item.upgrades)

    logger.debug(f"Built upgrade graph: {edges} edges across {len(items)} items")
