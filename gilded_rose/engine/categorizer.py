"""
Name-based item categorization.

``categorize()`` is a pure function of the name string.  It is evaluated
once per item per tick by the aging engine; nothing is cached on the item.
"""

from __future__ import annotations

from gilded_rose.taxonomy.aging_taxonomy import (
    AGED_STOCK_NAME,
    SUBSTRING_MARKERS,
    AgingCategory,
)


def categorize(name: str) -> AgingCategory:
    """Return the aging category for an item name.

    First match wins: exact aged-stock name, then the event-pass,
    legendary, and perishable substrings.  Unrecognized names are ordinary.

    Args:
        name: Item name exactly as stored on the ``Item``.

    Returns:
        The matching ``AgingCategory``.
    """
    if name == AGED_STOCK_NAME:
        return AgingCategory.AGED_STOCK
    for marker, category in SUBSTRING_MARKERS:
        if marker in name:
            return category
    return AgingCategory.ORDINARY
