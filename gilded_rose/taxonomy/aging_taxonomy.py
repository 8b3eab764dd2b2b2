"""
Aging category taxonomy for inventory items.

Every item belongs to exactly one ``AgingCategory``.  The category decides
how the item's quality moves each day and whether its sell-in counter runs
at all.  Membership is derived from the item name on every tick and never
stored on the item.

Name markers
------------
  ``AGED_STOCK_NAME``    exact name match ("Aged Brie")
  ``EVENT_PASS_MARKER``  substring match ("Backstage passes ...")
  ``LEGENDARY_MARKER``   substring match ("Sulfuras, Hand of Ragnaros")
  ``PERISHABLE_MARKER``  substring match ("Conjured Mana Cake")

Anything else is ``AgingCategory.ORDINARY``.

This module has NO imports from any other ``gilded_rose`` package.
"""

from enum import StrEnum


class AgingCategory(StrEnum):
    """Behavioral class an item's name maps to."""

    ORDINARY = "ordinary"
    """Default stock. Loses quality every day, twice as fast past sell-by."""

    AGED_STOCK = "aged_stock"
    """Improves with age; gains quality faster once past sell-by."""

    EVENT_PASS = "event_pass"
    """Gains value as the event approaches, worthless once it has passed."""

    LEGENDARY = "legendary"
    """Never sold and never degrades. Quality and sell-in are frozen."""

    PERISHABLE = "perishable"
    """Conjured goods. Degrade at double the ordinary rate."""


AGED_STOCK_NAME = "Aged Brie"
EVENT_PASS_MARKER = "Backstage passes"
LEGENDARY_MARKER = "Sulfuras"
PERISHABLE_MARKER = "Conjured"

# Substring markers in match order. AGED_STOCK is checked first by exact name.
SUBSTRING_MARKERS: tuple[tuple[str, AgingCategory], ...] = (
    (EVENT_PASS_MARKER, AgingCategory.EVENT_PASS),
    (LEGENDARY_MARKER, AgingCategory.LEGENDARY),
    (PERISHABLE_MARKER, AgingCategory.PERISHABLE),
)
