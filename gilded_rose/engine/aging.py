"""
Daily aging pass over an item collection.

``advance(items)`` is the engine's single operation.  For each item, in list
order, it classifies the name, derives the new quality and sell-in from the
item's own pre-tick values, and only then writes both back.  An item never
reads any other item's state, so the order of the collection has no effect
on the result.

``GildedRose`` wraps a collection for callers that expect the classic
``update_quality()`` method.  ``simulate()`` drives several days and captures
a ``DayReport`` per day for display.

Usage::

    from gilded_rose.engine.aging import GildedRose
    from gilded_rose.models.item import Item

    rose = GildedRose([Item.new("Aged Brie", 2, 0)])
    rose.update_quality()
    print(rose.items[0])   # Aged Brie, 1, 1
"""

from __future__ import annotations

import logging

from gilded_rose.engine.categorizer import categorize
from gilded_rose.engine.rules import next_quality, next_sell_in
from gilded_rose.models.item import DayReport, Item

logger = logging.getLogger(__name__)


def advance(items: list[Item]) -> None:
    """Age every item in ``items`` by one day, in place.

    Never raises for any name or integer field values: unknown names age as
    ordinary stock and out-of-range quality is clamped back into bounds.
    """
    for item in items:
        category = categorize(item.name)
        sell_in, quality = item.sell_in, item.quality

        new_quality = next_quality(category, sell_in, quality)
        new_sell_in = next_sell_in(category, sell_in)

        item.quality = new_quality
        item.sell_in = new_sell_in

    logger.debug("Advanced %d item(s) by one day.", len(items))


class GildedRose:
    """Owner of the inventory collection.

    Attributes:
        items: The managed items, in insertion order.  Mutated in place.
    """

    def __init__(self, items: list[Item]) -> None:
        self.items = items

    def update_quality(self) -> None:
        """Advance the whole inventory by one day."""
        advance(self.items)


def simulate(items: list[Item], days: int) -> list[DayReport]:
    """Run the inventory through ``days`` day snapshots.

    Day 0 is captured before any update, so ``days`` reports are produced
    and ``days - 1`` ticks are applied.

    Args:
        items: Collection to age.  Mutated in place.
        days:  Number of day snapshots to capture (>= 1).

    Returns:
        One ``DayReport`` per day, oldest first.

    Raises:
        ValueError: If ``days`` is less than 1.
    """
    if days < 1:
        raise ValueError(f"days must be >= 1, got {days}.")

    reports = [DayReport.capture(0, items)]
    for day in range(1, days):
        advance(items)
        reports.append(DayReport.capture(day, items))

    logger.info(
        "Simulated %d day(s) over %d item(s).",
        days,
        len(items),
        extra={"days": days, "item_count": len(items)},
    )
    return reports
