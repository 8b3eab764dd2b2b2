"""
gilded_rose: In-memory inventory aging simulation.

Quick start::

    from gilded_rose import Item, advance

    items = [Item.new("Aged Brie", 2, 0), Item.new("Elixir of the Mongoose", 5, 7)]
    advance(items)
"""

from gilded_rose.engine.aging import GildedRose, advance, simulate
from gilded_rose.engine.categorizer import categorize
from gilded_rose.engine.rules import next_quality, next_sell_in
from gilded_rose.models.item import DayReport, Item
from gilded_rose.taxonomy.aging_taxonomy import AgingCategory

__all__ = [
    "AgingCategory",
    "DayReport",
    "GildedRose",
    "Item",
    "advance",
    "categorize",
    "next_quality",
    "next_sell_in",
    "simulate",
]
