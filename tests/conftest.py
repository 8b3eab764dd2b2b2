"""
Shared pytest fixtures for the Gilded Rose test suite.

Provides:
  - ``standard_rows`` / ``standard_inventory``: the nine-item day-zero shop
    inventory, built fresh for each test.
  - ``inventory_file``: the same inventory written to a temporary JSON file.
  - ``age``: helper that ticks a single item N days.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable

import pytest

from gilded_rose.engine.aging import advance
from gilded_rose.models.item import Item

STANDARD_ROWS: list[tuple[str, int, int]] = [
    ("+5 Dexterity Vest", 10, 20),
    ("Aged Brie", 2, 0),
    ("Elixir of the Mongoose", 5, 7),
    ("Sulfuras, Hand of Ragnaros", 0, 80),
    ("Sulfuras, Hand of Ragnaros", -1, 80),
    ("Backstage passes to a TAFKAL80ETC concert", 15, 20),
    ("Backstage passes to a TAFKAL80ETC concert", 10, 49),
    ("Backstage passes to a TAFKAL80ETC concert", 5, 49),
    ("Conjured Mana Cake", 3, 6),
]


@pytest.fixture
def standard_rows() -> list[tuple[str, int, int]]:
    """Day-zero rows of the standard shop inventory."""
    return list(STANDARD_ROWS)


@pytest.fixture
def standard_inventory() -> list[Item]:
    """Fresh copy of the standard shop inventory."""
    return [Item.new(*row) for row in STANDARD_ROWS]


@pytest.fixture
def inventory_file(tmp_path: Path) -> Path:
    """Standard inventory as a JSON seed file, with a leading comment entry."""
    records: list[dict] = [{"_comment": "test inventory"}]
    records.extend(
        {"name": name, "sell_in": sell_in, "quality": quality}
        for name, sell_in, quality in STANDARD_ROWS
    )
    path = tmp_path / "items.json"
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


@pytest.fixture
def age() -> Callable[[Item, int], Item]:
    """Return a helper that advances a single item ``days`` times."""

    def _age(item: Item, days: int = 1) -> Item:
        items = [item]
        for _ in range(days):
            advance(items)
        return item

    return _age
