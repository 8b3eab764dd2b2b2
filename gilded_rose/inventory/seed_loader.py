"""
Seed inventory loader: JSON → ``list[Item]``.

File format
-----------
A JSON array of objects::

    [
      {"_comment": "Standard shop inventory."},
      {"name": "Aged Brie", "sell_in": 2, "quality": 0},
      {"name": "Sulfuras, Hand of Ragnaros", "sell_in": 0, "quality": 80}
    ]

Validation rules
----------------
- The top-level value must be an array.
- Comment-only entries (no ``name`` key, only ``_comment*`` keys) are skipped.
- Every remaining entry needs ``name``, ``sell_in`` and ``quality``.
- ``sell_in`` and ``quality`` must be integers.
- Names are NOT validated; unknown names simply age as ordinary stock.
- Quality outside 0-50 is accepted (the engine clamps it on the next tick).

Usage
-----
    from gilded_rose.inventory.seed_loader import load_inventory

    items = load_inventory(Path("config/inventory/default_items.json"))
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from gilded_rose.models.item import Item

log = logging.getLogger(__name__)

_REQUIRED_FIELDS: tuple[str, ...] = ("name", "sell_in", "quality")


def _is_comment(rec: dict[str, Any]) -> bool:
    return bool(rec) and all(key.startswith("_comment") for key in rec)


def _validate_records(records: list[Any]) -> None:
    """Raise ValueError for any structural problems in the records list."""
    for i, rec in enumerate(records):
        if not isinstance(rec, dict):
            raise ValueError(f"Inventory entry at index {i} is not an object.")
        missing = [f for f in _REQUIRED_FIELDS if f not in rec]
        if missing:
            raise ValueError(
                f"Inventory entry at index {i} is missing field(s): {', '.join(missing)}."
            )


def parse_inventory(records: list[Any]) -> list[Item]:
    """Build ``Item`` models from already-decoded JSON records.

    Args:
        records: Decoded JSON array (comment entries allowed).

    Returns:
        Items in file order.

    Raises:
        ValueError: On non-array input, missing fields, or non-integer values.
    """
    if not isinstance(records, list):
        raise ValueError("Inventory file must contain a JSON array.")

    item_records = [r for r in records if not (isinstance(r, dict) and _is_comment(r))]
    _validate_records(item_records)

    items: list[Item] = []
    for i, rec in enumerate(item_records):
        try:
            items.append(
                Item(name=rec["name"], sell_in=rec["sell_in"], quality=rec["quality"])
            )
        except ValidationError as exc:
            raise ValueError(f"Inventory entry at index {i} is invalid:\n{exc}") from exc
    return items


def load_inventory(path: Path) -> list[Item]:
    """Load and validate a JSON inventory file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the file is not valid JSON or fails validation.
    """
    log.info("Loading inventory from %s", path)
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Inventory file {path} is not valid JSON: {exc}") from exc

    items = parse_inventory(raw)
    log.info("Loaded %d item(s) from %s", len(items), path)
    return items
