"""
Inventory item and daily snapshot models.

``Item`` is the only mutable model in the project: the aging engine writes
``sell_in`` and ``quality`` back in place once per simulated day.  ``name``
is a frozen field, so reassigning it raises ``ValidationError``.

Quality is deliberately NOT range-checked here.  Out-of-range values are
accepted as-is and pulled back into bounds by the engine on the next tick.
``sell_in`` and ``quality`` are strict integers: strings, floats and booleans
are rejected rather than coerced.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class Item(BaseModel):
    """A single stock item.

    Attributes:
        name: Free-text identifier. Determines the aging category.
        sell_in: Days left until the sell-by date; negative once past it.
        quality: Desirability score, normally 0-50 (legendary items hold 80).
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str = Field(frozen=True)
    sell_in: StrictInt
    quality: StrictInt

    @classmethod
    def new(cls, name: str, sell_in: int, quality: int) -> Item:
        """Positional constructor: ``Item.new("Aged Brie", 2, 0)``."""
        return cls(name=name, sell_in=sell_in, quality=quality)

    def as_row(self) -> tuple[str, int, int]:
        return (self.name, self.sell_in, self.quality)

    def __str__(self) -> str:
        return f"{self.name}, {self.sell_in}, {self.quality}"


class DayReport(BaseModel):
    """Frozen snapshot of the whole collection at the start of a day.

    Attributes:
        day: Day number, 0 for the initial inventory.
        rows: ``(name, sell_in, quality)`` per item, in collection order.
    """

    model_config = ConfigDict(frozen=True)

    day: int = Field(ge=0)
    rows: list[tuple[str, int, int]]

    @classmethod
    def capture(cls, day: int, items: list[Item]) -> DayReport:
        return cls(day=day, rows=[item.as_row() for item in items])
