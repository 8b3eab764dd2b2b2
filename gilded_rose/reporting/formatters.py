"""
Plain-text formatters for items and simulation output.

All formatters return strings suitable for ``typer.echo()``.

Output layout
-------------
One block per simulated day, blocks separated by a blank line::

  -------- day 0 --------
  name, sellIn, quality
  +5 Dexterity Vest, 10, 20
  Aged Brie, 2, 0

The layout matches the classic text fixture so runs can be diffed against
approved output.
"""

from __future__ import annotations

from gilded_rose.models.item import DayReport, Item

DAY_HEADER = "-------- day {day} --------"
COLUMN_HEADER = "name, sellIn, quality"


def format_row(name: str, sell_in: int, quality: int) -> str:
    return f"{name}, {sell_in}, {quality}"


def format_item(item: Item) -> str:
    """Render one item as ``"<name>, <sell_in>, <quality>"``."""
    return format_row(item.name, item.sell_in, item.quality)


def format_day_report(report: DayReport) -> str:
    """Render one day's snapshot with its day and column headers."""
    lines = [DAY_HEADER.format(day=report.day), COLUMN_HEADER]
    lines.extend(format_row(*row) for row in report.rows)
    return "\n".join(lines)


def format_simulation(reports: list[DayReport]) -> str:
    """Render a full run, one block per day separated by blank lines."""
    return "\n\n".join(format_day_report(r) for r in reports)
