"""
Per-category transition rules.

Quality
-------
Each category has a rule ``(sell_in, quality) -> new quality`` computed from
the item's pre-tick values.  Bounded categories are clamped once, after the
whole day's delta, into ``[MIN_QUALITY, MAX_QUALITY]``::

  ordinary     -1        (-2 past sell-by)
  perishable   -2        (-4 past sell-by)
  aged_stock   +1        (+2 past sell-by)
  event_pass   +1 / +2 / +3 as the event nears, 0 once it has passed
  legendary    unchanged, never clamped

"Past sell-by" means ``sell_in < SELL_BY_THRESHOLD`` before the update.

Sell-in
-------
Legendary items never move; everything else counts down by one with no floor.

``QUALITY_RULES`` must hold an entry for every ``AgingCategory``; a category
without one raises ``KeyError``.
"""

from __future__ import annotations

from typing import Callable

from gilded_rose.taxonomy.aging_taxonomy import AgingCategory

MIN_QUALITY = 0
MAX_QUALITY = 50
LEGENDARY_QUALITY = 80

SELL_BY_THRESHOLD = 1
EVENT_PASS_DOUBLE_DAYS = 10
EVENT_PASS_TRIPLE_DAYS = 5

ORDINARY_DAILY_LOSS = 1
PERISHABLE_DAILY_LOSS = 2 * ORDINARY_DAILY_LOSS
AGED_STOCK_DAILY_GAIN = 1
EVENT_PASS_DAILY_GAIN = 1
EVENT_PASS_DOUBLE_GAIN = 2 * EVENT_PASS_DAILY_GAIN
EVENT_PASS_TRIPLE_GAIN = 3 * EVENT_PASS_DAILY_GAIN

QualityRule = Callable[[int, int], int]


def clamp_quality(value: int) -> int:
    return max(MIN_QUALITY, min(MAX_QUALITY, value))


def is_past_sell_by(sell_in: int) -> bool:
    return sell_in < SELL_BY_THRESHOLD


def _degrade(daily_loss: int) -> QualityRule:
    def rule(sell_in: int, quality: int) -> int:
        loss = 2 * daily_loss if is_past_sell_by(sell_in) else daily_loss
        return clamp_quality(quality - loss)
    return rule


def _aged_stock(sell_in: int, quality: int) -> int:
    gain = 2 * AGED_STOCK_DAILY_GAIN if is_past_sell_by(sell_in) else AGED_STOCK_DAILY_GAIN
    return clamp_quality(quality + gain)


def _event_pass(sell_in: int, quality: int) -> int:
    if sell_in <= 0:
        return MIN_QUALITY
    if sell_in <= EVENT_PASS_TRIPLE_DAYS:
        gain = EVENT_PASS_TRIPLE_GAIN
    elif sell_in <= EVENT_PASS_DOUBLE_DAYS:
        gain = EVENT_PASS_DOUBLE_GAIN
    else:
        gain = EVENT_PASS_DAILY_GAIN
    return clamp_quality(quality + gain)


def _legendary(sell_in: int, quality: int) -> int:
    return quality


QUALITY_RULES: dict[AgingCategory, QualityRule] = {
    AgingCategory.ORDINARY:   _degrade(ORDINARY_DAILY_LOSS),
    AgingCategory.PERISHABLE: _degrade(PERISHABLE_DAILY_LOSS),
    AgingCategory.AGED_STOCK: _aged_stock,
    AgingCategory.EVENT_PASS: _event_pass,
    AgingCategory.LEGENDARY:  _legendary,
}

# Categories whose sell-in counter is frozen.
FROZEN_SELL_IN: frozenset[AgingCategory] = frozenset({AgingCategory.LEGENDARY})


def next_quality(category: AgingCategory, sell_in: int, quality: int) -> int:
    """Return tomorrow's quality for an item of ``category``.

    Args:
        category: The item's aging category.
        sell_in:  Sell-in value before today's update.
        quality:  Quality value before today's update.

    Returns:
        The new quality, already clamped for bounded categories.

    Raises:
        KeyError: If ``category`` has no registered rule.
    """
    return QUALITY_RULES[category](sell_in, quality)


def next_sell_in(category: AgingCategory, sell_in: int) -> int:
    """Return tomorrow's sell-in value.  Unbounded below."""
    if category in FROZEN_SELL_IN:
        return sell_in
    return sell_in - 1
