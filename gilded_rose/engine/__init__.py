"""
gilded_rose.engine: The daily aging engine.

Modules:
  categorizer: Maps an item name to its ``AgingCategory``.
  rules:       Per-category quality and sell-in transitions, clamping.
  aging:       ``advance()``: one full pass over the collection per day.
"""
