"""
gilded_rose.reporting: Plain-text rendering of items and simulation runs.

Modules:
  formatters: Item lines and per-day blocks for ``typer.echo()``.
"""
