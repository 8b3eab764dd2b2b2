"""
Gilded Rose CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Validate inputs.
  4. Execute action.
  5. Report result to stdout.

Install and run::

    pip install -e .
    gilded-rose --help
    gilded-rose validate-config
    gilded-rose categorize "Backstage passes to a TAFKAL80ETC concert"
    gilded-rose simulate --days 30
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="gilded-rose",
    help="Gilded Rose: daily inventory aging simulation.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from pydantic import ValidationError

    from gilded_rose.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except ValidationError as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from gilded_rose.utils.logging import configure_logging
    configure_logging(config.logging)


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Simulation days:  {config.simulation.days}")
    typer.echo(f"  Inventory file:   {config.simulation.inventory_file}")
    typer.echo(f"  Log level:        {config.logging.level}")
    typer.echo(f"  Debug mode:       {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


@app.command("categorize")
def categorize_name(
    name: str = typer.Argument(..., help="Item name to classify."),
) -> None:
    """Print the aging category an item name maps to."""
    from gilded_rose.engine.categorizer import categorize

    typer.echo(categorize(name).value)


@app.command("simulate")
def simulate_inventory(
    days: Optional[int] = typer.Option(
        None,
        "--days",
        "-d",
        min=1,
        help="Number of days to print (day 0 included). Defaults to config.simulation.days.",
    ),
    inventory_file: Optional[str] = typer.Option(
        None,
        "--file",
        "-f",
        help="Path to inventory JSON. Defaults to config.simulation.inventory_file.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Age the seed inventory day by day and print each day's state.

    Output is one block per day::

    \b
      -------- day 0 --------
      name, sellIn, quality
      +5 Dexterity Vest, 10, 20
    """
    from gilded_rose.engine.aging import simulate
    from gilded_rose.inventory.seed_loader import load_inventory
    from gilded_rose.reporting.formatters import format_simulation

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    inventory_path = Path(inventory_file or config.simulation.inventory_file)
    if not inventory_path.is_file():
        typer.echo(f"[ERROR] Inventory file not found: {inventory_path}", err=True)
        raise typer.Exit(code=1)

    try:
        items = load_inventory(inventory_path)
    except ValueError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)

    reports = simulate(items, days or config.simulation.days)
    typer.echo(format_simulation(reports))


if __name__ == "__main__":
    app()
