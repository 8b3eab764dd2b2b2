"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``: committed static defaults
  2. ``config/local.toml``: optional local overrides, gitignored
  3. ``.env``: local env overrides, gitignored
  4. Environment variables with the ``GILDED_ROSE_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``

Only the harness is configurable (logging, day count, inventory file).
The aging rules themselves are fixed in ``gilded_rose.engine.rules``.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

# ── Sub-config models ─────────────────────────────────────────────────────────


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: str = ""
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class SimulationConfig(BaseModel):
    """Settings for the ``simulate`` command."""

    model_config = ConfigDict(frozen=True)

    days: int = 2
    inventory_file: str = "config/inventory/default_items.json"

    @field_validator("days")
    @classmethod
    def validate_days(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"days must be >= 1, got {v}.")
        return v


class AppConfig(BaseModel):
    """Complete application configuration, the single source of truth."""

    model_config = ConfigDict(frozen=True)

    logging: LoggingConfig = LoggingConfig()
    simulation: SimulationConfig = SimulationConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (contains pyproject.toml)."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return _PROJECT_ROOT


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If the specified ``config_path`` does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()

    # 1. Load .env file (silently skip if missing)
    load_dotenv(dotenv_path=root / ".env", override=False)

    # 2. Load TOML config
    if config_path is None:
        config_path = root / "config" / "default.toml"

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "rb") as f:
        raw: dict[str, Any] = tomllib.load(f)

    local_config_path = config_path.parent / "local.toml"
    if local_config_path.exists():
        with open(local_config_path, "rb") as f:
            local_raw: dict[str, Any] = tomllib.load(f)
        raw = _deep_merge(raw, local_raw)

    # 3. Apply GILDED_ROSE_* environment variable overrides
    raw = _apply_env_overrides(raw)

    return _build_app_config(raw)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply GILDED_ROSE_* env vars to the raw config dict.

    Supported overrides:
      GILDED_ROSE_LOG_LEVEL       → raw["logging"]["level"]
      GILDED_ROSE_DAYS            → raw["simulation"]["days"]
      GILDED_ROSE_INVENTORY_FILE  → raw["simulation"]["inventory_file"]
      GILDED_ROSE_DEBUG           → raw["debug"]
    """
    if log_level := os.environ.get("GILDED_ROSE_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if days := os.environ.get("GILDED_ROSE_DAYS"):
        raw.setdefault("simulation", {})["days"] = days

    if inventory_file := os.environ.get("GILDED_ROSE_INVENTORY_FILE"):
        raw.setdefault("simulation", {})["inventory_file"] = inventory_file

    if debug := os.environ.get("GILDED_ROSE_DEBUG"):
        raw["debug"] = debug.lower() in ("1", "true", "yes")

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    return AppConfig(
        logging=LoggingConfig(**raw.get("logging", {})),
        simulation=SimulationConfig(**raw.get("simulation", {})),
        debug=raw.get("debug", False),
    )
