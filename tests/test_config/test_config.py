"""Tests for gilded_rose.config: TOML loading, local overrides, env vars."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from gilded_rose.config import AppConfig, LoggingConfig, SimulationConfig, load_config

_ENV_VARS = (
    "GILDED_ROSE_LOG_LEVEL",
    "GILDED_ROSE_DAYS",
    "GILDED_ROSE_INVENTORY_FILE",
    "GILDED_ROSE_DEBUG",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)


def _write_toml(directory: Path, text: str, name: str = "config.toml") -> Path:
    path = directory / name
    path.write_text(text, encoding="utf-8")
    return path


class TestModels:
    def test_defaults(self):
        config = AppConfig()
        assert config.simulation.days == 2
        assert config.logging.level == "INFO"
        assert config.debug is False

    def test_level_normalized(self):
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_invalid_level_rejected(self):
        with pytest.raises(ValidationError, match="Log level"):
            LoggingConfig(level="LOUD")

    def test_days_must_be_positive(self):
        with pytest.raises(ValidationError, match="days"):
            SimulationConfig(days=0)

    def test_frozen(self):
        with pytest.raises(ValidationError):
            AppConfig().debug = True


class TestLoadConfig:
    def test_committed_default_loads(self):
        config = load_config()
        assert config.simulation.inventory_file.endswith("default_items.json")

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.toml")

    def test_reads_sections(self, tmp_path):
        path = _write_toml(tmp_path, '[simulation]\ndays = 31\n[logging]\nlevel = "warning"\n')
        config = load_config(path)
        assert config.simulation.days == 31
        assert config.logging.level == "WARNING"

    def test_local_toml_overrides(self, tmp_path):
        path = _write_toml(tmp_path, "[simulation]\ndays = 31\n")
        _write_toml(tmp_path, "[simulation]\ndays = 5\n", name="local.toml")
        assert load_config(path).simulation.days == 5

    def test_env_overrides(self, tmp_path, monkeypatch):
        path = _write_toml(tmp_path, "[simulation]\ndays = 31\n")
        monkeypatch.setenv("GILDED_ROSE_DAYS", "7")
        monkeypatch.setenv("GILDED_ROSE_DEBUG", "yes")
        monkeypatch.setenv("GILDED_ROSE_LOG_LEVEL", "debug")
        monkeypatch.setenv("GILDED_ROSE_INVENTORY_FILE", "other.json")
        config = load_config(path)
        assert config.simulation.days == 7
        assert config.simulation.inventory_file == "other.json"
        assert config.debug is True
        assert config.logging.level == "DEBUG"

    def test_invalid_env_log_level_raises(self, tmp_path, monkeypatch):
        path = _write_toml(tmp_path, "[logging]\nlevel = \"INFO\"\n")
        monkeypatch.setenv("GILDED_ROSE_LOG_LEVEL", "chatty")
        with pytest.raises(ValidationError, match="Log level"):
            load_config(path)

    def test_invalid_values_raise(self, tmp_path):
        path = _write_toml(tmp_path, "[simulation]\ndays = -1\n")
        with pytest.raises(ValidationError):
            load_config(path)
