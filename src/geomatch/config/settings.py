# src/geomatch/config/settings.py
"""
Application settings (Pydantic).

Settings are loaded from `src/geomatch/config/defaults.yaml`, then optionally overridden by:
- an external YAML file via `GEOMATCH_CONFIG_PATH`
- environment variables (e.g., `GEOMATCH_LOG_LEVEL`, `GEOMATCH_REGIONS_PATH`)

Design rule:
- Tuning knobs (default radius, country bounds, region table location) live in YAML,
  not hard-coded in matching logic.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, model_validator

from geomatch.core.env import load_dotenv_if_present


def _read_package_yaml(filename: str) -> Any:
    """Read a YAML file packaged inside `geomatch.config`."""
    text = resources.files("geomatch.config").joinpath(filename).read_text(encoding="utf-8")
    return yaml.safe_load(text)


def _read_yaml_file(path: str | Path) -> Any:
    """Read a YAML file from disk."""
    return yaml.safe_load(Path(path).read_text(encoding="utf-8"))


def _as_mapping(data: Any, *, source: str | Path) -> dict[str, Any]:
    data = data or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {source}; expected a mapping.")
    return data


class AppSettings(BaseModel):
    name: str = "geomatch"
    log_level: str = "INFO"


class MatchingSettings(BaseModel):
    default_radius_km: float = Field(5.0, ge=0)
    location_key: str = "location"


class CountrySettings(BaseModel):
    """Approximate national rectangle used for coarse "is this in the country" checks."""

    name: str = "Guatemala"
    north: float = Field(17.8193, ge=-90, le=90)
    south: float = Field(13.7373, ge=-90, le=90)
    east: float = Field(-88.2256, ge=-180, le=180)
    west: float = Field(-92.2714, ge=-180, le=180)

    @model_validator(mode="after")
    def _validate_edges(self) -> "CountrySettings":
        if self.south > self.north:
            raise ValueError("country.south must not be greater than country.north")
        if self.west > self.east:
            raise ValueError("country.west must not be greater than country.east")
        return self


class RegionSettings(BaseModel):
    # None means the packaged `regions.yaml`.
    path: str | None = None


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    matching: MatchingSettings = Field(default_factory=MatchingSettings)
    country: CountrySettings = Field(default_factory=CountrySettings)
    regions: RegionSettings = Field(default_factory=RegionSettings)


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload.

    Note: We intentionally keep this whitelist small.
    """
    load_dotenv_if_present()
    data = dict(data)

    log_level = os.getenv("GEOMATCH_LOG_LEVEL")
    if log_level:
        data.setdefault("app", {})["log_level"] = log_level

    regions_path = os.getenv("GEOMATCH_REGIONS_PATH")
    if regions_path:
        data.setdefault("regions", {})["path"] = regions_path

    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    load_dotenv_if_present()
    config_path = os.getenv("GEOMATCH_CONFIG_PATH")
    if config_path:
        raw = _as_mapping(_read_yaml_file(config_path), source=config_path)
    else:
        raw = _as_mapping(_read_package_yaml("defaults.yaml"), source="defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _as_mapping(_read_package_yaml("logging.yaml"), source="logging.yaml")
