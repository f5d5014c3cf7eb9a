# src/mapline/config/settings.py
"""
Application settings (Pydantic).

Settings are loaded from `src/mapline/config/defaults.yaml`, then optionally overridden by:
- an external YAML file via `MAPLINE_CONFIG_PATH`
- environment variables (e.g., `MAPLINE_LOG_LEVEL`)

Design rule:
- The starting viewport, screen size and overlay styling live in YAML, not in the core.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Literal
from mapline.core.env import load_dotenv_if_present, resolve_project_path

import yaml
from pydantic import BaseModel, Field


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `mapline.config`."""
    text = resources.files("mapline.config").joinpath(filename).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {filename}; expected a mapping.")
    return data


def _read_yaml_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML file from disk and return its mapping root."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {path}; expected a mapping.")
    return data


class AppSettings(BaseModel):
    name: str = "MapLine"
    log_level: str = "INFO"


class ViewportSettings(BaseModel):
    lat: float = Field(37.78825, ge=-90, le=90)
    lon: float = Field(-122.4324, ge=-180, le=180)
    lat_span: float = Field(0.0922, gt=0)
    lon_span: float = Field(0.0421, gt=0)


class MapSettings(BaseModel):
    initial_viewport: ViewportSettings = Field(default_factory=ViewportSettings)


class ScreenSettings(BaseModel):
    width: float = Field(390, gt=0)
    height: float = Field(844, gt=0)


class OverlaySettings(BaseModel):
    style: Literal["line", "polygon", "circle"] = "polygon"
    stroke_color: str = "#000"
    fill_color: str = "red"
    stroke_width: float = Field(3, ge=0)


class DistanceSettings(BaseModel):
    decimals: int = Field(2, ge=0, le=10)
    unit_suffix: str = "meters"
    unavailable_label: str = "N/A"


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    map: MapSettings = Field(default_factory=MapSettings)
    screen: ScreenSettings = Field(default_factory=ScreenSettings)
    overlay: OverlaySettings = Field(default_factory=OverlaySettings)
    distance: DistanceSettings = Field(default_factory=DistanceSettings)


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload."""
    load_dotenv_if_present()
    data = dict(data)
    log_level = os.getenv("MAPLINE_LOG_LEVEL")
    if log_level:
        data.setdefault("app", {})["log_level"] = log_level
    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    load_dotenv_if_present()
    config_path = os.getenv("MAPLINE_CONFIG_PATH")
    raw = _read_yaml_file(resolve_project_path(config_path)) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
