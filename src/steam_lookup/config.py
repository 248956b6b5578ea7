"""Settings loading with packaged defaults and optional JSON overrides."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping, Tuple

PACKAGE_DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULTS_PATH = PACKAGE_DATA_DIR / "defaults.json"

CONFIG_ENV_VAR = "STEAM_LOOKUP_CONFIG"
DATA_DIR_ENV_VAR = "STEAM_LOOKUP_DATA_DIR"

Domain = Tuple[float, float]


@dataclass(frozen=True)
class CompressedSearchSettings:
    """Window and normalisation constants for the compressed-region search."""

    temperature_window_C: float = 0.1
    pressure_window_MPa: float = 0.01
    temperature_scale_C: float = 373.95
    pressure_scale_MPa: float = 1000.0
    phase_check_neighbours: int = 4


@dataclass(frozen=True)
class Settings:
    """Resolved runtime configuration."""

    data_dir: Path
    by_temperature_file: str
    by_pressure_file: str
    compressed_file: str
    domains: Dict[str, Domain]
    compressed_search: CompressedSearchSettings
    units: Dict[str, str]

    @property
    def by_temperature_path(self) -> Path:
        return self.data_dir / self.by_temperature_file

    @property
    def by_pressure_path(self) -> Path:
        return self.data_dir / self.by_pressure_file

    @property
    def compressed_path(self) -> Path:
        return self.data_dir / self.compressed_file

    def domain(self, name: str) -> Domain:
        return self.domains[name]


def load_defaults(defaults_path: Path = DEFAULTS_PATH) -> Dict[str, Any]:
    """Load the packaged default configuration values."""

    with defaults_path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursively merge two dictionaries without mutating the inputs."""

    merged: Dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _load_override() -> Dict[str, Any]:
    path = os.getenv(CONFIG_ENV_VAR)
    if not path:
        return {}
    with open(path, "r", encoding="utf-8") as handle:
        return json.load(handle)


def build_settings(raw: Mapping[str, Any]) -> Settings:
    """Convert a merged configuration mapping into :class:`Settings`."""

    datasets = raw.get("datasets", {})
    data_dir = os.getenv(DATA_DIR_ENV_VAR) or datasets.get("data_dir") or PACKAGE_DATA_DIR
    search = raw.get("compressed_search", {})
    domains = {
        name: (float(bounds[0]), float(bounds[1]))
        for name, bounds in raw.get("domains", {}).items()
    }
    return Settings(
        data_dir=Path(data_dir),
        by_temperature_file=str(datasets.get("by_temperature", "saturated_by_temperature.json")),
        by_pressure_file=str(datasets.get("by_pressure", "saturated_by_pressure.json")),
        compressed_file=str(
            datasets.get("compressed", "compressed_liquid_and_superheated_steam.json")
        ),
        domains=domains,
        compressed_search=CompressedSearchSettings(
            temperature_window_C=float(search.get("temperature_window_C", 0.1)),
            pressure_window_MPa=float(search.get("pressure_window_MPa", 0.01)),
            temperature_scale_C=float(search.get("temperature_scale_C", 373.95)),
            pressure_scale_MPa=float(search.get("pressure_scale_MPa", 1000.0)),
            phase_check_neighbours=int(search.get("phase_check_neighbours", 4)),
        ),
        units=dict(raw.get("units", {})),
    )


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Return the process-wide settings, merging any override file once."""

    return build_settings(deep_merge(load_defaults(), _load_override()))


__all__ = [
    "CONFIG_ENV_VAR",
    "DATA_DIR_ENV_VAR",
    "DEFAULTS_PATH",
    "CompressedSearchSettings",
    "Settings",
    "build_settings",
    "deep_merge",
    "load_defaults",
    "load_settings",
]
